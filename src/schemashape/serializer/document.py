# Copyright 2026 schemashape Contributors
# SPDX-License-Identifier: Apache-2.0

"""Encoding of descriptors as JSON and as versioned descriptor documents.

A descriptor document wraps one named descriptor together with a format
version so that readers can detect documents written by an incompatible
release:

    {"v": "1", "name": "user", "descriptor": {"type": "object", ...}}
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from schemashape.serializer.descriptors import Descriptor

# ###############
# Public Interface
# ###############

DOCUMENT_FORMAT_VERSION = "1"
DOCUMENT_SUFFIX = ".schema.json"


class DescriptorFormatError(Exception):
    """Raised when a descriptor cannot be encoded or a document cannot be decoded."""


@dataclass(frozen=True)
class DescriptorDocument:
    """A named descriptor as stored on disk.

    Attributes:
        name: Export name the descriptor was written under.
        descriptor: The serialized schema.
    """

    name: str
    descriptor: Descriptor


def to_json(descriptor: Descriptor | dict[str, Any], indent: int | None = None) -> str:
    """Encode a descriptor as JSON, compact unless *indent* is given.

    Raises:
        DescriptorFormatError: If the descriptor holds values JSON cannot
            represent, such as a non-finite number or an arbitrary object
            produced by a default factory.
    """
    try:
        if indent is None:
            return json.dumps(descriptor, separators=(",", ":"), allow_nan=False)
        return json.dumps(descriptor, indent=indent, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise DescriptorFormatError(f"Descriptor is not JSON-encodable: {exc}") from exc


def encode_document(document: DescriptorDocument, indent: int | None = None) -> str:
    """Encode a :class:`DescriptorDocument` as a JSON string."""
    return to_json(
        {"v": DOCUMENT_FORMAT_VERSION, "name": document.name, "descriptor": document.descriptor},
        indent=indent,
    )


def decode_document(data: str) -> DescriptorDocument:
    """Decode a descriptor document from a JSON string.

    Args:
        data: JSON string produced by :func:`encode_document`.

    Returns:
        The reconstructed :class:`DescriptorDocument`.

    Raises:
        DescriptorFormatError: If the data is not valid JSON, the format
            version is not recognised, or a required member is missing.
    """
    try:
        obj = json.loads(data)
    except json.JSONDecodeError as exc:
        raise DescriptorFormatError(f"Invalid descriptor document: {exc}") from exc
    if not isinstance(obj, dict):
        raise DescriptorFormatError("Descriptor document must be a JSON object")
    version = obj.get("v")
    if version != DOCUMENT_FORMAT_VERSION:
        raise DescriptorFormatError(f"Unsupported descriptor document version: {version!r}")
    name = obj.get("name")
    descriptor = obj.get("descriptor")
    if not isinstance(name, str):
        raise DescriptorFormatError("Descriptor document is missing its 'name'")
    if not isinstance(descriptor, dict) or "type" not in descriptor:
        raise DescriptorFormatError(f"Descriptor document '{name}' has no valid 'descriptor'")
    return DescriptorDocument(name=name, descriptor=descriptor)


def write_descriptor(document: DescriptorDocument, path: Path, indent: int | None = None) -> None:
    """Write a descriptor document to *path*, creating parent directories as needed."""
    text = encode_document(document, indent=indent)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def read_descriptor(path: Path) -> DescriptorDocument:
    """Read and decode a descriptor document from *path*."""
    return decode_document(path.read_text(encoding="utf-8"))
