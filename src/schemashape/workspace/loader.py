# Copyright 2026 schemashape Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resolution of ``module:attribute`` references to schema objects."""

from __future__ import annotations

import importlib
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Any

# ###############
# Public Interface
# ###############


class SchemaLoadError(Exception):
    """Raised when a schema reference is malformed or does not resolve to a schema."""


def split_reference(reference: str) -> tuple[str, list[str]]:
    """Split ``package.module:Attr.path`` into the module name and attribute path.

    Raises:
        SchemaLoadError: If the reference is not of the form ``module:attribute``.
    """
    module_name, sep, attribute = reference.partition(":")
    parts = attribute.split(".")
    if not sep or not module_name.strip() or not all(part.isidentifier() for part in parts):
        raise SchemaLoadError(f"Invalid schema reference '{reference}': expected 'module:attribute'")
    return module_name.strip(), parts


def load_schema(reference: str, search_paths: Sequence[Path] = ()) -> Any:
    """Import the module named by *reference* and return the schema object it names.

    Args:
        reference: ``module:attribute`` reference; the attribute may be dotted.
        search_paths: Directories tried before ``sys.path`` while importing.

    Returns:
        The referenced schema node.

    Raises:
        SchemaLoadError: If the reference is malformed, the module cannot be
            imported, the attribute does not exist, or the object is not a
            schema node.
    """
    module_name, parts = split_reference(reference)

    with _prepended(search_paths):
        try:
            obj: Any = importlib.import_module(module_name)
        except ImportError as exc:
            raise SchemaLoadError(f"Cannot import module '{module_name}': {exc}") from exc

    for part in parts:
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise SchemaLoadError(f"'{reference}' does not exist: no attribute '{part}'") from None

    if isinstance(obj, type) or not isinstance(getattr(obj, "kind", None), str):
        raise SchemaLoadError(f"'{reference}' is not a schema node (got {type(obj).__name__})")
    return obj


# ################
# Implementation
# ################


@contextmanager
def _prepended(paths: Sequence[Path]) -> Iterator[None]:
    """Temporarily put *paths* at the front of ``sys.path``."""
    entries = [str(p) for p in paths if str(p) not in sys.path]
    if not entries:
        yield
        return
    sys.path[:0] = entries
    importlib.invalidate_caches()
    try:
        yield
    finally:
        for entry in entries:
            if entry in sys.path:
                sys.path.remove(entry)
