# Copyright 2026 schemashape Contributors
# SPDX-License-Identifier: Apache-2.0

"""Descriptor serializer: dispatch engine, constraint extraction, and document output."""

from schemashape.serializer.build import ExportError, export_schemas
from schemashape.serializer.constraints import DOMAINS, extract_constraints
from schemashape.serializer.descriptors import Descriptor
from schemashape.serializer.document import (
    DOCUMENT_FORMAT_VERSION,
    DOCUMENT_SUFFIX,
    DescriptorDocument,
    DescriptorFormatError,
    decode_document,
    encode_document,
    read_descriptor,
    to_json,
    write_descriptor,
)
from schemashape.serializer.engine import (
    KINDS,
    PRIMITIVES,
    CyclicSchemaError,
    SerializationError,
    UnrecognizedKindError,
    serialize,
)

__all__ = [
    "serialize",
    "SerializationError",
    "UnrecognizedKindError",
    "CyclicSchemaError",
    "KINDS",
    "PRIMITIVES",
    "Descriptor",
    "extract_constraints",
    "DOMAINS",
    "to_json",
    "encode_document",
    "decode_document",
    "write_descriptor",
    "read_descriptor",
    "DescriptorDocument",
    "DescriptorFormatError",
    "DOCUMENT_FORMAT_VERSION",
    "DOCUMENT_SUFFIX",
    "export_schemas",
    "ExportError",
]
