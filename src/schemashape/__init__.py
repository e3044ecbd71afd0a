# Copyright 2026 schemashape Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialize schema graphs into canonical, JSON-compatible descriptors."""

from schemashape.serializer import (
    CyclicSchemaError,
    Descriptor,
    SerializationError,
    UnrecognizedKindError,
    serialize,
)

__all__ = [
    "serialize",
    "Descriptor",
    "SerializationError",
    "UnrecognizedKindError",
    "CyclicSchemaError",
]
