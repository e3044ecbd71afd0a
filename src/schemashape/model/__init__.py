# Copyright 2026 schemashape Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema node models (strings, collections, composites, modifiers) and their checks."""

from schemashape.model.checks import STRING_FORMATS, Check, SizeBound
from schemashape.model.nodes import (
    AnySchema,
    ArraySchema,
    BigIntSchema,
    BooleanSchema,
    BrandedSchema,
    CatchSchema,
    DateSchema,
    DefaultSchema,
    DiscriminatedUnionSchema,
    EffectsSchema,
    EnumSchema,
    FunctionSchema,
    IntersectionSchema,
    LazySchema,
    LiteralSchema,
    MapSchema,
    NaNSchema,
    NativeEnumSchema,
    NeverSchema,
    NullableSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    OptionalSchema,
    PipelineSchema,
    PromiseSchema,
    RecordSchema,
    SchemaNode,
    SetSchema,
    StringSchema,
    SymbolSchema,
    TupleSchema,
    UndefinedSchema,
    UnionSchema,
    UnknownSchema,
    VoidSchema,
)

__all__ = [
    # Checks
    "Check",
    "SizeBound",
    "STRING_FORMATS",
    # Leaves
    "StringSchema",
    "NumberSchema",
    "BigIntSchema",
    "DateSchema",
    "BooleanSchema",
    "NaNSchema",
    "UndefinedSchema",
    "NullSchema",
    "AnySchema",
    "UnknownSchema",
    "NeverSchema",
    "VoidSchema",
    "SymbolSchema",
    "LiteralSchema",
    "EnumSchema",
    "NativeEnumSchema",
    # Collections and composites
    "TupleSchema",
    "ArraySchema",
    "SetSchema",
    "ObjectSchema",
    "RecordSchema",
    "MapSchema",
    "UnionSchema",
    "DiscriminatedUnionSchema",
    "IntersectionSchema",
    "FunctionSchema",
    "PromiseSchema",
    # Modifiers
    "OptionalSchema",
    "NullableSchema",
    "DefaultSchema",
    "LazySchema",
    "EffectsSchema",
    "BrandedSchema",
    "PipelineSchema",
    "CatchSchema",
    "SchemaNode",
]
