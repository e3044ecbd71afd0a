# Copyright 2026 schemashape Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema node representations consumed by the descriptor serializer.

Each node kind is an immutable model tagged by a ``kind`` literal. Nodes carry
structure only; they do not validate values.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from schemashape.model.checks import Check, SizeBound

# ###############
# Public Interface
# ###############


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str | None = None


# Leaf kinds carrying checks


class StringSchema(_Node):
    """A string, optionally constrained by length, format, or pattern checks."""

    kind: Literal["string"] = "string"
    checks: list[Check] = _Field(default_factory=list)


class NumberSchema(_Node):
    """A floating-point or integer number."""

    kind: Literal["number"] = "number"
    checks: list[Check] = _Field(default_factory=list)


class BigIntSchema(_Node):
    """An arbitrary-precision integer."""

    kind: Literal["bigint"] = "bigint"
    checks: list[Check] = _Field(default_factory=list)


class DateSchema(_Node):
    """A point in time, optionally bounded by ``min`` / ``max`` checks."""

    kind: Literal["date"] = "date"
    checks: list[Check] = _Field(default_factory=list)


# Leaf kinds without checks


class BooleanSchema(_Node):
    kind: Literal["boolean"] = "boolean"


class NaNSchema(_Node):
    kind: Literal["nan"] = "nan"


class UndefinedSchema(_Node):
    kind: Literal["undefined"] = "undefined"


class NullSchema(_Node):
    kind: Literal["null"] = "null"


class AnySchema(_Node):
    kind: Literal["any"] = "any"


class UnknownSchema(_Node):
    kind: Literal["unknown"] = "unknown"


class NeverSchema(_Node):
    kind: Literal["never"] = "never"


class VoidSchema(_Node):
    kind: Literal["void"] = "void"


class SymbolSchema(_Node):
    """A unique symbol. Has no descriptor representation."""

    kind: Literal["symbol"] = "symbol"


class LiteralSchema(_Node):
    """Exactly one scalar value."""

    kind: Literal["literal"] = "literal"
    value: str | int | float | bool | None


# Enumerations


class EnumSchema(_Node):
    """A closed enumeration of string literals, in declaration order."""

    kind: Literal["enum"] = "enum"
    values: list[str]


class NativeEnumSchema(_Node):
    """An enumeration defined outside the schema library (e.g. an ``enum.Enum`` subclass)."""

    kind: Literal["native_enum"] = "native_enum"
    enum: Any


# Collections


class TupleSchema(_Node):
    """A fixed sequence of positional items with an optional variadic tail."""

    kind: Literal["tuple"] = "tuple"
    items: list[SchemaNode] = _Field(default_factory=list)
    rest: SchemaNode | None = None


class ArraySchema(_Node):
    """A homogeneous, ordered sequence."""

    kind: Literal["array"] = "array"
    element: SchemaNode
    min_length: SizeBound | None = None
    max_length: SizeBound | None = None
    exact_length: SizeBound | None = None


class SetSchema(_Node):
    """A homogeneous collection of unique values."""

    kind: Literal["set"] = "set"
    value: SchemaNode
    min_size: SizeBound | None = None
    max_size: SizeBound | None = None


class ObjectSchema(_Node):
    """A mapping of declared property names to schemas."""

    kind: Literal["object"] = "object"
    shape: dict[str, SchemaNode] = _Field(default_factory=dict)


class RecordSchema(_Node):
    """A string-keyed dictionary with uniformly typed keys and values."""

    kind: Literal["record"] = "record"
    key: SchemaNode
    value: SchemaNode


class MapSchema(_Node):
    """A dictionary with arbitrary typed keys and values."""

    kind: Literal["map"] = "map"
    key: SchemaNode
    value: SchemaNode


# Composites


class UnionSchema(_Node):
    kind: Literal["union"] = "union"
    options: list[SchemaNode]


class DiscriminatedUnionSchema(_Node):
    """A union whose options are selected by the value of one shared field."""

    kind: Literal["discriminated_union"] = "discriminated_union"
    discriminator: str
    options: list[SchemaNode]


class IntersectionSchema(_Node):
    kind: Literal["intersection"] = "intersection"
    left: SchemaNode
    right: SchemaNode


class FunctionSchema(_Node):
    """A callable with an argument list schema (usually a tuple) and a return schema."""

    kind: Literal["function"] = "function"
    args: SchemaNode
    returns: SchemaNode


class PromiseSchema(_Node):
    """A deferred value resolving to ``value``."""

    kind: Literal["promise"] = "promise"
    value: SchemaNode


# Modifiers


class OptionalSchema(_Node):
    kind: Literal["optional"] = "optional"
    inner: SchemaNode


class NullableSchema(_Node):
    kind: Literal["nullable"] = "nullable"
    inner: SchemaNode


class DefaultSchema(_Node):
    """Substitutes the result of ``default_factory`` for a missing value."""

    kind: Literal["default"] = "default"
    inner: SchemaNode
    default_factory: Callable[[], Any]


class LazySchema(_Node):
    """Defers construction of the real schema to ``getter``, enabling recursive schemas."""

    kind: Literal["lazy"] = "lazy"
    getter: Callable[[], Any]


class EffectsSchema(_Node):
    """Attaches a refinement, transform, or preprocessing step to ``inner``."""

    kind: Literal["effects"] = "effects"
    inner: SchemaNode
    effect: Literal["refinement", "transform", "preprocess"] = "refinement"


class BrandedSchema(_Node):
    kind: Literal["branded"] = "branded"
    inner: SchemaNode
    brand: str | None = None


class PipelineSchema(_Node):
    """Validates with ``input`` and passes the result on to ``output``."""

    kind: Literal["pipeline"] = "pipeline"
    input: SchemaNode
    output: SchemaNode


class CatchSchema(_Node):
    """Falls back to ``fallback`` whenever ``inner`` rejects a value."""

    kind: Literal["catch"] = "catch"
    inner: SchemaNode
    fallback: Any = None


# A schema node: any leaf, collection, composite or modifier kind.
# The `kind` discriminator field selects the model without trying each in turn.
SchemaNode = Annotated[
    StringSchema
    | NumberSchema
    | BigIntSchema
    | DateSchema
    | BooleanSchema
    | NaNSchema
    | UndefinedSchema
    | NullSchema
    | AnySchema
    | UnknownSchema
    | NeverSchema
    | VoidSchema
    | SymbolSchema
    | LiteralSchema
    | EnumSchema
    | NativeEnumSchema
    | TupleSchema
    | ArraySchema
    | SetSchema
    | ObjectSchema
    | RecordSchema
    | MapSchema
    | UnionSchema
    | DiscriminatedUnionSchema
    | IntersectionSchema
    | FunctionSchema
    | PromiseSchema
    | OptionalSchema
    | NullableSchema
    | DefaultSchema
    | LazySchema
    | EffectsSchema
    | BrandedSchema
    | PipelineSchema
    | CatchSchema,
    _Field(discriminator="kind"),
]


# Resolve forward references for models that use SchemaNode.
TupleSchema.model_rebuild()
ArraySchema.model_rebuild()
SetSchema.model_rebuild()
ObjectSchema.model_rebuild()
RecordSchema.model_rebuild()
MapSchema.model_rebuild()
UnionSchema.model_rebuild()
DiscriminatedUnionSchema.model_rebuild()
IntersectionSchema.model_rebuild()
FunctionSchema.model_rebuild()
PromiseSchema.model_rebuild()
OptionalSchema.model_rebuild()
NullableSchema.model_rebuild()
DefaultSchema.model_rebuild()
EffectsSchema.model_rebuild()
BrandedSchema.model_rebuild()
PipelineSchema.model_rebuild()
CatchSchema.model_rebuild()
