# Copyright 2026 schemashape Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shapes of the JSON-compatible descriptors produced by the serializer.

Descriptors are plain dictionaries at runtime; these definitions document the
keys each ``type`` may carry. Key names are camelCase because descriptors are
meant to be read by consumers in other languages.
"""

from typing import Any, Literal, NotRequired, TypedDict

# ###############
# Public Interface
# ###############


class _Common(TypedDict):
    description: NotRequired[str]
    isOptional: NotRequired[bool]
    isNullable: NotRequired[bool]
    defaultValue: NotRequired[Any]


class PrimitiveDescriptor(_Common):
    type: Literal["boolean", "nan", "undefined", "null", "any", "unknown", "never", "void"]


class NumberDescriptor(_Common):
    type: Literal["number", "bigInt"]
    min: NotRequired[int | float]
    minInclusive: NotRequired[bool]
    max: NotRequired[int | float]
    maxInclusive: NotRequired[bool]
    multipleOf: NotRequired[int | float]
    int: NotRequired[bool]
    finite: NotRequired[bool]


class StringDescriptor(_Common):
    type: Literal["string"]
    min: NotRequired[int]
    max: NotRequired[int]
    length: NotRequired[int]
    startsWith: NotRequired[str]
    endsWith: NotRequired[str]
    includes: NotRequired[str]
    position: NotRequired[int]
    regex: NotRequired[str]
    flags: NotRequired[str]
    kind: NotRequired[str]
    version: NotRequired[str]
    offset: NotRequired[bool]
    precision: NotRequired[int]


class DateDescriptor(_Common):
    type: Literal["date"]
    min: NotRequired[int | float]
    max: NotRequired[int | float]


class LiteralDescriptor(_Common):
    type: Literal["literal"]
    value: str | int | float | bool | None


class EnumDescriptor(_Common):
    type: Literal["enum"]
    values: list[str]


class TupleDescriptor(_Common):
    type: Literal["tuple"]
    items: list["Descriptor"]
    rest: NotRequired["Descriptor"]


class ArrayDescriptor(_Common):
    type: Literal["array"]
    element: "Descriptor"
    minLength: NotRequired[int]
    maxLength: NotRequired[int]


class SetDescriptor(_Common):
    type: Literal["set"]
    value: "Descriptor"
    minSize: NotRequired[int]
    maxSize: NotRequired[int]


class ObjectDescriptor(_Common):
    type: Literal["object"]
    properties: dict[str, "Descriptor"]


class KeyValueDescriptor(_Common):
    type: Literal["record", "map"]
    key: "Descriptor"
    value: "Descriptor"


class UnionDescriptor(_Common):
    type: Literal["union"]
    options: list["Descriptor"]


class DiscriminatedUnionDescriptor(_Common):
    type: Literal["discriminatedUnion"]
    discriminator: str
    options: list["Descriptor"]


class IntersectionDescriptor(_Common):
    type: Literal["intersection"]
    left: "Descriptor"
    right: "Descriptor"


class FunctionDescriptor(_Common):
    type: Literal["function"]
    args: "Descriptor"
    returns: "Descriptor"


class PromiseDescriptor(_Common):
    type: Literal["promise"]
    value: "Descriptor"


Descriptor = (
    PrimitiveDescriptor
    | NumberDescriptor
    | StringDescriptor
    | DateDescriptor
    | LiteralDescriptor
    | EnumDescriptor
    | TupleDescriptor
    | ArrayDescriptor
    | SetDescriptor
    | ObjectDescriptor
    | KeyValueDescriptor
    | UnionDescriptor
    | DiscriminatedUnionDescriptor
    | IntersectionDescriptor
    | FunctionDescriptor
    | PromiseDescriptor
)
