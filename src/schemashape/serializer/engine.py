# Copyright 2026 schemashape Contributors
# SPDX-License-Identifier: Apache-2.0

"""Descriptor construction for schema graphs.

:func:`serialize` reads a node's ``kind`` tag, looks up the rule registered for
that kind, and lets the rule recursively serialize any child schemas. Rules
fall into a few shapes:

* **Modifiers** (``optional``, ``nullable``, ``default``) serialize their inner
  schema and merge a flag onto it. A modifier's own description replaces the
  inner one when set.
* **Pass-through kinds** (``lazy``, ``effects``, ``branded``, ``pipeline``,
  ``catch``) yield the descriptor of the schema they wrap, unchanged.
* **Leaves** produce ``{"type": ...}``, merged with constraints extracted from
  their checks where the kind carries checks.
* **Collections and composites** serialize their children in declaration
  order and add structural fields.

The engine reads nodes through their attributes only, so any object exposing
``kind`` and the fields of its kind can be serialized.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, cast

from schemashape.serializer.constraints import extract_constraints
from schemashape.serializer.descriptors import Descriptor

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class SerializationError(Exception):
    """Raised when a schema graph cannot be turned into a descriptor."""


class UnrecognizedKindError(SerializationError):
    """Raised when a schema node's kind has no registered descriptor rule.

    This usually means the schema library produced a node kind this version of
    the serializer does not know about.

    Attributes:
        kind: The unrecognized kind tag.
    """

    def __init__(self, kind: Any) -> None:
        self.kind = kind
        super().__init__(f"No descriptor rule for schema kind {kind!r}")


class CyclicSchemaError(SerializationError):
    """Raised when a lazy schema resolves, directly or indirectly, to itself."""


# Leaf kinds mapped to the descriptor type they produce.
PRIMITIVES: dict[str, str] = {
    "string": "string",
    "number": "number",
    "boolean": "boolean",
    "nan": "nan",
    "bigint": "bigInt",
    "date": "date",
    "undefined": "undefined",
    "null": "null",
    "any": "any",
    "unknown": "unknown",
    "never": "never",
    "void": "void",
}


def serialize(schema: Any) -> Descriptor:
    """Build the JSON-compatible descriptor of *schema*.

    The descriptor is rebuilt on every call. The only side effect is invoking
    the ``default_factory`` of ``default`` nodes and the ``getter`` of ``lazy``
    nodes; exceptions raised by either propagate unchanged.

    Args:
        schema: Root node of the schema graph.

    Returns:
        A nested structure of dicts, lists and scalars.

    Raises:
        UnrecognizedKindError: If any node in the graph has an unknown kind.
        CyclicSchemaError: If a lazy node is reached again while it is still
            being expanded.
    """
    descriptor = _Walker().visit(schema)
    logger.debug("Serialized %s schema to %s descriptor", _kind_of(schema), descriptor["type"])
    return cast(Descriptor, descriptor)


# ################
# Implementation
# ################


class _Walker:
    """Recursion state for a single :func:`serialize` call."""

    def __init__(self) -> None:
        # Getters of lazy nodes on the current recursion path, compared by equality
        # because reading a bound method creates a new object each time.
        self._expanding: list[Callable[[], Any]] = []

    def visit(self, node: Any) -> dict[str, Any]:
        kind = _kind_of(node)
        rule = _RULES.get(kind) if isinstance(kind, str) else None
        if rule is None:
            raise UnrecognizedKindError(kind)
        return rule(node, self)

    def expand(self, node: Any) -> dict[str, Any]:
        """Serialize the schema returned by a lazy node's getter."""
        getter = node.getter
        if any(getter == active for active in self._expanding):
            raise CyclicSchemaError(f"Lazy schema refers back to itself through {getter!r}")
        self._expanding.append(getter)
        try:
            return self.visit(getter())
        finally:
            self._expanding.pop()


_Rule = Callable[[Any, _Walker], dict[str, Any]]


def _kind_of(node: Any) -> Any:
    return getattr(node, "kind", None)


def _base(type_: str, node: Any) -> dict[str, Any]:
    d: dict[str, Any] = {"type": type_}
    description = getattr(node, "description", None)
    if description is not None:
        d["description"] = description
    return d


def _modified(node: Any, walker: _Walker, flags: dict[str, Any]) -> dict[str, Any]:
    """Merge modifier *flags* onto the inner descriptor, preferring the modifier's description."""
    d = {**walker.visit(node.inner), **flags}
    description = getattr(node, "description", None)
    if description is not None:
        d["description"] = description
    return d


# Modifiers


def _optional(node: Any, walker: _Walker) -> dict[str, Any]:
    return _modified(node, walker, {"isOptional": True})


def _nullable(node: Any, walker: _Walker) -> dict[str, Any]:
    return _modified(node, walker, {"isNullable": True})


def _default(node: Any, walker: _Walker) -> dict[str, Any]:
    return _modified(node, walker, {"defaultValue": node.default_factory()})


# Pass-through kinds


def _lazy(node: Any, walker: _Walker) -> dict[str, Any]:
    return walker.expand(node)


def _inner(node: Any, walker: _Walker) -> dict[str, Any]:
    return walker.visit(node.inner)


def _pipeline(node: Any, walker: _Walker) -> dict[str, Any]:
    return walker.visit(node.output)


# Leaves


def _plain(type_: str) -> _Rule:
    def rule(node: Any, walker: _Walker) -> dict[str, Any]:
        return _base(type_, node)

    return rule


def _checked(type_: str) -> _Rule:
    def rule(node: Any, walker: _Walker) -> dict[str, Any]:
        return {**_base(type_, node), **extract_constraints(type_, node.checks)}

    return rule


def _literal(node: Any, walker: _Walker) -> dict[str, Any]:
    return {**_base("literal", node), "value": node.value}


def _enum(node: Any, walker: _Walker) -> dict[str, Any]:
    return {**_base("enum", node), "values": list(node.values)}


def _native_enum(node: Any, walker: _Walker) -> dict[str, Any]:
    # Members of enumerations defined outside the schema library are not introspected.
    return _base("unknown", node)


# Collections


def _tuple(node: Any, walker: _Walker) -> dict[str, Any]:
    d = _base("tuple", node)
    d["items"] = [walker.visit(item) for item in node.items]
    if node.rest is not None:
        d["rest"] = walker.visit(node.rest)
    return d


def _array(node: Any, walker: _Walker) -> dict[str, Any]:
    d = _base("array", node)
    d["element"] = walker.visit(node.element)
    if node.exact_length is not None:
        d["minLength"] = node.exact_length.value
        d["maxLength"] = node.exact_length.value
        return d
    if node.min_length is not None:
        d["minLength"] = node.min_length.value
    if node.max_length is not None:
        d["maxLength"] = node.max_length.value
    return d


def _set(node: Any, walker: _Walker) -> dict[str, Any]:
    d = _base("set", node)
    d["value"] = walker.visit(node.value)
    if node.min_size is not None:
        d["minSize"] = node.min_size.value
    if node.max_size is not None:
        d["maxSize"] = node.max_size.value
    return d


def _object(node: Any, walker: _Walker) -> dict[str, Any]:
    d = _base("object", node)
    d["properties"] = {key: walker.visit(value) for key, value in node.shape.items()}
    return d


def _key_value(type_: str) -> _Rule:
    def rule(node: Any, walker: _Walker) -> dict[str, Any]:
        d = _base(type_, node)
        d["key"] = walker.visit(node.key)
        d["value"] = walker.visit(node.value)
        return d

    return rule


# Composites


def _union(node: Any, walker: _Walker) -> dict[str, Any]:
    d = _base("union", node)
    d["options"] = [walker.visit(option) for option in node.options]
    return d


def _discriminated_union(node: Any, walker: _Walker) -> dict[str, Any]:
    d = _base("discriminatedUnion", node)
    d["discriminator"] = node.discriminator
    d["options"] = [walker.visit(option) for option in node.options]
    return d


def _intersection(node: Any, walker: _Walker) -> dict[str, Any]:
    d = _base("intersection", node)
    d["left"] = walker.visit(node.left)
    d["right"] = walker.visit(node.right)
    return d


def _function(node: Any, walker: _Walker) -> dict[str, Any]:
    d = _base("function", node)
    d["args"] = walker.visit(node.args)
    d["returns"] = walker.visit(node.returns)
    return d


def _promise(node: Any, walker: _Walker) -> dict[str, Any]:
    d = _base("promise", node)
    d["value"] = walker.visit(node.value)
    return d


_RULES: dict[str, _Rule] = {
    "optional": _optional,
    "nullable": _nullable,
    "default": _default,
    "lazy": _lazy,
    "effects": _inner,
    "branded": _inner,
    "pipeline": _pipeline,
    "catch": _inner,
    "literal": _literal,
    "enum": _enum,
    "native_enum": _native_enum,
    "tuple": _tuple,
    "array": _array,
    "set": _set,
    "object": _object,
    "record": _key_value("record"),
    "map": _key_value("map"),
    "union": _union,
    "discriminated_union": _discriminated_union,
    "intersection": _intersection,
    "function": _function,
    "promise": _promise,
}
for _kind, _type in PRIMITIVES.items():
    _RULES[_kind] = _checked(_type) if _kind in ("string", "number", "bigint", "date") else _plain(_type)

# Every node kind with a descriptor rule.
KINDS: frozenset[str] = frozenset(_RULES)
