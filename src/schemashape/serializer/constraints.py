# Copyright 2026 schemashape Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reduction of a node's check list into flat descriptor constraints.

Checks are folded left to right into a single mapping. Each check kind
contributes zero or more fields; when two checks write the same field the
later one wins. Check kinds without a rule for the node's domain contribute
nothing, so a newer schema library degrades to "unconstrained" instead of
failing.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from datetime import date, datetime, timedelta, timezone
from typing import Any

from schemashape.model.checks import STRING_FORMATS, Check

# ###############
# Public Interface
# ###############

DOMAINS = ("number", "bigInt", "string", "date")


def extract_constraints(domain: str, checks: Iterable[Check]) -> dict[str, Any]:
    """Fold *checks* into the constraint fields of a *domain* descriptor.

    Args:
        domain: Descriptor type the checks belong to, one of :data:`DOMAINS`.
        checks: Checks in declaration order.

    Returns:
        A new mapping of constraint fields, empty if no check applies.

    Raises:
        ValueError: If *domain* is not one of :data:`DOMAINS`.
    """
    try:
        rule = _DOMAIN_RULES[domain]
    except KeyError:
        raise ValueError(f"Unknown constraint domain: {domain!r}") from None

    constraints: dict[str, Any] = {}
    for check in checks:
        constraints.update(rule(check))
    return constraints


# ################
# Implementation
# ################

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Letters used for regex flags in descriptors. re.UNICODE is implied for str
# patterns and is not rendered.
_REGEX_FLAG_LETTERS = (
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
    (re.ASCII, "a"),
)


def _bound(name: str, check: Check) -> dict[str, Any]:
    """Return a numeric bound, flagged when it includes its value."""
    fields: dict[str, Any] = {name: check.value}
    if check.inclusive:
        fields[f"{name}Inclusive"] = True
    return fields


def _bigint_fields(check: Check) -> dict[str, Any]:
    if check.kind in ("min", "max"):
        return _bound(check.kind, check)
    if check.kind == "multipleOf":
        return {"multipleOf": check.value}
    return {}


def _number_fields(check: Check) -> dict[str, Any]:
    if check.kind == "int":
        return {"int": True}
    if check.kind == "finite":
        return {"finite": True}
    return _bigint_fields(check)


def _string_fields(check: Check) -> dict[str, Any]:
    kind = check.kind
    if kind in ("min", "max", "length", "startsWith", "endsWith"):
        return {kind: check.value}
    if kind == "includes":
        fields: dict[str, Any] = {"includes": check.value}
        if check.position is not None:
            fields["position"] = check.position
        return fields
    if kind == "regex":
        return _regex_fields(check.regex)
    if kind == "ip":
        fields = {"kind": "ip"}
        if check.version is not None:
            fields["version"] = check.version
        return fields
    if kind == "datetime":
        fields = {"kind": "datetime"}
        if check.offset:
            fields["offset"] = True
        if isinstance(check.precision, int | float) and not isinstance(check.precision, bool):
            fields["precision"] = check.precision
        return fields
    if kind in STRING_FORMATS:
        return {"kind": kind}
    return {}


def _regex_fields(pattern: re.Pattern[str] | str | None) -> dict[str, Any]:
    if pattern is None:
        return {}
    if isinstance(pattern, str):
        return {"regex": pattern}
    fields: dict[str, Any] = {"regex": pattern.pattern}
    flags = "".join(letter for flag, letter in _REGEX_FLAG_LETTERS if pattern.flags & flag)
    if flags:
        fields["flags"] = flags
    return fields


def _date_fields(check: Check) -> dict[str, Any]:
    if check.kind in ("min", "max"):
        return {check.kind: _instant(check.value)}
    return {}


def _instant(value: Any) -> Any:
    """Convert a date or datetime to epoch milliseconds; pass other values through."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return (value - _EPOCH) // timedelta(milliseconds=1)
    if isinstance(value, date):
        return (datetime(value.year, value.month, value.day, tzinfo=timezone.utc) - _EPOCH) // timedelta(
            milliseconds=1
        )
    return value


_DOMAIN_RULES: dict[str, Callable[[Check], dict[str, Any]]] = {
    "number": _number_fields,
    "bigInt": _bigint_fields,
    "string": _string_fields,
    "date": _date_fields,
}
