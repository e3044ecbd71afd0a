# Copyright 2026 schemashape Contributors
# SPDX-License-Identifier: Apache-2.0

"""Validation checks attached to leaf schema nodes."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt

# ###############
# Public Interface
# ###############

# Check kinds that only tag a string with a well-known format.
STRING_FORMATS = frozenset({"email", "url", "emoji", "uuid", "cuid", "cuid2", "ulid"})


class Check(BaseModel):
    """A single validation rule attached to a leaf schema node.

    The meaning of the parameters depends on ``kind`` and on the node the check
    is attached to: ``value`` is a numeric bound for numbers, a length for
    strings, a comparison instant for dates, and the matched text for
    ``startsWith`` / ``endsWith`` / ``includes``. Kinds unknown to the
    serializer are allowed and carry arbitrary extra parameters.

    Attributes:
        kind: Check tag, e.g. ``"min"``, ``"regex"`` or ``"email"``.
        value: Kind-specific comparison value.
        inclusive: Whether a ``min`` / ``max`` bound includes its value.
        position: Start offset for an ``includes`` check.
        regex: Pattern for a ``regex`` check. Strings are compiled.
        version: IP version for an ``ip`` check (``"v4"`` or ``"v6"``).
        offset: Whether a ``datetime`` check accepts a UTC offset.
        precision: Sub-second digits required by a ``datetime`` check.
        message: Custom error message. Never serialized.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    kind: str
    value: Any = None
    inclusive: bool = True
    position: int | None = None
    regex: re.Pattern[str] | None = None
    version: str | None = None
    offset: bool = False
    precision: StrictInt | StrictFloat | None = None
    message: str | None = None


class SizeBound(BaseModel):
    """A size limit on a collection (array length or set size)."""

    model_config = ConfigDict(frozen=True)

    value: int
    message: str | None = None
