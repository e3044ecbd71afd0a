# Copyright 2026 schemashape Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the check-to-constraint reduction."""

import re
from datetime import date, datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from schemashape.model import STRING_FORMATS, Check
from schemashape.serializer.constraints import extract_constraints

# ###############
# Numbers
# ###############


class TestNumberChecks:
    def test_inclusive_min(self) -> None:
        assert extract_constraints("number", [Check(kind="min", value=0)]) == {"min": 0, "minInclusive": True}

    def test_exclusive_min(self) -> None:
        assert extract_constraints("number", [Check(kind="min", value=0, inclusive=False)]) == {"min": 0}

    def test_inclusive_max(self) -> None:
        result = extract_constraints("number", [Check(kind="max", value=9.5, inclusive=True)])
        assert result == {"max": 9.5, "maxInclusive": True}

    def test_exclusive_max(self) -> None:
        assert extract_constraints("number", [Check(kind="max", value=100, inclusive=False)]) == {"max": 100}

    def test_multiple_of_int_and_finite(self) -> None:
        checks = [Check(kind="multipleOf", value=0.5), Check(kind="int"), Check(kind="finite")]
        assert extract_constraints("number", checks) == {"multipleOf": 0.5, "int": True, "finite": True}

    def test_bigint_ignores_number_only_checks(self) -> None:
        checks = [Check(kind="int"), Check(kind="finite"), Check(kind="max", value=7, inclusive=False)]
        assert extract_constraints("bigInt", checks) == {"max": 7}

    def test_number_ignores_string_checks(self) -> None:
        assert extract_constraints("number", [Check(kind="email"), Check(kind="startsWith", value="x")]) == {}


# ###############
# Strings
# ###############


class TestStringChecks:
    @pytest.mark.parametrize("kind", ["min", "max", "length"])
    def test_lengths(self, kind: str) -> None:
        assert extract_constraints("string", [Check(kind=kind, value=4)]) == {kind: 4}

    def test_string_lengths_have_no_inclusive_flag(self) -> None:
        assert "minInclusive" not in extract_constraints("string", [Check(kind="min", value=1)])

    def test_starts_and_ends_with(self) -> None:
        checks = [Check(kind="startsWith", value="https://"), Check(kind="endsWith", value=".org")]
        assert extract_constraints("string", checks) == {"startsWith": "https://", "endsWith": ".org"}

    def test_includes_without_position(self) -> None:
        assert extract_constraints("string", [Check(kind="includes", value="@")]) == {"includes": "@"}

    def test_includes_with_position(self) -> None:
        result = extract_constraints("string", [Check(kind="includes", value="@", position=2)])
        assert result == {"includes": "@", "position": 2}

    def test_regex_without_flags(self) -> None:
        result = extract_constraints("string", [Check(kind="regex", regex="^[a-z]+$")])
        assert result == {"regex": "^[a-z]+$"}

    def test_regex_with_flags(self) -> None:
        pattern = re.compile(r"^\w+$", re.IGNORECASE | re.MULTILINE)
        result = extract_constraints("string", [Check(kind="regex", regex=pattern)])
        assert result == {"regex": r"^\w+$", "flags": "im"}

    def test_regex_flag_letters(self) -> None:
        pattern = re.compile("a.b", re.DOTALL | re.VERBOSE | re.ASCII)
        assert extract_constraints("string", [Check(kind="regex", regex=pattern)])["flags"] == "sxa"

    def test_ip_with_version(self) -> None:
        assert extract_constraints("string", [Check(kind="ip", version="v6")]) == {"kind": "ip", "version": "v6"}

    def test_ip_without_version(self) -> None:
        assert extract_constraints("string", [Check(kind="ip")]) == {"kind": "ip"}

    def test_datetime_defaults(self) -> None:
        assert extract_constraints("string", [Check(kind="datetime")]) == {"kind": "datetime"}

    def test_datetime_offset_and_precision(self) -> None:
        result = extract_constraints("string", [Check(kind="datetime", offset=True, precision=3)])
        assert result == {"kind": "datetime", "offset": True, "precision": 3}

    def test_datetime_zero_precision_is_kept(self) -> None:
        result = extract_constraints("string", [Check(kind="datetime", precision=0)])
        assert result == {"kind": "datetime", "precision": 0}

    def test_datetime_boolean_precision_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Check(kind="datetime", precision=True)

    def test_datetime_float_precision_is_kept(self) -> None:
        result = extract_constraints("string", [Check(kind="datetime", precision=3.0)])
        assert result == {"kind": "datetime", "precision": 3.0}
        assert isinstance(result["precision"], float)

    def test_datetime_boolean_precision_on_duck_typed_check_is_dropped(self) -> None:
        check = SimpleNamespace(kind="datetime", offset=False, precision=True)
        assert extract_constraints("string", [check]) == {"kind": "datetime"}

    @pytest.mark.parametrize("kind", sorted(STRING_FORMATS))
    def test_format_tags(self, kind: str) -> None:
        assert extract_constraints("string", [Check(kind=kind)]) == {"kind": kind}

    def test_later_format_replaces_earlier(self) -> None:
        checks = [Check(kind="email"), Check(kind="uuid")]
        assert extract_constraints("string", checks) == {"kind": "uuid"}

    def test_unknown_check_contributes_nothing(self) -> None:
        checks = [Check(kind="trim"), Check(kind="toUpperCase", locale="tr")]
        assert extract_constraints("string", checks) == {}

    def test_string_ignores_number_only_checks(self) -> None:
        assert extract_constraints("string", [Check(kind="int"), Check(kind="multipleOf", value=2)]) == {}


# ###############
# Dates
# ###############


class TestDateChecks:
    def test_numeric_bounds_copied(self) -> None:
        checks = [Check(kind="min", value=1_577_836_800_000), Check(kind="max", value=1_609_459_200_000)]
        assert extract_constraints("date", checks) == {"min": 1_577_836_800_000, "max": 1_609_459_200_000}

    def test_aware_datetime_as_epoch_milliseconds(self) -> None:
        bound = datetime(2020, 1, 1, 0, 0, 0, 250_000, tzinfo=timezone.utc)
        assert extract_constraints("date", [Check(kind="min", value=bound)]) == {"min": 1_577_836_800_250}

    def test_offset_datetime_is_normalized(self) -> None:
        bound = datetime(2020, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=1)))
        assert extract_constraints("date", [Check(kind="max", value=bound)]) == {"max": 1_577_836_800_000}

    def test_naive_datetime_is_treated_as_utc(self) -> None:
        assert extract_constraints("date", [Check(kind="min", value=datetime(2020, 1, 1))]) == {
            "min": 1_577_836_800_000
        }

    def test_date_is_midnight_utc(self) -> None:
        assert extract_constraints("date", [Check(kind="max", value=date(1970, 1, 2))]) == {"max": 86_400_000}

    def test_no_inclusive_flag(self) -> None:
        assert extract_constraints("date", [Check(kind="min", value=0, inclusive=True)]) == {"min": 0}


# ###############
# Reduction
# ###############


class TestReduction:
    def test_empty_checks(self) -> None:
        assert extract_constraints("number", []) == {}

    def test_last_check_of_same_field_wins(self) -> None:
        checks = [Check(kind="min", value=1), Check(kind="min", value=5, inclusive=False)]
        # The inclusive flag of the first check survives: only fields written twice are replaced.
        assert extract_constraints("number", checks) == {"min": 5, "minInclusive": True}

    def test_accepts_any_iterable(self) -> None:
        checks = (Check(kind=k, value=2) for k in ("min", "max"))
        assert extract_constraints("string", checks) == {"min": 2, "max": 2}

    def test_unknown_domain(self) -> None:
        with pytest.raises(ValueError, match="Unknown constraint domain"):
            extract_constraints("boolean", [])
