# Copyright 2026 schemashape Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the schemashape export configuration file."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".schemashape.yaml"


class ExportConfigError(Exception):
    """Raised when an export configuration file is invalid or cannot be loaded."""


@dataclass
class SchemaExport:
    """A schema to serialize, and the name its descriptor document is written under.

    Attributes:
        name: Export name, used as the descriptor document's file stem.
        schema: Reference to the schema object in ``module:attribute`` form.
    """

    name: str
    schema: str


@dataclass
class ExportConfig:
    """The parsed export configuration.

    Attributes:
        output_directory: Relative path (from the config file) for descriptor documents.
        exports: Schemas to serialize, in file order.
        indent: Pretty-print indentation for written documents; compact when None.
    """

    output_directory: str
    exports: list[SchemaExport] = field(default_factory=list)
    indent: int | None = None


def load_export_config(path: Path) -> ExportConfig:
    """Load and parse a schemashape export configuration file.

    Args:
        path: Path to the `.schemashape.yaml` file.

    Returns:
        An ExportConfig instance populated from the file.

    Raises:
        ExportConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ExportConfigError(f"Export config file not found: {path}") from None
    except OSError as exc:
        raise ExportConfigError(f"Cannot read export config file: {exc}") from exc

    return _parse_export_config(text, source_label=str(path))


# ################
# Implementation
# ################

_EXPORT_NAME = re.compile(r"^[A-Za-z0-9_.-]+$")


def _parse_export_config(text: str, source_label: str = "<string>") -> ExportConfig:
    """Parse export config YAML text into an ExportConfig.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Returns:
        An ExportConfig instance.

    Raises:
        ExportConfigError: If the YAML is invalid or required fields are missing.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ExportConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise ExportConfigError(f"{source_label}: export config must be a YAML mapping")

    output_directory = _require_string(data, "output-directory", source_label)

    indent = data.get("indent")
    if indent is not None and (isinstance(indent, bool) or not isinstance(indent, int) or indent < 0):
        raise ExportConfigError(f"{source_label}: 'indent' must be a non-negative integer")

    exports: list[SchemaExport] = []
    if "exports" in data:
        raw_exports = data["exports"]
        if not isinstance(raw_exports, list):
            raise ExportConfigError(f"{source_label}: 'exports' must be a list")
        seen: set[str] = set()
        for index, entry in enumerate(raw_exports):
            export = _parse_export(entry, index, source_label)
            if export.name in seen:
                raise ExportConfigError(f"{source_label}: exports[{index}]: duplicate export name '{export.name}'")
            seen.add(export.name)
            exports.append(export)

    return ExportConfig(output_directory=output_directory, exports=exports, indent=indent)


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a required string field from a mapping, raising ExportConfigError if missing."""
    if key not in mapping:
        raise ExportConfigError(f"{source_label}: missing required field '{key}'")
    value = mapping[key]
    if not isinstance(value, str):
        raise ExportConfigError(f"{source_label}: '{key}' must be a string")
    return value


def _parse_export(entry: object, index: int, source_label: str) -> SchemaExport:
    """Parse a single export entry from the YAML list."""
    location = f"{source_label}: exports[{index}]"

    if not isinstance(entry, dict):
        raise ExportConfigError(f"{location} must be a YAML mapping")

    name = _require_string(entry, "name", location)
    if not _EXPORT_NAME.match(name):
        raise ExportConfigError(
            f"{location} '{name}': name may only contain letters, digits, '_', '.' and '-'"
        )

    schema = _require_string(entry, "schema", location)
    return SchemaExport(name=name, schema=schema)
