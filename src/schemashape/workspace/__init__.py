# Copyright 2026 schemashape Contributors
# SPDX-License-Identifier: Apache-2.0

"""Export configuration and schema reference loading for schemashape."""

from schemashape.workspace.config import (
    CONFIG_FILE_NAME,
    ExportConfig,
    ExportConfigError,
    SchemaExport,
    load_export_config,
)
from schemashape.workspace.loader import SchemaLoadError, load_schema, split_reference

__all__ = [
    "CONFIG_FILE_NAME",
    "ExportConfig",
    "ExportConfigError",
    "SchemaExport",
    "SchemaLoadError",
    "load_export_config",
    "load_schema",
    "split_reference",
]
