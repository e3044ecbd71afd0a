# Copyright 2026 schemashape Contributors
# SPDX-License-Identifier: Apache-2.0

"""Export workflow: serialize every configured schema to a descriptor document.

For each entry of the export configuration, the builder:
1. Resolves the ``module:attribute`` reference, importing from the
   configuration's directory first.
2. Serializes the schema graph to its descriptor.
3. Writes ``<output-directory>/<name>.schema.json``.

Any failure aborts the build; documents written before the failure are left
in place.
"""

from __future__ import annotations

import logging
from pathlib import Path

from schemashape.serializer.document import (
    DOCUMENT_SUFFIX,
    DescriptorDocument,
    DescriptorFormatError,
    write_descriptor,
)
from schemashape.serializer.engine import SerializationError, serialize
from schemashape.workspace.config import ExportConfig
from schemashape.workspace.loader import SchemaLoadError, load_schema

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class ExportError(Exception):
    """Raised when a configured schema cannot be loaded, serialized, or written."""


def export_schemas(config: ExportConfig, root: Path) -> dict[str, Path]:
    """Serialize and write every schema listed in *config*.

    Args:
        config: Parsed export configuration.
        root: Directory containing the configuration file. The output
            directory is resolved against it and it is searched first when
            importing schema modules.

    Returns:
        A mapping from export name to the path of the written document, in
        configuration order.

    Raises:
        ExportError: On unresolvable references, unserializable schemas, or
            descriptors that cannot be encoded as JSON.
    """
    output_dir = root / config.output_directory
    written: dict[str, Path] = {}
    for export in config.exports:
        path = output_dir / f"{export.name}{DOCUMENT_SUFFIX}"
        try:
            schema = load_schema(export.schema, search_paths=[root])
            descriptor = serialize(schema)
            write_descriptor(DescriptorDocument(name=export.name, descriptor=descriptor), path, indent=config.indent)
        except (SchemaLoadError, SerializationError, DescriptorFormatError) as exc:
            raise ExportError(f"Export '{export.name}': {exc}") from exc
        logger.info("Wrote descriptor for '%s' to %s", export.name, path)
        written[export.name] = path
    return written
