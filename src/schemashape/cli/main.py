# Copyright 2026 schemashape Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the schemashape command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from schemashape.serializer.build import ExportError, export_schemas
from schemashape.serializer.document import DescriptorFormatError, to_json
from schemashape.serializer.engine import SerializationError, serialize
from schemashape.workspace.config import CONFIG_FILE_NAME, ExportConfigError, load_export_config
from schemashape.workspace.loader import SchemaLoadError, load_schema

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the schemashape CLI."""
    parser = argparse.ArgumentParser(
        prog="schemashape",
        description="schemashape - serialize schema graphs to JSON descriptors",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # dump subcommand
    dump_parser = subparsers.add_parser(
        "dump",
        help="Print the descriptor of a single schema",
        description="Serialize the schema named by a module:attribute reference and print its descriptor.",
    )
    dump_parser.add_argument(
        "reference",
        help="Schema reference in module:attribute form (e.g. myapp.schemas:User)",
    )
    dump_parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Pretty-print with this indentation (default: compact)",
    )
    dump_parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Write the descriptor to this file instead of stdout",
    )

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Create a starter export configuration",
        description=f"Write a starter {CONFIG_FILE_NAME} file.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to create the configuration in (default: current directory)",
    )

    # export subcommand
    export_parser = subparsers.add_parser(
        "export",
        help="Write descriptor documents for all configured schemas",
        description=f"Serialize every schema listed in {CONFIG_FILE_NAME} and write one document per schema.",
    )
    export_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help=f"Directory containing {CONFIG_FILE_NAME} (default: current directory)",
    )

    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_STARTER_CONFIG = (
    "# schemashape export configuration\n"
    "output-directory: build/schemas\n"
    "indent: 2\n"
    "exports: []\n"
    "#  - name: user\n"
    "#    schema: myapp.schemas:User\n"
)


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "dump":
        return _cmd_dump(args)
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "export":
        return _cmd_export(args)
    return 0


def _cmd_dump(args: argparse.Namespace) -> int:
    """Handle the dump subcommand."""
    try:
        schema = load_schema(args.reference, search_paths=[Path.cwd()])
        text = to_json(serialize(schema), indent=args.indent)
    except (SchemaLoadError, SerializationError, DescriptorFormatError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.output is None:
        print(text)
        return 0

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    print(f"Wrote descriptor to '{output}'.")
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME

    if config_file.exists():
        print(
            f"Error: export configuration already exists at '{config_file}'.",
            file=sys.stderr,
        )
        return 1

    config_file.write_text(_STARTER_CONFIG, encoding="utf-8")
    print(f"Created export configuration at '{config_file}'.")
    return 0


def _cmd_export(args: argparse.Namespace) -> int:
    """Handle the export subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME

    if not config_file.exists():
        print(
            f"Error: no {CONFIG_FILE_NAME} found in '{directory}'. Run 'schemashape init' to create one.",
            file=sys.stderr,
        )
        return 1

    try:
        config = load_export_config(config_file)
    except ExportConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not config.exports:
        print("No schemas configured for export.")
        return 0

    print(f"Exporting {len(config.exports)} schema(s)...")
    try:
        written = export_schemas(config, directory)
    except ExportError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for name, path in written.items():
        print(f"  {name} -> {path}")
    return 0
