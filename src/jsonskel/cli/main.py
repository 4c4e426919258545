# Copyright 2026 jsonskel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the jsonskel command-line interface."""

import argparse
import sys
from pathlib import Path

from jsonskel.config.settings import SETTINGS_FILE_NAME, Settings, SettingsError, load_settings
from jsonskel.resolver.catalog import CatalogError, CatalogTypeResolver, load_catalog
from jsonskel.skeleton.builder import MAX_DEPTH_LIMIT, SkeletonBuilder
from jsonskel.skeleton.defaults import with_overrides

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the jsonskel CLI."""
    parser = argparse.ArgumentParser(
        prog="jsonskel",
        description="jsonskel: generate sample JSON documents from type definitions",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate the JSON skeleton of a type",
        description="Print a sample JSON document with default values for every field of a type.",
    )
    generate_parser.add_argument("catalog", help="Path to the YAML type catalog")
    generate_parser.add_argument("type_name", metavar="TYPE", help="Name of the composite type to expand")
    generate_parser.add_argument(
        "--compact",
        action="store_true",
        help="Render JSON without extraneous whitespace",
    )
    generate_parser.add_argument(
        "--no-comments",
        action="store_true",
        help="Do not collect field documentation into the comment entry",
    )
    generate_parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Maximum number of nested composite types along one path",
    )
    generate_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the JSON to this file instead of standard output",
    )
    generate_parser.add_argument(
        "--config",
        default=None,
        help=f"Settings file (default: {SETTINGS_FILE_NAME} in the current directory, if present)",
    )

    # types subcommand
    types_parser = subparsers.add_parser(
        "types",
        help="List the composite types of a catalog",
        description="Print the name of every composite type declared in a type catalog.",
    )
    types_parser.add_argument("catalog", help="Path to the YAML type catalog")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "types":
        return _cmd_types(args)
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    try:
        settings = _load_settings(args.config)
        catalog = load_catalog(Path(args.catalog))
    except (SettingsError, CatalogError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if catalog.get(args.type_name) is None:
        print(f"Error: type '{args.type_name}' is not defined in '{args.catalog}'.", file=sys.stderr)
        return 1

    if args.max_depth is not None:
        if not 1 <= args.max_depth <= MAX_DEPTH_LIMIT:
            print(f"Error: --max-depth must be between 1 and {MAX_DEPTH_LIMIT}.", file=sys.stderr)
            return 1
        settings.max_depth = args.max_depth
    if args.no_comments:
        settings.include_comments = False

    defaults = with_overrides(settings.scalar_defaults)
    builder = SkeletonBuilder(
        CatalogTypeResolver(catalog, scalar_names=defaults),
        comment_key=settings.comment_key,
        include_comments=settings.include_comments,
        max_depth=settings.max_depth,
        defaults=defaults,
    )
    result = builder.build_result(args.type_name)
    for diagnostic in result.diagnostics:
        print(f"Warning: {diagnostic.path}: {diagnostic.message}", file=sys.stderr)

    text = result.skeleton.to_json(pretty=not args.compact, indent=settings.indent)
    if args.output is None:
        print(text)
        return 0

    output = Path(args.output)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        print(f"Error: cannot write '{output}': {exc}", file=sys.stderr)
        return 1
    print(f"Wrote skeleton of '{args.type_name}' to '{output}'.")
    return 0


def _cmd_types(args: argparse.Namespace) -> int:
    """Handle the types subcommand."""
    try:
        catalog = load_catalog(Path(args.catalog))
    except CatalogError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not catalog.types:
        print("No types defined in the catalog.")
        return 0

    for name in catalog.names:
        print(name)
    return 0


def _load_settings(config: str | None) -> Settings:
    """Load settings from *config*, or from the current directory when present."""
    if config is not None:
        return load_settings(Path(config))
    default_path = Path.cwd() / SETTINGS_FILE_NAME
    if default_path.exists():
        return load_settings(default_path)
    return Settings()
