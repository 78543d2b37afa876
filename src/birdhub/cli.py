"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import requests

from birdhub import __version__
from birdhub.config import get_settings
from birdhub.flows.importer import import_lifelist
from birdhub.store import ExportStore


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="birdhub",
        description="Import an eBird life list into a birding profile's data.json",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'import' command - CSV export -> data.json
    import_parser = subparsers.add_parser("import", help="Import a life list CSV export")
    import_parser.add_argument(
        "csv",
        nargs="?",
        default=None,
        help="Path to the CSV export, or '-' for stdin",
    )
    import_parser.add_argument(
        "--url",
        type=str,
        default=None,
        help="Download the CSV from this URL (default: lifelist_url from settings)",
    )
    import_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Export artifact to rewrite (default: data_path from settings)",
    )
    import_parser.add_argument(
        "--detect-columns",
        action="store_true",
        help="Locate columns by header name instead of fixed positions",
    )

    # 'show' command - summarize the current artifact
    show_parser = subparsers.add_parser("show", help="Show profile and latest sightings")
    show_parser.add_argument(
        "--limit",
        type=int,
        default=5,
        help="Number of recent sightings to list (default: 5)",
    )

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def cmd_import(args: argparse.Namespace) -> int:
    """Handle the 'import' command."""
    settings = get_settings()
    if args.debug:
        print(f"Debug mode enabled. Settings: {settings}")

    output = args.output or settings.data_path
    url = args.url or settings.lifelist_url
    detect_columns = args.detect_columns or settings.detect_columns

    if args.csv is None and url is None:
        print("Error: give a CSV path, '-' for stdin, or --url", file=sys.stderr)
        return 1

    try:
        if args.csv == "-":
            result = import_lifelist(
                output=output, detect_columns=detect_columns, csv_text=sys.stdin.read()
            )
        elif args.csv is not None:
            result = import_lifelist(
                source=Path(args.csv), output=output, detect_columns=detect_columns
            )
        else:
            result = import_lifelist(url=url, output=output, detect_columns=detect_columns)
    except (OSError, ValueError, requests.RequestException) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Imported life list into {result['output']}")
    print(f"   Species: {result['species']}")
    latest = result["latest"]
    if latest:
        print(f"   Latest: {latest['common']} ({latest['date']})")
    if args.debug:
        print(f"   Dropped rows: {result['dropped']}")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Handle the 'show' command."""
    settings = get_settings()
    try:
        export = ExportStore(settings.data_path).read()
    except ValueError as e:
        print(f"Error: {settings.data_path} is not a valid export: {e}", file=sys.stderr)
        return 1

    if export is None:
        print(
            f"No export found at {settings.data_path}. Run 'birdhub import' first.",
            file=sys.stderr,
        )
        return 1

    profile = export.profile.model_dump(by_alias=True)
    for key, value in profile.items():
        print(f"{key}: {value}")
    print(f"Exported: {export.exported_at}")
    print(f"Species: {len(export.observations)}")

    recent = export.observations[-args.limit :] if args.limit > 0 else []
    for obs in reversed(recent):
        print(f"  {obs.date}  {obs.common} ({obs.sci_name}) - {obs.location}, {obs.region}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Data path: {settings.data_path}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "import": cmd_import,
        "show": cmd_show,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
