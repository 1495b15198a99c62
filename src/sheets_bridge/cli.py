"""CLI for sheets-bridge - inspect configuration and read or append rows.

Usage:
    sheets-bridge status                   # Show which settings are configured
    sheets-bridge values                   # Print raw A:Z values as JSON
    sheets-bridge rows                     # Print rows keyed by header as JSON
    sheets-bridge append VALUE [VALUE...]  # Append one row
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys

from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import HttpError

from sheets_bridge.google.exceptions import SheetsBridgeError

LOG_LEVEL_VAR = "SHEETS_BRIDGE_LOG_LEVEL"


def _configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else os.environ.get(LOG_LEVEL_VAR, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cmd_status() -> int:
    """Show status of all configured settings."""
    from sheets_bridge.config import ENV_FILE, get_credential_status

    status = get_credential_status()

    print("=" * 60)
    print("SHEETS-BRIDGE STATUS")
    print("=" * 60)
    print()
    print(f".env file: {ENV_FILE} {'[x]' if status['env_file'] else '[ ]'}")
    print()

    print("Sheet:")
    print(f"  SHEET_ID / SPREADSHEET_ID:  {'[x]' if status['sheet']['sheet_id'] else '[ ]'}")
    print(f"  SHEET_NAME:                 {status['sheet']['sheet_name']}")
    print()

    print("Google service account:")
    google = status["google"]
    print(f"  GOOGLE_APPLICATION_CREDENTIALS: {'[x]' if google['key_file'] else '[ ]'}")
    print(f"  GOOGLE_CLIENT_EMAIL:            {'[x]' if google['client_email'] else '[ ]'}")
    print(f"  GOOGLE_PRIVATE_KEY:             {'[x]' if google['private_key'] else '[ ]'}")
    print()

    try:
        from sheets_bridge.sheets import create_sheets_client

        error = create_sheets_client().check_config()
    except SheetsBridgeError as e:
        print(f"[✗] {e}")
        return 1

    if error is not None:
        print(f"[✗] {error.code}: {error}")
        return 1

    print("[✓] Ready")
    return 0


def cmd_values() -> int:
    """Print raw sheet values."""
    from sheets_bridge.sheets import get_raw_values

    values = asyncio.run(get_raw_values())
    print(json.dumps(values, indent=2, ensure_ascii=False))
    return 0


def cmd_rows() -> int:
    """Print sheet rows keyed by header."""
    from sheets_bridge.sheets import get_rows_as_objects

    rows = asyncio.run(get_rows_as_objects())
    print(json.dumps(rows, indent=2, ensure_ascii=False))
    return 0


def cmd_append(values: list[str]) -> int:
    """Append one row of string values."""
    from sheets_bridge.sheets import append_row

    response = asyncio.run(append_row(values))
    updates = response.get("updates", {})
    print(f"Appended to {updates.get('updatedRange', 'unknown range')}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="sheets-bridge",
        description="Read and append Google Sheets rows with a service account",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    subparsers.add_parser("status", help="Show configuration status")
    subparsers.add_parser("values", help="Print raw A:Z values as JSON")
    subparsers.add_parser("rows", help="Print rows keyed by header as JSON")

    append_parser = subparsers.add_parser("append", help="Append one row")
    append_parser.add_argument("values", nargs="+", help="Cell values in header order")

    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    if args.command is None:
        parser.print_help()
        return 0

    _configure_logging(args.verbose)

    if args.command == "status":
        return cmd_status()

    try:
        if args.command == "values":
            return cmd_values()
        if args.command == "rows":
            return cmd_rows()
        if args.command == "append":
            return cmd_append(args.values)
    except (SheetsBridgeError, HttpError, GoogleAuthError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
