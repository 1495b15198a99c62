"""Google Sheets access with service account authentication.

Read and append rows of one spreadsheet tab.

Usage:
    from sheets_bridge.sheets import get_rows_as_objects, append_row

    rows = await get_rows_as_objects()
    await append_row(["42", "2025-10-08", "done"])

Setup:
    1. Create a service account in Google Cloud Console and share the spreadsheet with it
    2. Set SHEET_ID and either GOOGLE_APPLICATION_CREDENTIALS or
       GOOGLE_CLIENT_EMAIL + GOOGLE_PRIVATE_KEY
    3. Check: sheets-bridge status
"""

from __future__ import annotations

from sheets_bridge.sheets.client import (
    SheetsClient,
    append_row,
    create_sheets_client,
    get_default_client,
    get_raw_values,
    get_rows_as_objects,
    reset_default_client,
    rows_to_objects,
)

__all__ = [
    "SheetsClient",
    "create_sheets_client",
    "get_default_client",
    "reset_default_client",
    "get_raw_values",
    "get_rows_as_objects",
    "append_row",
    "rows_to_objects",
]
