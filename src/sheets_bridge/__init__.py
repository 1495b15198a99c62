"""Read and append Google Sheets rows with service account credentials."""

from sheets_bridge.config import SheetsConfig
from sheets_bridge.google import ConfigurationError, RowFormatError, SheetsBridgeError
from sheets_bridge.sheets import (
    SheetsClient,
    append_row,
    create_sheets_client,
    get_raw_values,
    get_rows_as_objects,
)

__all__ = [
    "SheetsConfig",
    "SheetsClient",
    "create_sheets_client",
    "get_raw_values",
    "get_rows_as_objects",
    "append_row",
    "SheetsBridgeError",
    "ConfigurationError",
    "RowFormatError",
]
