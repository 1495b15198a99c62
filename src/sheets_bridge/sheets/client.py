"""Google Sheets client implementation."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Sequence
from typing import Any

from googleapiclient.errors import HttpError

from sheets_bridge.config import SheetsConfig
from sheets_bridge.google import GoogleServiceAccount
from sheets_bridge.google.exceptions import (
    MISSING_GOOGLE_CREDS,
    MISSING_SHEET_ID,
    SHEETS_CLIENT_ERROR,
    ConfigurationError,
    RowFormatError,
)

logger = logging.getLogger(__name__)

PRIMITIVE_TYPES = (str, int, float, bool, type(None))


def rows_to_objects(values: Sequence[Sequence[Any]]) -> list[dict[str, Any]]:
    """Map data rows to dicts keyed by the header row.

    Blank header cells become ``col{index}``. Rows shorter than the header
    get ``""`` for the missing columns.

    Example:
        >>> rows_to_objects([["id", "date"], ["1"]])
        [{'id': '1', 'date': ''}]
    """
    if not values:
        return []

    header = [str(cell).strip() if cell else "" for cell in values[0]]
    rows = []
    for row in values[1:]:
        obj: dict[str, Any] = {}
        for index, name in enumerate(header):
            value = row[index] if index < len(row) else None
            obj[name or f"col{index}"] = "" if value is None else value
        rows.append(obj)
    return rows


def is_row(row: Any) -> bool:
    """Check that ``row`` is a list or tuple of primitive cell values."""
    return isinstance(row, (list, tuple)) and all(isinstance(v, PRIMITIVE_TYPES) for v in row)


class SheetsClient:
    """Google Sheets client bound to one spreadsheet tab.

    Reads and appends rows using service account credentials. The Sheets API
    service is built on first use and shared by every later call.

    Usage:
        client = create_sheets_client()

        # Raw 2D values of columns A:Z
        values = await client.get_raw_values()

        # Data rows keyed by header
        rows = await client.get_rows_as_objects()

        # Append one row
        await client.append_row(["42", "2025-10-08", "done"])
    """

    def __init__(
        self,
        config: SheetsConfig,
        auth: GoogleServiceAccount | None = None,
        service: Any = None,
    ) -> None:
        """Initialize Sheets client.

        Args:
            config: Spreadsheet location and credentials.
            auth: Service account used to build the API service.
            service: Prebuilt Sheets API service (skips building one from ``auth``).
        """
        self.config = config
        self._auth = auth
        self._service = service
        self._service_lock = threading.Lock()

    @property
    def sheet_id(self) -> str | None:
        return self.config.sheet_id

    @property
    def sheet_name(self) -> str:
        return self.config.sheet_name

    # =========================================================================
    # Configuration checks
    # =========================================================================

    def check_config(self) -> ConfigurationError | None:
        """Return the first configuration problem, or None if ready to call the API."""
        if not self.config.sheet_id:
            return ConfigurationError(
                "Server misconfigured: missing SHEET_ID / SPREADSHEET_ID environment variable.",
                MISSING_SHEET_ID,
            )

        credentials = self.config.credentials
        if credentials is None or not credentials.is_complete:
            return ConfigurationError(
                "Server misconfigured: missing Google service account credentials. "
                "Set GOOGLE_APPLICATION_CREDENTIALS (local file) or "
                "GOOGLE_CLIENT_EMAIL and GOOGLE_PRIVATE_KEY (env).",
                MISSING_GOOGLE_CREDS,
            )

        if self._auth is None and self._service is None:
            return ConfigurationError(
                "Google Sheets client not initialized correctly.",
                SHEETS_CLIENT_ERROR,
            )

        return None

    def ensure_configured(self) -> None:
        """Raise the first configuration problem, if any.

        Raises:
            ConfigurationError: With ``code`` set to MISSING_SHEET_ID,
                MISSING_GOOGLE_CREDS or SHEETS_CLIENT_ERROR.
        """
        error = self.check_config()
        if error is not None:
            raise error

    def _get_service(self) -> Any:
        """Get or create Sheets API service."""
        if self._service is None:
            with self._service_lock:
                if self._service is None:
                    self._service = self._auth.build_service("sheets", "v4")
        return self._service

    def _new_http(self) -> Any:
        """Get a transport for one request, or None to use the service default.

        The service object is shared between worker threads but its httplib2
        transport is not thread-safe, so each request gets a fresh one.
        """
        if self._auth is None:
            return None
        return self._auth.authorized_http()

    # =========================================================================
    # Reading Data
    # =========================================================================

    def _fetch_values(self) -> list[list[Any]]:
        service = self._get_service()
        result = (
            service.spreadsheets()
            .values()
            .get(
                spreadsheetId=self.config.sheet_id,
                range=self.config.range_notation,
            )
            .execute(http=self._new_http())
        )
        return result.get("values", [])

    async def get_raw_values(self) -> list[list[Any]]:
        """Read columns A:Z of the sheet.

        Returns:
            2D list of cell values, or [] if the sheet is empty.

        Raises:
            ConfigurationError: If the client is not configured.
            HttpError: If the Sheets API rejects the request.
        """
        self.ensure_configured()

        try:
            return await asyncio.to_thread(self._fetch_values)
        except Exception as e:
            logger.error(f"get_raw_values failed: {e}")
            raise

    async def get_rows_as_objects(self) -> list[dict[str, Any]]:
        """Read the sheet and map each data row by the header row.

        Returns:
            List of dicts, e.g. [{"id": "123", "date": "2025-10-08"}, ...].
        """
        values = await self.get_raw_values()
        return rows_to_objects(values)

    # =========================================================================
    # Writing Data
    # =========================================================================

    def _append_values(self, row: list[Any]) -> dict[str, Any]:
        service = self._get_service()
        return (
            service.spreadsheets()
            .values()
            .append(
                spreadsheetId=self.config.sheet_id,
                range=self.config.range_notation,
                valueInputOption="RAW",
                insertDataOption="INSERT_ROWS",
                body={"values": [row]},
            )
            .execute(http=self._new_http())
        )

    async def append_row(self, row: Sequence[Any]) -> dict[str, Any]:
        """Append a single row after the last row of the sheet.

        Args:
            row: List or tuple of primitives in header order.

        Returns:
            The Sheets API append response.

        Raises:
            ConfigurationError: If the client is not configured.
            RowFormatError: If ``row`` is not a list or tuple of primitives.
            HttpError: If the Sheets API rejects the request.
        """
        self.ensure_configured()

        if not is_row(row):
            raise RowFormatError("append_row expects a list of primitive values.")

        try:
            return await asyncio.to_thread(self._append_values, list(row))
        except HttpError as e:
            logger.error(f"append_row failed: {e.error_details or e.reason}")
            raise
        except Exception as e:
            logger.error(f"append_row failed: {e}")
            raise


def create_sheets_client(config: SheetsConfig | None = None) -> SheetsClient:
    """Create a client from ``config``, or from the environment if not given.

    Raises:
        ConfigurationError: If GOOGLE_PRIVATE_KEY is set but malformed.
    """
    if config is None:
        config = SheetsConfig.from_env()

    auth = None
    if config.credentials is not None:
        auth = GoogleServiceAccount(config.credentials, scopes=["sheets"])

    return SheetsClient(config, auth=auth)


_default_client: SheetsClient | None = None
_default_client_error: ConfigurationError | None = None
_default_client_lock = threading.Lock()


def get_default_client() -> SheetsClient:
    """Get the process-wide client, created from the environment on first call.

    The client is created exactly once. A malformed private key is remembered
    and raised again on every later call without re-reading the environment.

    Raises:
        ConfigurationError: If GOOGLE_PRIVATE_KEY is set but malformed.
    """
    global _default_client, _default_client_error

    if _default_client is None and _default_client_error is None:
        with _default_client_lock:
            if _default_client is None and _default_client_error is None:
                try:
                    _default_client = create_sheets_client()
                except ConfigurationError as e:
                    _default_client_error = e

    if _default_client_error is not None:
        raise _default_client_error
    return _default_client


def reset_default_client() -> None:
    """Forget the process-wide client so the next call re-reads the environment."""
    global _default_client, _default_client_error

    with _default_client_lock:
        _default_client = None
        _default_client_error = None


async def get_raw_values() -> list[list[Any]]:
    """Read columns A:Z of the configured sheet with the default client."""
    return await get_default_client().get_raw_values()


async def get_rows_as_objects() -> list[dict[str, Any]]:
    """Read the configured sheet as header-keyed dicts with the default client."""
    return await get_default_client().get_rows_as_objects()


async def append_row(row: Sequence[Any]) -> dict[str, Any]:
    """Append one row to the configured sheet with the default client."""
    return await get_default_client().append_row(row)
