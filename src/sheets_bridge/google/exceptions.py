"""Google Sheets access exceptions."""

MISSING_SHEET_ID = "MISSING_SHEET_ID"
MISSING_GOOGLE_CREDS = "MISSING_GOOGLE_CREDS"
SHEETS_CLIENT_ERROR = "SHEETS_CLIENT_ERROR"
INVALID_PRIVATE_KEY = "INVALID_PRIVATE_KEY"


class SheetsBridgeError(Exception):
    """Base exception for sheets-bridge errors."""

    pass


class ConfigurationError(SheetsBridgeError):
    """Raised when the server is misconfigured.

    The ``code`` attribute lets callers branch on the specific problem,
    e.g. ``MISSING_SHEET_ID`` versus ``MISSING_GOOGLE_CREDS``.
    """

    def __init__(self, message: str, code: str):
        self.code = code
        super().__init__(message)


class CredentialsNotFoundError(ConfigurationError):
    """Raised when the service account key file is not found."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"Service account key file not found at {path}. "
            "Check GOOGLE_APPLICATION_CREDENTIALS.",
            MISSING_GOOGLE_CREDS,
        )


class RowFormatError(SheetsBridgeError, TypeError):
    """Raised when append_row is given something other than a row of primitives."""

    pass
