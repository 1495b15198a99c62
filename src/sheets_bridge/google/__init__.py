"""Google service account authentication utilities."""

from sheets_bridge.google.exceptions import (
    ConfigurationError,
    CredentialsNotFoundError,
    RowFormatError,
    SheetsBridgeError,
)
from sheets_bridge.google.service_account import (
    GoogleServiceAccount,
    KeyFileCredentials,
    ServiceAccountKey,
)

__all__ = [
    "GoogleServiceAccount",
    "KeyFileCredentials",
    "ServiceAccountKey",
    "SheetsBridgeError",
    "ConfigurationError",
    "CredentialsNotFoundError",
    "RowFormatError",
]
