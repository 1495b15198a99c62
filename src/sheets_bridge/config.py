"""Environment-based configuration.

Settings are read from environment variables:
    SHEET_ID / SPREADSHEET_ID        - spreadsheet ID (not the full URL)
    SHEET_NAME                       - tab name, defaults to "Sheet1"
    GOOGLE_APPLICATION_CREDENTIALS   - path to a service account JSON key file
    GOOGLE_CLIENT_EMAIL              - service account email (used with the key below)
    GOOGLE_PRIVATE_KEY               - service account private key, newlines escaped as \\n

This module auto-loads a .env file from the working directory on import.
Variables already present in the environment take precedence.

Missing settings never raise here; they are reported when a Sheets call is
made. A malformed private key is the exception and fails immediately.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from sheets_bridge.google.service_account import (
    CredentialSource,
    KeyFileCredentials,
    ServiceAccountKey,
)

logger = logging.getLogger(__name__)

ENV_FILE = Path.cwd() / ".env"

SHEET_ID_VARS = ("SHEET_ID", "SPREADSHEET_ID")
SHEET_NAME_VAR = "SHEET_NAME"
KEY_FILE_VAR = "GOOGLE_APPLICATION_CREDENTIALS"
CLIENT_EMAIL_VAR = "GOOGLE_CLIENT_EMAIL"
PRIVATE_KEY_VAR = "GOOGLE_PRIVATE_KEY"

DEFAULT_SHEET_NAME = "Sheet1"
COLUMN_SPAN = "A:Z"


def _load_env_file(env_path: Path) -> dict[str, str]:
    """Load environment variables from a file.

    Args:
        env_path: Path to .env file.

    Returns:
        Dictionary of loaded variables.
    """
    loaded = {}
    if not env_path.exists():
        return loaded

    with open(env_path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip()
            value = value.strip()

            # Remove surrounding quotes
            if (value.startswith('"') and value.endswith('"')) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]

            # Only set if not already in environment (env vars take precedence)
            if key and key not in os.environ:
                os.environ[key] = value
                loaded[key] = value

    return loaded


@dataclass(frozen=True)
class SheetsConfig:
    """Spreadsheet location and service account credentials."""

    sheet_id: str | None = None
    sheet_name: str = DEFAULT_SHEET_NAME
    credentials: CredentialSource | None = None

    @property
    def range_notation(self) -> str:
        """A1 range covering columns A through Z of the configured tab."""
        return f"{self.sheet_name}!{COLUMN_SPAN}"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SheetsConfig:
        """Read configuration from the environment.

        A key file path wins over the email / private key pair.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Raises:
            ConfigurationError: If GOOGLE_PRIVATE_KEY is set but is not a PEM block.
        """
        env = os.environ if environ is None else environ

        sheet_id = next((env[name] for name in SHEET_ID_VARS if env.get(name)), None)
        if not sheet_id:
            # Reported again when a Sheets call is made
            logger.warning("SHEET_ID / SPREADSHEET_ID env var is not set.")

        key_file = env.get(KEY_FILE_VAR)
        if key_file:
            credentials: CredentialSource = KeyFileCredentials(Path(key_file))
        else:
            credentials = ServiceAccountKey.from_env_values(
                env.get(CLIENT_EMAIL_VAR),
                env.get(PRIVATE_KEY_VAR),
            )

        return cls(
            sheet_id=sheet_id,
            sheet_name=env.get(SHEET_NAME_VAR) or DEFAULT_SHEET_NAME,
            credentials=credentials,
        )


def get_credential_status(environ: Mapping[str, str] | None = None) -> dict:
    """Get status of all configured settings.

    Returns:
        Dictionary of which settings are present. Secret values are never included.
    """
    env = os.environ if environ is None else environ
    return {
        "env_file": ENV_FILE.exists(),
        "sheet": {
            "sheet_id": any(env.get(name) for name in SHEET_ID_VARS),
            "sheet_name": env.get(SHEET_NAME_VAR) or DEFAULT_SHEET_NAME,
        },
        "google": {
            "key_file": bool(env.get(KEY_FILE_VAR)),
            "client_email": bool(env.get(CLIENT_EMAIL_VAR)),
            "private_key": bool(env.get(PRIVATE_KEY_VAR)),
        },
    }


# Auto-load .env from the working directory on import
_loaded = _load_env_file(ENV_FILE)
