"""
Service-account credentials for the Sheets API.

Dependencies: google-auth
System role: Credential loading from configuration
"""

from dataclasses import dataclass

from google.oauth2 import service_account

from job_tracker.configs.google_sheets import GoogleSheetsSettings
from job_tracker.core.exceptions import ConfigurationError

WRITE_SCOPES = ("https://www.googleapis.com/auth/spreadsheets",)
READ_SCOPES = ("https://www.googleapis.com/auth/spreadsheets.readonly",)

TOKEN_URI = "https://oauth2.googleapis.com/token"


def unescape_private_key(private_key: str) -> str:
    """Turn literal ``\\n`` sequences (as env vars carry them) into newlines."""
    return private_key.replace("\\n", "\n")


@dataclass(frozen=True)
class ServiceAccountConfig:
    """Spreadsheet id and service-account identity loaded at startup."""

    spreadsheet_id: str
    client_email: str
    private_key: str

    @classmethod
    def from_settings(cls, settings: GoogleSheetsSettings) -> "ServiceAccountConfig":
        return cls(
            spreadsheet_id=settings.sheet_id,
            client_email=settings.client_email,
            private_key=unescape_private_key(settings.private_key),
        )

    def missing_fields(self) -> list[str]:
        """Names of the environment variables that are not set."""
        missing = []
        if not self.spreadsheet_id:
            missing.append("GOOGLE_SHEET_ID")
        if not self.client_email:
            missing.append("GOOGLE_CLIENT_EMAIL")
        if not self.private_key:
            missing.append("GOOGLE_PRIVATE_KEY")
        return missing

    def ensure_complete(self) -> None:
        """
        Raise if any credential field is missing.

        Raises:
            ConfigurationError: Spreadsheet id, client email or private key unset
        """
        missing = self.missing_fields()
        if missing:
            raise ConfigurationError(
                "Google Sheets is not configured", missing=missing
            )

    def build_credentials(self, scopes: tuple[str, ...]) -> service_account.Credentials:
        """
        Build scoped service-account credentials.

        Args:
            scopes: OAuth scopes for this session

        Returns:
            service_account.Credentials: Credentials for the Sheets API

        Raises:
            ConfigurationError: Missing fields or a private key that does not parse
        """
        self.ensure_complete()
        info = {
            "type": "service_account",
            "client_email": self.client_email,
            "private_key": self.private_key,
            "token_uri": TOKEN_URI,
        }
        try:
            return service_account.Credentials.from_service_account_info(
                info, scopes=list(scopes)
            )
        except ValueError as e:
            raise ConfigurationError(
                "Malformed service account credentials",
                details={"client_email": self.client_email, "error": str(e)},
            ) from e
