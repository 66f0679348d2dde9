"""
Google Sheets backend configuration.

Service-account credentials and the sheet/column ranges the handlers use.

Dependencies: pydantic_settings
System role: Spreadsheet backend configuration
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GoogleSheetsSettings(BaseSettings):
    """Settings for the Google Sheets store of record."""

    model_config = SettingsConfigDict(
        env_prefix="GOOGLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    sheet_id: str = Field(
        default="",
        description="Spreadsheet ID (the long token in the sheet URL)",
    )
    client_email: str = Field(
        default="",
        description="Service account client email",
    )
    private_key: str = Field(
        default="",
        description="Service account private key, PEM, literal \\n escapes allowed",
    )
    sheet_name: str = Field(
        default="Sheet1",
        description="Worksheet (tab) holding the job rows",
    )
    write_columns: str = Field(
        default="A:N",
        description="Column span rows are appended to",
    )
    read_columns: str = Field(
        default="A:O",
        description="Column span the read handler fetches",
    )

    @field_validator("sheet_id", "client_email", mode="before")
    @classmethod
    def strip_value(cls, v):
        """Strip whitespace from identifiers copied out of the console."""
        if isinstance(v, str):
            return v.strip()
        return v or ""

    @property
    def write_range(self) -> str:
        """A1 range for appends, e.g. ``Sheet1!A:N``."""
        return f"{self.sheet_name}!{self.write_columns}"

    @property
    def read_range(self) -> str:
        """A1 range for reads, e.g. ``Sheet1!A:O``."""
        return f"{self.sheet_name}!{self.read_columns}"
