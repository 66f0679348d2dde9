"""
Google Sheets boundary modules.

Exports: GoogleSheetsClient, SheetsClientFactory, ServiceAccountConfig
"""

from .credentials import READ_SCOPES, WRITE_SCOPES, ServiceAccountConfig
from .sheets_client import GoogleSheetsClient, SheetsClientFactory

__all__ = [
    "GoogleSheetsClient",
    "READ_SCOPES",
    "ServiceAccountConfig",
    "SheetsClientFactory",
    "WRITE_SCOPES",
]
