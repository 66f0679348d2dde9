"""
Boundary layer for external system integrations.

Handles all interactions with the Google Sheets store of record.
"""
