"""
Job Tracker.

Job entry form and job table backed by a Google Sheets spreadsheet.
"""

__version__ = "0.1.0"
