"""
Tracker page presentation layer.

Tabbed add/view page rendered server-side, with per-browser UI state
kept in memory and handler calls made over HTTP.
"""
