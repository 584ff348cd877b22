"""Reference listing host: view table, directory scanning, and session state."""

from __future__ import annotations

from .host import ListingSession, PromptFn
from .listing import DirectoryChild, format_entry, list_entries
from .table import ViewTable

__all__ = [
    "ListingSession",
    "PromptFn",
    "ViewTable",
    "DirectoryChild",
    "list_entries",
    "format_entry",
]
