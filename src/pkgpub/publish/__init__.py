"""Host-side publishing: copy registered mappings and record a CSV ledger."""

from __future__ import annotations

from .copy import PublishedItem, copy_published, sha256_file
from .ledger import LEDGER_COLUMNS, ledger_frame, read_ledger, write_ledger

__all__ = [
    "LEDGER_COLUMNS",
    "PublishedItem",
    "copy_published",
    "ledger_frame",
    "read_ledger",
    "sha256_file",
    "write_ledger",
]
