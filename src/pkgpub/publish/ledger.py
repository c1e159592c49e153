"""Publish ledger (CSV).

One row per copied file with a stable column order:
  group, source, destination, kind, sha256

Paths are written with forward slashes so ledgers diff cleanly across
platforms.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Iterable

from pkgpub.publish.copy import PublishedItem

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd

LEDGER_COLUMNS = ["group", "source", "destination", "kind", "sha256"]


def _posix(path: Path) -> str:
    return str(path).replace("\\", "/")


def ledger_frame(items: Iterable[PublishedItem], *, group: str | None = None) -> "pd.DataFrame":
    """Return the ledger as a pandas DataFrame (empty frames keep the columns)."""
    import pandas as pd  # local import to keep module import-light

    rows = [
        {
            "group": group or "",
            "source": _posix(item.source),
            "destination": _posix(item.destination),
            "kind": item.kind,
            "sha256": item.sha256,
        }
        for item in items
    ]
    return pd.DataFrame(rows, columns=LEDGER_COLUMNS)


def write_ledger(items: Iterable[PublishedItem], path: Path, *, group: str | None = None) -> Path:
    """Write (or append to) a ledger CSV and return its path."""
    import pandas as pd

    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    df = ledger_frame(items, group=group)
    if p.exists():
        df = pd.concat([read_ledger(p), df], ignore_index=True)
    df.loc[:, LEDGER_COLUMNS].to_csv(p, index=False, lineterminator="\n")
    return p


def read_ledger(path: Path) -> "pd.DataFrame":
    import pandas as pd

    p = Path(path)
    df = pd.read_csv(p, dtype=str, keep_default_na=False)
    missing = [c for c in LEDGER_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{p.name}: missing ledger columns: {missing}")
    return df.loc[:, LEDGER_COLUMNS]


__all__ = ["LEDGER_COLUMNS", "ledger_frame", "read_ledger", "write_ledger"]
