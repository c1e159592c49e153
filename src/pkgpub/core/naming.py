"""Filename helpers for published resources.

Rules:
- `build_file_name` keeps only the basename and guarantees the source extension.
- `prepare_migration_file` additionally strips a `####_` ordering prefix and a
  trailing `.stub` marker before the extension is ensured.
- `class_from_source` returns the first identifier that follows a `class`
  keyword token; `None` when the text declares no class or cannot be tokenized.
"""

from __future__ import annotations

import io
import re
import tokenize
from pathlib import Path

from pkgpub.core.model import SOURCE_EXTENSION, STUB_SUFFIX

_MIGRATION_PREFIX_RE = re.compile(r"\d{4}_(.+)")

# Length of the `####_` ordering prefix.
_MIGRATION_PREFIX_LEN = 5


def add_extension(name: str, extension: str = SOURCE_EXTENSION) -> str:
    """Append `extension` unless `name` already ends with it."""
    if not name.endswith(extension):
        name = name + extension
    return name


def build_file_name(file: str | Path, extension: str = SOURCE_EXTENSION) -> str:
    return add_extension(Path(file).name, extension)


def normalize_file_name(file: str | Path, extension: str = SOURCE_EXTENSION) -> str:
    """`app.stub` -> `app.py`; the published name of a config or seed stub."""
    return add_extension(strip_stub_suffix(Path(file).name), extension)


def strip_migration_prefix(name: str) -> str:
    """Cut a 4-digit ordering prefix from a migration stub name.

    The pattern is searched anywhere in the name but the cut always removes the
    first five characters, e.g. `ab1234_x` becomes `4_x`.
    """
    if _MIGRATION_PREFIX_RE.search(name):
        name = name[_MIGRATION_PREFIX_LEN:]
    return name


def strip_stub_suffix(name: str) -> str:
    if name.endswith(STUB_SUFFIX):
        name = name[: -len(STUB_SUFFIX)]
    return name


def prepare_migration_file(file: str | Path, extension: str = SOURCE_EXTENSION) -> str:
    """`0001_create_users.stub` -> `create_users.py`."""
    name = strip_migration_prefix(Path(file).name)
    name = strip_stub_suffix(name)
    return add_extension(name, extension)


def class_from_source(text: str) -> str | None:
    """Return the first class name declared in `text`."""
    previous: tokenize.TokenInfo | None = None
    try:
        for tok in tokenize.generate_tokens(io.StringIO(text).readline):
            if tok.type == tokenize.NAME and previous is not None and previous.string == "class":
                # Keyword and identifier must be whitespace separated on one line.
                if previous.type == tokenize.NAME and previous.end[0] == tok.start[0] and previous.end[1] < tok.start[1]:
                    return tok.string
            if tok.type not in (tokenize.NL, tokenize.COMMENT):
                previous = tok
    except (tokenize.TokenError, SyntaxError):
        return None
    return None


def class_from_file(path: str | Path) -> str | None:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    return class_from_source(text)


__all__ = [
    "add_extension",
    "build_file_name",
    "class_from_file",
    "class_from_source",
    "normalize_file_name",
    "prepare_migration_file",
    "strip_migration_prefix",
    "strip_stub_suffix",
]
