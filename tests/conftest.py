"""Pytest configuration.

This repo follows the `src/` layout. Some environments may invoke a `pytest`
entrypoint from a different Python install than the one used for
`python -m pip install -e ...`, which can cause `import pkgpub` to fail.
We ensure `src/` is on `sys.path` during tests.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def _reset_pkgpub_logger():
    # CLI invocations install a handler bound to the runner's (later closed) stream.
    yield
    logger = logging.getLogger("pkgpub")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


# =============================================================================
# Shared helpers
# =============================================================================


MIGRATION_STUB = """\
from demo.schema import Migration


class {name}(Migration):
    def up(self, schema):
        schema.create("{table}")

    def down(self, schema):
        schema.drop("{table}")
"""


def write_text(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def make_package_tree(root: Path) -> Path:
    """Create a package source tree with one resource of every kind."""
    write_text(root / "config" / "blog.stub", "PER_PAGE = 10\n")
    write_text(root / "config" / "blog.py", 'PER_PAGE = 10\nTITLE = "Blog"\n_PRIVATE = 1\n')
    write_text(
        root / "database" / "migrations" / "0001_create_posts_table.stub",
        MIGRATION_STUB.format(name="CreatePostsTable", table="posts"),
    )
    write_text(
        root / "database" / "migrations" / "0002_create_comments_table.stub",
        MIGRATION_STUB.format(name="CreateCommentsTable", table="comments"),
    )
    write_text(root / "database" / "seeds" / "posts_seeder.stub", "class PostsSeeder:\n    pass\n")
    write_text(root / "resources" / "views" / "index.html", "<h1>{{ title }}</h1>\n")
    write_text(root / "resources" / "views" / "partials" / "post.html", "<article></article>\n")
    write_text(root / "resources" / "lang" / "en" / "messages.json", '{"hello": "Hello"}\n')
    write_text(root / "public" / "assets" / "app.css", "body { margin: 0; }\n")
    write_text(
        root / "http" / "routes.py",
        'def index():\n    return "posts"\n\n\nrouter.get("/posts", index, name="posts.index")\n',
    )
    return root


class StepClock:
    """Deterministic clock: each call advances by `step`."""

    def __init__(self, start: datetime, step: timedelta = timedelta(seconds=1)) -> None:
        self.current = start
        self.step = step
        self.calls = 0

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        self.calls += 1
        return value
