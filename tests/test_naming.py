from __future__ import annotations

from pathlib import Path

import pytest

from pkgpub.core.naming import (
    add_extension,
    build_file_name,
    class_from_file,
    class_from_source,
    normalize_file_name,
    prepare_migration_file,
    strip_migration_prefix,
    strip_stub_suffix,
)


@pytest.mark.parametrize("name", ["blog", "blog.stub", "create_users", "blog.py"])
def test_add_extension_appends_once_and_is_idempotent(name: str) -> None:
    once = add_extension(name)
    assert once.endswith(".py")
    assert not once.endswith(".py.py")
    assert add_extension(once) == once


def test_add_extension_custom_extension() -> None:
    assert add_extension("blog", ".php") == "blog.php"
    assert add_extension("blog.php", ".php") == "blog.php"


def test_build_file_name_keeps_basename_only() -> None:
    assert build_file_name("/pkg/config/blog") == "blog.py"
    assert build_file_name(Path("nested") / "blog.py") == "blog.py"
    # Stub files keep their suffix here; only normalize_file_name drops it.
    assert build_file_name("blog.stub") == "blog.stub.py"


def test_normalize_file_name_drops_stub_suffix() -> None:
    assert normalize_file_name("/pkg/config/blog.stub") == "blog.py"
    assert normalize_file_name("blog") == "blog.py"


def test_strip_migration_prefix_on_four_digit_prefix() -> None:
    assert strip_migration_prefix("0001_create_users.stub") == "create_users.stub"
    assert strip_migration_prefix("2024_add_index.stub") == "add_index.stub"


def test_strip_migration_prefix_passes_through_non_matching_names() -> None:
    assert strip_migration_prefix("create_users.stub") == "create_users.stub"
    assert strip_migration_prefix("002_create_widgets.stub") == "002_create_widgets.stub"
    assert strip_migration_prefix("0001create.stub") == "0001create.stub"


def test_strip_migration_prefix_cuts_first_five_chars_even_when_match_is_not_leading() -> None:
    # The pattern may match mid-name; the cut still starts at index 5.
    assert strip_migration_prefix("ab1234_x.stub") == "4_x.stub"


def test_strip_stub_suffix() -> None:
    assert strip_stub_suffix("a.stub") == "a"
    assert strip_stub_suffix("a.py") == "a.py"


def test_prepare_migration_file_full_pipeline() -> None:
    assert prepare_migration_file("/pkg/database/migrations/0002_create_widgets.stub") == "create_widgets.py"
    assert prepare_migration_file("create_widgets.py") == "create_widgets.py"
    assert prepare_migration_file("0003_seed.stub", ".php") == "seed.php"


def test_class_from_source_returns_first_declared_class() -> None:
    text = "import os\n\n\nclass CreateUsersTable(Migration):\n    pass\n\n\nclass Other:\n    pass\n"
    assert class_from_source(text) == "CreateUsersTable"


def test_class_from_source_ignores_class_inside_strings_and_comments() -> None:
    text = '# class Commented\nNOTE = "class Quoted"\n\nclass Real:\n    pass\n'
    assert class_from_source(text) == "Real"


def test_class_from_source_none_without_class() -> None:
    assert class_from_source("x = 1\n") is None
    assert class_from_source("") is None


def test_class_from_source_untokenizable_text_yields_none() -> None:
    assert class_from_source('x = """never closed\n') is None


def test_class_from_file_missing_file_yields_none(tmp_path: Path) -> None:
    assert class_from_file(tmp_path / "nope.stub") is None


def test_class_from_file_reads_stub(tmp_path: Path) -> None:
    p = tmp_path / "0001_create_posts.stub"
    p.write_text("class CreatePostsTable:\n    pass\n", encoding="utf-8")
    assert class_from_file(p) == "CreatePostsTable"
