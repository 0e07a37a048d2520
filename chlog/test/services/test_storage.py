from __future__ import annotations

import os
import stat
import sys
from pathlib import Path

import pytest

from chlog.changelog.errors import NotFound
from chlog.core.result import Err, Ok
from chlog.services.storage import ChangelogStorage, atomic_write_text


def test_read_missing_file(tmp_path: Path) -> None:
    storage = ChangelogStorage(tmp_path / "CHANGELOG.md")
    assert storage.exists() is False
    assert storage.read() == Err(NotFound(tmp_path / "CHANGELOG.md"))


def test_write_then_read(tmp_path: Path) -> None:
    storage = ChangelogStorage(tmp_path / "CHANGELOG.md")
    assert storage.write("# Changelog\n") == Ok(None)
    assert storage.exists() is True
    assert storage.read() == Ok("# Changelog\n")


def test_write_leaves_no_temp_files(tmp_path: Path) -> None:
    atomic_write_text(tmp_path / "CHANGELOG.md", "text")
    assert [p.name for p in tmp_path.iterdir()] == ["CHANGELOG.md"]


def test_remove(tmp_path: Path) -> None:
    path = tmp_path / "CHANGELOG.md"
    path.write_text("x", encoding="utf-8")
    storage = ChangelogStorage(path)

    assert storage.remove() == Ok(None)
    assert not path.exists()
    assert storage.remove() == Err(NotFound(path))


@pytest.mark.skipif(sys.platform == "win32", reason="chmod doesn't work on Windows")
def test_write_keeps_existing_mode(tmp_path: Path) -> None:
    path = tmp_path / "CHANGELOG.md"
    path.write_text("old\n", encoding="utf-8")
    path.chmod(0o644)

    assert ChangelogStorage(path).write("new\n") == Ok(None)

    assert stat.S_IMODE(path.stat().st_mode) == 0o644
    assert path.read_text(encoding="utf-8") == "new\n"


@pytest.mark.skipif(sys.platform == "win32", reason="chmod doesn't work on Windows")
def test_new_file_mode_follows_umask(tmp_path: Path) -> None:
    previous = os.umask(0o022)
    try:
        atomic_write_text(tmp_path / "CHANGELOG.md", "text")
    finally:
        os.umask(previous)

    assert stat.S_IMODE((tmp_path / "CHANGELOG.md").stat().st_mode) == 0o644
