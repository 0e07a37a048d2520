"""Changelog document storage.

All access to the changelog file goes through ``ChangelogStorage`` so the
document path is an explicit value rather than ambient process state.
"""

from __future__ import annotations

import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path

from chlog.changelog.errors import NotFound, ReadFailed, RemoveFailed, WriteFailed
from chlog.core.result import Err, Ok, Result

__all__ = ["ChangelogStorage", "atomic_write_text"]


def _target_mode(path: Path) -> int:
    """Permission bits for ``path``: its current mode, else 0o666 minus the umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def atomic_write_text(path: Path, content: str, *, encoding: str = "utf-8") -> None:
    """Write text to path atomically using temp file + replace.

    The replaced file keeps its permission bits; a new file gets the
    umask-derived default instead of the temp file's 0o600.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    mode = _target_mode(path)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        tmp_path.chmod(mode)
        os.replace(tmp_path, path)
    finally:
        tmp_path.unlink(missing_ok=True)


@dataclass(frozen=True, slots=True)
class ChangelogStorage:
    path: Path

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> Result[str, NotFound | ReadFailed]:
        try:
            return Ok(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return Err(NotFound(self.path))
        except (OSError, UnicodeDecodeError) as e:
            return Err(ReadFailed(self.path, str(e)))

    def write(self, text: str) -> Result[None, WriteFailed]:
        try:
            atomic_write_text(self.path, text)
        except OSError as e:
            return Err(WriteFailed(self.path, str(e)))
        return Ok(None)

    def remove(self) -> Result[None, NotFound | RemoveFailed]:
        if not self.exists():
            return Err(NotFound(self.path))
        try:
            self.path.unlink()
        except OSError as e:
            return Err(RemoveFailed(self.path, str(e)))
        return Ok(None)
