"""External editor adapter.

``ExternalEditor`` writes a scratch file, blocks until the user's editor
exits, reads the file back and always removes it afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import click
import typer

from chlog.changelog.errors import EditorFailed
from chlog.core.result import Err, Ok, Result

__all__ = ["EditorProtocol", "ExternalEditor", "strip_comments"]


class EditorProtocol(Protocol):
    def edit(self, initial: str) -> Result[str, EditorFailed]:
        """Let the user edit ``initial`` and return the final text."""
        ...


@dataclass(frozen=True, slots=True)
class ExternalEditor:
    """Edit through ``$VISUAL`` / ``$EDITOR`` (or an explicit command)."""

    scratch_path: Path
    command: str | None = None

    def edit(self, initial: str) -> Result[str, EditorFailed]:
        try:
            self.scratch_path.write_text(initial, encoding="utf-8")
        except OSError as e:
            return Err(EditorFailed(f"could not create {self.scratch_path.name}: {e}"))

        try:
            typer.edit(filename=str(self.scratch_path), editor=self.command)
            return Ok(self.scratch_path.read_text(encoding="utf-8"))
        except click.ClickException as e:
            return Err(EditorFailed(e.format_message()))
        except (OSError, UnicodeDecodeError) as e:
            return Err(EditorFailed(f"could not read {self.scratch_path.name}: {e}"))
        finally:
            self.scratch_path.unlink(missing_ok=True)


def strip_comments(text: str) -> list[str]:
    """Lines the user actually wrote: no blanks, no ``#`` comment lines."""
    lines: list[str] = []
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        lines.append(stripped)
    return lines
