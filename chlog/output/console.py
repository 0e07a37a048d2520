"""Console output abstraction.

Commands write through ``ConsoleProtocol`` so they can be exercised in tests
with ``MockConsole`` instead of a real terminal.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

from rich.console import Console, RenderableType

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "OutputRecord",
    "RichConsole",
    "Style",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()
    ERROR = auto()
    DIM = auto()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None: ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def render(self, renderable: RenderableType) -> None:
        """Print a rich renderable (Text, Panel, ...)."""
        ...


_STYLE_MAP = {
    Style.DEFAULT: "",
    Style.SUCCESS: "green",
    Style.ERROR: "red bold",
    Style.DIM: "dim",
}


class RichConsole:
    """Production console backed by rich.

    Errors go to stderr so ``chlog parse`` output stays clean.
    """

    def __init__(self) -> None:
        self._out = Console(highlight=False)
        self._err = Console(stderr=True, highlight=False)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = _STYLE_MAP.get(style, "")
        if rich_style:
            self._out.print(message, style=rich_style, markup=False)
        else:
            self._out.print(message, markup=False)

    def success(self, message: str) -> None:
        self._out.print(f"[green]OK[/green] {message}")

    def error(self, message: str) -> None:
        self._err.print(f"[red bold]fatal:[/red bold] {message}")

    def render(self, renderable: RenderableType) -> None:
        self._out.print(renderable)


@dataclass
class OutputRecord:
    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console that captures output for assertions."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def success(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"OK {message}", Style.SUCCESS))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"fatal: {message}", Style.ERROR))

    def render(self, renderable: RenderableType) -> None:
        buffer = io.StringIO()
        Console(file=buffer, width=100, color_system=None).print(renderable)
        self.outputs.append(OutputRecord(buffer.getvalue().rstrip("\n"), Style.DEFAULT))

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)
