"""Tests for chlog.output.console module."""

from __future__ import annotations

import pytest
from rich.text import Text

from chlog.output.console import MockConsole, RichConsole, Style


def test_mock_console_captures() -> None:
    console = MockConsole()
    console.print("plain")
    console.print("quiet", Style.DIM)
    console.success("done")
    console.error("broken")

    assert console.messages == ["plain", "quiet", "OK done", "fatal: broken"]
    assert console.has_error()


def test_mock_console_render_is_plain_text() -> None:
    console = MockConsole()
    console.render(Text("styled", style="bold red"))
    assert console.text == "styled"


def test_rich_console_markup_is_not_interpreted_in_print(
    capsys: pytest.CaptureFixture[str],
) -> None:
    RichConsole().print("[not markup]")
    assert "[not markup]" in capsys.readouterr().out


def test_rich_console_errors_go_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    RichConsole().error("broken")
    captured = capsys.readouterr()
    assert "fatal: broken" in captured.err
    assert "broken" not in captured.out
