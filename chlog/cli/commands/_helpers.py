"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from chlog.changelog.errors import ChangelogError
from chlog.core.result import Err, Result
from chlog.output.errors import changelog_error_exit_code, print_changelog_error

if TYPE_CHECKING:
    from chlog.cli.context import CLIContext

T = TypeVar("T")


def exit_on_error(result: Result[T, ChangelogError], ctx: CLIContext) -> T:
    """Return the Ok value, or report the error and exit with its code.

    Replaces the per-command boilerplate:
        match result:
            case Err(e):
                print_changelog_error(e, ctx.console)
                raise typer.Exit(code=changelog_error_exit_code(e))
            case Ok(value):
                ...
    """
    if isinstance(result, Err):
        print_changelog_error(result.error, ctx.console)
        raise typer.Exit(code=changelog_error_exit_code(result.error))
    return result.value
