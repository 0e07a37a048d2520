from __future__ import annotations

import typer

from chlog.cli.commands._helpers import exit_on_error
from chlog.cli.context import build_context
from chlog.services.changelog import bump as bump_changelog


def bump(
    ctx: typer.Context,
    target: str | None = typer.Argument(
        None,
        metavar="[VERSION|patch|minor|major]",
        help="Explicit version, or the part to increment (default: patch)",
    ),
) -> None:
    """Release the Unreleased section under a new version."""
    cli = build_context(ctx)
    result = exit_on_error(bump_changelog(cli.storage, target), cli)

    cli.console.success(f"Updated from {result.previous} -> {result.current}")
