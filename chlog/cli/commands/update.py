from __future__ import annotations

import typer

from chlog.changelog.model import ChangeKind
from chlog.cli.commands._helpers import exit_on_error
from chlog.cli.context import build_context
from chlog.services.changelog import update as update_changelog


def update(
    ctx: typer.Context,
    kind: ChangeKind = typer.Argument(..., help="Kind of change to record"),
) -> None:
    """Add items to the Unreleased section using $EDITOR."""
    cli = build_context(ctx)
    result = exit_on_error(update_changelog(cli.storage, cli.editor(), kind), cli)

    noun = "item" if result.count == 1 else "items"
    cli.console.success(f'Added {result.count} {noun} to "{result.category}"')
