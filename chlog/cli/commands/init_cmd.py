"""Document lifecycle commands: create and remove the changelog."""

from __future__ import annotations

import typer

from chlog.cli.commands._helpers import exit_on_error
from chlog.cli.context import build_context
from chlog.services.changelog import destroy as destroy_changelog
from chlog.services.changelog import init_changelog


def init(ctx: typer.Context) -> None:
    """Create a new changelog with an empty Unreleased section."""
    cli = build_context(ctx)
    exit_on_error(init_changelog(cli.storage), cli)

    path = cli.storage.path
    cli.console.success(f"Initialized empty {path.name} in {path.parent}")


def destroy(ctx: typer.Context) -> None:
    """Delete the changelog file."""
    cli = build_context(ctx)
    exit_on_error(destroy_changelog(cli.storage), cli)

    path = cli.storage.path
    cli.console.success(f"Successfully removed {path.name} in {path.parent}")
