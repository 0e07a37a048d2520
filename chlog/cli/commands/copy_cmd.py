from __future__ import annotations

import typer

from chlog.cli.commands._helpers import exit_on_error
from chlog.cli.context import build_context
from chlog.services.changelog import copy as copy_changelog


def copy(ctx: typer.Context) -> None:
    """Copy the latest release notes to the clipboard (not implemented)."""
    cli = build_context(ctx)
    exit_on_error(copy_changelog(), cli)
