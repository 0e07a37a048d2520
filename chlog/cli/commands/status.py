"""Status command - summarize releases and pending changes."""

from __future__ import annotations

import datetime

import typer

from chlog.cli.commands._helpers import exit_on_error
from chlog.cli.context import build_context
from chlog.output.status import render_status
from chlog.services.changelog import load, summarize


def status(ctx: typer.Context) -> None:
    """Show release history and Unreleased content."""
    cli = build_context(ctx)
    releases = exit_on_error(load(cli.storage), cli)

    today = datetime.datetime.now(datetime.UTC).date()
    cli.console.render(render_status(summarize(releases), today))
