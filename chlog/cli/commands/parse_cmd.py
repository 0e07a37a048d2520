from __future__ import annotations

import json

import typer

from chlog.cli.commands._helpers import exit_on_error
from chlog.cli.context import build_context
from chlog.services.changelog import load


def parse(ctx: typer.Context) -> None:
    """Print the parsed changelog as JSON."""
    cli = build_context(ctx)
    releases = exit_on_error(load(cli.storage), cli)

    typer.echo(json.dumps([r.to_dict() for r in releases], indent=4))
