from __future__ import annotations

from pathlib import Path

import typer

from chlog import __version__
from chlog.cli.commands.bump import bump
from chlog.cli.commands.copy_cmd import copy
from chlog.cli.commands.init_cmd import destroy, init
from chlog.cli.commands.parse_cmd import parse
from chlog.cli.commands.status import status
from chlog.cli.commands.update import update
from chlog.cli.context import CLIOptions


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Maintain a Keep a Changelog CHANGELOG.md.",
)


# Commands
app.command()(init)
app.command()(parse)
app.command()(status)
app.command()(bump)
app.command()(update)
app.command()(destroy)
app.command()(copy)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show version and exit.",
    ),
    file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        help="Changelog path (default: CHANGELOG.md in the current directory)",
    ),
    editor: str | None = typer.Option(
        None,
        "--editor",
        help="Editor command for 'update' (default: $VISUAL / $EDITOR)",
    ),
) -> None:
    ctx.obj = CLIOptions(file=file, editor=editor)


def main() -> None:
    app()
