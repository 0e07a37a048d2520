from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from chlog.core.config import Config, resolve_config
from chlog.core.errors import ErrorCode
from chlog.core.result import Err
from chlog.output.console import ConsoleProtocol, RichConsole
from chlog.services.editor import EditorProtocol, ExternalEditor
from chlog.services.storage import ChangelogStorage


@dataclass(frozen=True, slots=True)
class CLIOptions:
    """Global options collected by the app callback."""

    file: Path | None = None
    editor: str | None = None


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    storage: ChangelogStorage
    console: ConsoleProtocol

    def editor(self) -> EditorProtocol:
        return ExternalEditor(scratch_path=self.config.scratch_path, command=self.config.editor)


def build_context(ctx: typer.Context | None = None) -> CLIContext:
    options = ctx.obj if ctx is not None and isinstance(ctx.obj, CLIOptions) else CLIOptions()
    console = RichConsole()

    config_result = resolve_config(file=options.file, editor=options.editor)
    if isinstance(config_result, Err):
        console.error(config_result.error.message)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    config = config_result.value
    return CLIContext(
        config=config,
        storage=ChangelogStorage(config.document_path),
        console=console,
    )
