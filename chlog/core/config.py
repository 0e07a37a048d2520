"""Typed configuration loading and access.

Configuration is layered, later sources winning:

1. Built-in defaults (``CHANGELOG.md`` in the working directory)
2. The optional ``[changelog]`` table of ``.chlog.toml``
3. ``CHLOG_FILE`` / ``CHLOG_EDITOR`` environment variables
4. Command line options
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import cast

from .result import Err, Ok, Result

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_FILENAME",
    "DEFAULT_SCRATCH_FILENAME",
    "Config",
    "ConfigError",
    "load_config",
    "resolve_config",
]

CONFIG_FILENAME = ".chlog.toml"
DEFAULT_FILENAME = "CHANGELOG.md"
DEFAULT_SCRATCH_FILENAME = ".UPDATE_EDITMSG"

ENV_FILE = "CHLOG_FILE"
ENV_EDITOR = "CHLOG_EDITOR"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Where the changelog lives and how it is edited."""

    directory: Path = field(default_factory=Path.cwd)
    filename: str = DEFAULT_FILENAME
    scratch_filename: str = DEFAULT_SCRATCH_FILENAME
    editor: str | None = None

    @property
    def document_path(self) -> Path:
        """Path to the changelog document."""
        path = Path(self.filename).expanduser()
        if path.is_absolute():
            return path
        return self.directory / path

    @property
    def scratch_path(self) -> Path:
        """Path to the temporary file handed to the editor."""
        return self.document_path.parent / self.scratch_filename

    @classmethod
    def from_dict(cls, data: Mapping[str, object], directory: Path) -> Config:
        """Create Config from a parsed TOML mapping."""
        table = _get_table(data, "changelog") or {}
        return cls(
            directory=directory,
            filename=_get_str(table, "file") or DEFAULT_FILENAME,
            scratch_filename=_get_str(table, "scratch_file") or DEFAULT_SCRATCH_FILENAME,
            editor=_get_str(table, "editor"),
        )


def _get_str(table: Mapping[str, object], key: str) -> str | None:
    value = table.get(key)
    if not isinstance(value, str):
        return None
    return value.strip() or None


def _get_table(table: Mapping[str, object], key: str) -> dict[str, object] | None:
    value = table.get(key)
    if not isinstance(value, dict):
        return None
    return cast(dict[str, object], value)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load configuration from a TOML file.

    Args:
        path: Path to the ``.chlog.toml`` file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    import tomllib

    try:
        data: object = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except (OSError, UnicodeDecodeError) as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    if not isinstance(data, dict):
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(Config.from_dict(cast(dict[str, object], data), directory=path.parent))


def resolve_config(
    directory: Path | None = None,
    *,
    file: Path | None = None,
    editor: str | None = None,
    env: Mapping[str, str] | None = None,
) -> Result[Config, ConfigError]:
    """Build the effective configuration for one invocation."""
    root = directory if directory is not None else Path.cwd()
    environ = env if env is not None else os.environ

    config = Config(directory=root)
    config_path = root / CONFIG_FILENAME
    if config_path.is_file():
        loaded = load_config(config_path)
        if isinstance(loaded, Err):
            return loaded
        config = loaded.value

    env_file = environ.get(ENV_FILE, "").strip()
    if env_file:
        config = replace(config, filename=env_file)
    env_editor = environ.get(ENV_EDITOR, "").strip()
    if env_editor:
        config = replace(config, editor=env_editor)

    if file is not None:
        config = replace(config, filename=str(file))
    if editor:
        config = replace(config, editor=editor)

    return Ok(config)
