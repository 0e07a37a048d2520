"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chlog.changelog.errors import (
    AlreadyExists,
    ChangelogError,
    EditorFailed,
    EmptyUpdate,
    FeatureNotImplemented,
    InvalidBumpTarget,
    MalformedDocument,
    NoContent,
    NotFound,
    ReadFailed,
    RemoveFailed,
    WriteFailed,
)
from chlog.core.errors import ErrorCode
from chlog.output.console import Style

if TYPE_CHECKING:
    from chlog.output.console import ConsoleProtocol

__all__ = ["changelog_error_exit_code", "format_changelog_error", "print_changelog_error"]


def format_changelog_error(error: ChangelogError) -> str:
    """One-line description of ``error``."""
    match error:
        case NotFound(path=path):
            return f"Could not find a {path.name} file in {path.parent}"
        case AlreadyExists(path=path):
            return f"There is already a {path.name} file in {path.parent}"
        case ReadFailed(path=path, reason=reason):
            return f"Could not read {path.name}: {reason}"
        case WriteFailed(path=path, reason=reason):
            return f"Could not write to {path.name}: {reason}"
        case RemoveFailed(path=path, reason=reason):
            return f"Could not remove {path.name} in {path.parent}: {reason}"
        case MalformedDocument(line=line, message=message):
            return f"Malformed changelog (line {line}): {message}"
        case NoContent(path=path):
            return f"No {path.name} content available to perform version bump"
        case InvalidBumpTarget(target=target):
            return f'"{target}" is not a valid version number or update type'
        case EmptyUpdate():
            return "No message was supplied, so the update was aborted"
        case EditorFailed(reason=reason):
            return f"Editor failed: {reason}"
        case FeatureNotImplemented(feature=feature):
            return f"Feature not yet implemented: {feature}"


def _hint(error: ChangelogError) -> str | None:
    match error:
        case InvalidBumpTarget(hint=hint) | EditorFailed(hint=hint):
            return hint
        case NotFound():
            return "Run: chlog init"
        case NoContent():
            return "Add changes first: chlog update <add|change|deprecate|remove|fix|secure>"
        case _:
            return None


def print_changelog_error(error: ChangelogError, console: ConsoleProtocol) -> None:
    """Print error to console with appropriate formatting."""
    console.error(format_changelog_error(error))
    hint = _hint(error)
    if hint:
        console.print(f"hint: {hint}", Style.DIM)


def changelog_error_exit_code(error: ChangelogError) -> int:
    """Get exit code for a changelog error."""
    match error:
        case NotFound() | ReadFailed() | WriteFailed() | RemoveFailed():
            return int(ErrorCode.IO_ERROR)
        case MalformedDocument():
            return int(ErrorCode.DOCUMENT_ERROR)
        case EditorFailed():
            return int(ErrorCode.ENV_ERROR)
        case AlreadyExists() | NoContent() | InvalidBumpTarget() | EmptyUpdate():
            return int(ErrorCode.USER_ERROR)
        case FeatureNotImplemented():
            return int(ErrorCode.USER_ERROR)
