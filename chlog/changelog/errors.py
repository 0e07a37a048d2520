from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class NotFound:
    path: Path


@dataclass(frozen=True, slots=True)
class AlreadyExists:
    path: Path


@dataclass(frozen=True, slots=True)
class ReadFailed:
    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class WriteFailed:
    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class RemoveFailed:
    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class MalformedDocument:
    line: int  # 1-based
    message: str


@dataclass(frozen=True, slots=True)
class NoContent:
    path: Path


@dataclass(frozen=True, slots=True)
class InvalidBumpTarget:
    target: str
    hint: str = "Use a semantic version (1.2.3) or one of: patch, minor, major"


@dataclass(frozen=True, slots=True)
class EmptyUpdate:
    category: str


@dataclass(frozen=True, slots=True)
class EditorFailed:
    reason: str
    hint: str = "Set $EDITOR or pass --editor"


@dataclass(frozen=True, slots=True)
class FeatureNotImplemented:
    feature: str


StorageError = NotFound | ReadFailed | WriteFailed | RemoveFailed

ChangelogError = (
    NotFound
    | AlreadyExists
    | ReadFailed
    | WriteFailed
    | RemoveFailed
    | MalformedDocument
    | NoContent
    | InvalidBumpTarget
    | EmptyUpdate
    | EditorFailed
    | FeatureNotImplemented
)
