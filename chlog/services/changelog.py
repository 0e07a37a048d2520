"""Changelog operations behind the CLI commands.

Every operation is one read -> parse -> mutate -> serialize -> write cycle.
Failures are returned as ``Err`` values from ``chlog.changelog.errors``.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass

from chlog.changelog.errors import (
    AlreadyExists,
    ChangelogError,
    EmptyUpdate,
    FeatureNotImplemented,
    InvalidBumpTarget,
    NoContent,
    WriteFailed,
)
from chlog.changelog.model import Category, ChangeKind, Release
from chlog.changelog.parser import parse
from chlog.changelog.semver import increment, is_valid_version
from chlog.changelog.serializer import stringify
from chlog.core.result import Err, Ok, Result
from chlog.services.editor import EditorProtocol, strip_comments
from chlog.services.storage import ChangelogStorage

__all__ = [
    "INITIAL_VERSION",
    "BumpResult",
    "StatusSummary",
    "UpdateResult",
    "bump",
    "copy",
    "destroy",
    "edit_message",
    "init_changelog",
    "load",
    "resolve_bump_target",
    "save",
    "summarize",
    "update",
]


INITIAL_VERSION = "0.0.0"


@dataclass(frozen=True, slots=True)
class StatusSummary:
    released_count: int
    latest: Release | None
    unreleased: Release | None


@dataclass(frozen=True, slots=True)
class BumpResult:
    previous: str
    current: str


@dataclass(frozen=True, slots=True)
class UpdateResult:
    category: Category
    count: int
    created_unreleased: bool


def load(storage: ChangelogStorage) -> Result[list[Release], ChangelogError]:
    text = storage.read()
    if isinstance(text, Err):
        return text
    return parse(text.value)


def save(storage: ChangelogStorage, releases: list[Release]) -> Result[None, WriteFailed]:
    return storage.write(stringify(releases))


def init_changelog(storage: ChangelogStorage) -> Result[None, ChangelogError]:
    """Create a changelog holding a single empty Unreleased section."""
    if storage.exists():
        return Err(AlreadyExists(storage.path))
    return save(storage, [Release.unreleased()])


def summarize(releases: list[Release]) -> StatusSummary:
    unreleased = releases[0] if releases and not releases[0].released else None
    released = [r for r in releases if r.released]
    return StatusSummary(
        released_count=len(released),
        latest=released[0] if released else None,
        unreleased=unreleased,
    )


def _previous_version(releases: list[Release]) -> str:
    return releases[1].version if len(releases) > 1 else INITIAL_VERSION


def resolve_bump_target(target: str | None, previous: str) -> Result[str, InvalidBumpTarget]:
    """Turn a bump argument into the version to release.

    A semantic version is used verbatim; ``patch``/``minor``/``major`` (default
    ``patch``) are applied to ``previous``.
    """
    if target is not None and is_valid_version(target):
        return Ok(target)

    kind = target if target is not None else "patch"
    match kind:
        case "major" | "minor" | "patch":
            next_version = increment(previous, kind)
        case _:
            return Err(InvalidBumpTarget(kind))

    if next_version is None:
        return Err(
            InvalidBumpTarget(
                kind,
                hint=f"Previous version {previous!r} is not a semantic version; "
                "pass an explicit version instead",
            )
        )
    return Ok(next_version)


def bump(
    storage: ChangelogStorage,
    target: str | None = None,
    *,
    today: datetime.date | None = None,
) -> Result[BumpResult, ChangelogError]:
    """Release the Unreleased section as a concrete version."""
    loaded = load(storage)
    if isinstance(loaded, Err):
        return loaded
    releases = loaded.value

    if not releases or releases[0].released or not releases[0].content:
        return Err(NoContent(storage.path))

    previous = _previous_version(releases)
    resolved = resolve_bump_target(target, previous)
    if isinstance(resolved, Err):
        return resolved

    on = today if today is not None else datetime.datetime.now(datetime.UTC).date()
    releases[0].mark_released(resolved.value, on)

    saved = save(storage, releases)
    if isinstance(saved, Err):
        return saved
    return Ok(BumpResult(previous=previous, current=resolved.value))


def edit_message(kind: ChangeKind, releases: list[Release], *, created: bool) -> str:
    """Comment block shown in the editor for ``chlog update``."""
    lines = [
        "",
        f"# Please enter what you have {kind.verb} in this new version. Lines",
        "# starting with '#' will be ignored and an empty message aborts",
        f"# the update. Multiple lines will be treated as multiple {kind.noun}.",
    ]

    current = releases[1].version if len(releases) > 1 else None
    if current is not None:
        note = ' - creating new "Unreleased" header.' if created else ""
        lines.append(f"# Currently on version {current}{note}")
    elif created:
        lines.append('# There was no content - creating new "Unreleased" header.')
    lines.append("#")
    return "\n".join(lines) + "\n"


def update(
    storage: ChangelogStorage,
    editor: EditorProtocol,
    kind: ChangeKind,
) -> Result[UpdateResult, ChangelogError]:
    """Collect new items from the editor and file them under ``kind``."""
    loaded = load(storage)
    if isinstance(loaded, Err):
        return loaded
    releases = loaded.value

    created = not releases or releases[0].released
    if created:
        releases.insert(0, Release.unreleased())

    edited = editor.edit(edit_message(kind, releases, created=created))
    if isinstance(edited, Err):
        return edited

    items = strip_comments(edited.value)
    if not items:
        return Err(EmptyUpdate(kind.category.value))

    releases[0].content.add(kind.category, *items)

    saved = save(storage, releases)
    if isinstance(saved, Err):
        return saved
    return Ok(UpdateResult(category=kind.category, count=len(items), created_unreleased=created))


def destroy(storage: ChangelogStorage) -> Result[None, ChangelogError]:
    return storage.remove()


def copy() -> Result[None, ChangelogError]:
    return Err(FeatureNotImplemented("copy"))
