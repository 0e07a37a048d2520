"""Markdown -> release model.

The document is read line by line with an explicit state machine:

    PREAMBLE --"## "--> RELEASE_HEADING --"### "--> CATEGORY --"- "--> ITEM

``## `` opens a release from any state, ``### `` opens a category from any
state inside a release, ``- `` opens an item inside a category. Other lines
continue the current item, or are ignored outside one. Link reference lines
(``[1.0.0]: https://...``) are pulled out before the state machine runs.
"""

from __future__ import annotations

import datetime
import re
from enum import Enum, auto
from typing import TypeAlias

from chlog.changelog.errors import MalformedDocument
from chlog.changelog.model import UNRELEASED, Release
from chlog.core.result import Err, Ok, Result

__all__ = ["extract_links", "parse"]


RELEASE_PREFIX = "## "
CATEGORY_PREFIX = "### "
ITEM_PREFIX = "- "

_LINK_RE = re.compile(r"^\s*\[(?P<label>[^\]]+)\]: (?P<url>.*\S)\s*$")


class _State(Enum):
    PREAMBLE = auto()
    RELEASE_HEADING = auto()
    CATEGORY = auto()
    ITEM = auto()


NumberedLine: TypeAlias = tuple[int, str]


def extract_links(lines: list[str]) -> tuple[dict[str, str], list[NumberedLine]]:
    """Split link reference definitions from the rest of the document.

    Returns the ``label -> url`` mapping and the remaining lines, numbered
    from 1 as in the source text.
    """
    links: dict[str, str] = {}
    body: list[NumberedLine] = []
    for lineno, line in enumerate(lines, start=1):
        m = _LINK_RE.match(line)
        if m is None:
            body.append((lineno, line))
        else:
            links[m.group("label").strip()] = m.group("url").strip()
    return links, body


def _parse_heading(
    lineno: int, heading: str, links: dict[str, str]
) -> Result[Release, MalformedDocument]:
    tokens = heading.split()
    if not tokens:
        return Err(MalformedDocument(lineno, "release heading has no version"))

    raw_version = tokens[0]
    version = raw_version.replace("[", "").replace("]", "")
    if not version:
        return Err(MalformedDocument(lineno, "release heading has no version"))

    link = links.get(version) if raw_version != version else None

    if version == UNRELEASED:
        return Ok(Release(version=version, released=False, link=link))

    # <version> - <date>
    if len(tokens) < 3:
        return Err(MalformedDocument(lineno, f"release {version} has no date"))
    try:
        date = datetime.date.fromisoformat(tokens[2])
    except ValueError:
        return Err(
            MalformedDocument(lineno, f"release {version} has an invalid date: {tokens[2]!r}")
        )

    return Ok(Release(version=version, released=True, date=date, link=link))


class _ReleaseReader:
    def __init__(self, links: dict[str, str]) -> None:
        self._links = links
        self._state = _State.PREAMBLE
        self._releases: list[Release] = []
        self._category: list[str] = []
        self._item: list[str] = []

    def feed(self, lineno: int, line: str) -> MalformedDocument | None:
        if line.startswith(RELEASE_PREFIX):
            self._flush_item()
            parsed = _parse_heading(lineno, line[len(RELEASE_PREFIX) :], self._links)
            if isinstance(parsed, Err):
                return parsed.error
            self._releases.append(parsed.value)
            self._state = _State.RELEASE_HEADING
            return None

        if self._state is _State.PREAMBLE:
            return None

        if line.startswith(CATEGORY_PREFIX):
            self._flush_item()
            label = line[len(CATEGORY_PREFIX) :].strip()
            self._category = self._releases[-1].content.ensure(label)
            self._state = _State.CATEGORY
            return None

        if self._state in (_State.CATEGORY, _State.ITEM) and line.startswith(ITEM_PREFIX):
            self._flush_item()
            self._item = [line[len(ITEM_PREFIX) :]]
            self._state = _State.ITEM
            return None

        if self._state is _State.ITEM:
            self._item.append(line)
        return None

    def finish(self) -> list[Release]:
        self._flush_item()
        return self._releases

    def _flush_item(self) -> None:
        if self._state is _State.ITEM:
            self._category.append(" ".join(self._item).strip())
        self._item = []


def parse(text: str) -> Result[list[Release], MalformedDocument]:
    """Parse a changelog document into releases, most recent first."""
    links, body = extract_links(text.splitlines())

    reader = _ReleaseReader(links)
    for lineno, line in body:
        error = reader.feed(lineno, line)
        if error is not None:
            return Err(error)
    return Ok(reader.finish())
