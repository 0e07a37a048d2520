"""Tests for chlog.changelog.parser."""

from __future__ import annotations

import datetime

from chlog.changelog.errors import MalformedDocument
from chlog.changelog.model import Content, Release
from chlog.changelog.parser import extract_links, parse
from chlog.core.result import Err, Ok


DOCUMENT = """\
# Changelog

All notable changes to this project will be documented in this file.

## [Unreleased]

### Added

- New thing
spanning two lines
- Another

## [1.0.0] - 2020-01-01

Intro prose is ignored.

### Fixed
Prose before the first bullet.
- Bug fix

### Experimental

- Custom

## 0.9.0 - 2019-06-30

[Unreleased]: https://example.com/compare/1.0.0...HEAD
[1.0.0]: https://example.com/1.0.0
"""


def _parse_ok(text: str) -> list[Release]:
    result = parse(text)
    assert isinstance(result, Ok)
    return result.value


class TestExtractLinks:
    def test_collects_links_and_keeps_other_lines(self) -> None:
        links, body = extract_links(["intro", "[1.0.0]:  https://example.com/1.0.0  ", "end"])
        assert links == {"1.0.0": "https://example.com/1.0.0"}
        assert body == [(1, "intro"), (3, "end")]

    def test_inline_brackets_are_not_links(self) -> None:
        links, body = extract_links(["- see [docs]: for details"])
        assert links == {}
        assert len(body) == 1


class TestParse:
    def test_releases_in_document_order(self) -> None:
        releases = _parse_ok(DOCUMENT)
        assert [r.version for r in releases] == ["Unreleased", "1.0.0", "0.9.0"]

    def test_unreleased_section(self) -> None:
        unreleased = _parse_ok(DOCUMENT)[0]
        assert unreleased.released is False
        assert unreleased.date is None
        assert unreleased.link == "https://example.com/compare/1.0.0...HEAD"
        assert unreleased.content["Added"] == ["New thing spanning two lines", "Another"]

    def test_released_section_with_link(self) -> None:
        release = _parse_ok(DOCUMENT)[1]
        assert release.released is True
        assert release.date == datetime.date(2020, 1, 1)
        assert release.link == "https://example.com/1.0.0"
        assert release.content.to_dict() == {"Fixed": ["Bug fix"], "Experimental": ["Custom"]}

    def test_release_without_categories_has_empty_content(self) -> None:
        release = _parse_ok(DOCUMENT)[2]
        assert release.content == Content()
        assert release.link is None

    def test_link_lookup_example(self) -> None:
        text = "## [1.0.0] - 2020-01-01\n\n[1.0.0]: https://example.com/1.0.0\n"
        release = _parse_ok(text)[0]
        assert release.version == "1.0.0"
        assert release.link == "https://example.com/1.0.0"

    def test_heading_without_brackets_ignores_link_definition(self) -> None:
        text = "## 1.0.0 - 2020-01-01\n\n[1.0.0]: https://example.com/1.0.0\n"
        assert _parse_ok(text)[0].link is None

    def test_brackets_without_definition_have_no_link(self) -> None:
        assert _parse_ok("## [1.0.0] - 2020-01-01\n")[0].link is None

    def test_unreleased_regardless_of_content(self) -> None:
        release = _parse_ok("# Title\n\n## Unreleased\n\n### Removed\n\n- Old API\n")[0]
        assert release.released is False
        assert release.date is None
        assert release.content["Removed"] == ["Old API"]

    def test_empty_category_is_present(self) -> None:
        text = "## 1.0.0 - 2020-01-01\n\n### Added\n\n### Fixed\n\n- x\n"
        content = _parse_ok(text)[0].content
        assert content["Added"] == []
        assert content["Fixed"] == ["x"]

    def test_bullets_before_first_category_are_ignored(self) -> None:
        text = "## Unreleased\n- stray\n\n### Added\n- kept\n"
        assert _parse_ok(text)[0].content.to_dict() == {"Added": ["kept"]}

    def test_heading_markers_inside_items_are_literal_text(self) -> None:
        text = "## Unreleased\n\n### Added\n\n- use the ## marker and ### too\n"
        assert _parse_ok(text)[0].content["Added"] == ["use the ## marker and ### too"]

    def test_preamble_only(self) -> None:
        assert _parse_ok("# Changelog\n\nNothing yet.\n") == []

    def test_empty_text(self) -> None:
        assert _parse_ok("") == []

    def test_crlf_line_endings(self) -> None:
        text = "## 1.0.0 - 2020-01-01\r\n\r\n### Added\r\n\r\n- a\r\n"
        release = _parse_ok(text)[0]
        assert release.date == datetime.date(2020, 1, 1)
        assert release.content["Added"] == ["a"]


class TestMalformed:
    def test_missing_date(self) -> None:
        result = parse("# Changelog\n\n## 1.0.0\n")
        assert isinstance(result, Err)
        assert result.error == MalformedDocument(3, "release 1.0.0 has no date")

    def test_invalid_date(self) -> None:
        result = parse("## 1.0.0 - yesterday\n")
        assert isinstance(result, Err)
        assert result.error.line == 1
        assert "invalid date" in result.error.message

    def test_heading_without_version(self) -> None:
        result = parse("## \n")
        assert isinstance(result, Err)
        assert "no version" in result.error.message
