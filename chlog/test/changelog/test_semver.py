from __future__ import annotations

import pytest

from chlog.changelog.semver import SemVer, increment, is_valid_version, parse_version


def test_parse_version() -> None:
    assert parse_version("1.2.3") == SemVer(1, 2, 3)
    assert parse_version("v0.0.1") == SemVer(0, 0, 1)
    assert parse_version("1.0.0-beta.2+build.7") == SemVer(1, 0, 0, "beta.2")


@pytest.mark.parametrize("value", ["1.2.3", "v1.2.3", "1.2.3-rc.1", "1.2.3+build.1"])
def test_valid_versions(value: str) -> None:
    assert is_valid_version(value)


@pytest.mark.parametrize("value", ["1.2", "patch", "01.2.3", "1.2.3-", "", "Unreleased"])
def test_invalid_versions(value: str) -> None:
    assert not is_valid_version(value)


@pytest.mark.parametrize(
    ("previous", "kind", "expected"),
    [
        ("0.0.0", "minor", "0.1.0"),
        ("0.0.0", "patch", "0.0.1"),
        ("1.2.3", "major", "2.0.0"),
        ("1.2.3", "minor", "1.3.0"),
        ("1.2.3", "patch", "1.2.4"),
        ("v1.0.0", "patch", "1.0.1"),
        ("1.2.3-beta.1", "patch", "1.2.3"),
        ("1.2.0-rc.1", "minor", "1.2.0"),
        ("1.2.1-rc.1", "minor", "1.3.0"),
        ("2.0.0-alpha", "major", "2.0.0"),
    ],
)
def test_increment(previous: str, kind: str, expected: str) -> None:
    assert increment(previous, kind) == expected  # type: ignore[arg-type]


def test_increment_rejects_non_version() -> None:
    assert increment("Unreleased", "patch") is None
