from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

__all__ = ["BumpKind", "SemVer", "increment", "is_valid_version", "parse_version"]


BumpKind = Literal["major", "minor", "patch"]

_NUM = r"0|[1-9]\d*"
_IDENT = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
_SEMVER_RE = re.compile(
    rf"^v?(?P<major>{_NUM})\.(?P<minor>{_NUM})\.(?P<patch>{_NUM})"
    rf"(?:-(?P<pre>{_IDENT}(?:\.{_IDENT})*))?"
    r"(?:\+(?P<build>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)


@dataclass(frozen=True, slots=True)
class SemVer:
    major: int
    minor: int
    patch: int
    prerelease: str | None = None

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            return f"{base}-{self.prerelease}"
        return base

    def bump(self, kind: BumpKind) -> SemVer:
        """Next version; a pre-release is first promoted to its own release."""
        pre = self.prerelease is not None
        match kind:
            case "major":
                if pre and self.minor == 0 and self.patch == 0:
                    return SemVer(self.major, 0, 0)
                return SemVer(self.major + 1, 0, 0)
            case "minor":
                if pre and self.patch == 0:
                    return SemVer(self.major, self.minor, 0)
                return SemVer(self.major, self.minor + 1, 0)
            case "patch":
                if pre:
                    return SemVer(self.major, self.minor, self.patch)
                return SemVer(self.major, self.minor, self.patch + 1)
            case _:
                raise AssertionError(f"unexpected bump kind: {kind}")


def parse_version(value: str) -> SemVer | None:
    m = _SEMVER_RE.match(value.strip())
    if m is None:
        return None
    return SemVer(int(m.group("major")), int(m.group("minor")), int(m.group("patch")), m.group("pre"))


def is_valid_version(value: str) -> bool:
    return parse_version(value) is not None


def increment(previous: str, kind: BumpKind) -> str | None:
    """Return ``previous`` bumped by ``kind``, or None if it is not a version."""
    parsed = parse_version(previous)
    if parsed is None:
        return None
    return str(parsed.bump(kind))
