from __future__ import annotations

import datetime
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import StrEnum

__all__ = [
    "UNRELEASED",
    "Category",
    "ChangeKind",
    "Content",
    "Release",
]


UNRELEASED = "Unreleased"


class Category(StrEnum):
    """Well-known Keep a Changelog section labels, in canonical order."""

    ADDED = "Added"
    CHANGED = "Changed"
    DEPRECATED = "Deprecated"
    REMOVED = "Removed"
    FIXED = "Fixed"
    SECURITY = "Security"

    @classmethod
    def is_known(cls, label: str) -> bool:
        return label in _KNOWN_LABELS


_KNOWN_LABELS = frozenset(c.value for c in Category)


class ChangeKind(StrEnum):
    """Change kind accepted by ``chlog update``."""

    ADD = "add"
    CHANGE = "change"
    DEPRECATE = "deprecate"
    REMOVE = "remove"
    FIX = "fix"
    SECURE = "secure"

    @property
    def category(self) -> Category:
        return _KIND_WORDING[self][0]

    @property
    def verb(self) -> str:
        """Past participle used in the editor prompt ("added")."""
        return _KIND_WORDING[self][1]

    @property
    def noun(self) -> str:
        """Plural noun used in the editor prompt ("additions")."""
        return _KIND_WORDING[self][2]


_KIND_WORDING: dict[ChangeKind, tuple[Category, str, str]] = {
    ChangeKind.ADD: (Category.ADDED, "added", "additions"),
    ChangeKind.CHANGE: (Category.CHANGED, "changed", "changes"),
    ChangeKind.DEPRECATE: (Category.DEPRECATED, "deprecated", "deprecations"),
    ChangeKind.REMOVE: (Category.REMOVED, "removed", "removals"),
    ChangeKind.FIX: (Category.FIXED, "fixed", "fixes"),
    ChangeKind.SECURE: (Category.SECURITY, "secured", "security fixes"),
}


def _empty_sections() -> dict[str, list[str]]:
    return {}


@dataclass(eq=False, slots=True)
class Content:
    """Ordered mapping of category label -> change items.

    Categories keep insertion order; adding to an existing category appends.
    Items are single-line strings.
    """

    _sections: dict[str, list[str]] = field(default_factory=_empty_sections)

    @classmethod
    def from_dict(cls, data: dict[str, list[str]]) -> Content:
        content = cls()
        for label, items in data.items():
            content.add(label, *items)
        return content

    def ensure(self, category: str) -> list[str]:
        """Return the item list for ``category``, creating it empty if needed."""
        return self._sections.setdefault(str(category), [])

    def add(self, category: str, *items: str) -> None:
        """Append ``items`` to ``category``, creating the category if needed."""
        self.ensure(category).extend(" ".join(item.splitlines()) for item in items)

    def items(self) -> Iterable[tuple[str, list[str]]]:
        return self._sections.items()

    def known(self) -> list[tuple[Category, list[str]]]:
        """Well-known categories present, in canonical order."""
        return [(c, self._sections[c.value]) for c in Category if c.value in self._sections]

    def custom(self) -> list[tuple[str, list[str]]]:
        """Custom categories present, in insertion order."""
        return [(k, v) for k, v in self._sections.items() if not Category.is_known(k)]

    def to_dict(self) -> dict[str, list[str]]:
        return {k: list(v) for k, v in self._sections.items()}

    def __getitem__(self, category: str) -> list[str]:
        return self._sections[str(category)]

    def __contains__(self, category: object) -> bool:
        return str(category) in self._sections

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __bool__(self) -> bool:
        return bool(self._sections)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Content):
            return NotImplemented
        return self._sections == other._sections

    def __repr__(self) -> str:
        return f"Content({self._sections!r})"


@dataclass(slots=True)
class Release:
    """One version section of the changelog.

    The leading ``Unreleased`` section has ``released=False`` and no date.
    ``link`` is only set when the heading used ``[version]`` syntax and the
    document defined a matching link reference.
    """

    version: str
    released: bool
    date: datetime.date | None = None
    link: str | None = None
    content: Content = field(default_factory=Content)

    @classmethod
    def unreleased(cls) -> Release:
        return cls(version=UNRELEASED, released=False)

    def mark_released(self, version: str, on: datetime.date) -> None:
        self.version = version
        self.released = True
        self.date = on

    def to_dict(self) -> dict[str, object]:
        """JSON-ready representation (dates as YYYY-MM-DD)."""
        return {
            "version": self.version,
            "released": self.released,
            "date": self.date.isoformat() if self.date is not None else None,
            "link": self.link,
            "content": self.content.to_dict(),
        }
