"""Release model -> canonical Markdown.

Layout:

    # Changelog
    <preamble paragraphs>

    ## [1.1.0] - 2024-03-01

    ### Added

    - first item
    - second item

    ### Experimental

    - custom categories come after the known ones

    [1.1.0]: https://example.com/1.1.0
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from chlog.changelog.model import Release

__all__ = ["PREAMBLE", "stringify"]


PREAMBLE = (
    "# Changelog\n"
    "\n"
    "All notable changes to this project will be documented in this file.\n"
    "\n"
    "The format is based on [Keep a Changelog](https://keepachangelog.com/en/1.0.0/), "
    "and this project adheres to "
    "[Semantic Versioning](https://semver.org/spec/v2.0.0.html).\n"
)


def _render_category(label: str, items: Iterable[str]) -> list[str]:
    lines = ["", f"### {label}"]
    bullets = [f"- {item}" for item in items]
    if bullets:
        lines.append("")
        lines.extend(bullets)
    return lines


def _render_release(release: Release) -> list[str]:
    heading = f"## [{release.version}]" if release.link else f"## {release.version}"
    if release.date is not None:
        heading += f" - {release.date.isoformat()}"

    lines = [heading]
    for category, items in release.content.known():
        lines.extend(_render_category(category.value, items))
    for label, items in release.content.custom():
        lines.extend(_render_category(label, items))
    return lines


def stringify(releases: Sequence[Release]) -> str:
    """Render releases as a Keep a Changelog document."""
    blocks: list[str] = [PREAMBLE.rstrip("\n")]
    links: list[str] = []

    for release in releases:
        blocks.append("\n".join(_render_release(release)))
        if release.link:
            links.append(f"[{release.version}]: {release.link}")

    if links:
        blocks.append("\n".join(links))

    return "\n\n".join(blocks).rstrip("\n") + "\n"
