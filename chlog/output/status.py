"""Rendering for ``chlog status``."""

from __future__ import annotations

import datetime

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from chlog.changelog.model import Category, Release
from chlog.services.changelog import StatusSummary

__all__ = ["CATEGORY_COLORS", "humanize_age", "render_status"]


CATEGORY_COLORS: dict[str, str] = {
    Category.ADDED: "green",
    Category.CHANGED: "yellow",
    Category.DEPRECATED: "grey50",
    Category.REMOVED: "red",
    Category.FIXED: "blue",
    Category.SECURITY: "magenta",
}


def humanize_age(then: datetime.date, today: datetime.date) -> str:
    """Relative age of ``then``: "today", "3 days ago", "a year ago"..."""
    days = (today - then).days
    if days < 0:
        return "in the future"
    if days == 0:
        return "today"
    if days == 1:
        return "yesterday"
    if days < 30:
        return f"{days} days ago"
    months = days // 30
    if months < 12:
        return "a month ago" if months == 1 else f"{months} months ago"
    years = days // 365
    return "a year ago" if years <= 1 else f"{years} years ago"


def _render_history(summary: StatusSummary, today: datetime.date) -> Text:
    text = Text()
    count = summary.released_count
    latest = summary.latest
    if count == 0 or latest is None:
        text.append("The changelog has no releases to show", style="dim")
        return text

    noun = "version" if count == 1 else "versions"
    verb = "has" if count == 1 else "have"
    text.append(f"There {verb} been {count} {noun} released\n")
    text.append("The most recent of these being ")
    text.append(f"v{latest.version}", style="bold")
    if latest.date is not None:
        text.append(f" from {humanize_age(latest.date, today)}", style="dim")
    return text


def _render_unreleased(release: Release) -> RenderableType:
    if not release.content:
        return Text('There is no content in "Unreleased" to show', style="dim")

    body = Text()
    for i, (label, items) in enumerate(release.content.items()):
        color = CATEGORY_COLORS.get(label, "")
        if i > 0:
            body.append("\n\n")
        body.append(f"{label}:", style=f"bold {color}".strip())
        for item in items:
            body.append(f"\n  - {item}", style=color)

    return Panel(
        body,
        title="[bold yellow]Unreleased[/bold yellow]",
        subtitle=Text('use "chlog bump [version | patch | minor | major]" to release', style="dim"),
        title_align="left",
        subtitle_align="left",
        border_style="yellow",
        padding=(0, 1),
    )


def render_status(summary: StatusSummary, today: datetime.date) -> RenderableType:
    parts: list[RenderableType] = [_render_history(summary, today)]
    if summary.unreleased is not None:
        parts.append(Text())
        parts.append(_render_unreleased(summary.unreleased))
    return Group(*parts)
