"""Layering rules: the document core stays free of CLI and terminal code."""

from __future__ import annotations

import ast
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ImportRef:
    module: str
    line: int


def _package_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _parse_imports(path: Path) -> list[ImportRef]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    imports: list[ImportRef] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            imports.extend(ImportRef(alias.name, node.lineno) for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and not node.level:
            imports.append(ImportRef(node.module, node.lineno))
    return imports


def _matches(module: str, prefix: str) -> bool:
    return module == prefix or module.startswith(prefix + ".")


def _offenders(package: str, forbidden: tuple[str, ...]) -> list[str]:
    root = _package_root()
    found: list[str] = []
    for path in sorted((root / package).rglob("*.py")):
        for ref in _parse_imports(path):
            if any(_matches(ref.module, prefix) for prefix in forbidden):
                rel = path.relative_to(root)
                found.append(f"{rel}:{ref.line}: forbidden import '{ref.module}'")
    return found


def test_changelog_core_is_pure() -> None:
    offenders = _offenders(
        "changelog", ("typer", "click", "rich", "chlog.cli", "chlog.services", "chlog.output")
    )
    assert not offenders, "changelog core dependency violations:\n" + "\n".join(offenders)


def test_services_do_not_import_cli_or_output() -> None:
    offenders = _offenders("services", ("chlog.cli", "chlog.output", "rich"))
    assert not offenders, "services -> cli/output dependency violations:\n" + "\n".join(offenders)
