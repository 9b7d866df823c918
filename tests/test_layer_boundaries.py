from __future__ import annotations

import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1] / "src" / "twelveweek"


def _collect_python_files(directory: Path) -> list[Path]:
    return sorted(path for path in directory.rglob("*.py") if path.is_file())


def _find_forbidden_imports(files: list[Path], forbidden_prefixes: tuple[str, ...]) -> list[str]:
    violations: list[str] = []
    for path in files:
        module = ast.parse(path.read_text(encoding="utf-8"))
        for node in ast.walk(module):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    if alias.name.startswith(forbidden_prefixes):
                        violations.append(f"{path}: import {alias.name}")
            elif isinstance(node, ast.ImportFrom):
                if node.module is None:
                    continue
                if node.module.startswith(forbidden_prefixes):
                    violations.append(f"{path}: from {node.module} import ...")
    return violations


def test_core_does_not_import_cli_layer() -> None:
    violations = _find_forbidden_imports(_collect_python_files(ROOT / "core"), ("twelveweek.cli", "rich", "argparse"))
    assert not violations, f"core imports cli-only modules: {violations}"


def test_contracts_do_not_import_engine_modules() -> None:
    files = _collect_python_files(ROOT / "core" / "contracts")
    forbidden = (
        "twelveweek.core.calendar",
        "twelveweek.core.hierarchy",
        "twelveweek.core.metrics",
        "twelveweek.core.snapshot",
        "twelveweek.core.config",
    )
    violations = _find_forbidden_imports(files, forbidden)
    assert not violations, f"contracts import engine modules: {violations}"


def test_engine_modules_do_not_read_files() -> None:
    files = [
        *_collect_python_files(ROOT / "core" / "calendar"),
        *_collect_python_files(ROOT / "core" / "hierarchy"),
        *_collect_python_files(ROOT / "core" / "metrics"),
    ]
    violations = _find_forbidden_imports(files, ("json", "pathlib", "twelveweek.core.snapshot.loader"))
    assert not violations, f"engine modules depend on file I/O: {violations}"
