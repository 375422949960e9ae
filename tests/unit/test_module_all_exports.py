from __future__ import annotations

import ast
import re
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[2] / "src" / "enigma_client"


def _assigned_names(module: ast.Module) -> set[str]:
    names: set[str] = set()
    for node in module.body:
        if isinstance(node, ast.Assign):
            names.update(t.id for t in node.targets if isinstance(t, ast.Name))
        elif isinstance(node, ast.AnnAssign) and isinstance(node.target, ast.Name):
            names.add(node.target.id)
    return names


def test_all_source_modules_define_dunder_all() -> None:
    missing: list[str] = []
    for path in sorted(SRC_ROOT.rglob("*.py")):
        module = ast.parse(path.read_text(encoding="utf-8"))
        if "__all__" not in _assigned_names(module):
            missing.append(path.as_posix())
    assert missing == []


def test_all_loggers_use_package_logger_name() -> None:
    pattern = re.compile(r"logging\.getLogger\(([^)]*)\)")
    names: set[str] = set()
    for path in sorted(SRC_ROOT.rglob("*.py")):
        names.update(pattern.findall(path.read_text(encoding="utf-8")))
    assert names == {'"enigma_client"'}
