from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture
def solutions_root(tmp_path: Path) -> Path:
    root = tmp_path / "solutions"
    for name in ("hard", "medium", "easy"):
        (root / name).mkdir(parents=True)

    (root / "easy" / "two-sum.rs").write_text(
        "// language: rust, comment: hash map\nfn main() {}\n", encoding="utf-8"
    )
    (root / "easy" / "two-sum.go").write_text(
        "// one pass\npackage main\n", encoding="utf-8"
    )
    (root / "medium" / "add-two-numbers.py").write_text(
        "## comment: linked list\nclass Solution: ...\n", encoding="utf-8"
    )
    (root / "hard" / "median-of-two-sorted-arrays.sql").write_text(
        "-- topic: binary search\nSELECT 1;\n", encoding="utf-8"
    )
    return root
