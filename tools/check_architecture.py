"""Import boundaries between the uihooks layers.

core/ and infra/ must import without Qt; services/ and ui/ must not reach
up into the demo app.

Usage:
    python tools/check_architecture.py
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path
from typing import Iterator, List

ROOT = Path(__file__).resolve().parents[1]

FORBIDDEN = {
    "core": {"PyQt5", "services", "ui", "app", "uihooks"},
    "infra": {"PyQt5", "core", "services", "ui", "app"},
    "services": {"ui", "app"},
    "ui": {"app"},
}


def imported_modules(path: Path) -> Iterator[str]:
    """Absolute imports of a file. Relative imports stay inside their layer."""
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            yield from (alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and not node.level:
            yield node.module


def find_violations() -> List[str]:
    violations = []
    for layer, forbidden in FORBIDDEN.items():
        for path in sorted((ROOT / layer).rglob("*.py")):
            for module in imported_modules(path):
                if module.split(".")[0] in forbidden:
                    violations.append(f"{path.relative_to(ROOT).as_posix()} imports {module} ({layer} layer)")
    return violations


def main() -> int:
    violations = find_violations()
    for v in violations:
        print(v)
    print(f"{len(violations)} layer violation(s)" if violations else "OK")
    return 1 if violations else 0


if __name__ == "__main__":
    sys.exit(main())
