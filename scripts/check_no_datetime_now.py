#!/usr/bin/env python3
"""Pre-commit hook preventing direct wall-clock reads in production code.

Validation rules compare against "now"; they must read it through the
injected TimeAuthorityProtocol so they stay deterministic under test. This
script scans src/ for ``datetime.now()`` / ``datetime.utcnow()`` calls
outside the system clock adapter.

Usage:
    python scripts/check_no_datetime_now.py [src_directory]

Exit codes:
    0: No violations found
    1: Direct clock reads found
"""

import re
import sys
from pathlib import Path

DATETIME_NOW_PATTERN = re.compile(r"datetime\s*\.\s*(now|utcnow)\s*\(")

# The only module allowed to read the wall clock
ALLOWED_FILES = frozenset({"infrastructure/adapters/system_time_authority.py"})


def check_file(file_path: Path) -> list[tuple[int, str]]:
    """Return (line number, line) for every direct clock read in a file."""
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return []

    violations: list[tuple[int, str]] = []
    for line_num, line in enumerate(content.splitlines(), start=1):
        if line.lstrip().startswith("#"):
            continue
        if DATETIME_NOW_PATTERN.search(line):
            violations.append((line_num, line.strip()))
    return violations


def find_violations(src_path: Path) -> dict[str, list[tuple[int, str]]]:
    """Scan every Python file under src_path, skipping the allowed adapter."""
    all_violations: dict[str, list[tuple[int, str]]] = {}
    for py_file in sorted(src_path.rglob("*.py")):
        relative = py_file.relative_to(src_path).as_posix()
        if relative in ALLOWED_FILES:
            continue
        violations = check_file(py_file)
        if violations:
            all_violations[relative] = violations
    return all_violations


def main() -> int:
    src_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("src")
    if not src_path.exists():
        print(f"Warning: {src_path}/ not found, skipping check")
        return 0

    all_violations = find_violations(src_path)
    if not all_violations:
        print(f"No datetime.now() violations found in {src_path}/")
        return 0

    print("Direct datetime.now() calls detected:")
    print()
    for file_path, violations in all_violations.items():
        print(f"  {file_path}:")
        for line_num, line_content in violations:
            print(f"    Line {line_num}: {line_content}")
    print()
    print("Inject TimeAuthorityProtocol and call self._time.now() instead.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
