#!/usr/bin/env python3
"""Check hexagonal architecture import boundaries.

Layering rules:
- domain/: models, errors and pure services, NO imports from other src layers
- application/: ports, validators, policies, decorators; imports domain/ only
- infrastructure/: adapters and stubs; imports domain/ and application/
- config/: plain settings; imports nothing from src
- bootstrap/: composition root; may import every other layer

Usage:
    python scripts/check_imports.py [src_directory]

Exit codes:
    0: No violations found
    1: Violations found
"""
import ast
import sys
from pathlib import Path

# Lower number = more inner layer
LAYER_HIERARCHY: dict[str, int] = {
    "domain": 0,
    "application": 1,
    "infrastructure": 2,
    "config": 2,
    "bootstrap": 3,
}

ALLOWED_IMPORTS: dict[str, set[str]] = {
    "domain": set(),
    "application": {"domain"},
    "infrastructure": {"domain", "application"},
    "config": set(),
    "bootstrap": {"domain", "application", "infrastructure", "config"},
}

Violation = tuple[str, int, str]


def get_import_modules(node: ast.Import | ast.ImportFrom) -> list[str]:
    """Return every module named by an import statement."""
    if isinstance(node, ast.ImportFrom):
        return [node.module] if node.module else []
    return [alias.name for alias in node.names]


def get_file_layer(py_file: Path, src_dir: Path) -> str | None:
    """Return the layer a file belongs to, or None for files outside any layer."""
    try:
        parts = py_file.relative_to(src_dir).parts
    except ValueError:
        return None
    if len(parts) < 2:
        return None
    return parts[0] if parts[0] in LAYER_HIERARCHY else None


def check_import(module: str, file_layer: str) -> str | None:
    """Return an error message if importing ``module`` from ``file_layer`` is illegal."""
    parts = module.split(".")
    if len(parts) < 2 or parts[0] != "src":
        return None

    target_layer = parts[1]
    if target_layer not in LAYER_HIERARCHY or target_layer == file_layer:
        return None
    if target_layer in ALLOWED_IMPORTS[file_layer]:
        return None
    return f"{file_layer} layer cannot import from {target_layer}"


def check_file_imports(py_file: Path, src_dir: Path) -> list[Violation]:
    """Check a single file for import boundary violations."""
    file_layer = get_file_layer(py_file, src_dir)
    if file_layer is None:
        return []

    try:
        tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
    except (SyntaxError, UnicodeDecodeError) as e:
        print(f"Warning: Could not parse {py_file}: {e}", file=sys.stderr)
        return []

    violations: list[Violation] = []
    for node in ast.walk(tree):
        if not isinstance(node, (ast.Import, ast.ImportFrom)):
            continue
        for module in get_import_modules(node):
            error_msg = check_import(module, file_layer)
            if error_msg:
                violations.append((str(py_file), node.lineno, error_msg))
    return violations


def check_import_boundaries(src_dir: Path) -> list[Violation]:
    """Check every Python file under src_dir."""
    if not src_dir.exists():
        print(f"Error: Source directory '{src_dir}' does not exist", file=sys.stderr)
        return []

    violations: list[Violation] = []
    for py_file in sorted(src_dir.rglob("*.py")):
        violations.extend(check_file_imports(py_file, src_dir))
    return violations


def format_violations(violations: list[Violation]) -> str:
    """Format violations for human-readable output."""
    if not violations:
        return ""

    lines = ["Import boundary violations found:", ""]
    for file_path, line_no, message in sorted(violations):
        lines.append(f"  {file_path}:{line_no}: {message}")
    lines.append("")
    lines.append(f"Total: {len(violations)} violation(s)")
    return "\n".join(lines)


def main() -> int:
    if len(sys.argv) > 1:
        src_dir = Path(sys.argv[1])
    else:
        src_dir = Path(__file__).parent.parent / "src"

    violations = check_import_boundaries(src_dir)
    if violations:
        print(format_violations(violations))
        return 1

    print("No import boundary violations found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
