#!/usr/bin/env python3
"""
Keep the package version in step with the VERSION file.

Usage:
    ./scripts/sync-version.py          # Write VERSION into pyproject.toml and __init__.py
    ./scripts/sync-version.py 0.2.0    # Bump VERSION, then sync
    ./scripts/sync-version.py --check  # Exit 1 if anything disagrees with VERSION
"""

import re
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).parent.parent
VERSION_FILE = REPO_ROOT / "VERSION"

# file -> (pattern, replacement template)
TARGETS: dict[Path, tuple[re.Pattern[str], str]] = {
    REPO_ROOT / "pyproject.toml": (
        re.compile(r'^version\s*=\s*"[^"]+"', re.MULTILINE),
        'version = "{version}"',
    ),
    REPO_ROOT / "src" / "aws_clients" / "__init__.py": (
        re.compile(r'^__version__\s*=\s*"[^"]+"', re.MULTILINE),
        '__version__ = "{version}"',
    ),
}

SEMVER_PATTERN = re.compile(r"^\d+\.\d+\.\d+(-[\w.]+)?$")


def sync_file(path: Path, version: str, check_only: bool) -> bool:
    pattern, template = TARGETS[path]
    expected = template.format(version=version)
    content = path.read_text()

    found = pattern.search(content)
    if not found:
        print(f"ERROR: no version line in {path}")
        return False
    if found.group(0) == expected:
        return True
    if check_only:
        print(f"MISMATCH: {path} has {found.group(0)}, expected {expected}")
        return False

    path.write_text(pattern.sub(expected, content))
    print(f"Updated {path}")
    return True


def main() -> int:
    args = sys.argv[1:]
    check_only = "--check" in args

    if args and not args[0].startswith("-"):
        version = args[0]
        if not SEMVER_PATTERN.match(version):
            print(f"ERROR: Invalid semver format: {version}")
            return 1
        VERSION_FILE.write_text(f"{version}\n")
        print(f"Set VERSION to {version}")
    else:
        version = VERSION_FILE.read_text().strip()

    results = [sync_file(path, version, check_only) for path in TARGETS]
    if all(results):
        print("All versions in sync!" if check_only else "Done!")
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())
