"""Application version module.

Reads major.minor from the VERSION file at the project root and appends
the number of commits since the last tag when running from a git checkout.
"""

import subprocess
from pathlib import Path

# VERSION file is at project root (editor/src/version.py -> ../../VERSION)
_VERSION_FILE = Path(__file__).resolve().parent.parent.parent / "VERSION"


def get_version() -> str:
    """Get the application version string (e.g. '0.1.4')."""
    try:
        major_minor = _VERSION_FILE.read_text().strip()
    except FileNotFoundError:
        major_minor = "0.0"

    try:
        result = subprocess.run(
            ['git', 'describe', '--tags', '--long'],
            capture_output=True, text=True, check=False,
            cwd=str(_VERSION_FILE.parent),
        )
    except FileNotFoundError:
        return f"{major_minor}.0"  # git not installed

    if result.returncode == 0:
        # Format: v0.1-5-gabcdef  ->  parts[1] = commit count
        parts = result.stdout.strip().rsplit('-', 2)
        if len(parts) == 3:
            return f"{major_minor}.{parts[1]}"

    return f"{major_minor}.0"
