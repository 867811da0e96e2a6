"""Locating user-editable files such as the settings override.

Files are searched, in order, in the current working directory, the
user configuration directory (``$XDG_CONFIG_HOME/ipatalk``, falling
back to ``~/.config/ipatalk``) and the installed package directory.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

PACKAGE_DIR = Path(__file__).resolve().parents[1]


def user_config_dir() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / "ipatalk"


def candidate_locations(filename: str) -> List[Path]:
    """Return every path at which *filename* is looked for, best first."""
    return [
        Path.cwd() / filename,
        user_config_dir() / filename,
        PACKAGE_DIR / filename,
    ]


def find_data_file(filename: str) -> Path:
    """Return the first existing candidate for *filename*.

    :raises FileNotFoundError: if none of the locations has the file.
    """
    candidates = candidate_locations(filename)
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    tried = ", ".join(str(p) for p in candidates)
    raise FileNotFoundError(f"Could not find data file '{filename}'. Tried: {tried}")
