"""Locating and reading puzzle input files."""

from __future__ import annotations

import os
from pathlib import Path

ROOT_ENV = "ADVENT2024_ROOT"


def file_in_src(path: str | os.PathLike[str]) -> Path:
    """Return the path of ``path`` inside the ``src`` directory of the project root.

    The project root is taken from the ``ADVENT2024_ROOT`` environment variable,
    falling back to the current working directory.
    """
    root = Path(os.environ.get(ROOT_ENV) or Path.cwd())
    return root / "src" / path


def input_to_string(path: str | os.PathLike[str]) -> str:
    """Read the whole of an input file found by :func:`file_in_src`."""
    return file_in_src(path).read_text()