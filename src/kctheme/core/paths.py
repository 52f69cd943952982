"""Path helpers."""

from __future__ import annotations

import os
from pathlib import Path


def is_inside(dir_path: str | Path, file_path: str | Path) -> bool:
    """Return True if *file_path* is *dir_path* or nested under it.

    Comparison is by path segment after normalization, so ``/a/build``
    is not inside ``/a/bu``.
    """
    ancestor = Path(os.path.normcase(os.path.abspath(dir_path)))
    candidate = Path(os.path.normcase(os.path.abspath(file_path)))
    return candidate == ancestor or ancestor in candidate.parents
