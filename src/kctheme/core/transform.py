"""
Directory tree copy with a per-file transform hook.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from .paths import is_inside

# Receives the absolute source path and its bytes. Return the bytes to write
# (the same object for a plain copy) or None to leave the file out.
TransformSourceCode = Callable[[Path, bytes], bytes | None]


def transform_codebase(
    src_dir: Path,
    dest_dir: Path,
    transform_source_code: TransformSourceCode | None = None,
) -> list[Path]:
    """Materialize *src_dir* into *dest_dir*, file by file.

    Files are visited in order of their relative POSIX path. The listing
    is taken before anything is written, and when *dest_dir* sits inside
    *src_dir* its content is never read back as source.

    Args:
        src_dir: Directory to read from.
        dest_dir: Directory to write to. Created as needed.
        transform_source_code: Optional hook; without it every file is
            copied byte for byte.

    Returns:
        Paths written under *dest_dir*.
    """
    src_dir = Path(src_dir)
    dest_dir = Path(dest_dir)
    dest_nested = is_inside(src_dir, dest_dir) and not is_inside(dest_dir, src_dir)

    file_paths = sorted(
        (p for p in src_dir.rglob("*") if p.is_file()),
        key=lambda p: p.relative_to(src_dir).as_posix(),
    )
    written: list[Path] = []

    for file_path in file_paths:
        if dest_nested and is_inside(dest_dir, file_path):
            continue

        source_code = file_path.read_bytes()

        if transform_source_code is None:
            modified = source_code
        else:
            modified = transform_source_code(file_path, source_code)
            if modified is None:
                continue

        target = dest_dir / file_path.relative_to(src_dir)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(modified)
        written.append(target)

    return written
