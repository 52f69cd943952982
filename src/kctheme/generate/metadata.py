"""``theme.properties`` writer."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from kctheme.core.constants import PARENT_THEME_BY_THEME_TYPE, ThemeType

THEME_PROPERTIES_FILE_NAME = "theme.properties"


def theme_properties_code(theme_type: ThemeType, extra_properties: Iterable[str] = ()) -> str:
    """``parent=<theme>`` followed by the extra properties, blank-line separated."""
    return "\n\n".join([f"parent={PARENT_THEME_BY_THEME_TYPE[theme_type]}", *extra_properties])


def write_theme_properties(
    theme_type: ThemeType, theme_dir: Path, extra_properties: Iterable[str] = ()
) -> Path:
    theme_dir.mkdir(parents=True, exist_ok=True)
    path = theme_dir / THEME_PROPERTIES_FILE_NAME
    path.write_bytes(theme_properties_code(theme_type, extra_properties).encode("utf-8"))
    return path
