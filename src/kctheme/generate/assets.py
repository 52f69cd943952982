"""
Copy of the compiled application bundle into a theme's ``resources/build``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from kctheme.core.constants import KEYCLOAK_RESOURCES_DIR_NAME
from kctheme.core.paths import is_inside
from kctheme.core.transform import transform_codebase
from kctheme.replacers.css import replace_imports_in_css_code
from kctheme.replacers.js import replace_imports_from_static_in_js_code

logger = logging.getLogger(__name__)


def copy_app_resources(
    react_app_build_dir: Path,
    dest_dir: Path,
    css_globals: dict[str, str],
) -> list[Path]:
    """
    Copy the bundle, rewriting stylesheets and scripts on the way.

    CSS globals extracted from stylesheets are merged into *css_globals*;
    for a name defined by several files the last one visited (sorted path
    order) wins.

    Args:
        react_app_build_dir: Compiled application bundle
        dest_dir: Target ``<theme>/resources/build`` directory
        css_globals: Accumulator updated in place

    Returns:
        Paths written under *dest_dir*
    """
    debug_resources_dir = react_app_build_dir / KEYCLOAK_RESOURCES_DIR_NAME

    def _transform(file_path: Path, source_code: bytes) -> bytes | None:
        # The debug copy of Keycloak resources would be copied back into itself
        if is_inside(debug_resources_dir, file_path):
            logger.debug("Skipping %s", file_path)
            return None

        suffix = file_path.suffix.lower()

        if suffix == ".css":
            css_code = source_code.decode("utf-8", errors="surrogateescape")
            replacement = replace_imports_in_css_code(css_code)
            css_globals.update(replacement.css_globals_to_define)
            return replacement.fixed_css_code.encode("utf-8", errors="surrogateescape")

        if suffix == ".js":
            js_code = source_code.decode("utf-8", errors="surrogateescape")
            return replace_imports_from_static_in_js_code(js_code).encode("utf-8", errors="surrogateescape")

        return source_code

    return transform_codebase(react_app_build_dir, dest_dir, _transform)
