"""
One FreeMarker template per page id.
"""

from __future__ import annotations

from pathlib import Path

from kctheme.collaborators import FtlFilesCodeGeneratorLike, ThemeCollaborators
from kctheme.core.config import ThemeBuildContext
from kctheme.core.constants import PAGE_IDS_BY_THEME_TYPE, ThemeType
from kctheme.core.errors import MissingInputError


def read_index_html(react_app_build_dir: Path) -> str:
    """Read the bundle entry document.

    Raises:
        MissingInputError: If the bundle has no ``index.html``
    """
    index_html = react_app_build_dir / "index.html"
    if not index_html.is_file():
        raise MissingInputError("Compiled bundle has no index.html", index_html)
    return index_html.read_text(encoding="utf-8")


def get_page_ids(
    theme_type: ThemeType, context: ThemeBuildContext, collaborators: ThemeCollaborators
) -> list[str]:
    """Stock page ids of the variant followed by the theme's extra pages."""
    return [
        *PAGE_IDS_BY_THEME_TYPE[theme_type],
        *collaborators.read_extra_pages_names(context.theme_src_dir, theme_type),
    ]


def build_ftl_generator(
    theme_type: ThemeType,
    context: ThemeBuildContext,
    css_globals: dict[str, str],
    collaborators: ThemeCollaborators,
) -> FtlFilesCodeGeneratorLike:
    return collaborators.generate_ftl_files_code_factory(
        index_html_code=read_index_html(context.react_app_build_dir),
        css_globals_to_define=dict(css_globals),
        build_options=context.build_options,
        tool_version=context.tool_version,
        theme_type=theme_type,
        field_names=collaborators.read_field_name_usage(
            context.theme_src_dir, theme_type, context.builtin_pages_dir
        ),
    )


def write_pages(
    theme_type: ThemeType,
    context: ThemeBuildContext,
    css_globals: dict[str, str],
    collaborators: ThemeCollaborators,
) -> list[Path]:
    """Write ``<theme_dir>/<page_id>`` for every page of the variant, overwriting."""
    theme_dir = context.theme_dir(theme_type)
    generator = build_ftl_generator(theme_type, context, css_globals, collaborators)

    written = []
    for page_id in get_page_ids(theme_type, context, collaborators):
        ftl_code = generator.generate_ftl_files_code(page_id)
        theme_dir.mkdir(parents=True, exist_ok=True)
        path = theme_dir / page_id
        path.write_bytes(ftl_code.encode("utf-8"))
        written.append(path)
    return written
