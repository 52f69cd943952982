"""
Source scanners reporting what a theme's page components use.

All scanners read ``.ts/.tsx/.js/.jsx`` files in sorted order and return
de-duplicated results in first-seen order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from kctheme.core.constants import ALL_PAGE_IDS, ThemeType

_SOURCE_SUFFIXES = {".ts", ".tsx", ".js", ".jsx"}

_FIELD_NAME_RE = re.compile(r'(?:printIfExists|existsError|get|exists)\("([^"]+)"')
_EXTRA_PAGE_RE = re.compile(r"""["']?pageId["']?\s*:\s*["']([^"'\s]+\.ftl)["']""")
_STATIC_RESOURCE_RE = re.compile(
    r"""url\.(resourcesCommonPath|resourcesPath)\s*\}?\s*(?:\+\s*["'`])?/([^`'"\s)$]+)"""
)


@dataclass
class StaticResourcesUsage:
    """Upstream files referenced by the theme, relative to their resources root."""

    resources_file_paths: set[str] = field(default_factory=set)
    resources_common_file_paths: set[str] = field(default_factory=set)


def _source_files(dir_path: Path) -> list[Path]:
    if not dir_path.is_dir():
        return []
    return sorted(p for p in dir_path.rglob("*") if p.is_file() and p.suffix in _SOURCE_SUFFIXES)


def _scanned_dirs(
    theme_src_dir: Path, theme_type: ThemeType, builtin_pages_dir: Path | None
) -> list[Path]:
    dirs = []
    if builtin_pages_dir is not None:
        dirs.append(builtin_pages_dir / theme_type.value)
    dirs.append(theme_src_dir / theme_type.value)
    return dirs


def read_field_name_usage(
    theme_src_dir: Path,
    theme_type: ThemeType,
    builtin_pages_dir: Path | None = None,
) -> list[str]:
    """Form field names queried through ``messagesPerField``."""
    field_names: dict[str, None] = {}
    for dir_path in _scanned_dirs(theme_src_dir, theme_type, builtin_pages_dir):
        for file_path in _source_files(dir_path):
            source = file_path.read_text(encoding="utf-8")
            if "messagesPerField" not in source:
                continue
            for name in _FIELD_NAME_RE.findall(source):
                field_names.setdefault(name, None)
    return list(field_names)


def read_extra_pages_names(theme_src_dir: Path, theme_type: ThemeType) -> list[str]:
    """Page ids handled by the theme beyond the stock Keycloak pages."""
    extra_pages: dict[str, None] = {}
    for file_path in _source_files(theme_src_dir / theme_type.value):
        for page_id in _EXTRA_PAGE_RE.findall(file_path.read_text(encoding="utf-8")):
            if page_id not in ALL_PAGE_IDS:
                extra_pages.setdefault(page_id, None)
    return list(extra_pages)


def read_static_resources_usage(
    theme_src_dir: Path,
    theme_type: ThemeType,
    builtin_pages_dir: Path | None = None,
) -> StaticResourcesUsage | None:
    """Upstream static files referenced by page sources.

    Returns None when no stock page sources are configured: the stock pages
    may need anything, so nothing can be filtered out.
    """
    if builtin_pages_dir is None:
        return None

    usage = StaticResourcesUsage()
    for dir_path in _scanned_dirs(theme_src_dir, theme_type, builtin_pages_dir):
        for file_path in _source_files(dir_path):
            source = file_path.read_text(encoding="utf-8")
            if "resourcesPath" not in source and "resourcesCommonPath" not in source:
                continue
            for kind, rel_path in _STATIC_RESOURCE_RE.findall(source):
                if kind == "resourcesCommonPath":
                    usage.resources_common_file_paths.add(rel_path)
                else:
                    usage.resources_file_paths.add(rel_path)
    return usage
