"""
Theme generation pipeline.

Usage:
    result = await generate_theme(context)
"""

from .assets import copy_app_resources
from .messages import write_message_bundles
from .metadata import theme_properties_code, write_theme_properties
from .pages import get_page_ids, read_index_html, write_pages
from .result import ThemeGenerationResult
from .runner import ThemeGenerator, generate_theme
from .static_resources import fetch_static_resources, keycloak_version_for

__all__ = [
    "ThemeGenerationResult",
    "ThemeGenerator",
    "generate_theme",
    "copy_app_resources",
    "write_pages",
    "get_page_ids",
    "read_index_html",
    "write_message_bundles",
    "fetch_static_resources",
    "keycloak_version_for",
    "theme_properties_code",
    "write_theme_properties",
]
