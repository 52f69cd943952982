"""
kctheme - Keycloak theme assembly for single-page applications.

Turns a compiled SPA bundle plus a theme source tree into a Keycloak
theme directory: FreeMarker page templates, message bundles, rewritten
static assets and theme metadata.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import BuildOptionsError, KcThemeError, MissingInputError, StaticResourcesError

__version__ = get_version()

__all__ = [
    "__version__",
    "KcThemeError",
    "MissingInputError",
    "BuildOptionsError",
    "StaticResourcesError",
]
