"""
Error types for kctheme theme generation.
"""

from pathlib import Path


class KcThemeError(Exception):
    """Base exception for all kctheme errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingInputError(KcThemeError):
    """
    Raised when a required build input does not exist.

    Examples:
    - Compiled application bundle directory missing
    - ``index.html`` missing from the bundle
    """

    def __init__(self, message: str, path: Path):
        self.path = path
        super().__init__(f"{message}: {path}")


class BuildOptionsError(KcThemeError):
    """
    Raised when build options cannot be resolved.

    Examples:
    - Malformed kctheme.toml
    - No theme name in kctheme.toml nor package.json
    """

    pass


class StaticResourcesError(KcThemeError):
    """
    Raised when upstream Keycloak static resources cannot be retrieved.

    Examples:
    - Download returned a non-success status
    - Archive does not contain the expected theme tree
    """

    pass
