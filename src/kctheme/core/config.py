"""
Build configuration.

Parses ``kctheme.toml`` (``[theme]`` and ``[paths]`` tables), falling back
to ``package.json`` for the theme name and version, and assembles the
read-only context threaded through the generation pipeline.
"""

from __future__ import annotations

import json
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import DEFAULT_LOGIN_RESOURCES_KEYCLOAK_VERSION, EMAIL_THEME_DIR_NAME, ThemeType
from .errors import BuildOptionsError

CONFIG_FILE_NAME = "kctheme.toml"
CACHE_DIR_ENV = "KCTHEME_CACHE_DIR"

DEFAULT_BUNDLE_DIR = "build"
DEFAULT_THEME_SRC_DIR = "src/keycloak-theme"
DEFAULT_OUTPUT_DIR = "build_keycloak"
DEFAULT_CACHE_DIR = ".cache/kctheme"


class BuildOptions(BaseModel):
    """Options controlling what goes into the generated theme."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    theme_name: str = Field(min_length=1, alias="name")
    theme_version: str = Field(default="0.0.0", alias="version")
    extra_theme_properties: tuple[str, ...] = Field(default=(), alias="extra_properties")
    login_theme_default_resources_from_keycloak_version: str = Field(
        default=DEFAULT_LOGIN_RESOURCES_KEYCLOAK_VERSION,
        alias="login_resources_keycloak_version",
    )
    url_pathname: str | None = None

    @field_validator("url_pathname")
    @classmethod
    def _normalize_url_pathname(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = "/" + value.strip("/") + "/"
        return "/" if value == "//" else value


@dataclass(frozen=True)
class ThemeBuildContext:
    """
    Per-run parameters shared by every pipeline step.

    Attributes:
        project_dir: Root of the application project
        react_app_build_dir: Compiled application bundle (contains index.html)
        keycloak_theme_building_dir: Output root; themes land under
            ``src/main/resources/theme/<theme_name>``
        theme_src_dir: Theme source tree (``login/``, ``account/``, ``email/``)
        build_options: Theme options
        tool_version: Version of kctheme producing the output
        builtin_pages_dir: Optional stock page sources scanned for usage
        cache_dir: Download cache for upstream resources
    """

    project_dir: Path
    react_app_build_dir: Path
    keycloak_theme_building_dir: Path
    theme_src_dir: Path
    build_options: BuildOptions
    tool_version: str
    builtin_pages_dir: Path | None = None
    cache_dir: Path | None = None

    @property
    def themes_root(self) -> Path:
        return self.keycloak_theme_building_dir / "src" / "main" / "resources" / "theme"

    def theme_dir(self, theme_type: ThemeType | str) -> Path:
        """Output directory of one variant (or ``email``)."""
        name = theme_type.value if isinstance(theme_type, ThemeType) else theme_type
        return self.themes_root / self.build_options.theme_name / name

    @property
    def email_theme_dir(self) -> Path:
        return self.theme_dir(EMAIL_THEME_DIR_NAME)

    @property
    def resolved_cache_dir(self) -> Path:
        if self.cache_dir is not None:
            return self.cache_dir
        env = os.environ.get(CACHE_DIR_ENV)
        if env:
            return Path(env)
        return self.project_dir / DEFAULT_CACHE_DIR


def _read_toml(toml_path: Path) -> dict[str, Any]:
    if not toml_path.exists():
        return {}
    try:
        with open(toml_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise BuildOptionsError(f"Invalid {toml_path.name}: {e}") from e


def _read_package_json(project_dir: Path) -> dict[str, Any]:
    package_json = project_dir / "package.json"
    if not package_json.exists():
        return {}
    try:
        data = json.loads(package_json.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise BuildOptionsError(f"Invalid package.json: {e}") from e
    return data if isinstance(data, dict) else {}


def _theme_name_from_package(name: str) -> str:
    """``@scope/app`` -> ``scope-app``."""
    return name.lstrip("@").replace("/", "-")


def load_build_options(project_dir: Path, overrides: dict[str, Any] | None = None) -> BuildOptions:
    """
    Resolve BuildOptions for a project.

    Precedence: explicit overrides, then ``[theme]`` in kctheme.toml,
    then ``package.json`` for name and version.

    Raises:
        BuildOptionsError: If no theme name can be found or values are invalid
    """
    theme_data = dict(_read_toml(project_dir / CONFIG_FILE_NAME).get("theme", {}))

    package = _read_package_json(project_dir)
    if "name" not in theme_data and isinstance(package.get("name"), str):
        theme_data["name"] = _theme_name_from_package(package["name"])
    if "version" not in theme_data and isinstance(package.get("version"), str):
        theme_data["version"] = package["version"]

    for key, value in (overrides or {}).items():
        if value is not None:
            theme_data[key] = value

    if not theme_data.get("name"):
        raise BuildOptionsError(
            f"No theme name: set [theme] name in {CONFIG_FILE_NAME} or 'name' in package.json"
        )

    try:
        return BuildOptions.model_validate(theme_data)
    except ValidationError as e:
        raise BuildOptionsError(f"Invalid theme options: {e}") from e


def load_build_context(
    project_dir: Path,
    tool_version: str,
    *,
    overrides: dict[str, Any] | None = None,
    output_dir: Path | None = None,
) -> ThemeBuildContext:
    """
    Build the ThemeBuildContext for a project directory.

    Relative paths in ``[paths]`` are resolved against *project_dir*.
    """
    project_dir = project_dir.resolve()
    paths = _read_toml(project_dir / CONFIG_FILE_NAME).get("paths", {})

    def _resolve(value: str) -> Path:
        p = Path(value)
        return p if p.is_absolute() else project_dir / p

    def _path(key: str, default: str) -> Path:
        return _resolve(paths.get(key, default))

    def _optional_path(key: str) -> Path | None:
        return _resolve(paths[key]) if key in paths else None

    building_dir = output_dir if output_dir is not None else _path("output_dir", DEFAULT_OUTPUT_DIR)

    return ThemeBuildContext(
        project_dir=project_dir,
        react_app_build_dir=_path("bundle_dir", DEFAULT_BUNDLE_DIR),
        keycloak_theme_building_dir=building_dir.resolve(),
        theme_src_dir=_path("theme_src_dir", DEFAULT_THEME_SRC_DIR),
        build_options=load_build_options(project_dir, overrides),
        tool_version=tool_version,
        builtin_pages_dir=_optional_path("builtin_pages_dir"),
        cache_dir=_optional_path("cache_dir"),
    )
