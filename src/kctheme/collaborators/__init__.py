"""
External collaborators of the generation pipeline.

The orchestrator only depends on the callables bundled in
``ThemeCollaborators``; the defaults here implement them against the
theme source tree, and tests swap in fakes.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from kctheme.core.constants import ThemeType

from .download import download_keycloak_static_resources
from .ftl import FtlFilesCodeGenerator, generate_ftl_files_code_factory
from .messages import MessageProperties, generate_message_properties
from .usage import (
    StaticResourcesUsage,
    read_extra_pages_names,
    read_field_name_usage,
    read_static_resources_usage,
)


class FtlFilesCodeGeneratorLike(Protocol):
    def generate_ftl_files_code(self, page_id: str) -> str: ...


@dataclass(frozen=True)
class ThemeCollaborators:
    """Callables the orchestrator delegates to."""

    generate_ftl_files_code_factory: Callable[..., FtlFilesCodeGeneratorLike] = (
        generate_ftl_files_code_factory
    )
    read_field_name_usage: Callable[[Path, ThemeType, Path | None], list[str]] = read_field_name_usage
    read_extra_pages_names: Callable[[Path, ThemeType], list[str]] = read_extra_pages_names
    read_static_resources_usage: Callable[
        [Path, ThemeType, Path | None], StaticResourcesUsage | None
    ] = read_static_resources_usage
    generate_message_properties: Callable[[Path, ThemeType], list[MessageProperties]] = (
        generate_message_properties
    )
    download_keycloak_static_resources: Callable[..., Awaitable[Any]] = (
        download_keycloak_static_resources
    )


__all__ = [
    "ThemeCollaborators",
    "FtlFilesCodeGenerator",
    "FtlFilesCodeGeneratorLike",
    "MessageProperties",
    "StaticResourcesUsage",
    "download_keycloak_static_resources",
    "generate_ftl_files_code_factory",
    "generate_message_properties",
    "read_extra_pages_names",
    "read_field_name_usage",
    "read_static_resources_usage",
]
