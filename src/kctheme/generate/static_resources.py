"""Selection of the upstream Keycloak release a variant's static resources come from."""

from __future__ import annotations

from kctheme.collaborators import ThemeCollaborators
from kctheme.core.config import BuildOptions, ThemeBuildContext
from kctheme.core.constants import LAST_KEYCLOAK_VERSION_WITH_ACCOUNT_V1, ThemeType


def keycloak_version_for(theme_type: ThemeType, build_options: BuildOptions) -> str:
    match theme_type:
        case ThemeType.ACCOUNT:
            return LAST_KEYCLOAK_VERSION_WITH_ACCOUNT_V1
        case ThemeType.LOGIN:
            return build_options.login_theme_default_resources_from_keycloak_version
    raise AssertionError(f"Unhandled theme type: {theme_type!r}")


async def fetch_static_resources(
    theme_type: ThemeType,
    context: ThemeBuildContext,
    collaborators: ThemeCollaborators,
) -> None:
    """Retrieve the stock resources for the variant. Failures propagate."""
    await collaborators.download_keycloak_static_resources(
        keycloak_version=keycloak_version_for(theme_type, context.build_options),
        theme_dir=context.theme_dir(theme_type),
        theme_type=theme_type,
        used_resources=collaborators.read_static_resources_usage(
            context.theme_src_dir, theme_type, context.builtin_pages_dir
        ),
        cache_dir=context.resolved_cache_dir,
    )
