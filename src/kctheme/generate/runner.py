"""
Theme generation runner - orchestrates the per-variant pipeline.

For each theme variant with sources: copy the bundle, write page
templates, message bundles, stock static resources and theme metadata.
The email theme, if any, is copied verbatim afterwards.
"""

from __future__ import annotations

import logging

from kctheme.collaborators import ThemeCollaborators
from kctheme.core.config import ThemeBuildContext
from kctheme.core.constants import EMAIL_THEME_DIR_NAME, THEME_TYPES, ThemeType
from kctheme.core.errors import MissingInputError
from kctheme.core.transform import transform_codebase

from .assets import copy_app_resources
from .messages import write_message_bundles
from .metadata import write_theme_properties
from .pages import write_pages
from .result import ThemeGenerationResult
from .static_resources import fetch_static_resources

logger = logging.getLogger(__name__)


class ThemeGenerator:
    """
    Runs theme generation for one build context.

    Every present variant gets its own copy of the bundle under
    ``resources/build``. CSS globals accumulate over the whole run, so a
    later variant's templates see the globals of every copy made so far.
    The page template generator is rebuilt for each variant.
    """

    def __init__(
        self,
        context: ThemeBuildContext,
        collaborators: ThemeCollaborators | None = None,
        *,
        copy_app_resources_per_theme_type: bool = True,
    ):
        """
        Initialize the generator.

        Args:
            context: Build context
            collaborators: Delegates for template, message and resource generation
            copy_app_resources_per_theme_type: Copy the bundle (and collect CSS
                globals) for every variant; when False only the first variant
                generated gets a copy
        """
        self.context = context
        self.collaborators = collaborators or ThemeCollaborators()
        self.copy_app_resources_per_theme_type = copy_app_resources_per_theme_type

    async def run(self) -> ThemeGenerationResult:
        """Generate every variant present in the theme sources, then the email theme."""
        context = self.context
        result = ThemeGenerationResult()

        if not context.react_app_build_dir.is_dir():
            raise MissingInputError("Compiled bundle not found", context.react_app_build_dir)

        for theme_type in THEME_TYPES:
            if not (context.theme_src_dir / theme_type.value).exists():
                logger.info("No %s theme sources, skipping", theme_type.value)
                continue

            await self._generate_theme_type(theme_type, result)
            result.theme_types.append(theme_type)

        self._copy_email_theme(result)

        return result

    async def _generate_theme_type(self, theme_type: ThemeType, result: ThemeGenerationResult) -> None:
        context = self.context
        collaborators = self.collaborators
        theme_dir = context.theme_dir(theme_type)

        logger.info("Generating %s theme in %s", theme_type.value, theme_dir)

        is_first_theme_type = not result.theme_types
        if self.copy_app_resources_per_theme_type or is_first_theme_type:
            result.add_files(
                copy_app_resources(
                    context.react_app_build_dir,
                    theme_dir / "resources" / "build",
                    result.css_globals,
                )
            )

        result.add_files(write_pages(theme_type, context, result.css_globals, collaborators))
        result.add_files(write_message_bundles(theme_type, context, collaborators))

        await fetch_static_resources(theme_type, context, collaborators)

        result.add_file(
            write_theme_properties(theme_type, theme_dir, context.build_options.extra_theme_properties)
        )

    def _copy_email_theme(self, result: ThemeGenerationResult) -> None:
        email_src_dir = self.context.theme_src_dir / EMAIL_THEME_DIR_NAME
        if not email_src_dir.exists():
            return

        logger.info("Copying email theme")
        result.add_files(transform_codebase(email_src_dir, self.context.email_theme_dir))
        result.email_copied = True


async def generate_theme(
    context: ThemeBuildContext,
    collaborators: ThemeCollaborators | None = None,
) -> ThemeGenerationResult:
    """
    Generate the Keycloak theme described by *context*.

    Args:
        context: Build context
        collaborators: Optional replacement delegates

    Returns:
        ThemeGenerationResult listing written files and generated variants

    Raises:
        MissingInputError: If the bundle or its index.html is missing
    """
    return await ThemeGenerator(context, collaborators).run()
