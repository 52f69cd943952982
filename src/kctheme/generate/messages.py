"""Per-language message bundles."""

from __future__ import annotations

from pathlib import Path

from kctheme.collaborators import ThemeCollaborators
from kctheme.core.config import ThemeBuildContext
from kctheme.core.constants import ThemeType

MESSAGES_DIR_NAME = "messages"


def messages_file_name(language_tag: str) -> str:
    return f"messages_{language_tag}.properties"


def write_message_bundles(
    theme_type: ThemeType,
    context: ThemeBuildContext,
    collaborators: ThemeCollaborators,
) -> list[Path]:
    """Write ``messages/messages_<lang>.properties``; a repeated tag overwrites the earlier file."""
    messages_dir = context.theme_dir(theme_type) / MESSAGES_DIR_NAME

    written = []
    for entry in collaborators.generate_message_properties(context.theme_src_dir, theme_type):
        messages_dir.mkdir(parents=True, exist_ok=True)
        path = messages_dir / messages_file_name(entry.language_tag)
        path.write_bytes(entry.properties_file_source.encode("utf-8"))
        written.append(path)
    return written
