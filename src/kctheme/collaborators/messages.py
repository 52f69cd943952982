"""
Message bundle sources.

Reads ``<theme_src>/<variant>/i18n/<lang>.json`` and renders each file as
a Java ``.properties`` source Keycloak can load.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from kctheme.core.constants import ThemeType
from kctheme.core.errors import KcThemeError

logger = logging.getLogger(__name__)

I18N_DIR_NAME = "i18n"


@dataclass(frozen=True)
class MessageProperties:
    language_tag: str
    properties_file_source: str


def _flatten(data: dict[str, Any], prefix: str = "") -> dict[str, str]:
    flat: dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{full_key}."))
        else:
            flat[full_key] = str(value)
    return flat


def _escape(text: str, is_key: bool) -> str:
    out = []
    for i, ch in enumerate(text):
        if ch == "\\":
            out.append("\\\\")
        elif ch == "\n":
            out.append("\\n")
        elif ch == "\r":
            out.append("\\r")
        elif ch == "\t":
            out.append("\\t")
        elif ch in "=:#!" and (is_key or ch in "#!" and i == 0):
            out.append("\\" + ch)
        elif ch == " " and (is_key or i == 0):
            out.append("\\ ")
        elif ord(ch) > 0x7E or ord(ch) < 0x20:
            out.extend(f"\\u{unit:04x}" for unit in _utf16_units(ch))
        else:
            out.append(ch)
    return "".join(out)


def _utf16_units(ch: str) -> list[int]:
    encoded = ch.encode("utf-16-be")
    return [int.from_bytes(encoded[i : i + 2], "big") for i in range(0, len(encoded), 2)]


def render_properties(messages: dict[str, str]) -> str:
    """Render messages as ``key=value`` lines, sorted by key.

    Single quotes are doubled since Keycloak formats messages with
    ``java.text.MessageFormat``.
    """
    lines = ["# This file was generated by kctheme"]
    for key in sorted(messages):
        value = messages[key].replace("'", "''")
        lines.append(f"{_escape(key, is_key=True)}={_escape(value, is_key=False)}")
    return "\n".join(lines) + "\n"


def generate_message_properties(theme_src_dir: Path, theme_type: ThemeType) -> list[MessageProperties]:
    """One properties source per language file found for the variant."""
    i18n_dir = theme_src_dir / theme_type.value / I18N_DIR_NAME
    if not i18n_dir.is_dir():
        return []

    result = []
    for json_path in sorted(i18n_dir.glob("*.json")):
        try:
            data = json.loads(json_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise KcThemeError(f"Invalid message file {json_path}: {e}") from e
        if not isinstance(data, dict):
            raise KcThemeError(f"Message file {json_path} must contain a JSON object")

        logger.debug("Read %s messages from %s", len(data), json_path)
        result.append(
            MessageProperties(
                language_tag=json_path.stem,
                properties_file_source=render_properties(_flatten(data)),
            )
        )
    return result
