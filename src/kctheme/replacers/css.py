"""
CSS rewriting.

Absolute ``url(/...)`` references only resolve when the app is served from
its own origin. Inside a theme the prefix is only known at render time
(``${url.resourcesPath}``), so each such declaration value is moved into a
CSS custom property the page template defines in ``:root``.
"""

from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass, field

# url(/path...) up to the end of the declaration value; url(//host) excluded
_ABSOLUTE_URL_RE = re.compile(r"""url\(["']?/[^/][^)"']+["']?\)[^;}]*""")


@dataclass(frozen=True)
class CssReplacement:
    """Rewritten stylesheet plus the globals it now relies on."""

    fixed_css_code: str
    css_globals_to_define: dict[str, str] = field(default_factory=dict)


def _css_global_name(declaration_value: str) -> str:
    return "url" + hashlib.sha256(declaration_value.encode("utf-8")).hexdigest()[:15]


def replace_imports_in_css_code(css_code: str) -> CssReplacement:
    """Replace absolute ``url()`` values with ``var(--urlXXXX)`` references.

    Args:
        css_code: Stylesheet source.

    Returns:
        CssReplacement with the rewritten source and the name -> original
        value mapping for every extracted global.
    """
    css_globals_to_define: dict[str, str] = {}
    for match in _ABSOLUTE_URL_RE.findall(css_code):
        css_globals_to_define[_css_global_name(match)] = match

    # Longest first so a value that prefixes another does not clobber it
    fixed_css_code = css_code
    for name, value in sorted(css_globals_to_define.items(), key=lambda item: -len(item[1])):
        fixed_css_code = fixed_css_code.replace(value, f"var(--{name})")

    return CssReplacement(fixed_css_code=fixed_css_code, css_globals_to_define=css_globals_to_define)


def generate_css_code_to_define_globals(
    css_globals_to_define: dict[str, str],
    url_pathname: str | None = None,
) -> str:
    """Render the ``:root`` block defining the extracted globals.

    ``url(<url_pathname>`` prefixes are pointed at the theme's copy of
    the bundle. Names are emitted in sorted order.
    """
    prefix = url_pathname or "/"
    pattern = re.compile(r"url\(([\"']?)" + re.escape(prefix))

    lines = [":root {"]
    for name in sorted(css_globals_to_define):
        value = pattern.sub(lambda m: f"url({m.group(1)}${{url.resourcesPath}}/build/", css_globals_to_define[name])
        lines.append(f"    --{name}: {value};")
    lines.append("}")
    return "\n".join(lines)
