"""
JS rewriting.

Webpack runtime chunks compute chunk URLs from a public path baked in at
build time. These rewrites make them resolve against the theme resources
path the page exposes on ``window.kcContext``.
"""

from __future__ import annotations

import re

from kctheme.core.constants import KC_CONTEXT_GLOBAL

_RESOURCES_PATH = f"window.{KC_CONTEXT_GLOBAL}.url.resourcesPath"


def _public_path_helper_re(language: str) -> re.Pattern[str]:
    return re.compile(
        r'([a-zA-Z_]+)\.([a-zA-Z]+)=function\(([a-zA-Z]+)\)\{return"static/' + language + '/"'
    )


def _public_path_helper_replacement(language: str):
    def _replace(match: re.Match[str]) -> str:
        n, u, e = match.group(1), match.group(2), match.group(3)
        return (
            f"{n}[(function(){{"
            f'var pd=Object.getOwnPropertyDescriptor({n},"p");'
            f"if(pd===undefined||pd.configurable){{"
            f'Object.defineProperty({n},"p",{{'
            f"get:function(){{return {_RESOURCES_PATH};}},"
            f"set:function(){{}}"
            f"}});"
            f"}}"
            f'return "{u}";'
            f"}})()]=function({e}){{return \"/build/static/{language}/\""
        )

    return _replace


_STATIC_CONCAT_RE = re.compile(r'([a-zA-Z]+\.[a-zA-Z]+)\+"static/')
_CHUNK_CSS_RE = re.compile(r'"\.chunk\.css",([a-zA-Z])+=[a-zA-Z]+\.[a-zA-Z]+\+([a-zA-Z]+),')


def replace_imports_from_static_in_js_code(js_code: str) -> str:
    """Point webpack ``static/`` asset lookups at the theme build directory."""
    fixed_js_code = js_code
    for language in ("js", "css"):
        fixed_js_code = _public_path_helper_re(language).sub(
            _public_path_helper_replacement(language), fixed_js_code
        )
    fixed_js_code = _STATIC_CONCAT_RE.sub(f'{_RESOURCES_PATH} + "/build/static/', fixed_js_code)
    fixed_js_code = _CHUNK_CSS_RE.sub(
        lambda m: f'".chunk.css",{m.group(1)} = {_RESOURCES_PATH} + "/build/" + {m.group(2)},',
        fixed_js_code,
        count=1,
    )
    return fixed_js_code
