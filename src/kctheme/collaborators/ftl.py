"""
FreeMarker page template generation.

Every page of a variant shares one document: the compiled ``index.html``
with its asset URLs pointed at the theme build directory and a head block
exposing the Keycloak context to the application as ``window.kcContext``.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, Comment, Doctype
from jinja2 import BaseLoader, Environment, StrictUndefined

from kctheme.core.config import BuildOptions
from kctheme.core.constants import KC_CONTEXT_GLOBAL, ThemeType
from kctheme.replacers.css import generate_css_code_to_define_globals
from kctheme.replacers.js import replace_imports_from_static_in_js_code

RESOURCES_BUILD_PATH = "${url.resourcesPath}/build/"

# Tag name -> attribute holding an asset URL emitted by the bundler
ASSET_ATTRIBUTES = {"link": "href", "script": "src"}

_HEAD_PLACEHOLDER = "kctheme-head"

_HEAD_TEMPLATE = """\
{% if css_globals_code %}
<style>
{{ css_globals_code }}
</style>
{% endif %}
<script>
    window.{{ global_name }} = {
        "pageId": "${pageId}",
        "themeType": {{ theme_type | tojson }},
        "themeName": {{ theme_name | tojson }},
        "themeVersion": {{ theme_version | tojson }},
        "keycloakifyVersion": {{ tool_version | tojson }},
        "url": {
            "resourcesPath": "${url.resourcesPath}",
            "resourcesCommonPath": "${url.resourcesCommonPath}"<#if url.loginAction??>,
            "loginAction": "${url.loginAction}"</#if>
        },
        "locale": <#if locale??>{ "currentLanguageTag": "${locale.currentLanguageTag}" }<#else>undefined</#if>,
        "messagesPerField": {
{% for name in field_names %}
            {{ name | tojson }}: <#if messagesPerField?? && messagesPerField.existsError({{ name | tojson }})>"${messagesPerField.get({{ name | tojson }})?js_string}"<#else>undefined</#if>{% if not loop.last %},{% endif %}

{% endfor %}
        }
    };
</script>
"""

_jinja_env = Environment(
    loader=BaseLoader(),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
    autoescape=False,
)


def _is_under_pathname(url: str, url_pathname: str) -> bool:
    # "//host/..." is protocol-relative, not under "/"
    return url.startswith(url_pathname) and not url[len(url_pathname) :].startswith("/")


def _rewrite_inline_css(css_code: str, url_pathname: str) -> str:
    pattern = re.compile(r"url\(([\"']?)" + re.escape(url_pathname) + r"(?!/)")
    return pattern.sub(lambda m: f"url({m.group(1)}{RESOURCES_BUILD_PATH}", css_code)


def _fix_doctype(soup: BeautifulSoup) -> None:
    # html.parser hands over "doctype html" for a lowercase declaration
    for node in list(soup.contents):
        if isinstance(node, Doctype) and node.lower().startswith("doctype "):
            node.replace_with(Doctype(node[len("doctype ") :]))


def _rewrite_document(soup: BeautifulSoup, url_pathname: str) -> None:
    """Point bundle asset references and inline code at the theme build dir."""
    for tag_name, attr in ASSET_ATTRIBUTES.items():
        for tag in soup.find_all(tag_name, attrs={attr: True}):
            url = tag[attr]
            if _is_under_pathname(url, url_pathname):
                tag[attr] = RESOURCES_BUILD_PATH + url[len(url_pathname) :]

    for tag in soup.find_all("script", src=False):
        if tag.string:
            tag.string = replace_imports_from_static_in_js_code(str(tag.string))

    for tag in soup.find_all("style"):
        if tag.string:
            tag.string = _rewrite_inline_css(str(tag.string), url_pathname)


class FtlFilesCodeGenerator:
    """Builds the FreeMarker source of every page of one theme variant."""

    def __init__(
        self,
        *,
        index_html_code: str,
        css_globals_to_define: dict[str, str],
        build_options: BuildOptions,
        tool_version: str,
        theme_type: ThemeType,
        field_names: list[str],
    ):
        url_pathname = build_options.url_pathname or "/"

        soup = BeautifulSoup(index_html_code, "html.parser")
        _fix_doctype(soup)
        _rewrite_document(soup, url_pathname)

        head_code = _jinja_env.from_string(_HEAD_TEMPLATE).render(
            css_globals_code=(
                generate_css_code_to_define_globals(css_globals_to_define, url_pathname)
                if css_globals_to_define
                else ""
            ),
            global_name=KC_CONTEXT_GLOBAL,
            theme_type=theme_type.value,
            theme_name=build_options.theme_name,
            theme_version=build_options.theme_version,
            tool_version=tool_version,
            field_names=field_names,
        )

        # The head block carries FreeMarker directives, so it is spliced in
        # after serialization rather than parsed as HTML
        placeholder = Comment(_HEAD_PLACEHOLDER)
        if soup.head is not None:
            soup.head.insert(0, placeholder)
        else:
            soup.insert(0, placeholder)

        self._document = str(soup).replace(f"<!--{_HEAD_PLACEHOLDER}-->", "\n" + head_code, 1)

    def generate_ftl_files_code(self, page_id: str) -> str:
        """FreeMarker source for *page_id*."""
        return f'<#assign pageId="{page_id}">\n{self._document}'


def generate_ftl_files_code_factory(
    *,
    index_html_code: str,
    css_globals_to_define: dict[str, str],
    build_options: BuildOptions,
    tool_version: str,
    theme_type: ThemeType,
    field_names: list[str],
) -> FtlFilesCodeGenerator:
    return FtlFilesCodeGenerator(
        index_html_code=index_html_code,
        css_globals_to_define=css_globals_to_define,
        build_options=build_options,
        tool_version=tool_version,
        theme_type=theme_type,
        field_names=field_names,
    )
