"""Source rewriters making bundled asset references resolve inside a Keycloak theme."""

from .css import CssReplacement, generate_css_code_to_define_globals, replace_imports_in_css_code
from .js import replace_imports_from_static_in_js_code

__all__ = [
    "CssReplacement",
    "generate_css_code_to_define_globals",
    "replace_imports_in_css_code",
    "replace_imports_from_static_in_js_code",
]
