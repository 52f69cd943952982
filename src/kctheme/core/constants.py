"""
Fixed values shared by the theme generation pipeline.
"""

from __future__ import annotations

from enum import Enum


class ThemeType(str, Enum):
    """Keycloak theme variants produced from the application bundle."""

    LOGIN = "login"
    ACCOUNT = "account"


# Iteration order of the generation loop
THEME_TYPES: tuple[ThemeType, ...] = (ThemeType.LOGIN, ThemeType.ACCOUNT)

# Email templates are copied verbatim, outside the variant loop
EMAIL_THEME_DIR_NAME = "email"

# Debug copy of Keycloak resources the app keeps in public/; never copied back
KEYCLOAK_RESOURCES_DIR_NAME = "keycloak-resources"

# Sub-directory of <theme>/resources holding keycloak/common resources
RESOURCES_COMMON_DIR_NAME = "resources_common"

# The account theme relies on account-v1, removed after this release
LAST_KEYCLOAK_VERSION_WITH_ACCOUNT_V1 = "21.1.2"

DEFAULT_LOGIN_RESOURCES_KEYCLOAK_VERSION = "11.0.3"

# Name of the JS global holding the Keycloak context inside generated pages
KC_CONTEXT_GLOBAL = "kcContext"

LOGIN_THEME_PAGE_IDS: tuple[str, ...] = (
    "login.ftl",
    "login-username.ftl",
    "login-password.ftl",
    "webauthn-authenticate.ftl",
    "register.ftl",
    "register-user-profile.ftl",
    "info.ftl",
    "error.ftl",
    "login-reset-password.ftl",
    "login-verify-email.ftl",
    "terms.ftl",
    "login-otp.ftl",
    "login-update-profile.ftl",
    "login-update-password.ftl",
    "login-idp-link-confirm.ftl",
    "login-idp-link-email.ftl",
    "login-page-expired.ftl",
    "login-config-totp.ftl",
    "logout-confirm.ftl",
    "update-user-profile.ftl",
    "idp-review-user-profile.ftl",
    "update-email.ftl",
    "select-authenticator.ftl",
    "saml-post-form.ftl",
)

ACCOUNT_THEME_PAGE_IDS: tuple[str, ...] = (
    "password.ftl",
    "account.ftl",
)


def _check_exhaustive(mapping: dict[ThemeType, object], name: str) -> None:
    missing = set(ThemeType) - set(mapping)
    if missing:
        raise RuntimeError(f"{name} does not handle theme types: {sorted(t.value for t in missing)}")


PAGE_IDS_BY_THEME_TYPE: dict[ThemeType, tuple[str, ...]] = {
    ThemeType.LOGIN: LOGIN_THEME_PAGE_IDS,
    ThemeType.ACCOUNT: ACCOUNT_THEME_PAGE_IDS,
}
_check_exhaustive(PAGE_IDS_BY_THEME_TYPE, "PAGE_IDS_BY_THEME_TYPE")

# Parent theme declared in theme.properties
PARENT_THEME_BY_THEME_TYPE: dict[ThemeType, str] = {
    ThemeType.LOGIN: "keycloak",
    ThemeType.ACCOUNT: "account-v1",
}
_check_exhaustive(PARENT_THEME_BY_THEME_TYPE, "PARENT_THEME_BY_THEME_TYPE")

ALL_PAGE_IDS: frozenset[str] = frozenset(
    page_id for page_ids in PAGE_IDS_BY_THEME_TYPE.values() for page_id in page_ids
)
