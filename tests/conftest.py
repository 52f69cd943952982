"""Shared pytest fixtures for kctheme tests."""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from kctheme.collaborators import MessageProperties, ThemeCollaborators
from kctheme.core.config import BuildOptions, ThemeBuildContext
from kctheme.core.constants import ThemeType

INDEX_HTML = """\
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8"/>
<link rel="icon" href="/favicon.ico"/>
<link href="/static/css/app.css" rel="stylesheet">
</head>
<body>
<div id="root"></div>
<script src="/static/js/app.js"></script>
</body>
</html>
"""

APP_CSS = """\
@import url("https://fonts.example.com/css?family=Roboto");
:root { --brand-color: #123456; }
body { background: url(/static/media/bg.png) no-repeat; }
"""

APP_JS = 'var logo=o.p+"static/media/logo.svg";console.log(logo);'


def write_files(root: Path, files: dict[str, str | bytes]) -> None:
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)


def make_keycloak_archive(path: Path, version: str = "21.1.2") -> Path:
    """Minimal stand-in for the Keycloak source archive."""
    prefix = f"keycloak-{version}/themes/src/main/resources/theme/"
    with zipfile.ZipFile(path, "w") as archive:
        archive.writestr(f"keycloak-{version}/README.md", "keycloak")
        archive.writestr(prefix + "keycloak/login/resources/css/login.css", ".login-pf {}")
        archive.writestr(prefix + "keycloak/login/resources/img/bg.jpg", b"\xff\xd8jpg")
        archive.writestr(prefix + "keycloak/account/resources/css/account.css", ".account {}")
        archive.writestr(prefix + "keycloak/common/resources/node_modules/patternfly/pf.css", ".pf {}")
        archive.writestr(prefix + "base/login/template.ftl", "<#macro registrationLayout></#macro>")
    return path


@pytest.fixture
def bundle_dir(tmp_path: Path) -> Path:
    """Compiled application bundle with one stylesheet and one script."""
    root = tmp_path / "build"
    write_files(
        root,
        {
            "index.html": INDEX_HTML,
            "static/css/app.css": APP_CSS,
            "static/js/app.js": APP_JS,
            "static/media/bg.png": b"\x89PNG\r\n\x1a\nfake",
            "keycloak-resources/login/resources/css/login.css": ".debug {}",
        },
    )
    return root


@pytest.fixture
def theme_src_dir(tmp_path: Path) -> Path:
    """Theme sources with only a login variant."""
    root = tmp_path / "src" / "keycloak-theme"
    write_files(
        root,
        {
            "login/KcApp.tsx": 'export default function KcApp() { return null; }\n',
            "login/i18n/en.json": '{"doRegister": "Sign up"}',
        },
    )
    return root


@pytest.fixture
def build_options() -> BuildOptions:
    return BuildOptions(theme_name="my-theme", theme_version="1.2.3", extra_theme_properties=("foo=bar",))


@pytest.fixture
def context(tmp_path: Path, bundle_dir: Path, theme_src_dir: Path, build_options: BuildOptions) -> ThemeBuildContext:
    return ThemeBuildContext(
        project_dir=tmp_path,
        react_app_build_dir=bundle_dir,
        keycloak_theme_building_dir=tmp_path / "build_keycloak",
        theme_src_dir=theme_src_dir,
        build_options=build_options,
        tool_version="0.3.0",
        cache_dir=tmp_path / "cache",
    )


class FakeFtlGenerator:
    def __init__(self, **kwargs):
        self.kwargs = kwargs

    def generate_ftl_files_code(self, page_id: str) -> str:
        return f"<#-- {self.kwargs['theme_type'].value} --> {page_id}"


class RecordingCollaborators:
    """Fake collaborators recording every call in order."""

    def __init__(self, extra_pages: dict[ThemeType, list[str]] | None = None):
        self.calls: list[tuple[str, object]] = []
        self.factory_kwargs: list[dict] = []
        self.download_kwargs: list[dict] = []
        self.extra_pages = extra_pages or {}
        self.messages: list[MessageProperties] = [MessageProperties("en", "doRegister=Sign up\n")]
        self.download_error: Exception | None = None
        self.on_download = None

    def factory(self, **kwargs):
        self.calls.append(("factory", kwargs["theme_type"]))
        self.factory_kwargs.append(kwargs)
        return FakeFtlGenerator(**kwargs)

    def read_field_name_usage(self, theme_src_dir, theme_type, builtin_pages_dir):
        self.calls.append(("field_names", theme_type))
        return ["username"]

    def read_extra_pages_names(self, theme_src_dir, theme_type):
        self.calls.append(("extra_pages", theme_type))
        return list(self.extra_pages.get(theme_type, []))

    def read_static_resources_usage(self, theme_src_dir, theme_type, builtin_pages_dir):
        self.calls.append(("static_usage", theme_type))
        return None

    def generate_message_properties(self, theme_src_dir, theme_type):
        self.calls.append(("messages", theme_type))
        return list(self.messages)

    async def download(self, **kwargs):
        self.calls.append(("download", kwargs["theme_type"]))
        self.download_kwargs.append(kwargs)
        if self.on_download is not None:
            self.on_download(kwargs)
        if self.download_error is not None:
            raise self.download_error

    def bundle(self) -> ThemeCollaborators:
        return ThemeCollaborators(
            generate_ftl_files_code_factory=self.factory,
            read_field_name_usage=self.read_field_name_usage,
            read_extra_pages_names=self.read_extra_pages_names,
            read_static_resources_usage=self.read_static_resources_usage,
            generate_message_properties=self.generate_message_properties,
            download_keycloak_static_resources=self.download,
        )


@pytest.fixture
def recorder() -> RecordingCollaborators:
    return RecordingCollaborators()
