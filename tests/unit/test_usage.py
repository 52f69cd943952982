"""Tests for the theme source scanners."""

from __future__ import annotations

from pathlib import Path

from conftest import write_files

from kctheme.collaborators.usage import (
    read_extra_pages_names,
    read_field_name_usage,
    read_static_resources_usage,
)
from kctheme.core.constants import ThemeType


class TestReadExtraPagesNames:
    def test_finds_unknown_page_ids(self, tmp_path: Path) -> None:
        write_files(
            tmp_path,
            {
                "login/KcApp.tsx": (
                    'switch (kcContext.pageId) {\n'
                    '  case "login.ftl": break;\n'
                    "}\n"
                    'const a = { pageId: "my-extra-page-1.ftl" };\n'
                    "const b = { 'pageId': 'my-extra-page-2.ftl' };\n"
                    'const c = { pageId: "my-extra-page-1.ftl" };\n'
                    'const d = { pageId: "login.ftl" };\n'
                ),
                "login/notes.md": 'pageId: "ignored.ftl"',
            },
        )

        assert read_extra_pages_names(tmp_path, ThemeType.LOGIN) == [
            "my-extra-page-1.ftl",
            "my-extra-page-2.ftl",
        ]

    def test_missing_variant_dir(self, tmp_path: Path) -> None:
        assert read_extra_pages_names(tmp_path, ThemeType.ACCOUNT) == []


class TestReadFieldNameUsage:
    def test_collects_messages_per_field_names(self, tmp_path: Path) -> None:
        write_files(
            tmp_path,
            {
                "builtin/login/Register.tsx": (
                    'messagesPerField.printIfExists("firstName", "x");\n'
                    'messagesPerField.existsError("email");\n'
                ),
                "theme/login/Login.tsx": (
                    'messagesPerField.exists("username");\nmessagesPerField.get("email");\n'
                ),
                "theme/login/Other.tsx": 'get("ignored") // no per-field messages here',
            },
        )

        names = read_field_name_usage(tmp_path / "theme", ThemeType.LOGIN, tmp_path / "builtin")

        assert names == ["firstName", "email", "username"]


class TestReadStaticResourcesUsage:
    def test_unknown_without_builtin_pages(self, tmp_path: Path) -> None:
        assert read_static_resources_usage(tmp_path, ThemeType.LOGIN) is None

    def test_collects_paths(self, tmp_path: Path) -> None:
        write_files(
            tmp_path,
            {
                "builtin/login/Template.tsx": (
                    "const a = `${url.resourcesCommonPath}/node_modules/patternfly/pf.css`;\n"
                    "const b = `${url.resourcesPath}/css/login.css`;\n"
                ),
                "theme/login/Logo.tsx": 'const c = url.resourcesPath + "/img/logo.png";\n',
            },
        )

        usage = read_static_resources_usage(tmp_path / "theme", ThemeType.LOGIN, tmp_path / "builtin")

        assert usage is not None
        assert usage.resources_common_file_paths == {"node_modules/patternfly/pf.css"}
        assert usage.resources_file_paths == {"css/login.css", "img/logo.png"}
