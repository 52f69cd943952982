"""Tests for copying the compiled bundle into a theme."""

from __future__ import annotations

from pathlib import Path

from conftest import APP_JS, write_files

from kctheme.generate.assets import copy_app_resources


def _tree(root: Path) -> dict[str, bytes]:
    return {p.relative_to(root).as_posix(): p.read_bytes() for p in root.rglob("*") if p.is_file()}


class TestCopyAppResources:
    def test_rewrites_css_and_collects_globals(self, bundle_dir: Path, tmp_path: Path) -> None:
        dest = tmp_path / "out"
        css_globals: dict[str, str] = {}

        copy_app_resources(bundle_dir, dest, css_globals)

        css = (dest / "static" / "css" / "app.css").read_text()
        assert "var(--url" in css
        assert "/static/media/bg.png" not in css
        assert "--brand-color: #123456;" in css
        assert list(css_globals.values()) == ["url(/static/media/bg.png) no-repeat"]

    def test_rewrites_js(self, bundle_dir: Path, tmp_path: Path) -> None:
        dest = tmp_path / "out"

        copy_app_resources(bundle_dir, dest, {})

        js = (dest / "static" / "js" / "app.js").read_text()
        assert js != APP_JS
        assert "window.kcContext.url.resourcesPath" in js

    def test_other_files_copied_byte_for_byte(self, bundle_dir: Path, tmp_path: Path) -> None:
        dest = tmp_path / "out"

        copy_app_resources(bundle_dir, dest, {})

        assert (dest / "static" / "media" / "bg.png").read_bytes() == (
            bundle_dir / "static" / "media" / "bg.png"
        ).read_bytes()
        assert (dest / "index.html").read_bytes() == (bundle_dir / "index.html").read_bytes()

    def test_skips_debug_keycloak_resources(self, bundle_dir: Path, tmp_path: Path) -> None:
        dest = tmp_path / "out"

        written = copy_app_resources(bundle_dir, dest, {})

        assert not (dest / "keycloak-resources").exists()
        assert all("keycloak-resources" not in p.parts for p in written)

    def test_accumulates_across_calls(self, bundle_dir: Path, tmp_path: Path) -> None:
        css_globals = {"urlfromearlier": "url(/earlier.png)"}

        copy_app_resources(bundle_dir, tmp_path / "out", css_globals)

        assert "urlfromearlier" in css_globals
        assert len(css_globals) == 2

    def test_globals_from_every_stylesheet(self, tmp_path: Path) -> None:
        bundle = tmp_path / "bundle"
        write_files(
            bundle,
            {
                "a.css": "a { background: url(/a.png); }",
                "nested/b.css": "b { background: url(/b.png); }",
            },
        )
        css_globals: dict[str, str] = {}

        copy_app_resources(bundle, tmp_path / "out", css_globals)

        assert sorted(css_globals.values()) == ["url(/a.png)", "url(/b.png)"]

    def test_non_utf8_sources_keep_their_bytes(self, tmp_path: Path) -> None:
        bundle = tmp_path / "bundle"
        write_files(
            bundle,
            {
                "legacy.css": b"/* \xa9 2020 */ a { background: url(/a.png); }",
                "legacy.js": b"/* \xa9 */ var a=o.p+\"static/media/a.svg\";",
            },
        )
        dest = tmp_path / "out"
        css_globals: dict[str, str] = {}

        copy_app_resources(bundle, dest, css_globals)

        css = (dest / "legacy.css").read_bytes()
        assert css.startswith(b"/* \xa9 2020 */ a { background: var(--url")
        assert list(css_globals.values()) == ["url(/a.png)"]
        js = (dest / "legacy.js").read_bytes()
        assert js.startswith(b"/* \xa9 */ ")
        assert b"window.kcContext.url.resourcesPath" in js

    def test_same_output_on_rerun(self, bundle_dir: Path, tmp_path: Path) -> None:
        first: dict[str, str] = {}
        second: dict[str, str] = {}

        copy_app_resources(bundle_dir, tmp_path / "first", first)
        copy_app_resources(bundle_dir, tmp_path / "second", second)

        assert _tree(tmp_path / "first") == _tree(tmp_path / "second")
        assert first == second
