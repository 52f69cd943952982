"""Tests for the local Keycloak container start script."""

from __future__ import annotations

import os
from pathlib import Path

from kctheme.testing_container import (
    START_SCRIPT_NAME,
    generate_start_keycloak_testing_container,
    start_keycloak_testing_container_code,
)


class TestStartScript:
    def test_mounts_every_theme(self, tmp_path: Path) -> None:
        themes = tmp_path / "src" / "main" / "resources" / "theme"
        (themes / "alpha").mkdir(parents=True)
        (themes / "beta").mkdir()
        (themes / "stray.txt").write_text("")

        code = start_keycloak_testing_container_code("21.1.2", tmp_path)

        assert code.startswith("#!/usr/bin/env bash\n")
        assert '-v "./src/main/resources/theme/alpha":"/opt/keycloak/themes/alpha":rw \\' in code
        assert '-v "./src/main/resources/theme/beta":"/opt/keycloak/themes/beta":rw \\' in code
        assert "stray.txt" not in code
        assert "-it quay.io/keycloak/keycloak:21.1.2 \\" in code
        assert code.endswith("start-dev --features=declarative-user-profile\n")

    def test_writes_executable_script(self, tmp_path: Path) -> None:
        script = generate_start_keycloak_testing_container("22.0.1", tmp_path / "out")

        assert script == tmp_path / "out" / START_SCRIPT_NAME
        assert os.access(script, os.X_OK)
        assert "keycloak:22.0.1" in script.read_text()
