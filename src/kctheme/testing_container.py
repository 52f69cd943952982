"""
Start script for a local Keycloak container serving the generated themes.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath

START_SCRIPT_NAME = "start_keycloak_testing_container.sh"
CONTAINER_NAME = "keycloak-testing-container"
THEME_RELATIVE_DIR = PurePosixPath("src", "main", "resources", "theme")


def start_keycloak_testing_container_code(
    keycloak_version: str, keycloak_theme_building_dir: Path
) -> str:
    themes_dir = keycloak_theme_building_dir / THEME_RELATIVE_DIR
    theme_names = sorted(p.name for p in themes_dir.iterdir() if p.is_dir()) if themes_dir.is_dir() else []

    lines = [
        "#!/usr/bin/env bash",
        "",
        f"docker rm {CONTAINER_NAME} || true",
        "",
        f'cd "{keycloak_theme_building_dir}"',
        "",
        "docker run \\",
        "   -p 8080:8080 \\",
        f"   --name {CONTAINER_NAME} \\",
        "   -e KEYCLOAK_ADMIN=admin \\",
        "   -e KEYCLOAK_ADMIN_PASSWORD=admin \\",
        *(
            f'   -v "./{THEME_RELATIVE_DIR / name}":"/opt/keycloak/themes/{name}":rw \\'
            for name in theme_names
        ),
        f"   -it quay.io/keycloak/keycloak:{keycloak_version} \\",
        "   start-dev --features=declarative-user-profile",
        "",
    ]
    return "\n".join(lines)


def generate_start_keycloak_testing_container(
    keycloak_version: str, keycloak_theme_building_dir: Path
) -> Path:
    """Write the executable start script into the theme building directory."""
    keycloak_theme_building_dir.mkdir(parents=True, exist_ok=True)
    script = keycloak_theme_building_dir / START_SCRIPT_NAME
    code = start_keycloak_testing_container_code(keycloak_version, keycloak_theme_building_dir)
    script.write_bytes(code.encode("utf-8"))
    script.chmod(0o755)
    return script
