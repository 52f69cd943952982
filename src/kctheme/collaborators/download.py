"""
Upstream Keycloak static resources.

Fetches the Keycloak source archive for a release (cached on disk), and
copies the stock theme resources the generated theme falls back on.
"""

from __future__ import annotations

import logging
import tempfile
import zipfile
from pathlib import Path

import httpx

from kctheme.core.constants import RESOURCES_COMMON_DIR_NAME, ThemeType
from kctheme.core.errors import StaticResourcesError
from kctheme.core.transform import transform_codebase

from .usage import StaticResourcesUsage

logger = logging.getLogger(__name__)

KEYCLOAK_ARCHIVE_URL = "https://github.com/keycloak/keycloak/archive/refs/tags/{version}.zip"
THEME_PATH_IN_ARCHIVE = "themes/src/main/resources/theme/"
DOWNLOAD_TIMEOUT = 120.0


async def fetch_keycloak_archive(
    keycloak_version: str,
    cache_dir: Path,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Path:
    """Return the cached source archive for *keycloak_version*, downloading it if needed."""
    archive_path = cache_dir / f"keycloak-{keycloak_version}.zip"
    if archive_path.exists():
        logger.info("Using cached Keycloak %s archive at %s", keycloak_version, archive_path)
        return archive_path

    cache_dir.mkdir(parents=True, exist_ok=True)
    url = KEYCLOAK_ARCHIVE_URL.format(version=keycloak_version)
    logger.info("Downloading Keycloak %s resources from %s", keycloak_version, url)

    partial_path = archive_path.with_suffix(".part")
    async with httpx.AsyncClient(
        follow_redirects=True, timeout=DOWNLOAD_TIMEOUT, transport=transport
    ) as client:
        async with client.stream("GET", url) as response:
            if response.status_code != 200:
                raise StaticResourcesError(
                    f"Failed to download Keycloak {keycloak_version}: HTTP {response.status_code} from {url}"
                )
            with open(partial_path, "wb") as f:
                async for chunk in response.aiter_bytes():
                    f.write(chunk)

    partial_path.replace(archive_path)
    return archive_path


def extract_builtin_themes(archive_path: Path, dest_dir: Path) -> None:
    """Extract the stock theme tree (``base/``, ``keycloak/``, ...) into *dest_dir*."""
    found = False
    with zipfile.ZipFile(archive_path) as archive:
        for info in archive.infolist():
            # Entries are prefixed by keycloak-<version>/
            _, _, inner = info.filename.partition("/")
            if not inner.startswith(THEME_PATH_IN_ARCHIVE) or info.is_dir():
                continue
            rel_path = inner[len(THEME_PATH_IN_ARCHIVE) :]
            if not rel_path or ".." in Path(rel_path).parts:
                continue
            found = True
            target = dest_dir / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(archive.read(info))

    if not found:
        raise StaticResourcesError(f"No theme tree found in {archive_path}")


def _copy_filtered(src_dir: Path, dest_dir: Path, used: set[str] | None) -> None:
    if not src_dir.is_dir():
        logger.debug("No stock resources at %s", src_dir)
        return

    def _keep_used(file_path: Path, source_code: bytes) -> bytes | None:
        if used is not None and file_path.relative_to(src_dir).as_posix() not in used:
            return None
        return source_code

    transform_codebase(src_dir, dest_dir, _keep_used)


async def download_keycloak_static_resources(
    *,
    keycloak_version: str,
    theme_dir: Path,
    theme_type: ThemeType,
    used_resources: StaticResourcesUsage | None,
    cache_dir: Path,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    """
    Copy the stock Keycloak resources of *theme_type* into *theme_dir*.

    Args:
        keycloak_version: Keycloak release the resources are taken from
        theme_dir: Output directory of the variant
        theme_type: Variant whose ``keycloak/<type>/resources`` is copied
        used_resources: Restrict copies to these files; None copies everything
        cache_dir: Where downloaded archives are kept between runs
        transport: Optional httpx transport (tests)

    Raises:
        StaticResourcesError: If the archive cannot be fetched or is not a Keycloak source tree
    """
    archive_path = await fetch_keycloak_archive(keycloak_version, cache_dir, transport)

    with tempfile.TemporaryDirectory(prefix="kctheme-") as tmp:
        builtin_dir = Path(tmp)
        extract_builtin_themes(archive_path, builtin_dir)

        _copy_filtered(
            builtin_dir / "keycloak" / theme_type.value / "resources",
            theme_dir / "resources",
            None if used_resources is None else used_resources.resources_file_paths,
        )
        _copy_filtered(
            builtin_dir / "keycloak" / "common" / "resources",
            theme_dir / "resources" / RESOURCES_COMMON_DIR_NAME,
            None if used_resources is None else used_resources.resources_common_file_paths,
        )
