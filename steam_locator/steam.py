"""Steam library detection and game path resolution."""

import logging
import os
from pathlib import Path

from .errors import NotInstalledError
from .platforms import STEAMAPPS, PlatformRootStrategy, select_strategy
from .vdf import (
    INSTALLDIR_KEY,
    PATH_KEY,
    PLATFORM_OVERRIDE_SOURCE_KEY,
    extract_all,
    read_manifest_field,
    read_text,
    unescape_path,
)

logger = logging.getLogger(__name__)

LIBRARY_FOLDERS_FILENAME = "libraryfolders.vdf"

# platform_override_source values that mean the game runs natively
NATIVE_OVERRIDE_SOURCES = ("", "linux")


def manifest_filename(app_id: str) -> str:
    return f"appmanifest_{app_id}.acf"


def _find_file(directory: Path, filename: str) -> Path | None:
    """Case-insensitive, non-recursive lookup of a file in a directory."""
    wanted = filename.lower()
    try:
        for entry in directory.iterdir():
            if entry.name.lower() == wanted and entry.is_file():
                return entry
    except OSError as e:
        logger.debug("Cannot list %s: %s", directory, e)
    return None


class SteamLocator:
    """
    Resolves Steam install, library and game locations.

    Nothing is cached: every call re-reads the registry and filesystem, so
    a locator can be reused across threads and across library changes.
    """

    def __init__(
        self,
        strategy: PlatformRootStrategy | None = None,
        steam_root: Path | None = None,
    ):
        """
        Args:
            strategy: OS strategy; picked from sys.platform on first use if omitted
            steam_root: Use this Steam root instead of detecting one
        """
        self._strategy = strategy
        self.steam_root = Path(steam_root) if steam_root is not None else None

    @property
    def strategy(self) -> PlatformRootStrategy:
        if self._strategy is None:
            self._strategy = select_strategy()
        return self._strategy

    def find_steam_directory(self) -> Path | None:
        """Find the Steam installation root directory."""
        if self.steam_root is not None:
            return self.steam_root

        root = self.strategy.locate_root()
        logger.debug("Steam root: %s", root)
        return root

    def find_steamapps_directory(self) -> Path | None:
        """Find the primary steamapps directory."""
        steamapps = self.strategy.locate_steamapps(self.find_steam_directory())
        logger.debug("Primary steamapps: %s", steamapps)
        return steamapps

    def library_folders(self) -> list[Path] | None:
        """
        Build the ordered list of steamapps directories to search.

        The primary steamapps directory always comes first, followed by each
        library declared in its libraryfolders.vdf. Returns None when the
        primary directory cannot be found.
        """
        primary = self.find_steamapps_directory()
        if primary is None:
            return None

        folders = [primary]
        vdf_path = _find_file(primary, LIBRARY_FOLDERS_FILENAME)
        if vdf_path is not None:
            for value in extract_all(read_text(vdf_path), PATH_KEY):
                folders.append(Path(unescape_path(value)) / STEAMAPPS)

        logger.debug("Library folders: %s", folders)
        return folders

    def find_manifest(self, app_id: str) -> Path | None:
        """Find appmanifest_<app_id>.acf in the first library that has it."""
        folders = self.library_folders()
        if folders is None:
            return None

        filename = manifest_filename(str(app_id))
        for folder in folders:
            manifest = _find_file(folder, filename)
            if manifest is not None:
                logger.debug("Found manifest for %s: %s", app_id, manifest)
                return manifest

        logger.debug("No manifest for %s in %d libraries", app_id, len(folders))
        return None

    def find_install_directory(self, app_id: str) -> Path | None:
        """Find the game install directory (<library>/common/<installdir>)."""
        manifest = self.find_manifest(app_id)
        if manifest is None:
            return None

        folder_name = read_manifest_field(manifest, INSTALLDIR_KEY)
        return Path(os.path.abspath(manifest.parent / "common" / folder_name))

    def is_proton_game(self, app_id: str) -> bool:
        """
        Check whether Steam runs the game through a compatibility layer.

        Any platform_override_source other than linux means Steam installed
        a non-native build and runs it under Proton.

        Raises:
            NotInstalledError: If no library has a manifest for the game.
        """
        manifest = self.find_manifest(app_id)
        if manifest is None:
            raise NotInstalledError(str(app_id))

        source = read_manifest_field(manifest, PLATFORM_OVERRIDE_SOURCE_KEY)
        return source not in NATIVE_OVERRIDE_SOURCES

    def find_proton_prefix(self, app_id: str) -> Path | None:
        """Find the Proton/Wine prefix for a game."""
        manifest = self.find_manifest(app_id)
        if manifest is None:
            return None

        prefix = manifest.parent / "compatdata" / str(app_id) / "pfx"
        if prefix.is_dir():
            return prefix
        return None


def find_steam_directory() -> Path | None:
    return SteamLocator().find_steam_directory()


def find_steamapps_directory() -> Path | None:
    return SteamLocator().find_steamapps_directory()


def find_install_directory(app_id: str) -> Path | None:
    return SteamLocator().find_install_directory(app_id)


def is_proton_game(app_id: str) -> bool:
    return SteamLocator().is_proton_game(app_id)


def find_proton_prefix(app_id: str) -> Path | None:
    return SteamLocator().find_proton_prefix(app_id)
