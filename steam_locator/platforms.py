"""Per-OS strategies for finding the Steam root and its steamapps directory."""

import logging
import sys
from pathlib import Path
from typing import Callable

from .errors import UnsupportedPlatformError

logger = logging.getLogger(__name__)

STEAMAPPS = "steamapps"

# HKLM, 32-bit view on 64-bit Windows
STEAM_REGISTRY_KEY = r"SOFTWARE\WOW6432Node\Valve\Steam"
STEAM_REGISTRY_VALUE = "InstallPath"

FLATPAK_APP_DIR = Path(".var") / "app" / "com.valvesoftware.Steam"

# Relative to $HOME, in probe order; repeated under FLATPAK_APP_DIR
LINUX_ROOT_SUFFIXES = [
    Path(".local") / "share" / "Steam",
    Path(".steam") / "steam",
    Path(".steam") / "root",
    Path(".steam"),
]

# Relative to the Steam root; distributions disagree on the layout
LINUX_STEAMAPPS_SUFFIXES = [
    Path(STEAMAPPS),
    Path("steam") / STEAMAPPS,
    Path("root") / STEAMAPPS,
]

RegistryReader = Callable[[], str | None]


def read_steam_install_path() -> str | None:
    """Read Steam's InstallPath from the Windows registry."""
    import winreg

    try:
        with winreg.OpenKey(
            winreg.HKEY_LOCAL_MACHINE,
            STEAM_REGISTRY_KEY,
            access=winreg.KEY_READ | winreg.KEY_WOW64_32KEY,
        ) as key:
            value, _ = winreg.QueryValueEx(key, STEAM_REGISTRY_VALUE)
    except OSError:
        return None

    if isinstance(value, str) and value:
        return value
    return None


def _first_existing_dir(candidates: list[Path]) -> Path | None:
    for path in candidates:
        if path.is_dir():
            logger.debug("Found %s", path)
            return path
        logger.debug("Not a directory: %s", path)
    return None


class PlatformRootStrategy:
    """Locates the Steam root and primary steamapps directory on one OS."""

    def locate_root(self) -> Path | None:
        raise NotImplementedError

    def locate_steamapps(self, root: Path | None) -> Path | None:
        if root is None:
            return None
        return root / STEAMAPPS


class WindowsStrategy(PlatformRootStrategy):
    def __init__(self, registry_reader: RegistryReader | None = None):
        self.registry_reader = registry_reader or read_steam_install_path

    def locate_root(self) -> Path | None:
        install_path = self.registry_reader()
        if not install_path:
            logger.debug("No %s in HKLM\\%s", STEAM_REGISTRY_VALUE, STEAM_REGISTRY_KEY)
            return None
        return Path(install_path)


class MacOSStrategy(PlatformRootStrategy):
    """
    Steam always lives under Application Support on macOS.

    The root is not checked for existence here. A missing install surfaces
    later, when the steamapps directory turns out to be absent.
    """

    def __init__(self, home: Path | None = None):
        self.home = home or Path.home()

    def locate_root(self) -> Path | None:
        return self.home / "Library" / "Application Support" / "Steam"


class LinuxStrategy(PlatformRootStrategy):
    """Probes native and Flatpak install locations."""

    def __init__(self, home: Path | None = None):
        self.home = home or Path.home()

    def root_candidates(self) -> list[Path]:
        native = [self.home / suffix for suffix in LINUX_ROOT_SUFFIXES]
        flatpak = [self.home / FLATPAK_APP_DIR / suffix for suffix in LINUX_ROOT_SUFFIXES]
        return native + flatpak

    def locate_root(self) -> Path | None:
        return _first_existing_dir(self.root_candidates())

    def locate_steamapps(self, root: Path | None) -> Path | None:
        if root is None:
            return None
        return _first_existing_dir([root / suffix for suffix in LINUX_STEAMAPPS_SUFFIXES])


def select_strategy(
    platform: str | None = None,
    home: Path | None = None,
    registry_reader: RegistryReader | None = None,
) -> PlatformRootStrategy:
    """
    Pick the strategy for a ``sys.platform`` value (defaults to the running OS).

    Raises:
        UnsupportedPlatformError: If the platform is not Windows, macOS or Linux.
    """
    platform = platform if platform is not None else sys.platform

    if platform == "win32":
        return WindowsStrategy(registry_reader)
    if platform == "darwin":
        return MacOSStrategy(home)
    if platform.startswith("linux"):
        return LinuxStrategy(home)

    raise UnsupportedPlatformError(platform)
