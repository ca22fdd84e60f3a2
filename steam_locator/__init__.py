"""Find Steam libraries, installed games and Proton usage from an app ID."""

from .errors import NotInstalledError, SteamError, UnsupportedPlatformError
from .platforms import (
    LinuxStrategy,
    MacOSStrategy,
    PlatformRootStrategy,
    WindowsStrategy,
    select_strategy,
)
from .steam import (
    SteamLocator,
    find_install_directory,
    find_proton_prefix,
    find_steam_directory,
    find_steamapps_directory,
    is_proton_game,
)

__all__ = [
    "LinuxStrategy",
    "MacOSStrategy",
    "NotInstalledError",
    "PlatformRootStrategy",
    "SteamError",
    "SteamLocator",
    "UnsupportedPlatformError",
    "WindowsStrategy",
    "find_install_directory",
    "find_proton_prefix",
    "find_steam_directory",
    "find_steamapps_directory",
    "is_proton_game",
    "select_strategy",
]
