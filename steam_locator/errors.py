"""Exceptions raised by steam_locator."""


class SteamError(Exception):
    """Base class for Steam lookup failures."""

    pass


class UnsupportedPlatformError(SteamError):
    """Raised when the running OS is not Windows, macOS or Linux."""

    def __init__(self, platform: str):
        self.platform = platform
        super().__init__(f"Unknown operating system: {platform}")


class NotInstalledError(SteamError):
    """Raised when a game's app manifest cannot be found in any library."""

    def __init__(self, app_id: str):
        self.app_id = app_id
        super().__init__(f"{app_id} is not installed!")
