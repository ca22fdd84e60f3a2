from __future__ import annotations

from pathlib import Path

import pytest

from steam_locator.platforms import LinuxStrategy
from steam_locator.steam import SteamLocator


@pytest.fixture
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def steam_root(home: Path) -> Path:
    path = home / ".local" / "share" / "Steam"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def steamapps(steam_root: Path) -> Path:
    path = steam_root / "steamapps"
    path.mkdir()
    return path


@pytest.fixture
def locator(home: Path, steamapps: Path) -> SteamLocator:
    return SteamLocator(strategy=LinuxStrategy(home=home))


@pytest.fixture
def manifest_factory():
    """
    Write an appmanifest into a steamapps directory
    """
    def func(
        library: Path,
        app_id: str,
        installdir: str | None = "MyGame",
        platform_override_source: str | None = None,
        filename: str | None = None,
    ) -> Path:
        lines = ['"AppState"', "{", f'\t"appid"\t\t"{app_id}"', '\t"name"\t\t"Fake game"']
        if installdir is not None:
            lines.append(f'\t"installdir"\t\t"{installdir}"')
        if platform_override_source is not None:
            lines.append(f'\t"platform_override_source"\t\t"{platform_override_source}"')
        lines.append("}")

        library.mkdir(parents=True, exist_ok=True)
        path = library / (filename or f"appmanifest_{app_id}.acf")
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return func


@pytest.fixture
def library_folders_factory():
    """
    Write a libraryfolders.vdf declaring the given library roots
    """
    def func(steamapps: Path, *library_roots: str, filename: str = "libraryfolders.vdf") -> Path:
        lines = ['"libraryfolders"', "{"]
        for i, root in enumerate(library_roots):
            lines += [
                f'\t"{i}"',
                "\t{",
                f'\t\t"path"\t\t"{root}"',
                '\t\t"label"\t\t""',
                "\t}",
            ]
        lines.append("}")

        path = steamapps / filename
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return func
