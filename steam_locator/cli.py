"""Command-line interface for steam-locator."""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .errors import NotInstalledError, UnsupportedPlatformError
from .logging_config import setup_logging
from .steam import SteamLocator

console = Console()


def _print_path(path: Path) -> None:
    # Plain output so the result can be captured by shell scripts
    console.print(str(path), markup=False, highlight=False, soft_wrap=True)


def _not_found(message: str) -> None:
    console.print(f"[yellow]{message}[/yellow]")
    sys.exit(1)


def _error(e: Exception) -> None:
    console.print(f"[red]Error:[/red] {escape(str(e))}")
    sys.exit(1)


@click.group()
@click.option(
    "--steam-dir",
    envvar="STEAM_DIR",
    type=click.Path(file_okay=False, resolve_path=True, path_type=Path),
    help="Steam installation root (or set STEAM_DIR env var)",
)
@click.option("--debug", is_flag=True, help="Log every probed path to stderr")
@click.pass_context
def main(ctx: click.Context, steam_dir: Path | None, debug: bool) -> None:
    """Locate Steam libraries and installed games."""
    setup_logging(debug=debug)
    ctx.ensure_object(dict)
    ctx.obj["locator"] = SteamLocator(steam_root=steam_dir)


@main.command("steam-dir")
@click.pass_context
def steam_dir(ctx: click.Context) -> None:
    """Show the Steam installation root."""
    locator: SteamLocator = ctx.obj["locator"]
    try:
        path = locator.find_steam_directory()
    except UnsupportedPlatformError as e:
        _error(e)

    if path is None:
        _not_found("Steam installation not found.")
    _print_path(path)


@main.command("steamapps-dir")
@click.pass_context
def steamapps_dir(ctx: click.Context) -> None:
    """Show the primary steamapps directory."""
    locator: SteamLocator = ctx.obj["locator"]
    try:
        path = locator.find_steamapps_directory()
    except UnsupportedPlatformError as e:
        _error(e)

    if path is None:
        _not_found("steamapps directory not found.")
    _print_path(path)


@main.command()
@click.pass_context
def libraries(ctx: click.Context) -> None:
    """List every Steam library folder, in search order."""
    locator: SteamLocator = ctx.obj["locator"]
    try:
        folders = locator.library_folders()
    except UnsupportedPlatformError as e:
        _error(e)

    if folders is None:
        _not_found("steamapps directory not found.")

    table = Table(title="Steam Libraries")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Path")
    table.add_column("Exists", justify="center")

    for i, folder in enumerate(folders):
        exists = "[green]yes[/green]" if folder.is_dir() else "[red]no[/red]"
        table.add_row(str(i), escape(str(folder)), exists)

    console.print(table)


@main.command("install-dir")
@click.argument("app_id")
@click.pass_context
def install_dir(ctx: click.Context, app_id: str) -> None:
    """
    Show where a game is installed.

    APP_ID: Steam application ID (e.g. 489830)
    """
    locator: SteamLocator = ctx.obj["locator"]
    try:
        path = locator.find_install_directory(app_id)
    except UnsupportedPlatformError as e:
        _error(e)

    if path is None:
        _not_found(f"App {escape(app_id)} is not installed.")
    _print_path(path)


@main.command("is-proton")
@click.argument("app_id")
@click.pass_context
def is_proton(ctx: click.Context, app_id: str) -> None:
    """
    Show whether a game runs under Proton.

    APP_ID: Steam application ID (e.g. 489830)
    """
    locator: SteamLocator = ctx.obj["locator"]
    try:
        proton = locator.is_proton_game(app_id)
    except (NotInstalledError, UnsupportedPlatformError) as e:
        _error(e)

    console.print("yes" if proton else "no")


@main.command()
@click.argument("app_id")
@click.pass_context
def prefix(ctx: click.Context, app_id: str) -> None:
    """
    Show a game's Proton prefix.

    APP_ID: Steam application ID (e.g. 489830)
    """
    locator: SteamLocator = ctx.obj["locator"]
    try:
        path = locator.find_proton_prefix(app_id)
    except UnsupportedPlatformError as e:
        _error(e)

    if path is None:
        _not_found(f"No Proton prefix found for app {escape(app_id)}.")
    _print_path(path)


if __name__ == "__main__":
    main()
