import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from .. import config
from ..domain.errors import EMPTY_USER_AGENT_MESSAGE, KrateConfigError, KrateError
from ..registry.builder import KrateClientBuilder
from ..registry.client import SyncKrateClient
from ..services.info import InfoService
from .settings import SettingsStore

app = typer.Typer()
console = Console()

USER_AGENT_HELP = "Identification sent to crates.io; defaults to the stored value"


def setup_logging(verbose: bool):
    """send library debug logs to stderr through rich."""
    if not verbose:
        return
    logger = logging.getLogger("krate")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


def get_settings_store() -> SettingsStore:
    return SettingsStore(config.SETTINGS_FILE)


def get_client(user_agent: Optional[str]) -> SyncKrateClient:
    resolved = user_agent or get_settings_store().get_user_agent()
    if resolved is None:
        raise KrateConfigError(f"{EMPTY_USER_AGENT_MESSAGE}; pass --user-agent or run 'krate set-user-agent'")
    return KrateClientBuilder(resolved).build_sync()


@app.callback()
def main_callback(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs")):
    """query crate metadata from crates.io."""
    setup_logging(verbose)


@app.command()
def info(
    crate_name: str,
    version: Optional[str] = typer.Argument(None, help="Optional specific version"),
    user_agent: Optional[str] = typer.Option(None, "--user-agent", "-u", help=USER_AGENT_HELP),
):
    """
    show information about a crate.
    """
    try:
        with get_client(user_agent) as client:
            InfoService(client, console).show_info(crate_name, version)
    except KrateError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def features(
    crate_name: str,
    version: str,
    user_agent: Optional[str] = typer.Option(None, "--user-agent", "-u", help=USER_AGENT_HELP),
):
    """
    list the features of a crate version.
    """
    try:
        with get_client(user_agent) as client:
            InfoService(client, console).show_features(crate_name, version)
    except KrateError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command("set-user-agent")
def set_user_agent(user_agent: str):
    """store the identification used when --user-agent is not given."""
    try:
        settings = get_settings_store().set_user_agent(user_agent)
    except KrateConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except RuntimeError as e:
        console.print(f"[red]Error saving settings:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Default user agent set to '{settings.user_agent}'")


if __name__ == "__main__":
    app()
