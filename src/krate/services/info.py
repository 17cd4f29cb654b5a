from typing import Optional
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..domain.models import Krate
from ..registry.client import SyncKrateClient

# how many older versions the info panel lists
OTHER_VERSIONS_SHOWN = 5


class InfoService:
    """handles fetching and displaying crate information."""

    def __init__(self, client: SyncKrateClient, console: Optional[Console] = None):
        self.client = client
        self.console = console or Console()

    def show_info(self, crate_name: str, version: Optional[str] = None) -> Krate:
        """
        fetch and display information about a crate.

        args:
            crate_name: name of the crate
            version: optional specific version, defaults to the latest

        raises:
            KrateError: if the crate cannot be fetched or has no versions
        """
        krate = self.client.fetch(crate_name)
        metadata = krate.krate

        target_version = version or krate.latest_version()
        version_record = krate.get_version(target_version)
        if version_record is None:
            self.console.print(f"[red]Version '{target_version}' not found for crate '{crate_name}'.[/red]")
            return krate

        grid = Table.grid(expand=True)
        grid.add_column(style="bold cyan", justify="right")
        grid.add_column(style="white")

        grid.add_row("Name:", metadata.name)
        grid.add_row("Version:", target_version + (" (yanked)" if version_record.yanked else ""))
        grid.add_row("Description:", metadata.description.strip() or "No description provided.")

        if version_record.license:
            grid.add_row("License:", version_record.license)
        if metadata.homepage:
            grid.add_row("Homepage:", metadata.homepage)
        if metadata.documentation:
            grid.add_row("Documentation:", metadata.documentation)
        if metadata.repository:
            grid.add_row("Repository:", metadata.repository)

        grid.add_row("Downloads:", f"{metadata.downloads:,}")

        if metadata.categories:
            grid.add_row("Categories:", ", ".join(metadata.categories))
        keywords = krate.keyword_names() or metadata.keywords
        if keywords:
            grid.add_row("Keywords:", ", ".join(keywords))

        # available versions (if showing latest)
        if not version:
            grid.add_row("Latest:", target_version)
            others = [v.num for v in krate.versions[1:OTHER_VERSIONS_SHOWN + 1]]
            if others:
                grid.add_row("Other Versions:", ", ".join(others))

        self.console.print(Panel(grid, title=f"📦 Crate Info: {metadata.name}", border_style="cyan"))
        return krate

    def show_features(self, crate_name: str, version: str) -> Krate:
        """fetch a crate and print the feature table of one version."""
        krate = self.client.fetch(crate_name)
        features = krate.features_for_version(version)

        if features is None:
            self.console.print(f"[yellow]No features found for {crate_name} {version}.[/yellow]")
            return krate

        table = Table(title=f"Features of {crate_name} {version}")
        table.add_column("Feature", style="bold cyan")
        table.add_column("Enables", style="white")
        for name, enables in sorted(features.items()):
            table.add_row(name, ", ".join(enables) or "-")

        self.console.print(table)
        return krate
