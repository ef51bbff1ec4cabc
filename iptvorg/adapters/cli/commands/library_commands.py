"""
Commandes CLI de consultation de la bibliotheque stockee (stats, shows).
"""

from typing import Annotated

import typer
from rich.table import Table
from rich.tree import Tree

from iptvorg.adapters.cli.helpers import console, resolve_category, with_container
from iptvorg.core.entities.library import EpisodicSection
from iptvorg.core.exceptions import IPTVOrgError
from iptvorg.core.value_objects.category import Category


def stats() -> None:
    """Affiche les statistiques de la bibliotheque stockee."""
    _stats()


@with_container()
def _stats(container) -> None:
    """Implementation de la commande stats."""
    library_service = container.library_service()
    try:
        library, updated_at = library_service.get_library()
    except IPTVOrgError as e:
        console.print(f"[red]Erreur:[/red] {e}")
        raise typer.Exit(code=1)

    table = Table(title=f"Bibliotheque du {updated_at:%Y-%m-%d %H:%M}")
    table.add_column("Categorie", style="cyan")
    table.add_column("Entrees", justify="right")
    table.add_column("Series", justify="right")

    for category in Category:
        section = library.section(category)
        shows = str(section.show_count) if isinstance(section, EpisodicSection) else "-"
        table.add_row(category.value, str(len(section)), shows)
    table.add_row("[bold]Total[/bold]", f"[bold]{library.total_entries}[/bold]", "")
    console.print(table)

    summary = library_service.stats()
    console.print(
        f"\n  Logos: [green]{summary.with_logo}[/green] avec, "
        f"[yellow]{summary.without_logo}[/yellow] sans"
    )
    protocols = ", ".join(
        f"{protocol} ({count})"
        for protocol, count in sorted(summary.protocols.items(), key=lambda item: -item[1])
    )
    if protocols:
        console.print(f"  Protocoles: {protocols}")


def shows(
    category: Annotated[
        str, typer.Argument(help="Categorie episodique (series ou cartoons)")
    ] = "series",
    episodes: Annotated[
        bool,
        typer.Option("--episodes", "-e", help="Afficher le detail des episodes"),
    ] = False,
) -> None:
    """Affiche l'arborescence serie / saison / episodes d'une categorie."""
    resolved = resolve_category(category)
    if not resolved.is_episodic:
        console.print(
            f"[red]Erreur:[/red] La categorie '{resolved.value}' n'est pas episodique"
        )
        raise typer.Exit(code=1)
    _shows(resolved, episodes)


@with_container()
def _shows(container, category: Category, episodes: bool) -> None:
    """Implementation de la commande shows."""
    library = container.library_service().get_library_or_empty()
    section = library.episodic(category)

    if not section.shows:
        console.print(f"[yellow]Aucune serie dans '{category.value}'[/yellow]")
        return

    tree = Tree(f"[bold blue]{category.value}[/bold blue] ({section.show_count} serie(s))")
    for show_name, seasons in section.shows.items():
        count = sum(len(items) for items in seasons.values())
        show_branch = tree.add(f"[magenta]{show_name}[/magenta] [dim]({count} episode(s))[/dim]")
        for season in sorted(seasons):
            season_branch = show_branch.add(
                f"Saison {season:02d} [dim]({len(seasons[season])})[/dim]"
            )
            if not episodes:
                continue
            for entry in seasons[season]:
                label = entry.series_info.label if entry.series_info else ""
                season_branch.add(f"[green]{label}[/green] {entry.name}")

    console.print(tree)
