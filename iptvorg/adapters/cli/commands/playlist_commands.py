"""
Commandes CLI sur les fichiers de playlist (import, export, merge).
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from iptvorg.adapters.cli.helpers import (
    console,
    read_playlist_file,
    resolve_category,
    suppress_loguru,
    with_container,
)
from iptvorg.core.entities.library import EpisodicSection
from iptvorg.core.value_objects.category import Category
from iptvorg.services.playlist_tools import merge_playlists
from iptvorg.utils.constants import DEFAULT_PLAYLIST_TITLE


def import_playlist(
    playlist_file: Annotated[
        Path,
        typer.Argument(help="Fichier M3U a importer"),
    ],
) -> None:
    """
    Importe une playlist M3U et remplace la bibliotheque stockee.

    Les entrees sont classees par categorie, les series et dessins animes
    sont regroupes par serie et par saison.
    """
    _import_playlist(playlist_file)


@with_container()
def _import_playlist(container, playlist_file: Path) -> None:
    """Implementation de la commande import."""
    text = read_playlist_file(playlist_file)
    library_service = container.library_service()

    console.print(f"[bold cyan]Import de la playlist[/bold cyan]: {playlist_file}\n")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("[cyan]Analyse en cours...", total=None)
        with suppress_loguru():
            report = library_service.import_playlist(text)
        progress.update(task, total=1, completed=1, description="[green]Termine")

    table = Table(title="Bibliotheque importee")
    table.add_column("Categorie", style="cyan")
    table.add_column("Entrees", justify="right")
    table.add_column("Series", justify="right")

    for category in Category:
        section = report.library.section(category)
        shows = str(section.show_count) if isinstance(section, EpisodicSection) else "-"
        table.add_row(category.value, str(len(section)), shows)

    console.print(table)
    console.print(f"\n  [green]{report.kept_count}[/green] entree(s) importee(s)")
    if report.duplicate_count > 0:
        console.print(f"  [yellow]{report.duplicate_count}[/yellow] doublon(s) ignore(s)")


def export_category(
    category: Annotated[str, typer.Argument(help="Categorie a exporter (ex: movies, series)")],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Fichier de sortie (defaut: <categorie>.m3u)"),
    ] = None,
    title: Annotated[
        Optional[str],
        typer.Option("--title", help="Titre de la playlist (#PLAYLIST)"),
    ] = None,
) -> None:
    """Exporte une categorie de la bibliotheque en playlist M3U."""
    _export_category(resolve_category(category), output, title)


@with_container()
def _export_category(
    container, category: Category, output: Optional[Path], title: Optional[str]
) -> None:
    """Implementation de la commande export."""
    library_service = container.library_service()
    export = library_service.export(category, title)

    destination = output or Path(export.filename)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(export.content, encoding="utf-8")

    console.print(
        f"[green]{export.entry_count}[/green] entree(s) exportee(s) vers {destination}"
    )


def merge(
    playlist_files: Annotated[
        list[Path],
        typer.Argument(help="Playlists a fusionner, par ordre de priorite"),
    ],
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Fichier M3U fusionne"),
    ],
    title: Annotated[
        Optional[str],
        typer.Option("--title", help="Titre de la playlist fusionnee"),
    ] = None,
) -> None:
    """
    Fusionne plusieurs playlists M3U en une seule.

    Les URLs en double sont retirees (la premiere occurrence est gardee).
    La bibliotheque stockee n'est pas modifiee.
    """
    _merge(playlist_files, output, title)


@with_container(requires_db=False)
def _merge(container, playlist_files: list[Path], output: Path, title: Optional[str]) -> None:
    """Implementation de la commande merge."""
    texts = [read_playlist_file(path) for path in playlist_files]
    entries = merge_playlists(texts, container.playlist_parser())
    content = container.playlist_writer().serialize(entries, title or DEFAULT_PLAYLIST_TITLE)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")

    console.print(
        f"[green]{len(entries)}[/green] entree(s) fusionnee(s) depuis "
        f"{len(playlist_files)} playlist(s) vers {output}"
    )
