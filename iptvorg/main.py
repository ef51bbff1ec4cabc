"""
Point d'entrée CLI d'IPTVOrg.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import (
    export_category,
    import_playlist,
    merge,
    shows,
    stats,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging, level_from_verbosity

app = typer.Typer(
    name="iptvorg",
    help="Organisation de playlists IPTV (M3U) par categorie",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """IPTVOrg - Classement et export de playlists IPTV."""
    if verbose or quiet:
        settings = get_config()
        configure_logging(
            log_level=level_from_verbosity(verbose, quiet, settings.log_level),
            log_file=settings.log_file,
            rotation_size=settings.log_rotation_size,
            retention_count=settings.log_retention_count,
        )


# Note: "import" est un mot reserve Python, donc on utilise name= explicitement
app.command(name="import")(import_playlist)
app.command(name="export")(export_category)
app.command()(merge)
app.command()(stats)
app.command()(shows)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration IPTVOrg")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Groupe par défaut : {config.default_group}")
    typer.echo(f"Protocoles de flux : {', '.join(config.stream_schemes)}")
    typer.echo(f"Doublons d'URL : {'retirés' if config.deduplicate_urls else 'conservés'}")
    typer.echo(f"Cache : {config.cache_ttl_seconds} s ({config.cache_dir})")
    typer.echo(f"Taille max. upload : {config.max_upload_mb} Mo")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"IPTVOrg v{__version__}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance l'API HTTP IPTVOrg."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("iptvorg.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    # Initialise la base de données (crée les tables si nécessaire)
    container.database.init()

    logger.info(f"Démarrage d'IPTVOrg v{__version__}")

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
