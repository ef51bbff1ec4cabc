"""Sous-package CLI commands - re-exporte les commandes publiques."""

from iptvorg.adapters.cli.commands.library_commands import (
    shows,
    stats,
)
from iptvorg.adapters.cli.commands.playlist_commands import (
    export_category,
    import_playlist,
    merge,
)

__all__ = [
    "export_category",
    "import_playlist",
    "merge",
    "shows",
    "stats",
]
