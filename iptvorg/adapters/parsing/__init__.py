"""Adaptateurs de lecture/ecriture du format de playlist M3U."""

from iptvorg.adapters.parsing.m3u_parser import M3UPlaylistParser
from iptvorg.adapters.parsing.m3u_writer import M3UPlaylistWriter

__all__ = ["M3UPlaylistParser", "M3UPlaylistWriter"]
