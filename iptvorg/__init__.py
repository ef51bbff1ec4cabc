"""
IPTVOrg - Organisation de playlists IPTV (M3U/M3U8).

Ce package fournit les fonctionnalites pour lire une playlist, classer
chaque entree par categorie, reconstruire la structure serie/saison/episode
et regenerer des playlists par categorie.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur)
- services/ : Couche application (cas d'utilisation, orchestration)
- adapters/ : Couche infrastructure (CLI, parsing M3U)
- infrastructure/ : Persistance SQLModel
- web/ : API HTTP FastAPI
"""

__version__ = "0.1.0"
