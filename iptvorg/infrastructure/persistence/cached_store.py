"""
Cache avec TTL devant un stockage de bibliotheque.

Le cache utilise diskcache : la lecture est serialisee (pickle) a l'ecriture
dans le cache, chaque get() retourne donc une copie independante. Toute
ecriture reussie invalide le cache, partage entre les processus (CLI et
serveur) qui utilisent le meme repertoire.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from diskcache import Cache

from iptvorg.core.entities.library import OrganizedLibrary
from iptvorg.core.ports.store import ILibraryStore


class CachedLibraryStore(ILibraryStore):
    """
    Decorateur de ILibraryStore gardant la derniere lecture en cache.

    Attributes:
        DEFAULT_TTL: Duree de vie par defaut d'une lecture (60 secondes)
        CACHE_KEY_PREFIX: Prefixe des cles du cache, suivi de l'espace de noms

    Example:
        store = CachedLibraryStore(SQLModelLibraryStore(engine), ttl_seconds=60,
                                   cache_dir=".cache/library")
        library, updated_at = store.get()
    """

    DEFAULT_TTL = 60
    CACHE_KEY_PREFIX = "library:"

    def __init__(
        self,
        inner: ILibraryStore,
        ttl_seconds: float = DEFAULT_TTL,
        cache_dir: Optional[Union[str, Path]] = None,
        namespace: str = "default",
    ) -> None:
        """
        Args:
            inner: Stockage reel
            ttl_seconds: Duree de validite d'une lecture en cache (0 = sans cache)
            cache_dir: Repertoire du cache (repertoire temporaire si None)
            namespace: Distingue les bibliotheques partageant un repertoire (URL de la base)
        """
        self._inner = inner
        self._ttl = ttl_seconds
        self._key = f"{self.CACHE_KEY_PREFIX}{namespace}"
        self._cache = Cache(str(cache_dir) if cache_dir is not None else None)

    def replace(self, library: OrganizedLibrary) -> datetime:
        """Ecrit dans le stockage reel puis invalide le cache."""
        written_at = self._inner.replace(library)
        self.invalidate()
        return written_at

    def get(self) -> tuple[Optional[OrganizedLibrary], Optional[datetime]]:
        """Retourne une copie de la lecture en cache, ou recharge si expiree."""
        cached = self._cache.get(self._key)
        if cached is not None:
            return cached

        result = self._inner.get()
        if self._ttl > 0:
            self._cache.set(self._key, result, expire=self._ttl)
        return result

    def invalidate(self) -> None:
        """Vide le cache."""
        self._cache.delete(self._key)

    def close(self) -> None:
        """Ferme le cache (a appeler a l'arret)."""
        self._cache.close()
