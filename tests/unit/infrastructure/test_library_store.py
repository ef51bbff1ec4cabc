"""
Tests unitaires pour la persistance de la bibliotheque.

Tests couvrant:
- library_codec : conversion bibliotheque <-> JSON
- SQLModelLibraryStore : ecriture/lecture d'un instantane en SQLite memoire
- CachedLibraryStore : cache TTL et invalidation a l'ecriture
"""

import time
from datetime import datetime
from unittest.mock import MagicMock, patch

import pytest
from sqlmodel import Session, select

from iptvorg.core.entities.entry import PlaylistEntry
from iptvorg.core.entities.library import OrganizedLibrary
from iptvorg.core.ports.store import ILibraryStore
from iptvorg.core.value_objects.category import Category
from iptvorg.core.value_objects.series_info import SeriesInfo
from iptvorg.infrastructure.persistence.cached_store import CachedLibraryStore
from iptvorg.infrastructure.persistence.database import build_engine
from iptvorg.infrastructure.persistence.library_codec import (
    entry_from_dict,
    entry_to_dict,
    library_from_dict,
    library_to_dict,
)
from iptvorg.infrastructure.persistence.models import LibrarySnapshotModel


@pytest.fixture
def library(ingest_service, sample_playlist) -> OrganizedLibrary:
    return ingest_service.ingest(sample_playlist).library


class TestLibraryCodec:

    def test_entree_avec_series_info(self):
        entry = PlaylistEntry(
            name="Dark S01E02",
            url="http://stream/dark",
            extra_attributes={"tvg-country": "DE"},
            series_info=SeriesInfo("Dark", 1, 2),
        )

        data = entry_to_dict(entry)

        assert data["id"] == entry.entry_id
        assert data["series_info"] == {"show_name": "Dark", "season": 1, "episode": 2}
        assert entry_from_dict(data) == entry

    def test_entree_minimale(self):
        entry = entry_from_dict({"name": "Canal", "url": "http://stream/a"})

        assert entry.duration == -1
        assert entry.group == "Outros"

    def test_forme_json(self, library):
        data = library_to_dict(library)

        assert set(data) == {category.value for category in Category}
        assert isinstance(data["movies"], list)
        assert list(data["series"]["Breaking Bad"]) == ["1", "2"]

    def test_aller_retour(self, library):
        restored = library_from_dict(library_to_dict(library))

        for category in Category:
            assert restored.flatten(category) == library.flatten(category)
        assert restored.episodic(Category.SERIES).shows == library.episodic(Category.SERIES).shows

    def test_categories_absentes_vides(self):
        restored = library_from_dict({"movies": []})

        assert restored.total_entries == 0
        assert set(restored.sections) == set(Category)


class TestSQLModelLibraryStore:

    def test_vide(self, library_store):
        assert library_store.get() == (None, None)

    def test_replace_puis_get(self, library_store, library):
        written_at = library_store.replace(library)

        restored, updated_at = library_store.get()

        assert updated_at == written_at
        assert restored.counts() == library.counts()
        assert restored.flatten(Category.SERIES) == library.flatten(Category.SERIES)

    def test_un_seul_instantane(self, library_store, library, memory_engine):
        library_store.replace(library)
        library_store.replace(OrganizedLibrary.empty())

        with Session(memory_engine) as session:
            snapshots = session.exec(select(LibrarySnapshotModel)).all()

        assert len(snapshots) == 1
        assert snapshots[0].entry_count == 0
        restored, _ = library_store.get()
        assert restored.total_entries == 0

    def test_base_fichier(self, tmp_path, library):
        from iptvorg.infrastructure.persistence.database import init_db
        from iptvorg.infrastructure.persistence.library_store import SQLModelLibraryStore

        engine = build_engine(f"sqlite:///{tmp_path}/sub/iptvorg.db")
        init_db(engine)
        SQLModelLibraryStore(engine).replace(library)

        restored, _ = SQLModelLibraryStore(engine).get()

        assert (tmp_path / "sub" / "iptvorg.db").exists()
        assert restored.total_entries == library.total_entries
        engine.dispose()


class TestCachedLibraryStore:

    @pytest.fixture
    def inner(self) -> MagicMock:
        mock = MagicMock(spec=ILibraryStore)
        mock.get.return_value = (OrganizedLibrary.empty(), datetime(2024, 1, 1))
        mock.replace.return_value = datetime(2024, 1, 2)
        return mock

    @pytest.fixture
    def make_store(self, tmp_path):
        stores = []

        def _make(inner, ttl_seconds=60, namespace="default"):
            store = CachedLibraryStore(
                inner, ttl_seconds=ttl_seconds, cache_dir=tmp_path / "cache", namespace=namespace
            )
            stores.append(store)
            return store

        yield _make
        for store in stores:
            store.close()

    def test_lecture_en_cache_pendant_le_ttl(self, inner, make_store):
        store = make_store(inner)

        store.get()
        store.get()

        assert inner.get.call_count == 1

    def test_rechargement_apres_expiration(self, inner, make_store):
        store = make_store(inner, ttl_seconds=0.05)

        store.get()
        time.sleep(0.2)
        store.get()

        assert inner.get.call_count == 2

    def test_replace_invalide_le_cache(self, inner, make_store):
        store = make_store(inner)
        store.get()

        written_at = store.replace(OrganizedLibrary.empty())
        store.get()

        assert written_at == datetime(2024, 1, 2)
        assert inner.get.call_count == 2

    def test_ttl_nul_desactive_le_cache(self, inner, make_store):
        store = make_store(inner, ttl_seconds=0)

        store.get()
        store.get()

        assert inner.get.call_count == 2

    def test_chaque_lecture_est_une_copie(self, inner, make_store):
        store = make_store(inner)

        first, _ = store.get()
        first.add_entry(Category.MOVIES, PlaylistEntry(name="Filme", url="http://stream/filme"))
        second, _ = store.get()

        assert second.total_entries == 0

    def test_echec_d_ecriture_conserve_la_lecture_precedente(self, inner, make_store):
        inner.replace.side_effect = RuntimeError("base verrouillee")
        store = make_store(inner)

        library, _ = store.get()
        library.add_entry(Category.MOVIES, PlaylistEntry(name="Filme", url="http://stream/filme"))
        with pytest.raises(RuntimeError):
            store.replace(library)

        restored, _ = store.get()
        assert restored.total_entries == 0
        assert inner.get.call_count == 1

    def test_cache_partage_entre_instances(self, inner, make_store):
        reader = make_store(inner)
        writer = make_store(MagicMock(spec=ILibraryStore))
        reader.get()

        writer.replace(OrganizedLibrary.empty())
        reader.get()

        assert inner.get.call_count == 2

    def test_espaces_de_noms_distincts(self, inner, make_store):
        other = MagicMock(spec=ILibraryStore)
        other.get.return_value = (None, None)
        make_store(inner, namespace="sqlite:///a.db").get()

        assert make_store(other, namespace="sqlite:///b.db").get() == (None, None)

    def test_sur_stockage_reel(self, library_store, library, make_store):
        store = make_store(library_store)

        assert store.get() == (None, None)
        store.replace(library)

        restored, _ = store.get()
        assert restored.total_entries == library.total_entries


class TestLibraryServiceWriteFailure:

    def test_ajout_non_persiste_invisible(self, library_store, ingest_service, writer, organizer, tmp_path):
        from iptvorg.services.library import LibraryService

        store = CachedLibraryStore(library_store, ttl_seconds=60, cache_dir=tmp_path / "cache")
        service = LibraryService(store, ingest_service, writer, organizer)
        service.import_playlist("#EXTINF:-1,Canal\nhttp://stream/canal\n")
        service.get_library()

        with patch.object(library_store, "replace", side_effect=RuntimeError("base verrouillee")):
            with pytest.raises(RuntimeError):
                service.add_entry(
                    Category.CHANNELS, PlaylistEntry(name="Nouveau", url="http://stream/nouveau")
                )

        assert [e.name for e in service.list_entries(Category.CHANNELS)] == ["Canal"]
        store.close()
