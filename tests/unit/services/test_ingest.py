"""
Tests unitaires pour IngestService.

Tests couvrant:
- Pipeline complet texte -> bibliotheque organisee
- Deduplication par URL (activable)
- Utilisation des ports injectes (parser mocke)
"""

from unittest.mock import MagicMock

from iptvorg.core.entities.entry import PlaylistEntry
from iptvorg.core.entities.library import EpisodicSection, FlatSection
from iptvorg.core.ports.playlist import IPlaylistParser
from iptvorg.core.value_objects.category import Category
from iptvorg.services.ingest import IngestService


class TestIngest:

    def test_pipeline_complet(self, ingest_service, sample_playlist):
        report = ingest_service.ingest(sample_playlist)
        library = report.library

        assert report.parsed_count == 8
        assert report.duplicate_count == 0
        assert [e.name for e in library.flatten(Category.NEWS)] == ["CNN HD"]
        assert [e.name for e in library.flatten(Category.MOVIES)] == ["The Matrix 1999 HD"]
        assert [e.name for e in library.flatten(Category.SPORTS)] == ["ESPN Brasil"]
        assert [e.name for e in library.flatten(Category.CHANNELS)] == ["Canal Local"]
        assert [e.name for e in library.flatten(Category.CARTOONS)] == ["Pica-Pau"]

    def test_series_organisees(self, ingest_service, sample_playlist):
        library = ingest_service.ingest(sample_playlist).library

        shows = library.episodic(Category.SERIES).shows
        assert list(shows) == ["Breaking Bad"]
        assert list(shows["Breaking Bad"]) == [1, 2]
        assert [e.series_info.episode for e in shows["Breaking Bad"][1]] == [1, 3]

    def test_types_de_section(self, ingest_service, sample_playlist):
        library = ingest_service.ingest(sample_playlist).library

        for category in Category:
            expected = EpisodicSection if category.is_episodic else FlatSection
            assert isinstance(library.section(category), expected)

    def test_doublons_retires(self, ingest_service):
        text = (
            "#EXTM3U\n"
            "#EXTINF:-1,Canal A\nhttp://stream/same\n"
            "#EXTINF:-1,Canal B\nhttp://stream/same\n"
        )

        report = ingest_service.ingest(text)

        assert report.parsed_count == 2
        assert report.duplicate_count == 1
        assert report.kept_count == 1
        assert [e.name for e in report.library.flatten(Category.CHANNELS)] == ["Canal A"]

    def test_doublons_conserves_si_desactive(self, parser, classifier, organizer):
        service = IngestService(parser, classifier, organizer, deduplicate=False)
        text = "#EXTINF:-1,A\nhttp://stream/same\n#EXTINF:-1,B\nhttp://stream/same\n"

        report = service.ingest(text)

        assert report.duplicate_count == 0
        assert len(report.library.flatten(Category.CHANNELS)) == 2

    def test_texte_sans_entree(self, ingest_service):
        report = ingest_service.ingest("n'importe quoi")

        assert report.parsed_count == 0
        assert report.library.total_entries == 0

    def test_parser_injecte(self, classifier, organizer):
        parser = MagicMock(spec=IPlaylistParser)
        parser.parse.return_value = [PlaylistEntry(name="Dark S01E01", url="http://stream/d")]
        service = IngestService(parser, classifier, organizer)

        report = service.ingest("ignored")

        parser.parse.assert_called_once_with("ignored")
        assert report.library.counts()["series"] == 1
