"""Tests unitaires pour M3UPlaylistWriter."""

from iptvorg.core.entities.entry import PlaylistEntry


class TestSerialize:
    """Tests de la generation du texte M3U."""

    def test_entete_et_titre(self, writer):
        text = writer.serialize([], "IPTV - MOVIES")

        assert text == "#EXTM3U\n#PLAYLIST:IPTV - MOVIES\n"

    def test_sans_titre(self, writer):
        assert writer.serialize([]) == "#EXTM3U\n"

    def test_bloc_par_entree(self, writer):
        entry = PlaylistEntry(
            name="CNN HD",
            url="http://stream/cnn",
            tvg_id="cnn.us",
            logo_url="http://x/l.png",
            group="News",
        )

        lines = writer.serialize([entry]).splitlines()

        assert lines[1] == (
            '#EXTINF:-1 tvg-id="cnn.us" tvg-logo="http://x/l.png" group-title="News",CNN HD'
        )
        assert lines[2] == "http://stream/cnn"

    def test_attributs_vides_omis(self, writer):
        entry = PlaylistEntry(name="Canal", url="http://stream/a", group="")

        header = writer.format_header(entry)

        assert header == "#EXTINF:-1,Canal"

    def test_attributs_libres_ecrits(self, writer):
        entry = PlaylistEntry(
            name="Canal",
            url="http://stream/a",
            duration=0,
            extra_attributes={"catchup-days": "7"},
        )

        header = writer.format_header(entry)

        assert header == '#EXTINF:0 group-title="Outros" catchup-days="7",Canal'

    def test_guillemets_remplaces(self, writer):
        entry = PlaylistEntry(name="Canal", url="http://stream/a", group='Le "Best"')

        assert 'group-title="Le \'Best\'"' in writer.format_header(entry)


class TestRoundTrip:
    """Relire le texte produit redonne les memes entrees."""

    def test_playlist_relue_identique(self, parser, writer, sample_playlist):
        entries = parser.parse(sample_playlist)

        reparsed = parser.parse(writer.serialize(entries, "Titre"))

        assert reparsed == entries

    def test_titre_avec_virgule_et_attributs_libres(self, parser, writer):
        entry = PlaylistEntry(
            name="Velozes, Furiosos",
            url="http://stream/vf",
            duration=5400,
            tvg_name="Velozes",
            group="Filmes, Acao",
            extra_attributes={"tvg-country": "BR"},
        )

        assert parser.parse(writer.serialize([entry])) == [entry]

    def test_nom_avec_emoji_compose(self, parser, writer):
        entry = PlaylistEntry(
            name="Família \U0001F468\u200d\U0001F469\u200d\U0001F467 Show",
            url="http://stream/familia",
        )

        reparsed = parser.parse(writer.serialize([entry]))

        assert reparsed[0].name == entry.name
