"""
Tests unitaires pour M3UPlaylistParser.

Tests couvrant:
- Extraction des attributs, du titre et de la duree
- Appariement ligne #EXTINF / ligne d'URL
- Lignes ignorees (commentaires, URLs orphelines, BOM)
- Fonctions utilitaires (separateur de titre, duree, attributs)
"""

import pytest

from iptvorg.adapters.parsing.m3u_parser import (
    M3UPlaylistParser,
    find_title_separator,
    parse_attributes,
    parse_duration,
)


class TestParse:
    """Tests du parsing d'une playlist complete."""

    def test_entree_simple_avec_attributs(self, parser):
        """Une ligne #EXTINF suivie d'une URL donne une entree complete."""
        text = (
            '#EXTM3U\n#EXTINF:-1 tvg-logo="http://x/l.png" group-title="News",CNN HD\n'
            "http://stream/cnn"
        )

        entries = parser.parse(text)

        assert len(entries) == 1
        entry = entries[0]
        assert entry.name == "CNN HD"
        assert entry.url == "http://stream/cnn"
        assert entry.group == "News"
        assert entry.logo_url == "http://x/l.png"
        assert entry.duration == -1

    def test_entete_sans_url_remplace_par_le_suivant(self, parser):
        """Deux #EXTINF consecutifs : seul le second produit une entree."""
        text = (
            "#EXTM3U\n"
            "#EXTINF:-1,Perdu\n"
            "#EXTINF:-1,Garde\n"
            "http://stream/garde\n"
        )

        entries = parser.parse(text)

        assert [entry.name for entry in entries] == ["Garde"]

    def test_url_sans_entete_ignoree(self, parser):
        """Une URL sans #EXTINF prealable est ignoree."""
        text = "#EXTM3U\nhttp://stream/orpheline\n#EXTINF:-1,Canal\nhttp://stream/canal\n"

        entries = parser.parse(text)

        assert [entry.url for entry in entries] == ["http://stream/canal"]

    def test_titre_vide_ignore(self, parser):
        """Un #EXTINF sans titre ne produit pas d'entree."""
        text = '#EXTINF:-1 group-title="News",\nhttp://stream/x\n'

        assert parser.parse(text) == []

    def test_entete_sans_virgule_ignore(self, parser):
        """Un #EXTINF sans separateur de titre ne produit pas d'entree."""
        assert parser.parse("#EXTINF:-1\nhttp://stream/x\n") == []

    def test_groupe_par_defaut(self, parser):
        """Sans group-title (ou avec une valeur vide), le groupe vaut Outros."""
        text = (
            "#EXTINF:-1,Sans groupe\nhttp://stream/a\n"
            '#EXTINF:-1 group-title="",Groupe vide\nhttp://stream/b\n'
        )

        entries = parser.parse(text)

        assert [entry.group for entry in entries] == ["Outros", "Outros"]

    def test_groupe_par_defaut_configurable(self):
        """Le groupe par defaut est injecte dans le parser."""
        parser = M3UPlaylistParser(default_group="Autres")

        entries = parser.parse("#EXTINF:-1,Canal\nhttp://stream/a\n")

        assert entries[0].group == "Autres"

    def test_attributs_libres_conserves(self, parser):
        """Les attributs non reconnus sont gardes dans extra_attributes."""
        text = (
            '#EXTINF:-1 tvg-id="a.b" tvg-name="A B" catchup-days="7" '
            'tvg-country="BR",A B\nhttp://stream/ab\n'
        )

        entry = parser.parse(text)[0]

        assert entry.tvg_id == "a.b"
        assert entry.tvg_name == "A B"
        assert entry.extra_attributes == {"catchup-days": "7", "tvg-country": "BR"}

    def test_titre_avec_virgule(self, parser):
        """Le titre commence apres la premiere virgule hors guillemets."""
        text = '#EXTINF:-1 group-title="Filmes, Acao",Velozes, Furiosos\nhttp://stream/vf\n'

        entry = parser.parse(text)[0]

        assert entry.group == "Filmes, Acao"
        assert entry.name == "Velozes, Furiosos"

    def test_duree_positive_et_fractionnaire(self, parser):
        text = "#EXTINF:120,Clip\nhttp://stream/a\n#EXTINF:12.7,Clip 2\nhttp://stream/b\n"

        entries = parser.parse(text)

        assert [entry.duration for entry in entries] == [120, 12]

    def test_bom_et_espaces_ignores(self, parser):
        """Le BOM initial, les espaces et les lignes vides n'empechent pas le parsing."""
        text = "\ufeff#EXTM3U\r\n\r\n   #EXTINF:-1,Canal   \r\n  http://stream/a  \r\n"

        entries = parser.parse(text)

        assert len(entries) == 1
        assert entries[0].name == "Canal"
        assert entries[0].url == "http://stream/a"

    def test_commentaires_ignores(self, parser):
        """Les directives inconnues entre l'entete et l'URL sont ignorees."""
        text = "#EXTM3U\n#EXTINF:-1,Canal\n#EXTVLCOPT:http-user-agent=VLC\nhttp://stream/a\n"

        entries = parser.parse(text)

        assert [entry.name for entry in entries] == ["Canal"]

    def test_schemes_reconnus(self, parser):
        """Seuls les schemes de flux configures ouvrent une ligne d'URL."""
        text = (
            "#EXTINF:-1,RTMP\nrtmp://live/a\n"
            "#EXTINF:-1,UDP\nudp://239.0.0.1:1234\n"
            "#EXTINF:-1,RTSP\nrtsp://cam/b\n"
        )

        entries = parser.parse(text)

        assert [entry.name for entry in entries] == ["RTMP", "RTSP"]

    def test_schemes_personnalises(self):
        parser = M3UPlaylistParser(stream_schemes=("udp",))

        entries = parser.parse("#EXTINF:-1,UDP\nudp://239.0.0.1:1234\n")

        assert [entry.url for entry in entries] == ["udp://239.0.0.1:1234"]

    def test_texte_vide(self, parser):
        assert parser.parse("") == []

    def test_ordre_du_fichier_conserve(self, parser, sample_playlist):
        entries = parser.parse(sample_playlist)

        assert [entry.name for entry in entries][:3] == [
            "CNN HD",
            "The Matrix 1999 HD",
            "Breaking Bad S01E03",
        ]
        assert len(entries) == 8

    def test_texte_non_chaine_refuse(self, parser):
        with pytest.raises(TypeError):
            parser.parse(None)


class TestHelpers:
    """Tests des fonctions utilitaires du parser."""

    def test_separateur_hors_guillemets(self):
        line = '#EXTINF:-1 group-title="a,b",Titre'
        assert line[find_title_separator(line) + 1:] == "Titre"

    def test_separateur_absent(self):
        assert find_title_separator("#EXTINF:-1") == -1

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("#EXTINF:-1,Canal", -1),
            ("#EXTINF:0,Canal", 0),
            ("#EXTINF: 300 tvg-id=\"x\",Canal", 300),
            ("#EXTINF:abc,Canal", -1),
        ],
    )
    def test_parse_duration(self, line, expected):
        assert parse_duration(line) == expected

    def test_parse_attributes_premiere_occurrence(self):
        attributes = parse_attributes('#EXTINF:-1 group-title="A" group-title="B" x_y="1"')

        assert attributes == {"group-title": "A", "x_y": "1"}
