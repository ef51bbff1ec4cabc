"""
Constantes globales pour IPTVOrg.

Ce module contient toutes les constantes utilisees dans l'application:
- Marqueurs du format M3U et attributs reconnus
- Table ordonnee des regles de classification par categorie
- Patterns d'extraction serie/saison/episode
- Schemes d'URL acceptes pour les flux
"""

import re

from iptvorg.core.value_objects.category import Category

# Marqueurs du format M3U
M3U_FILE_MARKER = "#EXTM3U"
M3U_INFO_MARKER = "#EXTINF:"
M3U_PLAYLIST_MARKER = "#PLAYLIST:"
M3U_MIME_TYPE = "application/x-mpegurl"

# Groupe attribue quand group-title est absent
DEFAULT_GROUP = "Outros"

DEFAULT_PLAYLIST_TITLE = "IPTV Playlist"

# Attributs extraits dans des champs dedies (exclus des attributs libres)
TVG_ID_ATTR = "tvg-id"
TVG_NAME_ATTR = "tvg-name"
TVG_LOGO_ATTR = "tvg-logo"
GROUP_TITLE_ATTR = "group-title"
KNOWN_ATTRIBUTES = frozenset({
    TVG_ID_ATTR,
    TVG_NAME_ATTR,
    TVG_LOGO_ATTR,
    GROUP_TITLE_ATTR,
})

# Schemes acceptes comme ligne d'URL de flux
DEFAULT_STREAM_SCHEMES = ("http", "https", "rtmp", "rtsp")
VALID_URL_SCHEMES = frozenset({"http", "https", "rtmp", "rtsp"})


def _compile(*patterns: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(pattern) for pattern in patterns)


# Table de classification, evaluee dans l'ordre (premiere regle satisfaite).
# Le texte compare est "{nom} {groupe}" en minuscules et sans accents.
# Les marqueurs d'episode passent avant l'annee des films, et les marqueurs
# de qualite d'image (hd, 4k) ne sont consultes qu'en dernier recours.
CATEGORY_RULES: tuple[tuple[Category, tuple[re.Pattern[str], ...]], ...] = (
    (
        Category.SERIES,
        _compile(
            r"\bserie\b", r"\bseries\b", r"\bs\d+e\d+\b", r"\btemporada\b",
            r"\bepisodio\b", r"\bepisode\b", r"\b\d+x\d+\b", r"\bt\d+e\d+\b",
        ),
    ),
    (
        Category.MOVIES,
        _compile(
            r"\bfilme\b", r"\bfilmes\b", r"\bmovie\b", r"\bmovies\b",
            r"\bcinema\b", r"\b(19|20)\d{2}\b", r"\bblu-?ray\b", r"\bdvdrip\b",
        ),
    ),
    (
        Category.CARTOONS,
        _compile(
            r"\bdesenho\b", r"\bdesenhos\b", r"\bcartoon\b", r"\binfantil\b",
            r"\bkids\b", r"\banimacao\b", r"\banimation\b", r"\bdisney\b",
            r"\bpixar\b",
        ),
    ),
    (
        Category.SPORTS,
        _compile(
            r"\besporte\b", r"\besportes\b", r"\bsport\b", r"\bsports\b",
            r"\bfutebol\b", r"\bfootball\b", r"\bbasket\b", r"\bvolei\b",
            r"\bf1\b", r"\bmma\b", r"\bufc\b",
        ),
    ),
    (
        Category.NEWS,
        _compile(
            r"\bnews\b", r"\bnoticia\b", r"\bnoticias\b", r"\bjornal\b",
            r"\binformativo\b", r"\breporter\b", r"\bglobo\b", r"\bsbt\b",
            r"\brecord\b", r"\bband\b",
        ),
    ),
    (
        Category.MUSIC,
        _compile(
            r"\bmusic\b", r"\bmusica\b", r"\bclip\b", r"\bmtv\b", r"\bradio\b",
            r"\bhits\b", r"\brock\b", r"\bpop\b", r"\bsertanejo\b",
        ),
    ),
    (
        Category.DOCUMENTARIES,
        _compile(
            r"\bdocumentarios?\b", r"\bdocumentar(y|ies)\b", r"\bnational\s*geographic\b",
            r"\bdiscovery\b", r"\bhistory\b", r"\banimal\b", r"\bnature\b",
        ),
    ),
    (
        Category.ADULT,
        _compile(r"\badult\b", r"\bxxx\b", r"\bsexy\b", r"\b18\+", r"\bplayboy\b"),
    ),
    (
        Category.MOVIES,
        _compile(r"\bhd\b", r"\bfullhd\b", r"\b4k\b"),
    ),
)

# Patterns serie/saison/episode, evalues dans l'ordre.
# Chaque entree : (regex, index nom, index saison, index episode)
SERIES_TITLE_PATTERNS: tuple[tuple[re.Pattern[str], int, int, int], ...] = (
    (re.compile(r"^(.+?)\s+S(\d+)E(\d+)", re.IGNORECASE), 1, 2, 3),
    (re.compile(r"^(.+?)\s+(\d+)x(\d+)", re.IGNORECASE), 1, 2, 3),
    (re.compile(r"^(.+?)\s+Temporada\s+(\d+)\s+Epis[oó]dio\s+(\d+)", re.IGNORECASE), 1, 2, 3),
    (re.compile(r"^(.+?)\s+T(\d+)E(\d+)", re.IGNORECASE), 1, 2, 3),
    (re.compile(r"^(.+?)\s*-\s*S(\d+)E(\d+)", re.IGNORECASE), 1, 2, 3),
)

# Indicateur de saison pour le repli (nom avant le premier indicateur)
SEASON_TOKEN_PATTERN = re.compile(r"^(.+?)\s+(S\d+|Temporada|\d+x\d+)", re.IGNORECASE)

# Detection de qualite et debit dans une URL de flux
URL_QUALITY_PATTERN = re.compile(r"(720p|1080p|4k|fullhd|hd|sd)", re.IGNORECASE)
URL_BITRATE_PATTERN = re.compile(r"(\d+)k", re.IGNORECASE)
