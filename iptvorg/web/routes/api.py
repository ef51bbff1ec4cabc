"""
Routes de l'API JSON : import de playlist, consultation, export M3U,
ajout et retrait d'entrées, recherche et statistiques.
"""

from dataclasses import asdict
from typing import Annotated, Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse, Response
from loguru import logger
from pydantic import BaseModel, Field, StringConstraints

from ...core.entities.entry import PlaylistEntry
from ...core.exceptions import EmptyLibraryError, EntryNotFoundError, UnknownCategoryError
from ...core.value_objects.category import Category
from ...infrastructure.persistence.library_codec import (
    entry_to_dict,
    library_to_dict,
    section_to_json,
)
from ...services.playlist_tools import extract_url_metadata, is_valid_url
from ...utils.constants import DEFAULT_GROUP, M3U_MIME_TYPE
from ..deps import get_library_service, get_settings

router = APIRouter(prefix="/api", tags=["api"])

# Texte obligatoire, valide apres suppression des espaces
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class UploadPayload(BaseModel):
    """Corps de POST /api/upload-m3u."""

    content: str


class EntryPayload(BaseModel):
    """Entrée saisie manuellement."""

    name: RequiredText
    url: RequiredText
    duration: int = -1
    tvg_id: str = ""
    tvg_name: str = ""
    logo_url: str = ""
    group: str = DEFAULT_GROUP
    extra_attributes: dict[str, str] = Field(default_factory=dict)

    def to_entry(self) -> PlaylistEntry:
        return PlaylistEntry(
            name=self.name,
            url=self.url,
            duration=self.duration,
            tvg_id=self.tvg_id,
            tvg_name=self.tvg_name,
            logo_url=self.logo_url,
            group=self.group or DEFAULT_GROUP,
            extra_attributes=dict(self.extra_attributes),
        )


class AddItemPayload(BaseModel):
    """Corps de POST /api/add-item."""

    category: str
    item: EntryPayload


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


@router.post("/upload-m3u")
async def upload_m3u(request: Request, payload: UploadPayload):
    """Importe une playlist et remplace la bibliothèque stockée."""
    settings = get_settings(request)
    if len(payload.content.encode("utf-8")) > settings.max_upload_bytes:
        return _error(
            f"Playlist trop volumineuse (max {settings.max_upload_mb} Mo)", 413
        )

    report = get_library_service(request).import_playlist(payload.content)
    return {
        "success": True,
        "message": "Playlist importée",
        "parsed": report.parsed_count,
        "duplicates": report.duplicate_count,
        "data": report.library.counts(),
    }


@router.get("/data")
async def get_data(request: Request):
    """Retourne toute la bibliothèque (catégories plates et imbriquées)."""
    library = get_library_service(request).get_library_or_empty()
    return library_to_dict(library)


@router.get("/categories/{category}")
async def get_category(
    request: Request,
    category: str,
    limit: Optional[int] = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    sort: Optional[str] = Query(default=None, pattern="^(name|group)$"),
    order: str = Query(default="asc", pattern="^(asc|desc)$"),
):
    """
    Retourne le contenu d'une catégorie.

    Catégorie plate : liste paginée (limit/offset, limit par défaut = page_size),
    éventuellement triée par nom ou par groupe (sort/order).
    Catégorie épisodique : arborescence série -> saison -> épisodes.
    """
    try:
        resolved = Category.from_value(category)
    except UnknownCategoryError as e:
        return _error(str(e), 400)

    library_service = get_library_service(request)
    if resolved.is_episodic:
        library = library_service.get_library_or_empty()
        return section_to_json(library.section(resolved))

    page_size = limit or get_settings(request).page_size
    entries = library_service.list_entries(
        resolved, limit=page_size, offset=offset, sort_by=sort, order=order
    )
    return [entry_to_dict(entry) for entry in entries]


@router.get("/generate-m3u/{category}")
async def generate_m3u(request: Request, category: str, title: Optional[str] = None):
    """Télécharge la playlist M3U d'une catégorie."""
    try:
        resolved = Category.from_value(category)
    except UnknownCategoryError as e:
        return _error(str(e), 400)

    export = get_library_service(request).export(resolved, title)
    return Response(
        content=export.content,
        media_type=M3U_MIME_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )


@router.post("/add-item")
async def add_item(request: Request, payload: AddItemPayload):
    """Ajoute une entrée à une catégorie sans réimporter la playlist."""
    try:
        resolved = Category.from_value(payload.category)
    except UnknownCategoryError as e:
        return _error(str(e), 400)
    if not is_valid_url(payload.item.url):
        return _error(f"URL invalide: {payload.item.url}", 400)

    entry = get_library_service(request).add_entry(resolved, payload.item.to_entry())
    return {
        "success": True,
        "message": "Entrée ajoutée",
        "item": entry_to_dict(entry),
    }


@router.delete("/remove-item/{category}/{index}")
async def remove_item(request: Request, category: str, index: int):
    """Retire l'entrée à l'index donné (ordre de la liste plate de la catégorie)."""
    try:
        resolved = Category.from_value(category)
    except UnknownCategoryError as e:
        return _error(str(e), 400)
    if index < 0:
        return _error(f"Index invalide: {index}", 400)

    try:
        removed = get_library_service(request).remove_entry(resolved, index)
    except (EmptyLibraryError, EntryNotFoundError) as e:
        logger.debug(f"Retrait impossible: {e}")
        return _error(str(e), 404)

    return {
        "success": True,
        "message": "Entrée retirée",
        "item": entry_to_dict(removed),
    }


@router.get("/stats")
async def get_stats(request: Request, category: Optional[str] = None):
    """Statistiques de la bibliothèque, ou d'une seule catégorie."""
    resolved = None
    if category:
        try:
            resolved = Category.from_value(category)
        except UnknownCategoryError as e:
            return _error(str(e), 400)

    library_service = get_library_service(request)
    library = library_service.get_library_or_empty()
    return {
        "counts": library.counts(),
        "total_entries": library.total_entries,
        **asdict(library_service.stats(resolved)),
    }


@router.get("/search")
async def search_entries(
    request: Request,
    q: str = Query(default=""),
    category: Optional[str] = None,
    limit: Optional[int] = Query(default=None, ge=1),
):
    """Recherche par nom, groupe ou tvg-name (insensible à la casse)."""
    resolved = None
    if category:
        try:
            resolved = Category.from_value(category)
        except UnknownCategoryError as e:
            return _error(str(e), 400)

    results = get_library_service(request).search(q, resolved)
    page_size = limit or get_settings(request).page_size
    return [entry_to_dict(entry) for entry in results[:page_size]]


@router.get("/groups/{category}")
async def get_groups(request: Request, category: str):
    """Nombre d'entrées par groupe d'origine (group-title) dans une catégorie."""
    try:
        resolved = Category.from_value(category)
    except UnknownCategoryError as e:
        return _error(str(e), 400)

    return get_library_service(request).groups(resolved)


@router.get("/url-info")
async def url_info(url: str = Query(min_length=1)):
    """Validité d'une URL de flux et métadonnées déduites (protocole, qualité, débit)."""
    return {
        "url": url,
        "valid": is_valid_url(url),
        **asdict(extract_url_metadata(url)),
    }
