from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from src.pages.forms_common import (
    FormMessages,
    ListMessages,
    clean_text,
    parse_record_id,
    require_fields,
)

MESSAGES = FormMessages(
    created="Blog creado",
    updated="Blog actualizado",
    create_failed="No se pudo crear el blog",
    update_failed="No se pudo actualizar el blog",
    load_failed="No se pudo cargar el blog",
)
LIST_MESSAGES = ListMessages(
    noun="el blog",
    deleted="Blog eliminado",
    delete_failed="No se pudo eliminar el blog",
    load_failed="No se pudo cargar la lista de blogs",
)
TEXT_FIELDS = (
    "title",
    "titleEng",
    "cleanUrlTitle",
    "descriptionShort",
    "description",
    "descriptionShortEng",
    "descriptionEng",
)
REQUIRED_FIELDS = {
    "title": "Título",
    "titleEng": "Título (inglés)",
    "descriptionShort": "Descripción corta",
    "descriptionShortEng": "Descripción corta (inglés)",
    "description": "Descripción",
    "descriptionEng": "Descripción (inglés)",
}
LIST_COLUMNS = (("ID", "id"), ("Título", "title"), ("Título (inglés)", "titleEng"), ("URL limpia", "cleanUrlTitle"))


def _first(ids: Optional[List[int]]) -> Optional[int]:
    return int(ids[0]) if ids else None


def build_blog_payload(
    values: Dict[str, Any],
    image_ids: Optional[List[int]],
    video_ids: Optional[List[int]],
    blog_type_id: Any = None,
) -> Dict[str, Any]:
    require_fields(values, REQUIRED_FIELDS)
    image_id = _first(image_ids)
    video_id = _first(video_ids)
    if image_id is None:
        raise ValueError("Selecciona una imagen.")
    if video_id is None:
        raise ValueError("Selecciona un video.")
    payload: Dict[str, Any] = {field: clean_text(values.get(field)) for field in TEXT_FIELDS}
    # The backend derives the slug from the title when none is sent.
    if not payload["cleanUrlTitle"]:
        del payload["cleanUrlTitle"]
    payload["imageUrlId"] = image_id
    payload["videoUrlId"] = video_id
    type_id = parse_record_id(blog_type_id)
    if type_id is not None:
        payload["blogTypeId"] = type_id
    return payload


def blog_type_choices(blog_types: Optional[List[Dict[str, Any]]]) -> List[Tuple[str, int]]:
    choices = []
    for row in blog_types or []:
        type_id = parse_record_id(row.get("id"))
        if type_id is not None:
            choices.append((str(row.get("name") or type_id), type_id))
    return choices


def _single(record: Optional[Dict[str, Any]]) -> Tuple[List[int], Optional[Dict[str, Any]]]:
    if not record or record.get("id") is None:
        return [], None
    return [int(record["id"])], record


def blog_form_state(record: Dict[str, Any]):
    """
    Split a blog record into text values and the (ids, row) pairs for image and
    video. ``values["blogTypeId"]`` holds the nested blog type's id or None.
    """
    values: Dict[str, Any] = {field: clean_text(record.get(field)) for field in TEXT_FIELDS}
    values["blogTypeId"] = parse_record_id((record.get("blogType") or {}).get("id"))
    return values, _single(record.get("imageUrl")), _single(record.get("videoUrl"))
