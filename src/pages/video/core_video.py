from __future__ import annotations

from typing import Any, Dict

from src.pages.forms_common import FormMessages, ListMessages, build_name_payload, clean_text
from src.youtube import is_valid

MESSAGES = FormMessages(
    created="Video creado",
    updated="Video creado",
    create_failed="No se pudo crear el video",
    update_failed="No se pudo crear el video",
    load_failed="No se pudo cargar el video",
)
LIST_MESSAGES = ListMessages(
    noun="el video",
    deleted="Video eliminado",
    delete_failed="No se pudo eliminar el video",
    load_failed="No se pudo cargar la lista de videos",
    in_use="El video está relacionado. Elimina la relación antes de borrar.",
)
MISSING_URL_MESSAGE = "Ingresa la URL del video"
NOT_YOUTUBE_MESSAGE = "Solo se permiten videos alojados en YouTube"


def build_video_payload(values: Dict[str, Any]) -> Dict[str, Any]:
    payload = build_name_payload(values)
    url = clean_text(values.get("url"))
    if not url:
        raise ValueError(MISSING_URL_MESSAGE)
    if not is_valid(url):
        raise ValueError(NOT_YOUTUBE_MESSAGE)
    payload["url"] = url
    return payload
