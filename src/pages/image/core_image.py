from __future__ import annotations

import base64
from pathlib import Path
from typing import Any, Dict

from src.pages.forms_common import FormMessages, ListMessages, build_name_payload

MESSAGES = FormMessages(
    created="Imagen guardada",
    updated="Imagen guardada",
    create_failed="No se pudo guardar la imagen",
    update_failed="No se pudo guardar la imagen",
    load_failed="No se pudo cargar la imagen",
)
LIST_MESSAGES = ListMessages(
    noun="la imagen",
    deleted="Imagen eliminada",
    delete_failed="No se pudo eliminar la imagen",
    load_failed="No se pudo cargar la lista de imágenes",
    in_use="La imagen está relacionada. Elimina la relación antes de borrar.",
)
MISSING_FILE_MESSAGE = "Selecciona una imagen para continuar."

IMAGE_CONTENT_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".svg": "image/svg+xml",
}
MAX_IMAGE_BYTES = 5 * 1024 * 1024


def extract_upload_path(uploaded: object) -> str:
    if not uploaded:
        return ""
    if isinstance(uploaded, Path):
        return str(uploaded)
    if isinstance(uploaded, str):
        return uploaded
    if isinstance(uploaded, dict):
        return str(uploaded.get("path") or uploaded.get("name") or "")
    if isinstance(uploaded, (list, tuple)):
        for item in uploaded:
            candidate = extract_upload_path(item)
            if candidate:
                return candidate
    return str(getattr(uploaded, "name", "") or "")


def image_data_url(upload_path: str) -> str:
    """Read an uploaded file into the ``data:<type>;base64,...`` form the backend stores."""
    source = Path((upload_path or "").strip())
    if not upload_path or not source.is_file():
        raise ValueError(MISSING_FILE_MESSAGE)
    content_type = IMAGE_CONTENT_TYPES.get(source.suffix.lower())
    if content_type is None:
        allowed = ", ".join(sorted(IMAGE_CONTENT_TYPES))
        raise ValueError(f"Formato no soportado. Permitidos: {allowed}")
    image_bytes = source.read_bytes()
    if len(image_bytes) > MAX_IMAGE_BYTES:
        raise ValueError(f"La imagen supera el límite de {MAX_IMAGE_BYTES // (1024 * 1024)} MB.")
    encoded = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{content_type};base64,{encoded}"


def build_image_payload(values: Dict[str, Any], uploaded: object) -> Dict[str, Any]:
    payload = build_name_payload(values)
    payload["file"] = image_data_url(extract_upload_path(uploaded))
    return payload
