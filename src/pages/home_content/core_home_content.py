from __future__ import annotations

from typing import Any, Dict, List, Optional

from src.pages.forms_common import FormMessages, clean_text, ids_of, require_fields

HOME_RECORD_ID = 1

MESSAGES = FormMessages(
    created="Contenido de inicio actualizado",
    updated="Contenido de inicio actualizado",
    create_failed="No se pudo actualizar el contenido de inicio",
    update_failed="No se pudo actualizar el contenido de inicio",
    load_failed="No se pudo cargar el contenido de inicio",
)
TEXT_FIELDS = (
    "greeting",
    "greetingEng",
    "buttonWorkLabel",
    "buttonWorkLabelEng",
    "buttonContactLabel",
    "buttonContactLabelEng",
)
REQUIRED_FIELDS = {
    "greeting": "Saludo",
    "greetingEng": "Saludo (inglés)",
    "buttonWorkLabel": "Botón de trabajo",
    "buttonContactLabel": "Botón de contacto",
}


def build_home_payload(
    values: Dict[str, Any],
    image_ids: Optional[List[int]],
    label_ids: Optional[List[int]],
) -> Dict[str, Any]:
    require_fields(values, REQUIRED_FIELDS)
    if not image_ids:
        raise ValueError("Selecciona una imagen.")
    if not label_ids:
        raise ValueError("Selecciona al menos un label.")
    payload = {field: clean_text(values.get(field)) for field in TEXT_FIELDS}
    payload["imageUrlId"] = int(image_ids[0])
    payload["labelIds"] = [int(value) for value in label_ids]
    return payload


def home_form_state(record: Dict[str, Any]):
    values = {field: clean_text(record.get(field)) for field in TEXT_FIELDS}
    image = record.get("imageUrl") or None
    image_ids = [int(image["id"])] if image and image.get("id") is not None else []
    labels = list(record.get("labels") or [])
    return values, image_ids, image, ids_of(labels), labels
