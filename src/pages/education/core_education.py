from __future__ import annotations

from typing import Any, Dict

from src.pages.forms_common import (
    FormMessages,
    ListMessages,
    clean_text,
    join_lines,
    require_fields,
    split_lines,
)

MESSAGES = FormMessages(
    created="Estudio creado",
    updated="Estudio actualizado",
    create_failed="No se pudo crear el estudio",
    update_failed="No se pudo actualizar el estudio",
    load_failed="No se pudo cargar el estudio",
)
LIST_MESSAGES = ListMessages(
    noun="el estudio",
    deleted="Estudio eliminado",
    delete_failed="No se pudo eliminar el estudio",
    load_failed="No se pudo cargar la lista de estudios",
)
TEXT_FIELDS = (
    "institution",
    "degree",
    "degreeEng",
    "area",
    "areaEng",
    "location",
    "locationEng",
    "startDate",
    "endDate",
)
LIST_FIELDS = ("highlights", "highlightsEng")
FORM_FIELDS = TEXT_FIELDS + LIST_FIELDS
REQUIRED_FIELDS = {
    "institution": "Institución",
    "degree": "Título",
    "degreeEng": "Título (inglés)",
    "area": "Área",
    "areaEng": "Área (inglés)",
    "location": "Ubicación",
    "locationEng": "Ubicación (inglés)",
    "startDate": "Fecha inicio",
    "endDate": "Fecha fin",
}
LIST_COLUMNS = (("ID", "id"), ("Institución", "institution"), ("Fecha inicio", "startDate"), ("Fecha fin", "endDate"))


def build_education_payload(values: Dict[str, Any]) -> Dict[str, Any]:
    require_fields(values, REQUIRED_FIELDS)
    payload: Dict[str, Any] = {field: clean_text(values.get(field)) for field in TEXT_FIELDS}
    for field in LIST_FIELDS:
        payload[field] = split_lines(values.get(field))
    return payload


def education_form_state(record: Dict[str, Any]) -> Dict[str, str]:
    values = {field: clean_text(record.get(field)) for field in TEXT_FIELDS}
    for field in LIST_FIELDS:
        values[field] = join_lines(record.get(field))
    return values
