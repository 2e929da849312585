from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from src.pages.forms_common import (
    FormMessages,
    ListMessages,
    clean_text,
    ids_of,
    join_lines,
    require_fields,
    split_lines,
)

MESSAGES = FormMessages(
    created="Experiencia creada",
    updated="Experiencia actualizada",
    create_failed="No se pudo crear la experiencia",
    update_failed="No se pudo actualizar la experiencia",
    load_failed="No se pudo cargar la experiencia",
)
LIST_MESSAGES = ListMessages(
    noun="la experiencia",
    deleted="Experiencia eliminada",
    delete_failed="No se pudo eliminar la experiencia",
    load_failed="No se pudo cargar la lista de experiencias",
)
REQUIRED_FIELDS = {
    "company": "Empresa",
    "yearStart": "Fecha de inicio",
    "yearEnd": "Fecha de fin",
    "summary": "Resumen",
    "summaryEng": "Resumen (inglés)",
}
TEXT_FIELDS = (
    "yearStart",
    "yearEnd",
    "company",
    "position",
    "positionEng",
    "location",
    "locationEng",
    "summary",
    "summaryEng",
    "summaryPdf",
    "summaryPdfEng",
)
# Bullet lists for the PDF résumé, edited one item per line.
LIST_FIELDS = ("descriptionItemsPdf", "descriptionItemsPdfEng")
FORM_FIELDS = TEXT_FIELDS + LIST_FIELDS
LIST_COLUMNS = (("ID", "id"), ("Empresa", "company"), ("Fecha inicio", "yearStart"), ("Fecha fin", "yearEnd"))


def build_experience_payload(
    values: Dict[str, Any], skill_son_ids: Optional[List[int]]
) -> Dict[str, Any]:
    require_fields(values, REQUIRED_FIELDS)
    if not skill_son_ids:
        raise ValueError("Selecciona al menos una habilidad hija.")
    payload: Dict[str, Any] = {field: clean_text(values.get(field)) for field in TEXT_FIELDS}
    for field in LIST_FIELDS:
        payload[field] = split_lines(values.get(field))
    payload["skillSonIds"] = [int(value) for value in skill_son_ids]
    return payload


def experience_form_state(
    record: Dict[str, Any]
) -> Tuple[Dict[str, str], List[int], List[Dict[str, Any]]]:
    skill_sons = list(record.get("skillSons") or [])
    values = {field: clean_text(record.get(field)) for field in TEXT_FIELDS}
    for field in LIST_FIELDS:
        values[field] = join_lines(record.get(field))
    return values, ids_of(skill_sons), skill_sons
