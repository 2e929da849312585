from __future__ import annotations

from typing import Any, Dict, List, Optional

from src.pages.forms_common import (
    NAME_FIELDS,
    FormMessages,
    ListMessages,
    build_name_payload,
    clean_text,
    ids_of,
)

MESSAGES = FormMessages(
    created="Habilidad creada",
    updated="Habilidad actualizada",
    create_failed="No se pudo crear la habilidad",
    update_failed="No se pudo actualizar la habilidad",
    load_failed="No se pudo cargar la habilidad",
)
LIST_MESSAGES = ListMessages(
    noun="la habilidad",
    deleted="Habilidad eliminada",
    delete_failed="No se pudo eliminar la habilidad",
    load_failed="No se pudo cargar la lista de habilidades",
)


def build_skill_payload(values: Dict[str, Any], skill_son_ids: Optional[List[int]]) -> Dict[str, Any]:
    payload = build_name_payload(values)
    if not skill_son_ids:
        raise ValueError("Selecciona al menos una habilidad hija.")
    payload["skillSonIds"] = [int(value) for value in skill_son_ids]
    return payload


def skill_form_state(record: Dict[str, Any]):
    skill_sons = list(record.get("skillSons") or [])
    values = {field: clean_text(record.get(field)) for field in NAME_FIELDS}
    return values, ids_of(skill_sons), skill_sons
