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
    created="Tipo de habilidad creado",
    updated="Tipo de habilidad actualizado",
    create_failed="No se pudo crear el tipo de habilidad",
    update_failed="No se pudo actualizar el tipo de habilidad",
    load_failed="No se pudo cargar el tipo de habilidad",
)
LIST_MESSAGES = ListMessages(
    noun="el tipo de habilidad",
    deleted="Tipo de habilidad eliminado",
    delete_failed="No se pudo eliminar el tipo de habilidad",
    load_failed="No se pudo cargar la lista de tipos de habilidad",
)


def build_skill_type_payload(values: Dict[str, Any], skill_ids: Optional[List[int]]) -> Dict[str, Any]:
    payload = build_name_payload(values)
    if not skill_ids:
        raise ValueError("Selecciona al menos una habilidad.")
    payload["skillIds"] = [int(value) for value in skill_ids]
    return payload


def skill_type_form_state(record: Dict[str, Any]):
    skills = list(record.get("skills") or [])
    values = {field: clean_text(record.get(field)) for field in NAME_FIELDS}
    return values, ids_of(skills), skills
