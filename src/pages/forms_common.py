from __future__ import annotations

import html as html_utils
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from src.api_client import ApiClient, ApiError, UnauthorizedError
from src.providers import ProviderResult
from src.youtube import preview_url

logger = logging.getLogger(__name__)

Row = Dict[str, Any]
SESSION_EXPIRED_MESSAGE = "La sesión expiró; vuelve a iniciar sesión."


@dataclass(frozen=True)
class FormMessages:
    created: str
    updated: str
    create_failed: str
    update_failed: str
    load_failed: str


@dataclass(frozen=True)
class ListMessages:
    noun: str
    deleted: str
    delete_failed: str
    load_failed: str
    # Shown on 412, when other records still reference the one being deleted.
    in_use: Optional[str] = None

    def confirm_prompt(self, record_id: Any) -> str:
        return f"¿Está seguro de eliminar {self.noun} con id {record_id}?"


def status_ok(message: str) -> str:
    return f"✅ {message}"


def status_error(message: str) -> str:
    return f"❌ {message}"


def parse_record_id(value: Any) -> Optional[int]:
    if value in (None, ""):
        return None
    try:
        record_id = int(float(value))
    except (TypeError, ValueError):
        return None
    return record_id if record_id > 0 else None


def clean_text(value: Any) -> str:
    return str(value or "").strip()


def require_fields(values: Dict[str, Any], labels: Dict[str, str]) -> None:
    missing = [label for key, label in labels.items() if not clean_text(values.get(key))]
    if missing:
        raise ValueError(f"Campos obligatorios: {', '.join(missing)}.")


def split_lines(value: Any) -> List[str]:
    if isinstance(value, (list, tuple)):
        items = value
    else:
        items = str(value or "").splitlines()
    return [clean_text(item) for item in items if clean_text(item)]


def join_lines(items: Any) -> str:
    return "\n".join(split_lines(items))


def ids_of(rows: Optional[List[Row]]) -> List[int]:
    ids: List[int] = []
    for row in rows or []:
        try:
            ids.append(int(row["id"]))
        except (KeyError, TypeError, ValueError):
            continue
    return ids


def commit_multiple(
    ids: List[int], rows: List[Row]
) -> Tuple[Optional[List[int]], Optional[List[Row]]]:
    """
    Fold a confirmed selection into a form's committed state.
    ``None`` means "keep what the form already has".
    """
    return (list(ids) if ids else None, list(rows) if rows else None)


def commit_single(
    ids: List[int], rows: List[Row]
) -> Tuple[Optional[int], Optional[Row]]:
    first_id = ids[0] if ids else None
    first_row = rows[0] if rows else None
    return (int(first_id) if first_id else None, first_row)


def tags_html(rows: Optional[List[Row]], empty_text: str) -> str:
    if not rows:
        return f"<div class='selection-summary'><span class='selector-muted'>{html_utils.escape(empty_text)}</span></div>"
    tags = "".join(
        f"<span class='selection-tag'>{html_utils.escape(str(row.get('name') or row.get('id')))}</span>"
        for row in rows
    )
    return f"<div class='selection-summary'>{tags}</div>"


def image_summary_html(row: Optional[Row], empty_text: str = "Sin imagen seleccionada") -> str:
    if not row:
        return f"<span class='selector-muted'>{html_utils.escape(empty_text)}</span>"
    name = html_utils.escape(str(row.get("name") or ""), quote=True)
    url = html_utils.escape(str(row.get("url") or ""), quote=True)
    return f"<img src='{url}' alt='Vista previa {name}' class='selection-thumb'/>"


def video_summary_html(row: Optional[Row], empty_text: str = "Sin video seleccionado") -> str:
    if not row:
        return f"<span class='selector-muted'>{html_utils.escape(empty_text)}</span>"
    thumbnail = preview_url(row.get("url"))
    if not thumbnail:
        return "<span class='selector-muted'>URL inválida</span>"
    name = html_utils.escape(str(row.get("name") or ""), quote=True)
    return f"<img src='{html_utils.escape(thumbnail, quote=True)}' alt='Vista previa {name}' class='selection-thumb'/>"


def save_record(
    client: ApiClient,
    *,
    record_id: Optional[int],
    payload: Dict[str, Any],
    create: Optional[Callable[[ApiClient, Dict[str, Any]], ProviderResult]],
    update: Callable[[ApiClient, int, Dict[str, Any]], ProviderResult],
    messages: FormMessages,
) -> str:
    editing = record_id is not None
    try:
        result = update(client, record_id, payload) if editing else create(client, payload)
    except UnauthorizedError:
        logger.warning("Save rejected with 401; session token is no longer valid.")
        return status_error(SESSION_EXPIRED_MESSAGE)
    except ApiError:
        logger.exception("Failed to save record (editing=%s)", editing)
        return status_error(messages.update_failed if editing else messages.create_failed)
    if not result.ok:
        logger.error("Unexpected status %s saving record", result.status)
        return status_error(messages.update_failed if editing else messages.create_failed)
    return status_ok(messages.updated if editing else messages.created)


def load_record(
    client: ApiClient,
    record_id: Optional[int],
    fetch: Callable[[ApiClient, int], Row],
    messages: FormMessages,
) -> Tuple[Optional[Row], str]:
    if record_id is None:
        return None, status_error("Indica un ID válido para cargar.")
    try:
        return fetch(client, record_id), ""
    except UnauthorizedError:
        return None, status_error(SESSION_EXPIRED_MESSAGE)
    except ApiError:
        logger.exception("Failed to load record %s", record_id)
        return None, status_error(messages.load_failed)


def delete_record(
    client: ApiClient,
    record_id: Optional[int],
    delete: Callable[[ApiClient, int], ProviderResult],
    messages: ListMessages,
) -> str:
    if record_id is None:
        return status_error("Indica un ID válido para eliminar.")
    try:
        result = delete(client, record_id)
    except UnauthorizedError:
        logger.warning("Delete rejected with 401; session token is no longer valid.")
        return status_error(SESSION_EXPIRED_MESSAGE)
    except ApiError as exc:
        if exc.status == 412 and messages.in_use:
            logger.info("Record %s is still referenced; delete refused", record_id)
            return status_error(messages.in_use)
        logger.exception("Failed to delete record %s", record_id)
        return status_error(messages.delete_failed)
    if not result.ok:
        logger.error("Unexpected status %s deleting record %s", result.status, record_id)
        return status_error(messages.delete_failed)
    return status_ok(messages.deleted)


NAME_FIELDS = ("name", "nameEng")
NAME_REQUIRED_FIELDS = {"name": "Nombre", "nameEng": "Nombre (inglés)"}


def build_name_payload(values: Dict[str, Any]) -> Dict[str, Any]:
    """Payload for the records that only carry a bilingual name."""
    require_fields(values, NAME_REQUIRED_FIELDS)
    return {field: clean_text(values.get(field)) for field in NAME_FIELDS}
