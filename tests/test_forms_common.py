"""Tests for the helpers shared by the content forms."""

from unittest.mock import MagicMock

import pytest

from src.api_client import ApiError, UnauthorizedError
from src.pages.forms_common import (
    SESSION_EXPIRED_MESSAGE,
    FormMessages,
    ListMessages,
    build_name_payload,
    commit_multiple,
    commit_single,
    delete_record,
    ids_of,
    image_summary_html,
    join_lines,
    load_record,
    parse_record_id,
    require_fields,
    save_record,
    split_lines,
    tags_html,
    video_summary_html,
)
from src.providers import ProviderResult

MESSAGES = FormMessages(
    created="Creado",
    updated="Actualizado",
    create_failed="No se pudo crear",
    update_failed="No se pudo actualizar",
    load_failed="No se pudo cargar",
)


def test_commit_keeps_current_values_when_confirm_is_empty():
    assert commit_multiple([], []) == (None, None)
    assert commit_multiple([1, 2], []) == ([1, 2], None)
    assert commit_single([4, 5], [{"id": 4}]) == (4, {"id": 4})
    assert commit_single([], []) == (None, None)


def test_parse_record_id():
    assert parse_record_id(None) is None
    assert parse_record_id("") is None
    assert parse_record_id(3.0) == 3
    assert parse_record_id("7") == 7
    assert parse_record_id(0) is None
    assert parse_record_id("abc") is None


def test_require_fields_lists_missing_labels():
    with pytest.raises(ValueError, match="Nombre, Empresa"):
        require_fields({"name": " ", "company": None, "ok": "x"}, {"name": "Nombre", "company": "Empresa", "ok": "Ok"})
    require_fields({"name": "x"}, {"name": "Nombre"})


def test_ids_of_skips_rows_without_ids():
    assert ids_of([{"id": 1}, {"name": "x"}, {"id": "3"}]) == [1, 3]
    assert ids_of(None) == []


def test_summaries():
    assert "Sin datos" in tags_html([], "Sin datos")
    assert "&lt;Go&gt;" in tags_html([{"id": 1, "name": "<Go>"}], "")
    assert "selection-thumb" in image_summary_html({"id": 1, "url": "https://cdn/x.png", "name": "x"})
    assert "hqdefault.jpg" in video_summary_html({"id": 1, "url": "https://youtu.be/ABCDEFGHIJK"})
    assert "URL inválida" in video_summary_html({"id": 1, "url": "https://example.com"})


def test_save_record_creates_or_updates():
    create = MagicMock(return_value=ProviderResult(201))
    update = MagicMock(return_value=ProviderResult(200))
    client = MagicMock()

    assert save_record(client, record_id=None, payload={"a": 1}, create=create, update=update, messages=MESSAGES) == "✅ Creado"
    create.assert_called_once_with(client, {"a": 1})

    assert save_record(client, record_id=5, payload={"a": 1}, create=create, update=update, messages=MESSAGES) == "✅ Actualizado"
    update.assert_called_once_with(client, 5, {"a": 1})


def test_save_record_reports_failures():
    client = MagicMock()
    failing = MagicMock(side_effect=ApiError("boom", status=500))
    expired = MagicMock(side_effect=UnauthorizedError("expired", status=401))
    accepted = MagicMock(return_value=ProviderResult(202))

    assert save_record(client, record_id=None, payload={}, create=failing, update=None, messages=MESSAGES) == "❌ No se pudo crear"
    assert save_record(client, record_id=2, payload={}, create=None, update=expired, messages=MESSAGES) == f"❌ {SESSION_EXPIRED_MESSAGE}"
    assert save_record(client, record_id=2, payload={}, create=None, update=accepted, messages=MESSAGES) == "❌ No se pudo actualizar"


def test_load_record():
    client = MagicMock()
    record, message = load_record(client, 3, lambda _c, record_id: {"id": record_id}, MESSAGES)
    assert record == {"id": 3}
    assert message == ""

    record, message = load_record(client, None, MagicMock(), MESSAGES)
    assert record is None
    assert message.startswith("❌")

    record, message = load_record(client, 3, MagicMock(side_effect=ApiError("x")), MESSAGES)
    assert (record, message) == (None, "❌ No se pudo cargar")


LIST_MESSAGES = ListMessages(
    noun="el label",
    deleted="Eliminado",
    delete_failed="No se pudo eliminar",
    load_failed="No se pudo cargar la lista",
    in_use="Está en uso",
)


def test_confirm_prompt_names_the_record():
    assert LIST_MESSAGES.confirm_prompt(7) == "¿Está seguro de eliminar el label con id 7?"


def test_split_and_join_lines():
    assert split_lines(" uno \n\n dos\n") == ["uno", "dos"]
    assert split_lines(["a", " ", None, "b "]) == ["a", "b"]
    assert split_lines(None) == []
    assert join_lines(["uno", "", "dos"]) == "uno\ndos"
    assert join_lines(None) == ""


def test_delete_record_outcomes():
    client = MagicMock()
    ok = MagicMock(return_value=ProviderResult(204))

    assert delete_record(client, 3, ok, LIST_MESSAGES) == "✅ Eliminado"
    ok.assert_called_once_with(client, 3)
    assert delete_record(client, None, ok, LIST_MESSAGES).startswith("❌ Indica un ID")
    assert ok.call_count == 1

    in_use = MagicMock(side_effect=ApiError("Precondition Failed", status=412))
    assert delete_record(client, 3, in_use, LIST_MESSAGES) == "❌ Está en uso"

    plain = ListMessages(noun="x", deleted="ok", delete_failed="No se pudo eliminar", load_failed="")
    assert delete_record(client, 3, in_use, plain) == "❌ No se pudo eliminar"

    expired = MagicMock(side_effect=UnauthorizedError("expired", status=401))
    assert delete_record(client, 3, expired, LIST_MESSAGES) == f"❌ {SESSION_EXPIRED_MESSAGE}"

    refused = MagicMock(return_value=ProviderResult(202))
    assert delete_record(client, 3, refused, LIST_MESSAGES) == "❌ No se pudo eliminar"


def test_name_payload_trims_and_requires_both_names():
    assert build_name_payload({"name": " Go ", "nameEng": "Go"}) == {"name": "Go", "nameEng": "Go"}
    with pytest.raises(ValueError, match="Nombre \\(inglés\\)"):
        build_name_payload({"name": "Go", "nameEng": " "})
