"""Tests for row sources feeding the selector table."""

from unittest.mock import MagicMock, patch

from src.api_client import ApiError
from src.components.resource_selector.row_sources import (
    LOAD_ERROR_MESSAGE,
    LoadedListSource,
    Pagination,
    RemoteListingSource,
    RowView,
)


def test_pagination_math():
    pagination = Pagination(current=2, page_size=10, total=23)
    assert pagination.page_count == 3
    assert pagination.has_previous
    assert pagination.has_next
    assert pagination.label == "Página 2 de 3 · 23 registros"
    assert Pagination(current=1, page_size=10, total=0).page_count == 1


def test_remote_listing_starts_loading_then_loads_page():
    source = RemoteListingSource("image", page_size=5)
    assert source.initial_view().loading

    with patch(
        "src.components.resource_selector.row_sources.list_page",
        return_value=([{"id": 6}], 6),
    ) as fake_list_page:
        view = source.load(MagicMock(), page=2)

    fake_list_page.assert_called_once()
    assert fake_list_page.call_args.kwargs == {"page": 2, "page_size": 5}
    assert view.rows == [{"id": 6}]
    assert not view.loading
    assert view.pagination == Pagination(current=2, page_size=5, total=6)


def test_remote_listing_failure_renders_empty_page():
    source = RemoteListingSource("video", page_size=10)
    with patch(
        "src.components.resource_selector.row_sources.list_page",
        side_effect=ApiError("boom", status=500),
    ):
        view = source.load(MagicMock(), page=1)
    assert view.rows == []
    assert view.pagination.total == 0


def test_page_size_from_settings(monkeypatch):
    monkeypatch.setenv("SELECTOR_PAGE_SIZE", "25")
    assert RemoteListingSource("label").page_size == 25


def test_loaded_list_source_handles_none_and_errors():
    assert LoadedListSource(lambda _client: None).load(MagicMock()).rows == []

    def failing(_client):
        raise ApiError("down", status=503)

    view = LoadedListSource(failing, name="skills").load(MagicMock())
    assert view.error == LOAD_ERROR_MESSAGE
    assert view.rows == []
    assert not view.loading


def test_row_view_lookup_helpers():
    view = RowView.of([{"id": 1}, {"id": "2"}, {"name": "no id"}])
    assert view.row_ids() == [1, 2]
    assert view.rows_for([2]) == [{"id": "2"}]
