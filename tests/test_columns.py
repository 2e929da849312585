"""Tests for table rendering."""

from src.components.resource_selector.columns import (
    EMPTY_MESSAGE,
    LOADING_MESSAGE,
    Column,
    choice_label,
    name_columns,
    render_table_html,
)
from src.components.resource_selector.row_sources import RowView


def test_missing_rows_render_an_empty_table():
    html = render_table_html(RowView(rows=None), name_columns())
    assert "<tbody>" in html
    assert "data-id" not in html
    assert EMPTY_MESSAGE in html
    assert EMPTY_MESSAGE in render_table_html(None, name_columns())


def test_loading_and_error_states():
    assert LOADING_MESSAGE in render_table_html(RowView(loading=True), name_columns())
    assert "Algo falló" in render_table_html(RowView(error="Algo falló"), name_columns())


def test_rows_are_escaped_and_selection_marked():
    view = RowView.of([{"id": 1, "name": "<b>Go</b>", "nameEng": "Go"}, {"id": 2, "name": "Rust"}])
    html = render_table_html(view, name_columns(), selected_ids=[2])
    assert "&lt;b&gt;Go&lt;/b&gt;" in html
    assert "<tr data-id='2' class='row-selected'>" in html
    assert "<tr data-id='1'>" in html


def test_custom_cell_renderer():
    column = Column("Extra", "x", lambda value, row: f"<i>{row['id']}:{value}</i>")
    assert column.cell_html({"id": 3, "x": "y"}) == "<i>3:y</i>"


def test_choice_label():
    assert choice_label({"id": 4, "name": "Docker"}) == "#4 · Docker"
