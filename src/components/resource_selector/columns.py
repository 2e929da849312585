from __future__ import annotations

import html as html_utils
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from src.components.resource_selector.row_sources import RowView

Row = Dict[str, Any]
CellRenderer = Callable[[Any, Row], str]

EMPTY_MESSAGE = "Sin datos"
LOADING_MESSAGE = "Cargando..."


@dataclass(frozen=True)
class Column:
    title: str
    key: str
    render: Optional[CellRenderer] = None

    def cell_html(self, row: Row) -> str:
        value = row.get(self.key)
        if self.render is not None:
            return self.render(value, row)
        if value is None:
            return ""
        return html_utils.escape(str(value))


def name_columns() -> List[Column]:
    return [
        Column("ID", "id"),
        Column("Nombre", "name"),
        Column("Nombre (inglés)", "nameEng"),
    ]


def _message_row(message: str, colspan: int, css_class: str) -> str:
    return (
        f"<tr class='{css_class}'><td colspan='{colspan}'>"
        f"{html_utils.escape(message)}</td></tr>"
    )


def render_table_html(
    view: Optional[RowView],
    columns: Iterable[Column],
    selected_ids: Iterable[int] = (),
) -> str:
    columns = list(columns)
    view = view or RowView()
    rows = view.rows or []
    selected = {int(value) for value in selected_ids}
    colspan = max(1, len(columns))

    header_cells = "".join(f"<th>{html_utils.escape(col.title)}</th>" for col in columns)
    body: List[str] = []
    if view.loading:
        body.append(_message_row(LOADING_MESSAGE, colspan, "selector-loading"))
    elif view.error:
        body.append(_message_row(view.error, colspan, "selector-error"))
    elif not rows:
        body.append(_message_row(EMPTY_MESSAGE, colspan, "no-data"))
    else:
        for row in rows:
            row_id = row.get("id")
            try:
                is_selected = int(row_id) in selected
            except (TypeError, ValueError):
                is_selected = False
            row_class = " class='row-selected'" if is_selected else ""
            cells = "".join(
                f"<td data-column='{html_utils.escape(col.key, quote=True)}'>{col.cell_html(row)}</td>"
                for col in columns
            )
            body.append(
                f"<tr data-id='{html_utils.escape(str(row_id), quote=True)}'{row_class}>{cells}</tr>"
            )

    return (
        "<div class='resource-selector-table'>"
        f"<table><thead><tr>{header_cells}</tr></thead>"
        f"<tbody>{''.join(body)}</tbody></table>"
        "</div>"
    )


def choice_label(row: Row) -> str:
    name = row.get("name") or row.get("title") or ""
    return f"#{row.get('id')} · {name}".strip()
