import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

import gradio as gr

from src.api_client import ApiClient, ApiError, UnauthorizedError
from src.components.action_bridge import ActionBridge
from src.components.resource_selector.columns import Column, render_table_html
from src.components.resource_selector.row_sources import Pagination, RowView
from src.login_logic import client_for
from src.page_timing import timed_page_load
from src.pages.forms_common import (
    SESSION_EXPIRED_MESSAGE,
    ListMessages,
    delete_record,
    parse_record_id,
)
from src.providers import ProviderResult

logger = logging.getLogger(__name__)

Row = Dict[str, Any]
FetchAll = Callable[[ApiClient], List[Row]]
FetchPage = Callable[..., Tuple[List[Row], int]]
ColumnSpec = Union[Column, Tuple[str, str]]

ACTIONS_TITLE = "Acciones"
EDIT_LABEL = "Editar"
DELETE_LABEL = "Eliminar"
DEFAULT_LIST_PAGE_SIZE = 10


class RecordList:
    """
    Table of backend records with per-row Editar / Eliminar buttons.

    Exactly one of ``fetch`` (whole list) or ``fetch_page`` (``(rows, total)``
    for one page) must be given. Deleting goes through a confirmation dialog;
    editing is wired by the page with ``on_edit``.
    """

    def __init__(
        self,
        *,
        prefix: str,
        title: str,
        columns: Iterable[ColumnSpec],
        messages: ListMessages,
        delete: Callable[[ApiClient, int], ProviderResult],
        fetch: Optional[FetchAll] = None,
        fetch_page: Optional[FetchPage] = None,
        page_size: int = DEFAULT_LIST_PAGE_SIZE,
        editable: bool = True,
    ):
        if (fetch is None) == (fetch_page is None):
            raise ValueError("RecordList needs exactly one of fetch or fetch_page")
        self.prefix = prefix
        self.title = title
        self.messages = messages
        self.delete = delete
        self.fetch = fetch
        self.fetch_page = fetch_page
        self.page_size = page_size
        self.editable = editable
        self.edit_bridge = ActionBridge(prefix, "edit")
        self.delete_bridge = ActionBridge(prefix, "delete")
        self.columns = [
            *[col if isinstance(col, Column) else Column(*col) for col in columns],
            Column(ACTIONS_TITLE, "id", self._actions_cell),
        ]

        self.rows_state: Optional[gr.State] = None
        self.status: Optional[gr.Markdown] = None
        self.view_outputs: List[Any] = []

    @property
    def paginated(self) -> bool:
        return self.fetch_page is not None

    def initial_view(self) -> RowView:
        pagination = Pagination(current=1, page_size=self.page_size, total=0) if self.paginated else None
        return RowView(loading=True, pagination=pagination)

    def _actions_cell(self, _value: Any, row: Row) -> str:
        row_id = parse_record_id(row.get("id"))
        if row_id is None:
            return ""
        buttons = []
        if self.editable:
            buttons.append(self.edit_bridge.button_html(row_id, EDIT_LABEL))
        buttons.append(self.delete_bridge.button_html(row_id, DELETE_LABEL))
        return f"<div class='row-actions'>{''.join(buttons)}</div>"

    def load(self, client: ApiClient, page: int = 1) -> RowView:
        page = max(1, int(page or 1))
        try:
            if self.fetch_page is not None:
                rows, total = self.fetch_page(client, page=page, page_size=self.page_size)
                pagination = Pagination(current=page, page_size=self.page_size, total=total)
                return RowView.of(rows, pagination=pagination)
            return RowView.of(self.fetch(client))
        except UnauthorizedError:
            return RowView(error=SESSION_EXPIRED_MESSAGE)
        except ApiError:
            logger.exception("Failed to load %s list (page %s)", self.prefix, page)
            return RowView(error=self.messages.load_failed)

    def _view_outputs(self, view: RowView) -> tuple:
        pagination = view.pagination
        return (
            view,
            render_table_html(view, self.columns),
            pagination.label if pagination else "",
            gr.update(visible=pagination is not None, interactive=bool(pagination and pagination.has_previous)),
            gr.update(visible=pagination is not None, interactive=bool(pagination and pagination.has_next)),
        )

    @staticmethod
    def _current_page(view: Optional[RowView]) -> int:
        return view.pagination.current if view and view.pagination else 1

    # --- event handlers
    def load_rows(self, request: gr.Request = None):
        return self._view_outputs(self.load(client_for(request), 1))

    def reload(self, view: RowView, request: gr.Request = None):
        return self._view_outputs(self.load(client_for(request), self._current_page(view)))

    def previous_page(self, view: RowView, request: gr.Request = None):
        return self._view_outputs(self.load(client_for(request), self._current_page(view) - 1))

    def next_page(self, view: RowView, request: gr.Request = None):
        pagination = view.pagination if view else None
        target = self._current_page(view) + 1
        if pagination is not None:
            target = min(target, pagination.page_count)
        return self._view_outputs(self.load(client_for(request), target))

    def ask_delete(self, key: Any):
        record_id = parse_record_id(key)
        if record_id is None:
            return None, gr.update(), gr.update()
        return record_id, gr.update(visible=True), self.messages.confirm_prompt(record_id)

    def confirm_delete(self, pending_id: Any, view: RowView, request: gr.Request = None):
        client = client_for(request)
        status = delete_record(client, parse_record_id(pending_id), self.delete, self.messages)
        return (None, status, *self._view_outputs(self.load(client, self._current_page(view))))

    def cancel_delete(self):
        return None, gr.update(visible=False)

    # --- layout
    def on_edit(self, record_input: Any, handler: Callable[..., Any], outputs: Sequence[Any]) -> None:
        """Editar copies the row id into ``record_input`` and then runs ``handler`` on it."""
        self.edit_bridge.trigger.click(
            parse_record_id,
            inputs=[self.edit_bridge.key_box],
            outputs=[record_input],
        ).then(handler, inputs=[record_input], outputs=list(outputs))

    def render(self, page: gr.Blocks, route: str = "") -> "RecordList":
        initial = self.initial_view()
        self.rows_state = gr.State(initial)
        pending_state = gr.State(None)

        with gr.Column(elem_classes=["record-list"]):
            gr.Markdown(f"### {self.title}")
            table_html = gr.HTML(render_table_html(initial, self.columns))
            with gr.Row(elem_classes=["resource-selector-pager"]):
                prev_btn = gr.Button("‹ Anterior", size="sm", visible=self.paginated)
                pager_md = gr.Markdown("")
                next_btn = gr.Button("Siguiente ›", size="sm", visible=self.paginated)
                reload_btn = gr.Button("Recargar", size="sm", variant="secondary")
            self.status = gr.Markdown("")

        self.edit_bridge.render()
        self.delete_bridge.render()

        with gr.Group(
            visible=False,
            elem_classes=["modal-overlay", "record-delete-dialog"],
        ) as delete_dialog:
            with gr.Column(elem_classes=["modal-content"]):
                prompt_md = gr.Markdown("", elem_classes=["modal-text"])
                with gr.Row(elem_classes=["modal-actions"]):
                    confirm_delete_btn = gr.Button("Sí", variant="stop")
                    cancel_delete_btn = gr.Button("No", variant="secondary")

        self.view_outputs = [self.rows_state, table_html, pager_md, prev_btn, next_btn]

        page.load(
            timed_page_load(route or "/", self.load_rows, label=f"{self.prefix}_list.load_rows"),
            inputs=None,
            outputs=self.view_outputs,
        )
        reload_btn.click(self.reload, inputs=[self.rows_state], outputs=self.view_outputs)
        prev_btn.click(self.previous_page, inputs=[self.rows_state], outputs=self.view_outputs)
        next_btn.click(self.next_page, inputs=[self.rows_state], outputs=self.view_outputs)

        self.delete_bridge.trigger.click(
            self.ask_delete,
            inputs=[self.delete_bridge.key_box],
            outputs=[pending_state, delete_dialog, prompt_md],
        )
        confirm_delete_btn.click(
            lambda: gr.update(visible=False),
            None,
            [delete_dialog],
        ).then(
            fn=self.confirm_delete,
            inputs=[pending_state, self.rows_state],
            outputs=[pending_state, self.status, *self.view_outputs],
        )
        cancel_delete_btn.click(
            self.cancel_delete,
            None,
            [pending_state, delete_dialog],
        )
        return self
