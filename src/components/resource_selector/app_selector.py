import logging
from typing import Any, Callable, Iterable, List, Optional, Sequence, Union
from uuid import uuid4

import gradio as gr

from src.components.resource_selector.columns import Column, choice_label, render_table_html
from src.components.resource_selector.core_selector import (
    CLOSED,
    SelectionMode,
    SelectorState,
    apply_selection,
    can_confirm,
    cancel,
    confirm,
    count_label,
    is_open,
    normalize_ids,
    open_dialog,
    pending_ids,
    pending_rows,
)
from src.components.resource_selector.row_sources import RowSource, RowView, safe_id
from src.login_logic import client_for
from src.page_timing import timed_page_load

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[List[int], List[dict]], Any]
SeedIds = Union[Sequence[int], "gr.State", None]

CONFIRM_LABEL = "Seleccionar"
CANCEL_LABEL = "Cerrar"


class ResourceSelectorModal:
    """
    Button + modal dialog that lets a form pick rows from a row source.

    ``on_confirm(ids, rows)`` runs when the user confirms; whatever it returns is
    routed to ``confirm_outputs`` (one value per output component). The dialog
    state is per browser session and kept in ``gr.State``.
    """

    def __init__(
        self,
        *,
        title: str,
        button_label: str,
        row_source: RowSource,
        columns: Iterable[Column],
        on_confirm: ConfirmCallback,
        selection_mode: Union[SelectionMode, str, None] = SelectionMode.MULTIPLE,
        initial_selected_ids: SeedIds = None,
        disabled: bool = False,
        confirm_outputs: Optional[Sequence[Any]] = None,
    ):
        self.title = title
        self.button_label = button_label
        self.row_source = row_source
        self.columns = list(columns)
        self.on_confirm = on_confirm
        self.selection_mode = SelectionMode.coerce(selection_mode)
        self.initial_selected_ids = initial_selected_ids
        self.disabled = bool(disabled)
        self.confirm_outputs = list(confirm_outputs or [])
        self.uid = uuid4().hex[:8]

        self.selector_state: Optional[gr.State] = None
        self.rows_state: Optional[gr.State] = None
        self.seed_state: Optional[gr.State] = None
        self.open_btn: Optional[gr.Button] = None
        self.dialog: Optional[gr.Group] = None

    # --- view helpers
    def _static_seed(self) -> List[int]:
        if isinstance(self.initial_selected_ids, gr.State) or self.initial_selected_ids is None:
            return []
        return list(normalize_ids(self.initial_selected_ids))

    def _picker_update(self, state: SelectorState, view: RowView):
        choices = [(choice_label(row), int(row["id"])) for row in view.rows if "id" in row]
        page_ids = set(view.row_ids())
        on_page = [row_id for row_id in pending_ids(state) if row_id in page_ids]
        if self.selection_mode is SelectionMode.SINGLE:
            return gr.update(choices=choices, value=on_page[0] if on_page else None)
        return gr.update(choices=choices, value=on_page)

    def _view_outputs(self, state: SelectorState, view: RowView) -> tuple:
        pagination = view.pagination
        return (
            render_table_html(view, self.columns, pending_ids(state)),
            self._picker_update(state, view),
            pagination.label if pagination else "",
            gr.update(visible=pagination is not None, interactive=bool(pagination and pagination.has_previous)),
            gr.update(visible=pagination is not None, interactive=bool(pagination and pagination.has_next)),
        )

    def _selection_outputs(self, state: SelectorState) -> tuple:
        return (
            count_label(state, self.selection_mode),
            gr.update(interactive=can_confirm(state)),
        )

    # --- event handlers
    def load_rows(self, state: SelectorState, request: gr.Request = None):
        view = self.row_source.load(client_for(request), 1)
        return (view, *self._view_outputs(state or CLOSED, view))

    def handle_open(self, state: SelectorState, view: RowView, seed_ids: Optional[List[int]] = None):
        if self.disabled:
            return (state, gr.update(), *self._selection_outputs(state), *self._view_outputs(state, view))
        new_state = open_dialog(state, seed_ids, mode=self.selection_mode)
        return (
            new_state,
            gr.update(visible=True),
            *self._selection_outputs(new_state),
            *self._view_outputs(new_state, view),
        )

    def handle_select(self, value: Any, state: SelectorState, view: RowView):
        if not is_open(state):
            return (state, *self._selection_outputs(state), gr.update())
        view = view or RowView()
        if self.selection_mode is SelectionMode.SINGLE:
            chosen = list(normalize_ids([value] if value not in (None, "", []) else []))
            ids, rows = chosen, view.rows_for(chosen)
        else:
            chosen = list(normalize_ids(value or []))
            page_ids = set(view.row_ids())
            kept_ids = [row_id for row_id in pending_ids(state) if row_id not in page_ids]
            kept_rows = [row for row in pending_rows(state) if safe_id(row) in kept_ids]
            ids = kept_ids + chosen
            rows = kept_rows + view.rows_for(chosen)
        new_state = apply_selection(state, ids, rows, mode=self.selection_mode)
        return (
            new_state,
            *self._selection_outputs(new_state),
            render_table_html(view, self.columns, pending_ids(new_state)),
        )

    def _change_page(self, delta: int, state: SelectorState, view: RowView, request: Any):
        pagination = view.pagination if view else None
        if pagination is None:
            return (view, *self._view_outputs(state, view or RowView()))
        target = min(max(1, pagination.current + delta), pagination.page_count)
        new_view = self.row_source.load(client_for(request), target)
        return (new_view, *self._view_outputs(state, new_view))

    def handle_previous_page(self, state: SelectorState, view: RowView, request: gr.Request = None):
        return self._change_page(-1, state, view, request)

    def handle_next_page(self, state: SelectorState, view: RowView, request: gr.Request = None):
        return self._change_page(1, state, view, request)

    def handle_confirm(self, state: SelectorState):
        if not can_confirm(state):
            return (state, gr.update(), *[gr.update() for _ in self.confirm_outputs])
        logger.debug("Selector %s confirmed ids=%s", self.uid, pending_ids(state))
        new_state, result = confirm(state, self.on_confirm)
        return (new_state, gr.update(visible=False), *self._spread(result))

    def handle_cancel(self, state: SelectorState):
        return cancel(state), gr.update(visible=False)

    def _spread(self, result: Any) -> tuple:
        count = len(self.confirm_outputs)
        if count == 0:
            return ()
        if count == 1:
            return (result,)
        if not isinstance(result, (tuple, list)) or len(result) != count:
            raise ValueError(
                f"on_confirm must return {count} values for the configured confirm_outputs"
            )
        return tuple(result)

    # --- layout
    def render(self, page: gr.Blocks, route: str = "") -> "ResourceSelectorModal":
        self.selector_state = gr.State(CLOSED)
        self.rows_state = gr.State(self.row_source.initial_view())
        if isinstance(self.initial_selected_ids, gr.State):
            self.seed_state = self.initial_selected_ids
        else:
            self.seed_state = gr.State(self._static_seed())

        self.open_btn = gr.Button(
            self.button_label,
            variant="secondary",
            interactive=not self.disabled,
            elem_id=f"selector-open-{self.uid}",
        )
        with gr.Group(
            visible=False,
            elem_classes=["modal-overlay", "resource-selector-modal"],
        ) as dialog:
            with gr.Column(elem_classes=["modal-content"]):
                gr.Markdown(f"### {self.title}")
                count_md = gr.Markdown(
                    count_label(CLOSED, self.selection_mode),
                    elem_classes=["resource-selector-meta"],
                )
                table_html = gr.HTML(render_table_html(self.row_source.initial_view(), self.columns))
                if self.selection_mode is SelectionMode.SINGLE:
                    picker = gr.Radio(choices=[], value=None, label="Selección")
                else:
                    picker = gr.CheckboxGroup(choices=[], value=[], label="Selección")
                with gr.Row(elem_classes=["resource-selector-pager"]):
                    prev_btn = gr.Button("‹ Anterior", size="sm", visible=self.row_source.paginated)
                    pager_md = gr.Markdown("")
                    next_btn = gr.Button("Siguiente ›", size="sm", visible=self.row_source.paginated)
                with gr.Row(elem_classes=["modal-actions"]):
                    confirm_btn = gr.Button(CONFIRM_LABEL, variant="primary", interactive=False)
                    cancel_btn = gr.Button(CANCEL_LABEL, variant="secondary")
        self.dialog = dialog

        view_outputs = [table_html, picker, pager_md, prev_btn, next_btn]

        page.load(
            timed_page_load(route or "/", self.load_rows, label=f"selector_{self.uid}.load_rows"),
            inputs=[self.selector_state],
            outputs=[self.rows_state, *view_outputs],
        )

        self.open_btn.click(
            self.handle_open,
            inputs=[self.selector_state, self.rows_state, self.seed_state],
            outputs=[self.selector_state, dialog, count_md, confirm_btn, *view_outputs],
        )

        picker.input(
            self.handle_select,
            inputs=[picker, self.selector_state, self.rows_state],
            outputs=[self.selector_state, count_md, confirm_btn, table_html],
        )

        prev_btn.click(
            self.handle_previous_page,
            inputs=[self.selector_state, self.rows_state],
            outputs=[self.rows_state, *view_outputs],
        )
        next_btn.click(
            self.handle_next_page,
            inputs=[self.selector_state, self.rows_state],
            outputs=[self.rows_state, *view_outputs],
        )

        confirm_btn.click(
            self.handle_confirm,
            inputs=[self.selector_state],
            outputs=[self.selector_state, dialog, *self.confirm_outputs],
        )
        cancel_btn.click(
            self.handle_cancel,
            inputs=[self.selector_state],
            outputs=[self.selector_state, dialog],
        )
        return self


class BoundSelector:
    """
    Base for resource-specific selectors: fixes the row source, the columns and
    the default labels, and forwards everything else to ResourceSelectorModal.
    """

    default_label = "Seleccionar"

    def __init__(
        self,
        *,
        on_confirm: ConfirmCallback,
        selection_mode: Union[SelectionMode, str, None] = SelectionMode.MULTIPLE,
        button_label: Optional[str] = None,
        title: Optional[str] = None,
        initial_selected_ids: SeedIds = None,
        disabled: bool = False,
        confirm_outputs: Optional[Sequence[Any]] = None,
    ):
        self.modal = ResourceSelectorModal(
            title=title or self.default_label,
            button_label=button_label or self.default_label,
            row_source=self.build_row_source(),
            columns=self.build_columns(),
            on_confirm=on_confirm,
            selection_mode=selection_mode,
            initial_selected_ids=initial_selected_ids,
            disabled=disabled,
            confirm_outputs=confirm_outputs,
        )

    def build_row_source(self) -> RowSource:
        raise NotImplementedError

    def build_columns(self) -> List[Column]:
        raise NotImplementedError

    def render_extras(self, page: gr.Blocks, route: str) -> None:
        return None

    def render(self, page: gr.Blocks, route: str = "") -> "BoundSelector":
        self.modal.render(page, route)
        self.render_extras(page, route)
        return self
