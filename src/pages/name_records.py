import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import gradio as gr

from src.api_client import ApiClient
from src.components.record_list import RecordList
from src.components.resource_selector.columns import name_columns
from src.css.utils import load_page_css
from src.login_logic import client_for
from src.page_timing import timed_page_load
from src.pages.forms_common import (
    NAME_FIELDS,
    FormMessages,
    ListMessages,
    build_name_payload,
    clean_text,
    load_record,
    parse_record_id,
    save_record,
    status_error,
)
from src.pages.header import render_header, with_light_mode_head
from src.providers import ProviderResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NameRecordPage:
    """
    A management page for records that only carry ``name`` / ``nameEng``.
    Leaving ``get`` or ``update`` unset makes the page create/delete only.
    """

    route: str
    prefix: str
    heading: str
    list_title: str
    save_label: str
    messages: FormMessages
    list_messages: ListMessages
    fetch: Callable[[ApiClient], List[Dict[str, Any]]]
    create: Callable[[ApiClient, Dict[str, Any]], ProviderResult]
    delete: Callable[[ApiClient, int], ProviderResult]
    get: Optional[Callable[[ApiClient, int], Dict[str, Any]]] = None
    update: Optional[Callable[[ApiClient, int, Dict[str, Any]], ProviderResult]] = None

    @property
    def editable(self) -> bool:
        return self.get is not None and self.update is not None

    def header(self, request: gr.Request):
        return render_header(path=self.route, request=request)

    def load(self, record_value, request: gr.Request):
        record_id = parse_record_id(record_value)
        record, message = load_record(client_for(request), record_id, self.get, self.messages)
        if record is None:
            return gr.update(), gr.update(), message
        return (
            clean_text(record.get("name")),
            clean_text(record.get("nameEng")),
            f"Editando #{record_id}.",
        )

    def submit(self, record_value, name, name_eng, request: gr.Request):
        try:
            payload = build_name_payload(dict(zip(NAME_FIELDS, (name, name_eng))))
        except ValueError as exc:
            return status_error(str(exc))
        record_id = parse_record_id(record_value) if self.editable else None
        return save_record(
            client_for(request),
            record_id=record_id,
            payload=payload,
            create=self.create,
            update=self.update,
            messages=self.messages,
        )


def _clear_form():
    return None, "", "", ""


def make_name_record_app(page: NameRecordPage) -> gr.Blocks:
    with gr.Blocks(
        title=page.heading,
        css=load_page_css("forms.css"),
        head=with_light_mode_head(None),
    ) as app:
        hdr = gr.HTML()
        app.load(timed_page_load(page.route, page.header, label=f"_header_{page.prefix}"), outputs=[hdr])

        with gr.Column(elem_id="form-shell"):
            gr.Markdown(f"## {page.heading}")
            records = RecordList(
                prefix=page.prefix,
                title=page.list_title,
                columns=name_columns(),
                messages=page.list_messages,
                fetch=page.fetch,
                delete=page.delete,
                editable=page.editable,
            ).render(app, page.route)

            with gr.Row(equal_height=True, visible=page.editable):
                record_id = gr.Number(label="ID (editar)", precision=0, value=None)
                load_btn = gr.Button("Cargar", variant="secondary")
                new_btn = gr.Button("Nuevo", variant="secondary")
            with gr.Row():
                name = gr.Textbox(label="Nombre")
                name_eng = gr.Textbox(label="Nombre (inglés)")

            save_btn = gr.Button(page.save_label, variant="primary")
            status = gr.Markdown("")

        if page.editable:
            load_outputs = [name, name_eng, status]
            load_btn.click(page.load, inputs=[record_id], outputs=load_outputs)
            records.on_edit(record_id, page.load, load_outputs)
            new_btn.click(_clear_form, inputs=None, outputs=[record_id, *load_outputs])
        save_btn.click(
            page.submit,
            inputs=[record_id, name, name_eng],
            outputs=[status],
        ).then(records.reload, inputs=[records.rows_state], outputs=records.view_outputs)

    return app
