import logging

import gradio as gr

from src.components.resource_selector.core_selector import SelectionMode
from src.components.resource_selector.image_selector import ImageSelector
from src.components.resource_selector.label_selector import LabelSelector
from src.css.utils import load_page_css
from src.login_logic import client_for
from src.page_timing import timed_page_load
from src.pages.forms_common import (
    commit_multiple,
    commit_single,
    image_summary_html,
    load_record,
    save_record,
    status_error,
    tags_html,
)
from src.pages.header import render_header, with_light_mode_head
from src.pages.home_content.core_home_content import (
    HOME_RECORD_ID,
    MESSAGES,
    TEXT_FIELDS,
    build_home_payload,
    home_form_state,
)
from src.providers import get_home, update_home

logger = logging.getLogger(__name__)

ROUTE = "/home-content"
EMPTY_LABELS = "Sin labels seleccionados"


def _header_home_content(request: gr.Request):
    return render_header(path=ROUTE, request=request)


def _on_image_confirm(ids, rows):
    new_id, new_row = commit_single(ids, rows)
    return (
        [new_id] if new_id is not None else gr.update(),
        new_row if new_row is not None else gr.update(),
        image_summary_html(new_row) if new_row is not None else gr.update(),
    )


def _on_labels_confirm(ids, rows):
    new_ids, new_rows = commit_multiple(ids, rows)
    return (
        new_ids if new_ids is not None else gr.update(),
        new_rows if new_rows is not None else gr.update(),
        tags_html(new_rows, EMPTY_LABELS) if new_rows is not None else gr.update(),
    )


def _load_home(request: gr.Request):
    record, message = load_record(client_for(request), HOME_RECORD_ID, get_home, MESSAGES)
    if record is None:
        return (*[gr.update() for _ in TEXT_FIELDS], *[gr.update()] * 6, message)
    values, image_ids, image_row, label_ids, label_rows = home_form_state(record)
    return (
        *[values[field] for field in TEXT_FIELDS],
        image_ids,
        image_row,
        image_summary_html(image_row),
        label_ids,
        label_rows,
        tags_html(label_rows, EMPTY_LABELS),
        "",
    )


def _submit_home(
    greeting,
    greeting_eng,
    button_work,
    button_work_eng,
    button_contact,
    button_contact_eng,
    image_ids,
    label_ids,
    request: gr.Request,
):
    texts = (greeting, greeting_eng, button_work, button_work_eng, button_contact, button_contact_eng)
    try:
        payload = build_home_payload(dict(zip(TEXT_FIELDS, texts)), image_ids, label_ids)
    except ValueError as exc:
        return status_error(str(exc))
    return save_record(
        client_for(request),
        record_id=HOME_RECORD_ID,
        payload=payload,
        create=None,
        update=update_home,
        messages=MESSAGES,
    )


def make_home_content_app() -> gr.Blocks:
    with gr.Blocks(
        title="Contenido de inicio",
        css=load_page_css("forms.css"),
        head=with_light_mode_head(None),
    ) as home_content_app:
        hdr = gr.HTML()
        home_content_app.load(timed_page_load(ROUTE, _header_home_content), outputs=[hdr])

        image_ids = gr.State([])
        image_row = gr.State(None)
        label_ids = gr.State([])
        label_rows = gr.State([])

        with gr.Column(elem_id="form-shell"):
            gr.Markdown("## Contenido de inicio")
            with gr.Row():
                greeting = gr.Textbox(label="Saludo", lines=2)
                greeting_eng = gr.Textbox(label="Saludo (inglés)", lines=2)
            with gr.Row():
                button_work = gr.Textbox(label="Botón de trabajo")
                button_work_eng = gr.Textbox(label="Botón de trabajo (inglés)")
            with gr.Row():
                button_contact = gr.Textbox(label="Botón de contacto")
                button_contact_eng = gr.Textbox(label="Botón de contacto (inglés)")

            with gr.Row():
                with gr.Column():
                    gr.Markdown("#### Imagen")
                    image_summary = gr.HTML(image_summary_html(None))
                    ImageSelector(
                        selection_mode=SelectionMode.SINGLE,
                        button_label="Seleccionar imagen",
                        title="Seleccionar imagen",
                        initial_selected_ids=image_ids,
                        on_confirm=_on_image_confirm,
                        confirm_outputs=[image_ids, image_row, image_summary],
                    ).render(home_content_app, ROUTE)
                with gr.Column():
                    gr.Markdown("#### Labels")
                    labels_summary = gr.HTML(tags_html([], EMPTY_LABELS))
                    LabelSelector(
                        selection_mode=SelectionMode.MULTIPLE,
                        initial_selected_ids=label_ids,
                        on_confirm=_on_labels_confirm,
                        confirm_outputs=[label_ids, label_rows, labels_summary],
                    ).render(home_content_app, ROUTE)

            save_btn = gr.Button("Guardar contenido", variant="primary")
            status = gr.Markdown("")

        text_inputs = [greeting, greeting_eng, button_work, button_work_eng, button_contact, button_contact_eng]
        home_content_app.load(
            timed_page_load(ROUTE, _load_home, label="load_home"),
            outputs=[
                *text_inputs,
                image_ids,
                image_row,
                image_summary,
                label_ids,
                label_rows,
                labels_summary,
                status,
            ],
        )
        save_btn.click(
            _submit_home,
            inputs=[*text_inputs, image_ids, label_ids],
            outputs=[status],
        )

    return home_content_app
