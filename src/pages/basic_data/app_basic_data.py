import logging

import gradio as gr

from src.css.utils import load_page_css
from src.login_logic import client_for
from src.page_timing import timed_page_load
from src.pages.basic_data.core_basic_data import (
    MESSAGES,
    SOCIAL_NETWORKS,
    TEXT_FIELDS,
    basic_data_form_state,
    build_basic_data_payload,
)
from src.pages.forms_common import load_record, save_record, status_error
from src.pages.header import render_header, with_light_mode_head
from src.providers import BASIC_DATA_RECORD_ID, get_basic_data, update_basic_data

logger = logging.getLogger(__name__)

ROUTE = "/basic-data"
DATE_PLACEHOLDER = "YYYY-MM-DD"


def _header_basic_data(request: gr.Request):
    return render_header(path=ROUTE, request=request)


def _load_basic_data(request: gr.Request):
    record, message = load_record(client_for(request), BASIC_DATA_RECORD_ID, get_basic_data, MESSAGES)
    if record is None:
        return (*[gr.update() for _ in TEXT_FIELDS], message)
    values = basic_data_form_state(record)
    return (*[values[field] for field in TEXT_FIELDS], "")


def _submit_basic_data(
    first_name,
    others_name,
    first_sur_name,
    others_sur_name,
    date_birth,
    located,
    located_eng,
    start_working_date,
    greeting,
    greeting_eng,
    email,
    instagram,
    linkedin,
    x,
    github,
    description,
    description_eng,
    request: gr.Request,
):
    texts = (
        first_name,
        others_name,
        first_sur_name,
        others_sur_name,
        date_birth,
        located,
        located_eng,
        start_working_date,
        greeting,
        greeting_eng,
        email,
        instagram,
        linkedin,
        x,
        github,
        description,
        description_eng,
    )
    try:
        payload = build_basic_data_payload(dict(zip(TEXT_FIELDS, texts)))
    except ValueError as exc:
        return status_error(str(exc))
    return save_record(
        client_for(request),
        record_id=BASIC_DATA_RECORD_ID,
        payload=payload,
        create=None,
        update=update_basic_data,
        messages=MESSAGES,
    )


def make_basic_data_app() -> gr.Blocks:
    with gr.Blocks(
        title="Datos básicos",
        css=load_page_css("forms.css"),
        head=with_light_mode_head(None),
    ) as basic_data_app:
        hdr = gr.HTML()
        basic_data_app.load(timed_page_load(ROUTE, _header_basic_data), outputs=[hdr])

        with gr.Column(elem_id="form-shell"):
            gr.Markdown("## Datos básicos")
            with gr.Row():
                first_name = gr.Textbox(label="Nombre")
                others_name = gr.Textbox(label="Otros nombres")
            with gr.Row():
                first_sur_name = gr.Textbox(label="Apellido")
                others_sur_name = gr.Textbox(label="Otros apellidos")
            with gr.Row():
                date_birth = gr.Textbox(label="Fecha de nacimiento", placeholder=DATE_PLACEHOLDER)
                start_working_date = gr.Textbox(label="Fecha de inicio laboral", placeholder=DATE_PLACEHOLDER)
            with gr.Row():
                located = gr.Textbox(label="Ubicación")
                located_eng = gr.Textbox(label="Ubicación (inglés)")
            with gr.Row():
                greeting = gr.Textbox(label="Saludo", lines=2)
                greeting_eng = gr.Textbox(label="Saludo (inglés)", lines=2)
            email = gr.Textbox(label="Correo", type="email")
            with gr.Row():
                instagram = gr.Textbox(label=SOCIAL_NETWORKS["instagram"].label, placeholder="usuario")
                linkedin = gr.Textbox(label=SOCIAL_NETWORKS["linkedin"].label, placeholder="usuario")
            with gr.Row():
                x = gr.Textbox(label=SOCIAL_NETWORKS["x"].label, placeholder="usuario")
                github = gr.Textbox(label=SOCIAL_NETWORKS["github"].label, placeholder="usuario")
            description = gr.Textbox(label="Descripción", lines=5)
            description_eng = gr.Textbox(label="Descripción (inglés)", lines=5)

            save_btn = gr.Button("Guardar datos", variant="primary")
            status = gr.Markdown("")

        # Order matches TEXT_FIELDS.
        form_inputs = [
            first_name,
            others_name,
            first_sur_name,
            others_sur_name,
            date_birth,
            located,
            located_eng,
            start_working_date,
            greeting,
            greeting_eng,
            email,
            instagram,
            linkedin,
            x,
            github,
            description,
            description_eng,
        ]
        basic_data_app.load(
            timed_page_load(ROUTE, _load_basic_data, label="load_basic_data"),
            outputs=[*form_inputs, status],
        )
        save_btn.click(_submit_basic_data, inputs=form_inputs, outputs=[status])

    return basic_data_app
