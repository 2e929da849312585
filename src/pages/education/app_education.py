import logging

import gradio as gr

from src.components.record_list import RecordList
from src.css.utils import load_page_css
from src.login_logic import client_for
from src.page_timing import timed_page_load
from src.pages.education.core_education import (
    FORM_FIELDS,
    LIST_COLUMNS,
    LIST_MESSAGES,
    MESSAGES,
    build_education_payload,
    education_form_state,
)
from src.pages.forms_common import load_record, parse_record_id, save_record, status_error
from src.pages.header import render_header, with_light_mode_head
from src.providers import (
    create_education,
    delete_education,
    get_education,
    get_educations,
    update_education,
)

logger = logging.getLogger(__name__)

ROUTE = "/education"
HIGHLIGHTS_HINT = "Un aspecto destacado por línea"


def _header_education(request: gr.Request):
    return render_header(path=ROUTE, request=request)


def _load_education(record_value, request: gr.Request):
    record_id = parse_record_id(record_value)
    record, message = load_record(client_for(request), record_id, get_education, MESSAGES)
    if record is None:
        return (*[gr.update() for _ in FORM_FIELDS], message)
    values = education_form_state(record)
    return (*[values[field] for field in FORM_FIELDS], f"Editando estudio #{record_id}.")


def _new_education():
    return (None, *["" for _ in FORM_FIELDS], "")


def _submit_education(
    record_value,
    institution,
    degree,
    degree_eng,
    area,
    area_eng,
    location,
    location_eng,
    start_date,
    end_date,
    highlights,
    highlights_eng,
    request: gr.Request,
):
    texts = (
        institution,
        degree,
        degree_eng,
        area,
        area_eng,
        location,
        location_eng,
        start_date,
        end_date,
        highlights,
        highlights_eng,
    )
    try:
        payload = build_education_payload(dict(zip(FORM_FIELDS, texts)))
    except ValueError as exc:
        return status_error(str(exc))
    return save_record(
        client_for(request),
        record_id=parse_record_id(record_value),
        payload=payload,
        create=create_education,
        update=update_education,
        messages=MESSAGES,
    )


def make_education_app() -> gr.Blocks:
    with gr.Blocks(
        title="Educación",
        css=load_page_css("forms.css"),
        head=with_light_mode_head(None),
    ) as education_app:
        hdr = gr.HTML()
        education_app.load(timed_page_load(ROUTE, _header_education), outputs=[hdr])

        with gr.Column(elem_id="form-shell"):
            gr.Markdown("## Educación")
            records = RecordList(
                prefix="education",
                title="Estudios",
                columns=LIST_COLUMNS,
                messages=LIST_MESSAGES,
                fetch=get_educations,
                delete=delete_education,
            ).render(education_app, ROUTE)

            with gr.Row(equal_height=True):
                record_id = gr.Number(label="ID (editar)", precision=0, value=None)
                load_btn = gr.Button("Cargar", variant="secondary")
                new_btn = gr.Button("Nuevo estudio", variant="secondary")
            institution = gr.Textbox(label="Institución")
            with gr.Row():
                degree = gr.Textbox(label="Título")
                degree_eng = gr.Textbox(label="Título (inglés)")
            with gr.Row():
                area = gr.Textbox(label="Área")
                area_eng = gr.Textbox(label="Área (inglés)")
            with gr.Row():
                location = gr.Textbox(label="Ubicación")
                location_eng = gr.Textbox(label="Ubicación (inglés)")
            with gr.Row():
                start_date = gr.Textbox(label="Fecha inicio", placeholder="YYYY-MM-DD")
                end_date = gr.Textbox(label="Fecha fin", placeholder="YYYY-MM-DD")
            with gr.Row():
                highlights = gr.Textbox(label="Aspectos destacados", lines=4, placeholder=HIGHLIGHTS_HINT)
                highlights_eng = gr.Textbox(
                    label="Aspectos destacados (inglés)", lines=4, placeholder=HIGHLIGHTS_HINT
                )

            save_btn = gr.Button("Guardar estudio", variant="primary")
            status = gr.Markdown("")

        # Order matches FORM_FIELDS.
        form_inputs = [
            institution,
            degree,
            degree_eng,
            area,
            area_eng,
            location,
            location_eng,
            start_date,
            end_date,
            highlights,
            highlights_eng,
        ]
        load_outputs = [*form_inputs, status]
        load_btn.click(_load_education, inputs=[record_id], outputs=load_outputs)
        records.on_edit(record_id, _load_education, load_outputs)
        new_btn.click(_new_education, inputs=None, outputs=[record_id, *load_outputs])
        save_btn.click(
            _submit_education,
            inputs=[record_id, *form_inputs],
            outputs=[status],
        ).then(records.reload, inputs=[records.rows_state], outputs=records.view_outputs)

    return education_app
