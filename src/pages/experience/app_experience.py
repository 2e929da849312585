import logging

import gradio as gr

from src.components.record_list import RecordList
from src.components.resource_selector.core_selector import SelectionMode
from src.components.resource_selector.skill_son_selector import SkillSonSelector
from src.css.utils import load_page_css
from src.login_logic import client_for
from src.page_timing import timed_page_load
from src.pages.experience.core_experience import (
    FORM_FIELDS,
    LIST_COLUMNS,
    LIST_MESSAGES,
    MESSAGES,
    build_experience_payload,
    experience_form_state,
)
from src.pages.forms_common import (
    commit_multiple,
    load_record,
    parse_record_id,
    save_record,
    status_error,
    tags_html,
)
from src.pages.header import render_header, with_light_mode_head
from src.providers import (
    create_experience,
    delete_experience,
    get_experience,
    get_experiences,
    update_experience,
)

logger = logging.getLogger(__name__)

ROUTE = "/experience"
EMPTY_SKILL_SONS = "Sin habilidades hijas seleccionadas"
PDF_ITEMS_HINT = "Una descripción por línea"


def _header_experience(request: gr.Request):
    return render_header(path=ROUTE, request=request)


def _on_skill_sons_confirm(ids, rows):
    new_ids, new_rows = commit_multiple(ids, rows)
    return (
        new_ids if new_ids is not None else gr.update(),
        new_rows if new_rows is not None else gr.update(),
        tags_html(new_rows, EMPTY_SKILL_SONS) if new_rows is not None else gr.update(),
    )


def _load_experience(record_value, request: gr.Request):
    record, message = load_record(client_for(request), parse_record_id(record_value), get_experience, MESSAGES)
    if record is None:
        return (*[gr.update() for _ in FORM_FIELDS], gr.update(), gr.update(), gr.update(), message)
    values, ids, rows = experience_form_state(record)
    return (
        *[values[field] for field in FORM_FIELDS],
        ids,
        rows,
        tags_html(rows, EMPTY_SKILL_SONS),
        f"Editando experiencia #{parse_record_id(record_value)}.",
    )


def _new_experience():
    return (None, *["" for _ in FORM_FIELDS], [], [], tags_html([], EMPTY_SKILL_SONS), "")


def _submit_experience(
    record_value,
    year_start,
    year_end,
    company,
    position,
    position_eng,
    location,
    location_eng,
    summary,
    summary_eng,
    summary_pdf,
    summary_pdf_eng,
    description_items_pdf,
    description_items_pdf_eng,
    skill_son_ids,
    request: gr.Request,
):
    texts = (
        year_start,
        year_end,
        company,
        position,
        position_eng,
        location,
        location_eng,
        summary,
        summary_eng,
        summary_pdf,
        summary_pdf_eng,
        description_items_pdf,
        description_items_pdf_eng,
    )
    try:
        payload = build_experience_payload(dict(zip(FORM_FIELDS, texts)), skill_son_ids)
    except ValueError as exc:
        return status_error(str(exc))
    return save_record(
        client_for(request),
        record_id=parse_record_id(record_value),
        payload=payload,
        create=create_experience,
        update=update_experience,
        messages=MESSAGES,
    )


def make_experience_app() -> gr.Blocks:
    with gr.Blocks(
        title="Experiencia",
        css=load_page_css("forms.css"),
        head=with_light_mode_head(None),
    ) as experience_app:
        hdr = gr.HTML()
        experience_app.load(timed_page_load(ROUTE, _header_experience), outputs=[hdr])

        skill_son_ids = gr.State([])
        skill_son_rows = gr.State([])

        with gr.Column(elem_id="form-shell"):
            gr.Markdown("## Experiencia")
            records = RecordList(
                prefix="experience",
                title="Experiencias",
                columns=LIST_COLUMNS,
                messages=LIST_MESSAGES,
                fetch=get_experiences,
                delete=delete_experience,
            ).render(experience_app, ROUTE)

            with gr.Row(equal_height=True):
                record_id = gr.Number(label="ID (editar)", precision=0, value=None)
                load_btn = gr.Button("Cargar", variant="secondary")
                new_btn = gr.Button("Nueva experiencia", variant="secondary")
            with gr.Row():
                year_start = gr.Textbox(label="Fecha de inicio", placeholder="YYYY-MM-DD")
                year_end = gr.Textbox(label="Fecha de fin", placeholder="YYYY-MM-DD")
            company = gr.Textbox(label="Empresa")
            with gr.Row():
                position = gr.Textbox(label="Cargo")
                position_eng = gr.Textbox(label="Cargo (inglés)")
            with gr.Row():
                location = gr.Textbox(label="Ubicación")
                location_eng = gr.Textbox(label="Ubicación (inglés)")
            with gr.Row():
                summary = gr.Textbox(label="Resumen", lines=4)
                summary_eng = gr.Textbox(label="Resumen (inglés)", lines=4)
            with gr.Row():
                summary_pdf = gr.Textbox(label="Resumen PDF", lines=3)
                summary_pdf_eng = gr.Textbox(label="Resumen PDF (inglés)", lines=3)
            with gr.Row():
                items_pdf = gr.Textbox(label="Descripciones PDF", lines=4, placeholder=PDF_ITEMS_HINT)
                items_pdf_eng = gr.Textbox(label="Descripciones PDF (inglés)", lines=4, placeholder=PDF_ITEMS_HINT)

            gr.Markdown("#### Habilidades hijas")
            skill_sons_summary = gr.HTML(tags_html([], EMPTY_SKILL_SONS))
            SkillSonSelector(
                selection_mode=SelectionMode.MULTIPLE,
                initial_selected_ids=skill_son_ids,
                on_confirm=_on_skill_sons_confirm,
                confirm_outputs=[skill_son_ids, skill_son_rows, skill_sons_summary],
            ).render(experience_app, ROUTE)

            save_btn = gr.Button("Guardar experiencia", variant="primary")
            status = gr.Markdown("")

        # Order matches FORM_FIELDS.
        form_inputs = [
            year_start,
            year_end,
            company,
            position,
            position_eng,
            location,
            location_eng,
            summary,
            summary_eng,
            summary_pdf,
            summary_pdf_eng,
            items_pdf,
            items_pdf_eng,
        ]
        load_outputs = [*form_inputs, skill_son_ids, skill_son_rows, skill_sons_summary, status]
        load_btn.click(_load_experience, inputs=[record_id], outputs=load_outputs)
        records.on_edit(record_id, _load_experience, load_outputs)
        new_btn.click(_new_experience, inputs=None, outputs=[record_id, *load_outputs])
        save_btn.click(
            _submit_experience,
            inputs=[record_id, *form_inputs, skill_son_ids],
            outputs=[status],
        ).then(records.reload, inputs=[records.rows_state], outputs=records.view_outputs)

    return experience_app
