import logging

import gradio as gr

from src.components.record_list import RecordList
from src.components.resource_selector.columns import name_columns
from src.components.resource_selector.core_selector import SelectionMode
from src.components.resource_selector.skill_selector import SkillSelector
from src.css.utils import load_page_css
from src.login_logic import client_for
from src.page_timing import timed_page_load
from src.pages.forms_common import (
    commit_multiple,
    load_record,
    parse_record_id,
    save_record,
    status_error,
    tags_html,
)
from src.pages.header import render_header, with_light_mode_head
from src.pages.skill_type.core_skill_type import (
    LIST_MESSAGES,
    MESSAGES,
    build_skill_type_payload,
    skill_type_form_state,
)
from src.providers import (
    create_skill_type,
    delete_skill_type,
    get_skill_type,
    get_skill_types,
    update_skill_type,
)

logger = logging.getLogger(__name__)

ROUTE = "/skill-type"
EMPTY_SKILLS = "Sin habilidades seleccionadas"


def _header_skill_type(request: gr.Request):
    return render_header(path=ROUTE, request=request)


def _on_skills_confirm(ids, rows):
    new_ids, new_rows = commit_multiple(ids, rows)
    return (
        new_ids if new_ids is not None else gr.update(),
        new_rows if new_rows is not None else gr.update(),
        tags_html(new_rows, EMPTY_SKILLS) if new_rows is not None else gr.update(),
    )


def _load_skill_type(record_value, request: gr.Request):
    record_id = parse_record_id(record_value)
    record, message = load_record(client_for(request), record_id, get_skill_type, MESSAGES)
    if record is None:
        return (gr.update(), gr.update(), gr.update(), gr.update(), gr.update(), message)
    values, ids, rows = skill_type_form_state(record)
    return (
        values["name"],
        values["nameEng"],
        ids,
        rows,
        tags_html(rows, EMPTY_SKILLS),
        f"Editando tipo de habilidad #{record_id}.",
    )


def _submit_skill_type(record_value, name, name_eng, skill_ids, request: gr.Request):
    try:
        payload = build_skill_type_payload({"name": name, "nameEng": name_eng}, skill_ids)
    except ValueError as exc:
        return status_error(str(exc))
    return save_record(
        client_for(request),
        record_id=parse_record_id(record_value),
        payload=payload,
        create=create_skill_type,
        update=update_skill_type,
        messages=MESSAGES,
    )


def make_skill_type_app() -> gr.Blocks:
    with gr.Blocks(
        title="Tipos de habilidad",
        css=load_page_css("forms.css"),
        head=with_light_mode_head(None),
    ) as skill_type_app:
        hdr = gr.HTML()
        skill_type_app.load(timed_page_load(ROUTE, _header_skill_type), outputs=[hdr])

        skill_ids = gr.State([])
        skill_rows = gr.State([])

        with gr.Column(elem_id="form-shell"):
            gr.Markdown("## Tipo de habilidad")
            records = RecordList(
                prefix="skill-type",
                title="Tipos de habilidad",
                columns=name_columns(),
                messages=LIST_MESSAGES,
                fetch=get_skill_types,
                delete=delete_skill_type,
            ).render(skill_type_app, ROUTE)

            with gr.Row(equal_height=True):
                record_id = gr.Number(label="ID (editar)", precision=0, value=None)
                load_btn = gr.Button("Cargar", variant="secondary")
            with gr.Row():
                name = gr.Textbox(label="Nombre")
                name_eng = gr.Textbox(label="Nombre (inglés)")

            gr.Markdown("#### Habilidades")
            summary = gr.HTML(tags_html([], EMPTY_SKILLS))
            SkillSelector(
                selection_mode=SelectionMode.MULTIPLE,
                initial_selected_ids=skill_ids,
                on_confirm=_on_skills_confirm,
                confirm_outputs=[skill_ids, skill_rows, summary],
            ).render(skill_type_app, ROUTE)

            save_btn = gr.Button("Guardar tipo de habilidad", variant="primary")
            status = gr.Markdown("")

        load_outputs = [name, name_eng, skill_ids, skill_rows, summary, status]
        load_btn.click(_load_skill_type, inputs=[record_id], outputs=load_outputs)
        records.on_edit(record_id, _load_skill_type, load_outputs)
        save_btn.click(
            _submit_skill_type,
            inputs=[record_id, name, name_eng, skill_ids],
            outputs=[status],
        ).then(records.reload, inputs=[records.rows_state], outputs=records.view_outputs)

    return skill_type_app
