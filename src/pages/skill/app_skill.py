import logging

import gradio as gr

from src.components.record_list import RecordList
from src.components.resource_selector.columns import name_columns
from src.components.resource_selector.core_selector import SelectionMode
from src.components.resource_selector.skill_son_selector import SkillSonSelector
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
from src.pages.skill.core_skill import LIST_MESSAGES, MESSAGES, build_skill_payload, skill_form_state
from src.providers import create_skill, delete_skill, get_skill, get_skills, update_skill

logger = logging.getLogger(__name__)

ROUTE = "/skill"
EMPTY_SKILL_SONS = "Sin habilidades hijas seleccionadas"


def _header_skill(request: gr.Request):
    return render_header(path=ROUTE, request=request)


def _on_skill_sons_confirm(ids, rows):
    new_ids, new_rows = commit_multiple(ids, rows)
    return (
        new_ids if new_ids is not None else gr.update(),
        new_rows if new_rows is not None else gr.update(),
        tags_html(new_rows, EMPTY_SKILL_SONS) if new_rows is not None else gr.update(),
    )


def _load_skill(record_value, request: gr.Request):
    record_id = parse_record_id(record_value)
    record, message = load_record(client_for(request), record_id, get_skill, MESSAGES)
    if record is None:
        return (gr.update(), gr.update(), gr.update(), gr.update(), gr.update(), message)
    values, ids, rows = skill_form_state(record)
    return (
        values["name"],
        values["nameEng"],
        ids,
        rows,
        tags_html(rows, EMPTY_SKILL_SONS),
        f"Editando habilidad #{record_id}.",
    )


def _submit_skill(record_value, name, name_eng, skill_son_ids, request: gr.Request):
    try:
        payload = build_skill_payload({"name": name, "nameEng": name_eng}, skill_son_ids)
    except ValueError as exc:
        return status_error(str(exc))
    return save_record(
        client_for(request),
        record_id=parse_record_id(record_value),
        payload=payload,
        create=create_skill,
        update=update_skill,
        messages=MESSAGES,
    )


def make_skill_app() -> gr.Blocks:
    with gr.Blocks(
        title="Habilidades",
        css=load_page_css("forms.css"),
        head=with_light_mode_head(None),
    ) as skill_app:
        hdr = gr.HTML()
        skill_app.load(timed_page_load(ROUTE, _header_skill), outputs=[hdr])

        skill_son_ids = gr.State([])
        skill_son_rows = gr.State([])

        with gr.Column(elem_id="form-shell"):
            gr.Markdown("## Habilidad")
            records = RecordList(
                prefix="skill",
                title="Habilidades",
                columns=name_columns(),
                messages=LIST_MESSAGES,
                fetch=get_skills,
                delete=delete_skill,
            ).render(skill_app, ROUTE)

            with gr.Row(equal_height=True):
                record_id = gr.Number(label="ID (editar)", precision=0, value=None)
                load_btn = gr.Button("Cargar", variant="secondary")
            with gr.Row():
                name = gr.Textbox(label="Nombre")
                name_eng = gr.Textbox(label="Nombre (inglés)")

            gr.Markdown("#### Habilidades hijas")
            summary = gr.HTML(tags_html([], EMPTY_SKILL_SONS))
            SkillSonSelector(
                selection_mode=SelectionMode.MULTIPLE,
                initial_selected_ids=skill_son_ids,
                on_confirm=_on_skill_sons_confirm,
                confirm_outputs=[skill_son_ids, skill_son_rows, summary],
            ).render(skill_app, ROUTE)

            save_btn = gr.Button("Guardar habilidad", variant="primary")
            status = gr.Markdown("")

        load_outputs = [name, name_eng, skill_son_ids, skill_son_rows, summary, status]
        load_btn.click(_load_skill, inputs=[record_id], outputs=load_outputs)
        records.on_edit(record_id, _load_skill, load_outputs)
        save_btn.click(
            _submit_skill,
            inputs=[record_id, name, name_eng, skill_son_ids],
            outputs=[status],
        ).then(records.reload, inputs=[records.rows_state], outputs=records.view_outputs)

    return skill_app
