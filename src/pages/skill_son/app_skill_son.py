import gradio as gr

from src.pages.name_records import NameRecordPage, make_name_record_app
from src.pages.skill_son.core_skill_son import LIST_MESSAGES, MESSAGES
from src.providers import (
    create_skill_son,
    delete_skill_son,
    get_skill_son,
    get_skill_sons,
    update_skill_son,
)

ROUTE = "/skill-son"

SKILL_SON_PAGE = NameRecordPage(
    route=ROUTE,
    prefix="skill-son",
    heading="Habilidad hija",
    list_title="Habilidades hijas",
    save_label="Guardar habilidad hija",
    messages=MESSAGES,
    list_messages=LIST_MESSAGES,
    fetch=get_skill_sons,
    create=create_skill_son,
    delete=delete_skill_son,
    get=get_skill_son,
    update=update_skill_son,
)


def make_skill_son_app() -> gr.Blocks:
    return make_name_record_app(SKILL_SON_PAGE)
