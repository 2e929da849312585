import gradio as gr

from src.pages.label.core_label import LIST_MESSAGES, MESSAGES
from src.pages.name_records import NameRecordPage, make_name_record_app
from src.providers import create_label, delete_label, get_labels

ROUTE = "/label"

LABEL_PAGE = NameRecordPage(
    route=ROUTE,
    prefix="label",
    heading="Labels",
    list_title="Labels",
    save_label="Crear label",
    messages=MESSAGES,
    list_messages=LIST_MESSAGES,
    fetch=get_labels,
    create=create_label,
    delete=delete_label,
)


def make_label_app() -> gr.Blocks:
    return make_name_record_app(LABEL_PAGE)
