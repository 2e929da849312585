import gradio as gr

from src.pages.blog_type.core_blog_type import LIST_MESSAGES, MESSAGES
from src.pages.name_records import NameRecordPage, make_name_record_app
from src.providers import (
    create_blog_type,
    delete_blog_type,
    get_blog_type,
    get_blog_types,
    update_blog_type,
)

ROUTE = "/blog-type"

BLOG_TYPE_PAGE = NameRecordPage(
    route=ROUTE,
    prefix="blog-type",
    heading="Tipo de blog",
    list_title="Tipos de blog",
    save_label="Guardar tipo de blog",
    messages=MESSAGES,
    list_messages=LIST_MESSAGES,
    fetch=get_blog_types,
    create=create_blog_type,
    delete=delete_blog_type,
    get=get_blog_type,
    update=update_blog_type,
)


def make_blog_type_app() -> gr.Blocks:
    return make_name_record_app(BLOG_TYPE_PAGE)
