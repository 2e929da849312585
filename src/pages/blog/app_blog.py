import logging

import gradio as gr

from src.api_client import ApiError
from src.components.record_list import RecordList
from src.components.resource_selector.core_selector import SelectionMode
from src.components.resource_selector.image_selector import ImageSelector
from src.components.resource_selector.video_selector import VideoSelector
from src.css.utils import load_page_css
from src.login_logic import client_for
from src.page_timing import timed_page_load
from src.pages.blog.core_blog import (
    LIST_COLUMNS,
    LIST_MESSAGES,
    MESSAGES,
    TEXT_FIELDS,
    blog_form_state,
    blog_type_choices,
    build_blog_payload,
)
from src.pages.forms_common import (
    commit_single,
    image_summary_html,
    load_record,
    parse_record_id,
    save_record,
    status_error,
    video_summary_html,
)
from src.pages.header import render_header, with_light_mode_head
from src.providers import create_blog, delete_blog, get_blog, get_blog_types, list_blogs, update_blog

logger = logging.getLogger(__name__)

ROUTE = "/blog"


def _header_blog(request: gr.Request):
    return render_header(path=ROUTE, request=request)


def _load_blog_types(request: gr.Request):
    try:
        blog_types = get_blog_types(client_for(request))
    except ApiError:
        logger.exception("Failed to load blog types")
        return gr.update(choices=[])
    return gr.update(choices=blog_type_choices(blog_types))


def _single_confirm(summary):
    def _on_confirm(ids, rows):
        new_id, new_row = commit_single(ids, rows)
        return (
            [new_id] if new_id is not None else gr.update(),
            new_row if new_row is not None else gr.update(),
            summary(new_row) if new_row is not None else gr.update(),
        )

    return _on_confirm


def _load_blog(record_value, request: gr.Request):
    record, message = load_record(client_for(request), parse_record_id(record_value), get_blog, MESSAGES)
    if record is None:
        return (*[gr.update() for _ in TEXT_FIELDS], gr.update(), *[gr.update()] * 6, message)
    values, (image_ids, image_row), (video_ids, video_row) = blog_form_state(record)
    return (
        *[values[field] for field in TEXT_FIELDS],
        values["blogTypeId"],
        image_ids,
        image_row,
        image_summary_html(image_row),
        video_ids,
        video_row,
        video_summary_html(video_row),
        f"Editando blog #{parse_record_id(record_value)}.",
    )


def _new_blog():
    return (
        None,
        *["" for _ in TEXT_FIELDS],
        None,
        [],
        None,
        image_summary_html(None),
        [],
        None,
        video_summary_html(None),
        "",
    )


def _submit_blog(
    record_value,
    title,
    title_eng,
    clean_url_title,
    description_short,
    description,
    description_short_eng,
    description_eng,
    blog_type_id,
    image_ids,
    video_ids,
    request: gr.Request,
):
    texts = (
        title,
        title_eng,
        clean_url_title,
        description_short,
        description,
        description_short_eng,
        description_eng,
    )
    try:
        payload = build_blog_payload(dict(zip(TEXT_FIELDS, texts)), image_ids, video_ids, blog_type_id)
    except ValueError as exc:
        return status_error(str(exc))
    return save_record(
        client_for(request),
        record_id=parse_record_id(record_value),
        payload=payload,
        create=create_blog,
        update=update_blog,
        messages=MESSAGES,
    )


def make_blog_app() -> gr.Blocks:
    with gr.Blocks(
        title="Blog",
        css=load_page_css("forms.css"),
        head=with_light_mode_head(None),
    ) as blog_app:
        hdr = gr.HTML()
        blog_app.load(timed_page_load(ROUTE, _header_blog), outputs=[hdr])

        image_ids = gr.State([])
        image_row = gr.State(None)
        video_ids = gr.State([])
        video_row = gr.State(None)

        with gr.Column(elem_id="form-shell"):
            gr.Markdown("## Blog")
            records = RecordList(
                prefix="blog",
                title="Blogs",
                columns=LIST_COLUMNS,
                messages=LIST_MESSAGES,
                fetch_page=list_blogs,
                delete=delete_blog,
            ).render(blog_app, ROUTE)

            with gr.Row(equal_height=True):
                record_id = gr.Number(label="ID (editar)", precision=0, value=None)
                load_btn = gr.Button("Cargar", variant="secondary")
                new_btn = gr.Button("Nuevo blog", variant="secondary")
            with gr.Row():
                title = gr.Textbox(label="Título")
                title_eng = gr.Textbox(label="Título (inglés)")
            with gr.Row():
                clean_url_title = gr.Textbox(label="URL limpia", placeholder="mi-primer-blog")
                blog_type = gr.Dropdown(label="Tipo de blog", choices=[], value=None)
            with gr.Row():
                description_short = gr.Textbox(label="Descripción corta", lines=2)
                description_short_eng = gr.Textbox(label="Descripción corta (inglés)", lines=2)
            description = gr.Textbox(label="Descripción", lines=6)
            description_eng = gr.Textbox(label="Descripción (inglés)", lines=6)

            with gr.Row():
                with gr.Column():
                    gr.Markdown("#### Imagen")
                    image_summary = gr.HTML(image_summary_html(None))
                    ImageSelector(
                        selection_mode=SelectionMode.SINGLE,
                        button_label="Seleccionar imagen",
                        title="Seleccionar imagen",
                        initial_selected_ids=image_ids,
                        on_confirm=_single_confirm(image_summary_html),
                        confirm_outputs=[image_ids, image_row, image_summary],
                    ).render(blog_app, ROUTE)
                with gr.Column():
                    gr.Markdown("#### Video")
                    video_summary = gr.HTML(video_summary_html(None))
                    VideoSelector(
                        selection_mode=SelectionMode.SINGLE,
                        button_label="Seleccionar video",
                        title="Seleccionar video",
                        initial_selected_ids=video_ids,
                        on_confirm=_single_confirm(video_summary_html),
                        confirm_outputs=[video_ids, video_row, video_summary],
                    ).render(blog_app, ROUTE)

            save_btn = gr.Button("Guardar blog", variant="primary")
            status = gr.Markdown("")

        blog_app.load(timed_page_load(ROUTE, _load_blog_types), outputs=[blog_type])

        # Order matches TEXT_FIELDS.
        text_inputs = [
            title,
            title_eng,
            clean_url_title,
            description_short,
            description,
            description_short_eng,
            description_eng,
        ]
        load_outputs = [
            *text_inputs,
            blog_type,
            image_ids,
            image_row,
            image_summary,
            video_ids,
            video_row,
            video_summary,
            status,
        ]
        load_btn.click(_load_blog, inputs=[record_id], outputs=load_outputs)
        records.on_edit(record_id, _load_blog, load_outputs)
        new_btn.click(_new_blog, inputs=None, outputs=[record_id, *load_outputs])
        save_btn.click(
            _submit_blog,
            inputs=[record_id, *text_inputs, blog_type, image_ids, video_ids],
            outputs=[status],
        ).then(records.reload, inputs=[records.rows_state], outputs=records.view_outputs)

    return blog_app
