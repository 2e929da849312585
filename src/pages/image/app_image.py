import logging

import gradio as gr

from src.components.record_list import RecordList
from src.components.resource_selector.columns import Column, name_columns
from src.css.utils import load_page_css
from src.login_logic import client_for
from src.page_timing import timed_page_load
from src.pages.forms_common import image_summary_html, save_record, status_error
from src.pages.header import render_header, with_light_mode_head
from src.pages.image.core_image import LIST_MESSAGES, MESSAGES, build_image_payload
from src.providers import create_image, delete_image, list_images

logger = logging.getLogger(__name__)

ROUTE = "/image"


def _header_image(request: gr.Request):
    return render_header(path=ROUTE, request=request)


def _submit_image(name, name_eng, uploaded, request: gr.Request):
    try:
        payload = build_image_payload({"name": name, "nameEng": name_eng}, uploaded)
    except ValueError as exc:
        return status_error(str(exc)), gr.update()
    status = save_record(
        client_for(request),
        record_id=None,
        payload=payload,
        create=create_image,
        update=None,
        messages=MESSAGES,
    )
    cleared = status.startswith("✅")
    return status, (None if cleared else gr.update())


def make_image_app() -> gr.Blocks:
    with gr.Blocks(
        title="Imágenes",
        css=load_page_css("forms.css"),
        head=with_light_mode_head(None),
    ) as image_app:
        hdr = gr.HTML()
        image_app.load(timed_page_load(ROUTE, _header_image), outputs=[hdr])

        with gr.Column(elem_id="form-shell"):
            gr.Markdown("## Imágenes")
            records = RecordList(
                prefix="image",
                title="Imágenes",
                columns=[
                    *name_columns(),
                    Column("Vista previa", "url", lambda _value, row: image_summary_html(row)),
                ],
                messages=LIST_MESSAGES,
                fetch_page=list_images,
                delete=delete_image,
                editable=False,
            ).render(image_app, ROUTE)

            gr.Markdown("#### Nueva imagen")
            with gr.Row():
                name = gr.Textbox(label="Nombre")
                name_eng = gr.Textbox(label="Nombre (inglés)")
            upload = gr.File(label="Imagen", file_types=["image"], file_count="single", type="filepath")

            save_btn = gr.Button("Guardar imagen", variant="primary")
            status = gr.Markdown("")

        save_btn.click(
            _submit_image,
            inputs=[name, name_eng, upload],
            outputs=[status, upload],
        ).then(records.reload, inputs=[records.rows_state], outputs=records.view_outputs)

    return image_app
