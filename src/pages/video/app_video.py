import logging

import gradio as gr

from src.components.record_list import RecordList
from src.components.resource_selector.columns import Column, name_columns
from src.css.utils import load_page_css
from src.login_logic import client_for
from src.page_timing import timed_page_load
from src.pages.forms_common import save_record, status_error, video_summary_html
from src.pages.header import render_header, with_light_mode_head
from src.pages.video.core_video import LIST_MESSAGES, MESSAGES, build_video_payload
from src.providers import create_video, delete_video, get_videos

logger = logging.getLogger(__name__)

ROUTE = "/video"


def _header_video(request: gr.Request):
    return render_header(path=ROUTE, request=request)


def _submit_video(name, name_eng, url, request: gr.Request):
    try:
        payload = build_video_payload({"name": name, "nameEng": name_eng, "url": url})
    except ValueError as exc:
        return status_error(str(exc))
    return save_record(
        client_for(request),
        record_id=None,
        payload=payload,
        create=create_video,
        update=None,
        messages=MESSAGES,
    )


def make_video_app() -> gr.Blocks:
    with gr.Blocks(
        title="Videos",
        css=load_page_css("forms.css"),
        head=with_light_mode_head(None),
    ) as video_app:
        hdr = gr.HTML()
        video_app.load(timed_page_load(ROUTE, _header_video), outputs=[hdr])

        with gr.Column(elem_id="form-shell"):
            gr.Markdown("## Videos")
            records = RecordList(
                prefix="video",
                title="Videos",
                columns=[
                    *name_columns(),
                    Column("Previsualización", "url", lambda _value, row: video_summary_html(row)),
                ],
                messages=LIST_MESSAGES,
                fetch=get_videos,
                delete=delete_video,
                editable=False,
            ).render(video_app, ROUTE)

            gr.Markdown("#### Nuevo video")
            with gr.Row():
                name = gr.Textbox(label="Nombre")
                name_eng = gr.Textbox(label="Nombre (inglés)")
            url = gr.Textbox(label="URL del video", placeholder="https://www.youtube.com/watch?v=...")

            save_btn = gr.Button("Crear video", variant="primary")
            status = gr.Markdown("")

        save_btn.click(
            _submit_video,
            inputs=[name, name_eng, url],
            outputs=[status],
        ).then(records.reload, inputs=[records.rows_state], outputs=records.view_outputs)

    return video_app
