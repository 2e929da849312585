from typing import Any, List

import gradio as gr

from src.components.action_bridge import ActionBridge
from src.components.resource_selector.app_selector import BoundSelector
from src.components.resource_selector.columns import Column, name_columns
from src.components.resource_selector.preview import (
    find_row,
    video_preview_html,
    video_thumbnail_cell,
)
from src.components.resource_selector.row_sources import RemoteListingSource, RowSource, RowView
from src.providers import VIDEO_RESOURCE
from src.youtube import extract_video_id

VIDEO_PREVIEW_TITLE = "### Previsualización de video"


class VideoSelector(BoundSelector):
    default_label = "Seleccionar videos"

    def __init__(self, **kwargs: Any):
        self.bridge = ActionBridge("video")
        super().__init__(**kwargs)

    def build_row_source(self) -> RowSource:
        return RemoteListingSource(VIDEO_RESOURCE)

    def build_columns(self) -> List[Column]:
        return [
            *name_columns(),
            Column("Previsualización", "preview", lambda _value, row: video_thumbnail_cell(self.bridge, row)),
        ]

    def open_preview(self, key: str, view: RowView):
        row = find_row(view, key)
        video_id = extract_video_id(row.get("url")) if row else None
        if not video_id:
            return gr.update(), gr.update(), gr.update()
        return video_id, gr.update(visible=True), video_preview_html(video_id)

    def close_preview(self):
        return None, gr.update(visible=False), ""

    def render_extras(self, page: gr.Blocks, route: str) -> None:
        preview_state = gr.State(None)
        self.bridge.render()
        with gr.Group(
            visible=False,
            elem_classes=["modal-overlay", "preview-overlay"],
        ) as preview_dialog:
            with gr.Column(elem_classes=["modal-content", "preview-content"]):
                gr.Markdown(VIDEO_PREVIEW_TITLE)
                preview_body = gr.HTML()
                close_btn = gr.Button("Cerrar", variant="secondary")

        outputs = [preview_state, preview_dialog, preview_body]
        self.bridge.trigger.click(
            self.open_preview,
            inputs=[self.bridge.key_box, self.modal.rows_state],
            outputs=outputs,
        )
        close_btn.click(self.close_preview, inputs=None, outputs=outputs)
