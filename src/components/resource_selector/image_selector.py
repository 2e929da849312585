from typing import Any, List, Optional

import gradio as gr

from src.components.action_bridge import ActionBridge
from src.components.resource_selector.app_selector import BoundSelector
from src.components.resource_selector.columns import Column, name_columns
from src.components.resource_selector.preview import (
    find_row,
    image_preview_html,
    image_thumbnail_cell,
)
from src.components.resource_selector.row_sources import RemoteListingSource, RowSource, RowView
from src.providers import IMAGE_RESOURCE


def image_preview_title(row: Optional[dict]) -> str:
    return f"### Imagen {row.get('name', '')}" if row else "### Imagen"


class ImageSelector(BoundSelector):
    default_label = "Seleccionar imágenes"

    def __init__(self, **kwargs: Any):
        self.bridge = ActionBridge("image")
        super().__init__(**kwargs)

    def build_row_source(self) -> RowSource:
        return RemoteListingSource(IMAGE_RESOURCE)

    def build_columns(self) -> List[Column]:
        return [
            *name_columns(),
            Column("Vista previa", "url", lambda _value, row: image_thumbnail_cell(self.bridge, row)),
        ]

    def open_preview(self, key: str, view: RowView):
        row = find_row(view, key)
        if row is None:
            return None, gr.update(visible=False), image_preview_title(None), ""
        return row, gr.update(visible=True), image_preview_title(row), image_preview_html(row)

    def close_preview(self):
        return None, gr.update(visible=False), image_preview_title(None), ""

    def render_extras(self, page: gr.Blocks, route: str) -> None:
        preview_state = gr.State(None)
        self.bridge.render()
        with gr.Group(
            visible=False,
            elem_classes=["modal-overlay", "preview-overlay"],
        ) as preview_dialog:
            with gr.Column(elem_classes=["modal-content", "preview-content"]):
                preview_title = gr.Markdown(image_preview_title(None))
                preview_body = gr.HTML()
                close_btn = gr.Button("Cerrar", variant="secondary")

        outputs = [preview_state, preview_dialog, preview_title, preview_body]
        self.bridge.trigger.click(
            self.open_preview,
            inputs=[self.bridge.key_box, self.modal.rows_state],
            outputs=outputs,
        )
        close_btn.click(self.close_preview, inputs=None, outputs=outputs)
