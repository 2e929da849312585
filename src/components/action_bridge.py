import html as html_utils
import json
from typing import Any, Optional
from uuid import uuid4

import gradio as gr


class ActionBridge:
    """
    Hidden textbox + trigger button pair that lets buttons inside rendered HTML
    call back into Python with a row id.

    ``onclick(key)`` returns an escaped inline handler that writes the key into
    the textbox and clicks the trigger; wire ``trigger.click`` with ``key_box``
    as input.
    """

    def __init__(self, prefix: str, action: str = "preview"):
        self.uid = uuid4().hex[:8]
        self.action = action
        self.box_id = f"{prefix}-{action}-key-{self.uid}"
        self.trigger_id = f"{prefix}-{action}-trigger-{self.uid}"
        self.key_box: Optional[gr.Textbox] = None
        self.trigger: Optional[gr.Button] = None

    def onclick(self, key: Any) -> str:
        payload = json.dumps(str(key))
        script = (
            "(function(k){"
            f"const host=document.getElementById({json.dumps(self.box_id)});"
            "const box=host&&host.querySelector('textarea,input');"
            "if(!box)return;"
            "box.value=k;"
            "box.dispatchEvent(new Event('input',{bubbles:true}));"
            f"setTimeout(function(){{const t=document.getElementById({json.dumps(self.trigger_id)});if(t)t.click();}},0);"
            f"}})({payload})"
        )
        return html_utils.escape(script, quote=True)

    def button_html(self, key: Any, label: str, css_class: str = "row-action") -> str:
        return (
            f"<button type='button' class='{css_class} {css_class}-{self.action}' "
            f"onclick=\"{self.onclick(key)}\">{html_utils.escape(label)}</button>"
        )

    def render(self) -> None:
        self.key_box = gr.Textbox(
            value="",
            show_label=False,
            elem_id=self.box_id,
            elem_classes=["selector-hidden"],
        )
        self.trigger = gr.Button(
            f"_{self.action}",
            elem_id=self.trigger_id,
            elem_classes=["selector-hidden"],
        )
