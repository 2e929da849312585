import html

import gradio as gr

from src.css.utils import load_css
from src.pages.header import SITE_TITLE, render_header, with_light_mode_head
from src.page_timing import timed_page_load

LOGIN_FORM_HTML = """
<form class="login-form" method="post" action="/auth/login">
  <label for="login-username">Usuario</label>
  <input id="login-username" name="username" type="text" autocomplete="username" required />
  <label for="login-password">Contraseña</label>
  <input id="login-password" name="password" type="password" autocomplete="current-password" required />
  <button type="submit">Iniciar sesión</button>
</form>
""".strip()


def _header_root(request: gr.Request):
    # Use keyword args so order can't be swapped by Gradio
    return render_header(path="/", request=request)


def login_error_html(message) -> str:
    text = str(message or "").strip()
    if not text:
        return ""
    return f"<p class='login-error'>❌ {html.escape(text)}</p>"


def _login_error(request: gr.Request) -> str:
    params = getattr(request, "query_params", None) or {}
    return login_error_html(params.get("error"))


def make_login_page() -> gr.Blocks:
    with gr.Blocks(
        title=SITE_TITLE,
        css=load_css("forms.css"),
        head=with_light_mode_head(None),
    ) as login_page:
        hdr = gr.HTML()
        with gr.Column(elem_id="login-shell"):
            gr.Markdown("## Iniciar sesión\nAdministra el contenido del portafolio.")
            error_box = gr.HTML()
            gr.HTML(LOGIN_FORM_HTML)

        login_page.load(timed_page_load("/", _header_root), outputs=[hdr])
        login_page.load(timed_page_load("/", _login_error), outputs=[error_box])

    return login_page
