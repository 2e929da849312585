import html

import gradio as gr

from src.pages.header import NAV_LINKS, render_header, with_light_mode_head
from src.css.utils import load_css
from src.page_timing import timed_page_load

DASHBOARD_DESCRIPTIONS = {
    "home-content": "Saludo, botones, imagen principal y labels de la portada.",
    "basic-data": "Nombre, saludo, correo y redes sociales del perfil.",
    "experience": "Experiencias laborales y las habilidades hijas asociadas.",
    "education": "Estudios, títulos y logros destacados.",
    "blog": "Entradas del blog con su imagen y su video.",
    "blog-type": "Categorías de las entradas del blog.",
    "skill": "Habilidades y sus habilidades hijas.",
    "skill-son": "Habilidades hijas que se asignan a experiencias.",
    "skill-type": "Tipos de habilidad y las habilidades que agrupan.",
    "image": "Imágenes subidas y su vista previa.",
    "video": "Videos de YouTube disponibles para el blog.",
    "label": "Labels que se muestran en la portada.",
}


def _header_home(request: gr.Request):
    return render_header(path="/app", request=request)


def dashboard_html() -> str:
    cards = []
    for link in NAV_LINKS:
        description = DASHBOARD_DESCRIPTIONS.get(link.key)
        if description is None:
            continue
        cards.append(
            f"<a class='dashboard-card' href='{html.escape(link.path)}'>"
            f"<strong>{html.escape(link.label)}</strong>"
            f"<span>{html.escape(description)}</span></a>"
        )
    return f"<div class='dashboard-grid'>{''.join(cards)}</div>"


def make_home_app() -> gr.Blocks:
    with gr.Blocks(
        title="Panel",
        css=load_css("forms.css"),
        head=with_light_mode_head(None),
    ) as home_app:
        hdr = gr.HTML()

        with gr.Column(elem_id="home-shell"):
            gr.Markdown("## Panel de administración")
            gr.HTML(dashboard_html())

        home_app.load(timed_page_load("/app", _header_home), outputs=[hdr])

    return home_app
