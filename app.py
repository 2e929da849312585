# ---- Resolve & inject ALL secrets BEFORE importing modules that read env ----
from src.secrets import get_secret

from fastapi import FastAPI


def _install_proxy_headers(app: FastAPI) -> None:
    """Honour X-Forwarded-* headers when running behind a proxy."""
    from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

    app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")


import gradio as gr

from src.mount_gradio_app import add_login_redirect, install_session_middleware, mount_gradio_app
from src.pages.ui_login import make_login_page
from src.pages.ui_home import make_home_app
from src.pages.home_content.app_home_content import make_home_content_app
from src.pages.basic_data.app_basic_data import make_basic_data_app
from src.pages.experience.app_experience import make_experience_app
from src.pages.education.app_education import make_education_app
from src.pages.blog.app_blog import make_blog_app
from src.pages.blog_type.app_blog_type import make_blog_type_app
from src.pages.skill.app_skill import make_skill_app
from src.pages.skill_son.app_skill_son import make_skill_son_app
from src.pages.skill_type.app_skill_type import make_skill_type_app
from src.pages.image.app_image import make_image_app
from src.pages.video.app_video import make_video_app
from src.pages.label.app_label import make_label_app

app = FastAPI()
_install_proxy_headers(app)


@app.get("/_routes")
def _routes():
    return [getattr(r, "path", str(r)) for r in app.router.routes]


# --- Pages
home_app         = make_home_app()
home_content_app = make_home_content_app()
basic_data_app   = make_basic_data_app()
experience_app   = make_experience_app()
education_app    = make_education_app()
blog_app         = make_blog_app()
blog_type_app    = make_blog_type_app()
skill_app        = make_skill_app()
skill_son_app    = make_skill_son_app()
skill_type_app   = make_skill_type_app()
image_app        = make_image_app()
video_app        = make_video_app()
label_app        = make_label_app()
login_page       = make_login_page()

mount_gradio_app(app, home_app,         "/app")
mount_gradio_app(app, home_content_app, "/home-content")
mount_gradio_app(app, basic_data_app,   "/basic-data")
mount_gradio_app(app, experience_app,   "/experience")
mount_gradio_app(app, education_app,    "/education")
mount_gradio_app(app, blog_app,         "/blog")
mount_gradio_app(app, blog_type_app,    "/blog-type")
mount_gradio_app(app, skill_app,        "/skill")
mount_gradio_app(app, skill_son_app,    "/skill-son")
mount_gradio_app(app, skill_type_app,   "/skill-type")
mount_gradio_app(app, image_app,        "/image")
mount_gradio_app(app, video_app,        "/video")
mount_gradio_app(app, label_app,        "/label")


add_login_redirect(app, target="/app/")

# Session middleware wraps every auth middleware above, so it is installed last.
session_secret = get_secret("SESSION_SECRET", default="dev-session-secret")
install_session_middleware(app, session_secret)

gr.mount_gradio_app(app, login_page, "/")
