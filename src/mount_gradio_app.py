# src/mount_gradio_app.py
import logging

from starlette.requests import Request
from starlette.responses import RedirectResponse
import gradio as gr
from starlette.middleware.sessions import SessionMiddleware

from src.login_logic import add_app_redirect, add_login_routes, get_token
from src.secrets import get_secret

logger = logging.getLogger(__name__)

GRADIO_PUBLIC_PREFIXES = (
    "/gradio_api", "/file", "/assets", "/static", "/config",
    "/proxy", "/localfiles", "/theme.css", "/favicon.ico",
    "/robots.txt",
)

PUBLIC_EXTRA: tuple[str, ...] = ("/auth", "/logout")

_SESSION_MIDDLEWARE_FLAG = "_portfolio_session_middleware"


def _normalize_route(app_route: str) -> str:
    route_no_slash = app_route or "/"
    if not route_no_slash.startswith("/"):
        route_no_slash = f"/{route_no_slash}"
    return route_no_slash.rstrip("/") or "/"


def matches_protected_path(route_no_slash: str, path: str) -> bool:
    if route_no_slash == "/":
        return False
    normalized_path = path or "/"
    if not normalized_path.startswith("/"):
        normalized_path = f"/{normalized_path}"
    if normalized_path != "/" and normalized_path.endswith("/"):
        normalized_path = normalized_path.rstrip("/")
    if normalized_path == route_no_slash:
        return True
    return normalized_path.startswith(f"{route_no_slash}/")


def add_middleware_redirect(app, app_route: str):
    """
    Require a valid backend token for everything under `app_route`.
    Gradio internals and the auth endpoints remain available without a session.
    """
    route_no_slash = _normalize_route(app_route)

    @app.middleware("http")
    async def check_authentication(request: Request, call_next):
        path = request.url.path

        if any(path.startswith(p) for p in GRADIO_PUBLIC_PREFIXES) or any(
            path.startswith(p) for p in PUBLIC_EXTRA
        ):
            return await call_next(request)

        if matches_protected_path(route_no_slash, path):
            if not get_token(request):
                logger.info("Unauthenticated request to %s; redirecting to login.", path)
                return RedirectResponse(url="/")
        return await call_next(request)


def add_login_redirect(app, target: str = "/app/"):
    """Send authenticated users hitting the login page straight to the dashboard."""

    @app.middleware("http")
    async def skip_login_when_authenticated(request: Request, call_next):
        if request.url.path == "/" and not request.query_params.get("error"):
            if get_token(request):
                return RedirectResponse(url=target)
        return await call_next(request)


def install_session_middleware(app, secret_key: str | None = None) -> None:
    # Must be added last so it wraps the auth middlewares.
    if getattr(app.state, _SESSION_MIDDLEWARE_FLAG, False):
        return
    setattr(app.state, _SESSION_MIDDLEWARE_FLAG, True)
    secret = secret_key or get_secret("SESSION_SECRET", default="dev-session-secret")
    app.add_middleware(SessionMiddleware, secret_key=secret)


def mount_gradio_app(*args, **kwargs):
    app = args[0]
    path = args[2]

    add_middleware_redirect(app, path)
    add_login_routes(app)
    add_app_redirect(app, _normalize_route(path))

    return gr.mount_gradio_app(*args, **kwargs)
