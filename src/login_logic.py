from typing import Any, Optional

import logging
import time
from urllib.parse import quote

import requests
from starlette.requests import Request
from starlette.responses import RedirectResponse

from src.api_client import ApiClient
from src.secrets import DEFAULT_API_TIMEOUT_SECONDS, get_api_url, get_float_setting

logger = logging.getLogger(__name__)
timing_logger = logging.getLogger("uvicorn.error")

TOKEN_SESSION_KEY = "auth_token"
_DEFAULT_REDIRECT_PATH = "/app/"
LOGIN_PATH = "/login"

MISSING_CREDENTIALS_MESSAGE = "Usuario y contraseña son obligatorios"
MISSING_API_URL_MESSAGE = "No se encontró la URL base de la API"
LOGIN_FAILED_MESSAGE = "Hay un problema al iniciar sesión"
MISSING_TOKEN_MESSAGE = "El servidor no devolvió un token válido"
CONNECTION_ERROR_MESSAGE = "Error en la conexión"


class LoginError(Exception):
    pass


def _log_timing(event_name: str, start: float, **fields: object) -> None:
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    if fields:
        field_text = " ".join(f"{key}={value}" for key, value in fields.items())
        timing_logger.info("login_logic.timing event=%s ms=%.2f %s", event_name, elapsed_ms, field_text)
        return
    timing_logger.info("login_logic.timing event=%s ms=%.2f", event_name, elapsed_ms)


def is_valid_token(token: Optional[str]) -> bool:
    # Tokens are JWTs: header.payload.signature
    if not token or not isinstance(token, str):
        return False
    return len(token.split(".")) == 3


def login(
    username: Optional[str],
    password: Optional[str],
    *,
    api_url: Optional[str] = None,
    session: Optional[requests.Session] = None,
) -> str:
    """
    Exchange credentials for a backend token.
    Raises LoginError with a user-facing message on any failure.
    """
    if not (username or "").strip() or not password:
        raise LoginError(MISSING_CREDENTIALS_MESSAGE)

    base_url = (api_url if api_url is not None else get_api_url()).rstrip("/")
    if not base_url:
        raise LoginError(MISSING_API_URL_MESSAGE)

    http = session or requests.Session()
    start = time.perf_counter()
    try:
        response = http.post(
            f"{base_url}{LOGIN_PATH}",
            json={"user": username.strip(), "password": password},
            headers={"Content-Type": "application/json"},
            timeout=get_float_setting("API_TIMEOUT_SECONDS", DEFAULT_API_TIMEOUT_SECONDS),
        )
    except requests.RequestException as exc:
        _log_timing("login.connection_error", start)
        raise LoginError(str(exc) or CONNECTION_ERROR_MESSAGE) from exc
    _log_timing("login.request", start, status=response.status_code)

    if not response.ok:
        try:
            payload = response.json()
        except ValueError:
            payload = None
        message = payload.get("message") if isinstance(payload, dict) else None
        raise LoginError(message or LOGIN_FAILED_MESSAGE)

    try:
        data = response.json()
    except ValueError:
        data = None
    token = data.get("token") if isinstance(data, dict) else None
    if not token:
        raise LoginError(MISSING_TOKEN_MESSAGE)
    return token


def _session_of(request: Any) -> Optional[dict]:
    try:
        if hasattr(request, "request") and hasattr(request.request, "session"):
            return request.request.session
        if isinstance(request, Request):
            return request.session
    except (AssertionError, AttributeError):
        # SessionMiddleware not installed on this app.
        return None
    return None


def get_token(request: Any) -> Optional[str]:
    session = _session_of(request)
    if session is None:
        return None
    token = session.get(TOKEN_SESSION_KEY)
    if not is_valid_token(token):
        if token:
            session.pop(TOKEN_SESSION_KEY, None)
        return None
    return token


def client_for(request: Any) -> ApiClient:
    return ApiClient(token=get_token(request))


def add_login_routes(app):
    state_flag = "_login_routes_registered"
    if getattr(app.state, state_flag, False):
        return
    setattr(app.state, state_flag, True)

    @app.post("/auth/login")
    async def auth_login(request: Request):
        form = await request.form()
        try:
            token = login(form.get("username"), form.get("password"))
        except LoginError as exc:
            logger.info("Login rejected: %s", exc)
            return RedirectResponse(f"/?error={quote(str(exc))}", status_code=303)
        request.session[TOKEN_SESSION_KEY] = token
        return RedirectResponse(_DEFAULT_REDIRECT_PATH, status_code=303)

    @app.get("/logout")
    async def logout(request: Request):
        request.session.pop(TOKEN_SESSION_KEY, None)
        return RedirectResponse("/")


def add_app_redirect(app, app_route: str) -> None:
    @app.get(app_route)
    async def _redir_to_slash():
        return RedirectResponse(f"{app_route}/")
