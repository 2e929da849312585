from __future__ import annotations
import html
import logging
import time
from dataclasses import dataclass
from typing import Any, Optional

from src.css.utils import load_css
from src.login_logic import get_token

timing_logger = logging.getLogger("uvicorn.error")

SITE_TITLE = "Portfolio Admin"


@dataclass(frozen=True)
class NavLink:
    key: str
    label: str
    path: str


NAV_LINKS: tuple[NavLink, ...] = (
    NavLink("app", "Inicio", "/app/"),
    NavLink("home-content", "Home", "/home-content/"),
    NavLink("basic-data", "Datos básicos", "/basic-data/"),
    NavLink("experience", "Experiencia", "/experience/"),
    NavLink("education", "Educación", "/education/"),
    NavLink("blog", "Blog", "/blog/"),
    NavLink("blog-type", "Tipos de blog", "/blog-type/"),
    NavLink("skill", "Habilidades", "/skill/"),
    NavLink("skill-son", "Habilidades hijas", "/skill-son/"),
    NavLink("skill-type", "Tipos de habilidad", "/skill-type/"),
    NavLink("image", "Imágenes", "/image/"),
    NavLink("video", "Videos", "/video/"),
    NavLink("label", "Labels", "/label/"),
)
_SECTION_ORDER: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("General", ("app",)),
    ("Contenido", ("home-content", "basic-data", "experience", "education", "blog", "blog-type")),
    ("Habilidades", ("skill", "skill-son", "skill-type")),
    ("Medios", ("image", "video", "label")),
)

FORCE_LIGHT_MODE_SCRIPT = """
<script>
(function() {
  const url = new URL(window.location.href);
  if (url.searchParams.get("__theme") !== "light") {
    url.searchParams.set("__theme", "light");
    window.history.replaceState(null, "", url.toString());
  }
  document.documentElement.classList.remove("dark");
  document.title = "__SITE_TITLE__";
})();
</script>
""".strip().replace("__SITE_TITLE__", SITE_TITLE)


def _log_timing(event_name: str, start: float, **fields: object) -> None:
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    if fields:
        field_text = " ".join(f"{key}={value}" for key, value in fields.items())
        timing_logger.info("header.timing event=%s ms=%.2f %s", event_name, elapsed_ms, field_text)
        return
    timing_logger.info("header.timing event=%s ms=%.2f", event_name, elapsed_ms)


def with_light_mode_head(head: Optional[str]) -> str:
    if head and head.strip():
        return f"{head}\n{FORCE_LIGHT_MODE_SCRIPT}"
    return FORCE_LIGHT_MODE_SCRIPT


def page_key_for_route(path: str) -> str:
    normalized = (path or "/").strip("/")
    return normalized.split("/")[0] if normalized else ""


def _header_html(authenticated: bool, path: str) -> str:
    css = load_css("header.css")
    active_key = page_key_for_route(path)
    links_by_key = {link.key: link for link in NAV_LINKS}

    sections: list[str] = []
    if authenticated:
        for section_label, keys in _SECTION_ORDER:
            items: list[str] = []
            for key in keys:
                link = links_by_key[key]
                is_active = link.key == active_key
                active_class = " is-active" if is_active else ""
                aria_current = ' aria-current="page"' if is_active else ""
                items.append(
                    f'<a href="{html.escape(link.path)}" class="nav-link{active_class}"{aria_current}>'
                    f"{html.escape(link.label)}</a>"
                )
            sections.append(
                f'<div class="nav-section"><span class="nav-section-title">{html.escape(section_label)}</span>'
                f'{"".join(items)}</div>'
            )
        account_html = '<a href="/logout" class="account-link">Cerrar sesión</a>'
    else:
        account_html = ""

    return f"""<style>
{css}
</style>
<div class="hdr-wrap">
  <div class="hdr">
    <a href="/" class="site-logo">{html.escape(SITE_TITLE)}</a>
    <nav class="hdr-nav" aria-label="Main navigation">{''.join(sections)}</nav>
    <div class="hdr-account">{account_html}</div>
  </div>
</div>
"""


def render_header(path: str = "/", request: Any = None) -> str:
    total_start = time.perf_counter()
    authenticated = bool(get_token(request))
    header_html = _header_html(authenticated, path or "/")
    _log_timing("render_header.total", total_start, path=path or "/", authenticated=authenticated)
    return header_html
