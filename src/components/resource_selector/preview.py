import html as html_utils
from typing import Any, Dict, Optional

from src.components.action_bridge import ActionBridge
from src.youtube import embed_url, preview_url

INVALID_URL_TEXT = "URL inválida"


def image_thumbnail_cell(bridge: ActionBridge, row: Dict[str, Any]) -> str:
    name = html_utils.escape(str(row.get("name") or ""), quote=True)
    url = html_utils.escape(str(row.get("url") or ""), quote=True)
    return (
        "<div class='image-preview'>"
        f"<button type='button' class='image-preview-button' aria-label='Ver imagen {name}' "
        f"onclick=\"{bridge.onclick(row.get('id'))}\">"
        f"<img src='{url}' alt='Vista previa {name}' loading='lazy'/>"
        "</button></div>"
    )


def video_thumbnail_cell(bridge: ActionBridge, row: Dict[str, Any]) -> str:
    thumbnail = preview_url(row.get("url"))
    if not thumbnail:
        return f"<span class='selector-muted'>{INVALID_URL_TEXT}</span>"
    name = html_utils.escape(str(row.get("name") or ""), quote=True)
    return (
        "<div class='video-preview'>"
        f"<button type='button' class='video-preview-button' aria-label='Reproducir {name}' "
        f"onclick=\"{bridge.onclick(row.get('id'))}\">"
        f"<img src='{html_utils.escape(thumbnail, quote=True)}' alt='{name} preview' loading='lazy'/>"
        "</button></div>"
    )


def image_preview_html(row: Optional[Dict[str, Any]]) -> str:
    if not row:
        return ""
    name = html_utils.escape(str(row.get("name") or ""), quote=True)
    url = html_utils.escape(str(row.get("url") or ""), quote=True)
    return f"<img src='{url}' alt='Imagen {name}' class='image-preview-modal-image'/>"


def video_preview_html(video_id: Optional[str]) -> str:
    if not video_id:
        return ""
    src = html_utils.escape(embed_url(video_id), quote=True)
    return (
        "<div class='video-preview-frame'>"
        f"<iframe src='{src}' title='Video preview' allow='autoplay; encrypted-media' "
        "allowfullscreen class='video-preview-iframe'></iframe>"
        "</div>"
    )


def find_row(view: Any, key: Any) -> Optional[Dict[str, Any]]:
    try:
        wanted = int(str(key).strip())
    except (TypeError, ValueError):
        return None
    rows = getattr(view, "rows", None) or []
    for row in rows:
        try:
            if int(row.get("id")) == wanted:
                return row
        except (TypeError, ValueError):
            continue
    return None
