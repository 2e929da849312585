from __future__ import annotations

import re
from typing import Optional

YOUTUBE_ID_PATTERN = re.compile(
    r"(?:youtu\.be/|youtube\.com/(?:watch\?(?:.*&)?v=|embed/|v/))([A-Za-z0-9_-]{11})"
)
PREVIEW_URL_TEMPLATE = "https://img.youtube.com/vi/{video_id}/hqdefault.jpg"
EMBED_URL_TEMPLATE = "https://www.youtube.com/embed/{video_id}?autoplay=1"


def extract_video_id(url: Optional[str]) -> Optional[str]:
    if not url or not isinstance(url, str):
        return None
    match = YOUTUBE_ID_PATTERN.search(url)
    return match.group(1) if match else None


def preview_url(url: Optional[str]) -> Optional[str]:
    video_id = extract_video_id(url)
    if not video_id:
        return None
    return PREVIEW_URL_TEMPLATE.format(video_id=video_id)


def embed_url(video_id: str) -> str:
    return EMBED_URL_TEMPLATE.format(video_id=video_id)


def is_valid(url: Optional[str] = None) -> bool:
    return bool(url and extract_video_id(url))
