"""
REST providers for the portfolio backend.

Every function takes an ``ApiClient`` first so page handlers can build one per
request with the caller's session token.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from src.api_client import ApiClient

IMAGE_RESOURCE = "image"
VIDEO_RESOURCE = "video"
LABEL_RESOURCE = "label"
SKILL_RESOURCE = "skill"
SKILL_SON_RESOURCE = "skill-son"
SKILL_TYPE_RESOURCE = "skill-type"
EXPERIENCE_RESOURCE = "experience"
BLOG_RESOURCE = "blog"
HOME_RESOURCE = "home"
EDUCATION_RESOURCE = "education"
BLOG_TYPE_RESOURCE = "blog-type"
BASIC_DATA_RESOURCE = "basic-data"
BASIC_DATA_RECORD_ID = 1

TOTAL_COUNT_HEADER = "x-total-count"
DEFAULT_SORT = "id,desc"


@dataclass
class ProviderResult:
    status: int
    data: Any = None

    @property
    def ok(self) -> bool:
        return self.status in (200, 201, 204)


def _endpoint(resource: str, record_id: Optional[int] = None) -> str:
    if record_id is None:
        return f"/{resource}"
    return f"/{resource}/{int(record_id)}"


def _as_list(data: Any) -> List[Dict[str, Any]]:
    if data is None:
        return []
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in ("data", "content"):
            if isinstance(data.get(key), list):
                return data[key]
    return []


def list_page(
    client: ApiClient, resource: str, page: int = 1, page_size: int = 10
) -> Tuple[List[Dict[str, Any]], int]:
    """Fetch one page using the simple-REST convention (_start/_end + x-total-count)."""
    page = max(1, int(page))
    start = (page - 1) * page_size
    response = client.get(
        _endpoint(resource),
        params={"_start": start, "_end": start + page_size},
    )
    rows = _as_list(response.data)
    raw_total = response.headers.get(TOTAL_COUNT_HEADER) if response.headers else None
    try:
        total = int(raw_total) if raw_total is not None else start + len(rows)
    except (TypeError, ValueError):
        total = start + len(rows)
    return rows, total


def list_spring_page(
    client: ApiClient, resource: str, page: int = 1, page_size: int = 10, sort: str = DEFAULT_SORT
) -> Tuple[List[Dict[str, Any]], int]:
    """Fetch one page from a Spring-style endpoint (zero-based page, size, sort)."""
    page = max(1, int(page))
    response = client.get(
        _endpoint(resource),
        params={"page": page - 1, "size": page_size, "sort": sort},
    )
    rows = _as_list(response.data)
    data = response.data if isinstance(response.data, dict) else {}
    try:
        total = int(data.get("totalElements", len(rows)))
    except (TypeError, ValueError):
        total = len(rows)
    return rows, total


def _get_all(client: ApiClient, resource: str) -> List[Dict[str, Any]]:
    return _as_list(client.get(_endpoint(resource)).data)


def _get_one(client: ApiClient, resource: str, record_id: int) -> Dict[str, Any]:
    return client.get(_endpoint(resource, record_id)).data or {}


def _create(client: ApiClient, resource: str, payload: Dict[str, Any]) -> ProviderResult:
    response = client.post(_endpoint(resource), payload)
    return ProviderResult(response.status, response.data)


def _update(client: ApiClient, resource: str, record_id: int, payload: Dict[str, Any]) -> ProviderResult:
    response = client.put(_endpoint(resource, record_id), payload)
    return ProviderResult(response.status, response.data)


def _delete(client: ApiClient, resource: str, record_id: int) -> ProviderResult:
    response = client.delete(_endpoint(resource, record_id))
    return ProviderResult(response.status)


# --- skills
def get_skills(client: ApiClient) -> List[Dict[str, Any]]:
    return _get_all(client, SKILL_RESOURCE)


def get_skill(client: ApiClient, skill_id: int) -> Dict[str, Any]:
    return _get_one(client, SKILL_RESOURCE, skill_id)


def create_skill(client: ApiClient, payload: Dict[str, Any]) -> ProviderResult:
    return _create(client, SKILL_RESOURCE, payload)


def update_skill(client: ApiClient, skill_id: int, payload: Dict[str, Any]) -> ProviderResult:
    return _update(client, SKILL_RESOURCE, skill_id, payload)


def delete_skill(client: ApiClient, skill_id: int) -> ProviderResult:
    return _delete(client, SKILL_RESOURCE, skill_id)


# --- skill sons
def get_skill_sons(client: ApiClient) -> List[Dict[str, Any]]:
    return _get_all(client, SKILL_SON_RESOURCE)


def get_skill_son(client: ApiClient, skill_son_id: int) -> Dict[str, Any]:
    return _get_one(client, SKILL_SON_RESOURCE, skill_son_id)


def create_skill_son(client: ApiClient, payload: Dict[str, Any]) -> ProviderResult:
    return _create(client, SKILL_SON_RESOURCE, payload)


def update_skill_son(client: ApiClient, skill_son_id: int, payload: Dict[str, Any]) -> ProviderResult:
    return _update(client, SKILL_SON_RESOURCE, skill_son_id, payload)


def delete_skill_son(client: ApiClient, skill_son_id: int) -> ProviderResult:
    return _delete(client, SKILL_SON_RESOURCE, skill_son_id)


# --- skill types
def get_skill_types(client: ApiClient) -> List[Dict[str, Any]]:
    return _get_all(client, SKILL_TYPE_RESOURCE)


def get_skill_type(client: ApiClient, skill_type_id: int) -> Dict[str, Any]:
    return _get_one(client, SKILL_TYPE_RESOURCE, skill_type_id)


def create_skill_type(client: ApiClient, payload: Dict[str, Any]) -> ProviderResult:
    return _create(client, SKILL_TYPE_RESOURCE, payload)


def update_skill_type(client: ApiClient, skill_type_id: int, payload: Dict[str, Any]) -> ProviderResult:
    return _update(client, SKILL_TYPE_RESOURCE, skill_type_id, payload)


def delete_skill_type(client: ApiClient, skill_type_id: int) -> ProviderResult:
    return _delete(client, SKILL_TYPE_RESOURCE, skill_type_id)


# --- labels
def get_labels(client: ApiClient) -> List[Dict[str, Any]]:
    return _get_all(client, LABEL_RESOURCE)


def create_label(client: ApiClient, payload: Dict[str, Any]) -> ProviderResult:
    return _create(client, LABEL_RESOURCE, payload)


def delete_label(client: ApiClient, label_id: int) -> ProviderResult:
    return _delete(client, LABEL_RESOURCE, label_id)


# --- media
def get_videos(client: ApiClient) -> List[Dict[str, Any]]:
    return _get_all(client, VIDEO_RESOURCE)


def create_video(client: ApiClient, payload: Dict[str, Any]) -> ProviderResult:
    return _create(client, VIDEO_RESOURCE, payload)


def delete_video(client: ApiClient, video_id: int) -> ProviderResult:
    return _delete(client, VIDEO_RESOURCE, video_id)


def list_images(client: ApiClient, page: int = 1, page_size: int = 10) -> Tuple[List[Dict[str, Any]], int]:
    return list_page(client, IMAGE_RESOURCE, page=page, page_size=page_size)


def create_image(client: ApiClient, payload: Dict[str, Any]) -> ProviderResult:
    return _create(client, IMAGE_RESOURCE, payload)


def delete_image(client: ApiClient, image_id: int) -> ProviderResult:
    return _delete(client, IMAGE_RESOURCE, image_id)


# --- experience
def get_experiences(client: ApiClient) -> List[Dict[str, Any]]:
    return _get_all(client, EXPERIENCE_RESOURCE)


def get_experience(client: ApiClient, experience_id: int) -> Dict[str, Any]:
    return _get_one(client, EXPERIENCE_RESOURCE, experience_id)


def create_experience(client: ApiClient, payload: Dict[str, Any]) -> ProviderResult:
    return _create(client, EXPERIENCE_RESOURCE, payload)


def update_experience(client: ApiClient, experience_id: int, payload: Dict[str, Any]) -> ProviderResult:
    return _update(client, EXPERIENCE_RESOURCE, experience_id, payload)


def delete_experience(client: ApiClient, experience_id: int) -> ProviderResult:
    return _delete(client, EXPERIENCE_RESOURCE, experience_id)


# --- education
def get_educations(client: ApiClient) -> List[Dict[str, Any]]:
    return _get_all(client, EDUCATION_RESOURCE)


def get_education(client: ApiClient, education_id: int) -> Dict[str, Any]:
    return _get_one(client, EDUCATION_RESOURCE, education_id)


def create_education(client: ApiClient, payload: Dict[str, Any]) -> ProviderResult:
    return _create(client, EDUCATION_RESOURCE, payload)


def update_education(client: ApiClient, education_id: int, payload: Dict[str, Any]) -> ProviderResult:
    return _update(client, EDUCATION_RESOURCE, education_id, payload)


def delete_education(client: ApiClient, education_id: int) -> ProviderResult:
    return _delete(client, EDUCATION_RESOURCE, education_id)


# --- blog
def list_blogs(client: ApiClient, page: int = 1, page_size: int = 10) -> Tuple[List[Dict[str, Any]], int]:
    return list_spring_page(client, BLOG_RESOURCE, page=page, page_size=page_size)


def get_blog(client: ApiClient, blog_id: int) -> Dict[str, Any]:
    return _get_one(client, BLOG_RESOURCE, blog_id)


def create_blog(client: ApiClient, payload: Dict[str, Any]) -> ProviderResult:
    return _create(client, BLOG_RESOURCE, payload)


def update_blog(client: ApiClient, blog_id: int, payload: Dict[str, Any]) -> ProviderResult:
    return _update(client, BLOG_RESOURCE, blog_id, payload)


def delete_blog(client: ApiClient, blog_id: int) -> ProviderResult:
    return _delete(client, BLOG_RESOURCE, blog_id)


# --- blog types
def get_blog_types(client: ApiClient) -> List[Dict[str, Any]]:
    return _get_all(client, BLOG_TYPE_RESOURCE)


def get_blog_type(client: ApiClient, blog_type_id: int) -> Dict[str, Any]:
    return _get_one(client, BLOG_TYPE_RESOURCE, blog_type_id)


def create_blog_type(client: ApiClient, payload: Dict[str, Any]) -> ProviderResult:
    return _create(client, BLOG_TYPE_RESOURCE, payload)


def update_blog_type(client: ApiClient, blog_type_id: int, payload: Dict[str, Any]) -> ProviderResult:
    return _update(client, BLOG_TYPE_RESOURCE, blog_type_id, payload)


def delete_blog_type(client: ApiClient, blog_type_id: int) -> ProviderResult:
    return _delete(client, BLOG_TYPE_RESOURCE, blog_type_id)


# --- home
def get_home(client: ApiClient, home_id: int) -> Dict[str, Any]:
    return _get_one(client, HOME_RESOURCE, home_id)


def update_home(client: ApiClient, home_id: int, payload: Dict[str, Any]) -> ProviderResult:
    return _update(client, HOME_RESOURCE, home_id, payload)


# --- basic data (single record)
def get_basic_data(client: ApiClient, record_id: int = BASIC_DATA_RECORD_ID) -> Dict[str, Any]:
    return _get_one(client, BASIC_DATA_RESOURCE, record_id)


def update_basic_data(
    client: ApiClient, record_id: int, payload: Dict[str, Any]
) -> ProviderResult:
    return _update(client, BASIC_DATA_RESOURCE, record_id, payload)
