"""Tests for the profile, education and media form helpers."""

import base64
from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from src.pages.basic_data.core_basic_data import (
    INVALID_EMAIL_MESSAGE,
    SOCIAL_NETWORKS,
    basic_data_form_state,
    build_basic_data_payload,
    normalize_social_link,
    validate_social_link,
)
from src.pages.education.core_education import build_education_payload, education_form_state
from src.pages.image.core_image import (
    MAX_IMAGE_BYTES,
    MISSING_FILE_MESSAGE,
    build_image_payload,
    extract_upload_path,
    image_data_url,
)
from src.pages.label.app_label import LABEL_PAGE
from src.pages.skill_son.app_skill_son import SKILL_SON_PAGE
from src.pages.video.core_video import NOT_YOUTUBE_MESSAGE, build_video_payload
from src.providers import ProviderResult

BASIC_DATA = {
    "firstName": "Ana",
    "othersName": "",
    "firstSurName": "Pérez",
    "othersSurName": "",
    "dateBirth": "1990-05-01",
    "located": "Santiago",
    "locatedEng": "Santiago",
    "startWorkingDate": "2012-03-01",
    "greeting": "Hola",
    "greetingEng": "Hi",
    "email": "ana@example.com",
    "instagram": "ana",
    "linkedin": "linkedin.com/in/ana",
    "x": "",
    "github": "https://github.com/ana",
    "description": "Desarrolladora",
    "descriptionEng": "Developer",
}


def test_social_links_are_normalised():
    instagram = SOCIAL_NETWORKS["instagram"]
    linkedin = SOCIAL_NETWORKS["linkedin"]

    assert normalize_social_link("ana", instagram) == "https://instagram.com/ana"
    assert normalize_social_link("/ana", instagram) == "https://instagram.com/ana"
    assert normalize_social_link("instagram.com/ana", instagram) == "https://instagram.com/ana"
    assert normalize_social_link("www.linkedin.com/in/ana", linkedin) == "https://www.linkedin.com/in/ana"
    assert normalize_social_link("linkedin.com/in/ana", linkedin) == "https://linkedin.com/in/ana"
    assert normalize_social_link("  ", linkedin) == ""


def test_social_links_must_stay_on_their_network():
    github = SOCIAL_NETWORKS["github"]
    validate_social_link("https://www.github.com/ana", github)
    validate_social_link("", github)
    with pytest.raises(ValueError, match="github.com"):
        validate_social_link("https://gitlab.com/ana", github)


def test_basic_data_payload():
    payload = build_basic_data_payload(BASIC_DATA)
    assert payload["instagram"] == "https://instagram.com/ana"
    assert payload["linkedin"] == "https://linkedin.com/in/ana"
    assert payload["x"] == ""
    assert payload["github"] == "https://github.com/ana"
    assert payload["firstName"] == "Ana"

    with pytest.raises(ValueError, match=INVALID_EMAIL_MESSAGE):
        build_basic_data_payload({**BASIC_DATA, "email": "ana@"})
    with pytest.raises(ValueError, match="Saludo"):
        build_basic_data_payload({**BASIC_DATA, "greeting": ""})
    with pytest.raises(ValueError, match="X"):
        build_basic_data_payload({**BASIC_DATA, "x": "https://twitter.com/ana"})


def test_basic_data_form_state_fills_missing_fields():
    values = basic_data_form_state({"firstName": "Ana", "email": None})
    assert values["firstName"] == "Ana"
    assert values["email"] == ""
    assert values["descriptionEng"] == ""


def test_education_payload_and_form_state():
    values = {
        "institution": " Universidad de Chile ",
        "degree": "Ingeniería",
        "degreeEng": "Engineering",
        "area": "Computación",
        "areaEng": "Computer Science",
        "location": "Santiago",
        "locationEng": "Santiago",
        "startDate": "2008-03-01",
        "endDate": "2013-12-20",
        "highlights": "Memoria con distinción\n\nAyudante",
        "highlightsEng": "",
    }
    payload = build_education_payload(values)
    assert payload["institution"] == "Universidad de Chile"
    assert payload["highlights"] == ["Memoria con distinción", "Ayudante"]
    assert payload["highlightsEng"] == []

    with pytest.raises(ValueError, match="Institución"):
        build_education_payload({**values, "institution": ""})

    state = education_form_state({"institution": "U", "highlights": ["a", "b"]})
    assert state["highlights"] == "a\nb"
    assert state["highlightsEng"] == ""


def test_extract_upload_path_variants(tmp_path):
    path = tmp_path / "logo.png"
    assert extract_upload_path(None) == ""
    assert extract_upload_path(str(path)) == str(path)
    assert extract_upload_path(path) == str(path)
    assert extract_upload_path({"path": "/tmp/a.png"}) == "/tmp/a.png"
    assert extract_upload_path([None, {"name": "/tmp/b.png"}]) == "/tmp/b.png"


def test_image_payload_embeds_the_file(tmp_path):
    path = tmp_path / "logo.PNG"
    path.write_bytes(b"\x89PNG")

    payload = build_image_payload({"name": "Logo", "nameEng": "Logo"}, str(path))

    assert payload["name"] == "Logo"
    assert payload["file"] == "data:image/png;base64," + base64.b64encode(b"\x89PNG").decode("ascii")


def test_image_data_url_rejects_bad_files(tmp_path):
    with pytest.raises(ValueError, match=MISSING_FILE_MESSAGE):
        image_data_url("")
    with pytest.raises(ValueError, match=MISSING_FILE_MESSAGE):
        image_data_url(str(tmp_path / "missing.png"))

    text = tmp_path / "notes.txt"
    text.write_text("hola")
    with pytest.raises(ValueError, match="Formato no soportado"):
        image_data_url(str(text))

    big = tmp_path / "big.jpg"
    big.write_bytes(b"0" * (MAX_IMAGE_BYTES + 1))
    with pytest.raises(ValueError, match="supera el límite"):
        image_data_url(str(big))


def test_image_payload_requires_names_before_the_file():
    with pytest.raises(ValueError, match="Nombre"):
        build_image_payload({"name": "", "nameEng": ""}, None)


def test_video_payload_only_accepts_youtube():
    values = {"name": "Demo", "nameEng": "Demo", "url": " https://youtu.be/ABCDEFGHIJK "}
    assert build_video_payload(values)["url"] == "https://youtu.be/ABCDEFGHIJK"

    with pytest.raises(ValueError, match=NOT_YOUTUBE_MESSAGE):
        build_video_payload({**values, "url": "https://vimeo.com/1"})
    with pytest.raises(ValueError, match="URL"):
        build_video_payload({**values, "url": ""})


def test_name_record_pages(monkeypatch):
    client = MagicMock()
    monkeypatch.setattr("src.pages.name_records.client_for", lambda request: client)

    assert SKILL_SON_PAGE.editable
    assert not LABEL_PAGE.editable

    create = MagicMock(return_value=ProviderResult(201))
    labels = replace(LABEL_PAGE, create=create)
    # Create-only pages ignore a stray record id.
    assert labels.submit(7, " Nuevo ", "New", None) == "✅ Label creado"
    create.assert_called_once_with(client, {"name": "Nuevo", "nameEng": "New"})
    assert labels.submit(None, "", "", None).startswith("❌ Campos obligatorios")

    update = MagicMock(return_value=ProviderResult(200))
    get = MagicMock(return_value={"id": 4, "name": "Django", "nameEng": None})
    skill_sons = replace(SKILL_SON_PAGE, update=update, get=get)
    assert skill_sons.submit(4, "Django", "Django", None) == "✅ " + SKILL_SON_PAGE.messages.updated
    update.assert_called_once_with(client, 4, {"name": "Django", "nameEng": "Django"})
    assert skill_sons.load("4", None) == ("Django", "", "Editando #4.")
    get.assert_called_once_with(client, 4)
