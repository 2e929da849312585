"""Tests for payload building in the content forms."""

import pytest

from src.pages.blog.core_blog import blog_form_state, blog_type_choices, build_blog_payload
from src.pages.experience.core_experience import build_experience_payload, experience_form_state
from src.pages.home_content.core_home_content import build_home_payload, home_form_state
from src.pages.skill.core_skill import build_skill_payload, skill_form_state
from src.pages.skill_type.core_skill_type import build_skill_type_payload, skill_type_form_state


EXPERIENCE_VALUES = {
    "yearStart": "2020-01-01",
    "yearEnd": "2022-06-30",
    "company": " ACME ",
    "position": "Backend developer",
    "positionEng": "Backend developer",
    "location": "Santiago",
    "locationEng": "Santiago",
    "summary": "APIs REST",
    "summaryEng": "REST APIs",
    "summaryPdf": "",
    "summaryPdfEng": "",
    "descriptionItemsPdf": "Diseñé la API\n\n  Migré la base de datos  \n",
    "descriptionItemsPdfEng": ["Designed the API", " "],
}


def test_experience_payload():
    payload = build_experience_payload(EXPERIENCE_VALUES, [3, "4"])
    assert set(payload) == {
        "yearStart",
        "yearEnd",
        "company",
        "position",
        "positionEng",
        "location",
        "locationEng",
        "summary",
        "summaryEng",
        "summaryPdf",
        "summaryPdfEng",
        "descriptionItemsPdf",
        "descriptionItemsPdfEng",
        "skillSonIds",
    }
    assert payload["company"] == "ACME"
    assert payload["skillSonIds"] == [3, 4]
    assert payload["descriptionItemsPdf"] == ["Diseñé la API", "Migré la base de datos"]
    assert payload["descriptionItemsPdfEng"] == ["Designed the API"]
    assert "description" not in payload

    with pytest.raises(ValueError, match="habilidad hija"):
        build_experience_payload(EXPERIENCE_VALUES, [])
    for field, label in (("company", "Empresa"), ("yearEnd", "Fecha de fin"), ("summaryEng", "Resumen")):
        with pytest.raises(ValueError, match=label):
            build_experience_payload({**EXPERIENCE_VALUES, field: ""}, [3])


def test_experience_form_state_from_record():
    record = {
        "company": "ACME",
        "summary": "APIs",
        "descriptionItemsPdf": ["uno", "dos"],
        "skillSons": [{"id": 3, "name": "SQL"}],
    }
    values, ids, rows = experience_form_state(record)
    assert values["company"] == "ACME"
    assert values["summary"] == "APIs"
    assert values["yearStart"] == ""
    assert values["descriptionItemsPdf"] == "uno\ndos"
    assert values["descriptionItemsPdfEng"] == ""
    assert ids == [3]
    assert rows == [{"id": 3, "name": "SQL"}]


def test_blog_payload_requires_image_and_video():
    values = {
        "title": "Hola",
        "titleEng": "Hello",
        "descriptionShort": "corto",
        "description": "largo",
        "descriptionShortEng": "short",
        "descriptionEng": "long",
    }
    payload = build_blog_payload(values, [7], [9])
    assert payload["imageUrlId"] == 7
    assert payload["videoUrlId"] == 9
    assert "cleanUrlTitle" not in payload
    assert "blogTypeId" not in payload

    with pytest.raises(ValueError, match="imagen"):
        build_blog_payload(values, [], [9])
    with pytest.raises(ValueError, match="video"):
        build_blog_payload(values, [7], None)


def test_blog_form_state_splits_media():
    record = {"title": "Hola", "imageUrl": {"id": 7, "url": "x"}, "videoUrl": None}
    values, (image_ids, image_row), (video_ids, video_row) = blog_form_state(record)
    assert values["title"] == "Hola"
    assert image_ids == [7]
    assert image_row == {"id": 7, "url": "x"}
    assert (video_ids, video_row) == ([], None)
    assert values["blogTypeId"] is None

    values, _, _ = blog_form_state({"cleanUrlTitle": "hola-mundo", "blogType": {"id": "3", "name": "Tech"}})
    assert values["cleanUrlTitle"] == "hola-mundo"
    assert values["blogTypeId"] == 3


def test_blog_payload_keeps_clean_url_title_and_type():
    values = {
        "title": "Hola",
        "titleEng": "Hello",
        "cleanUrlTitle": " hola-mundo ",
        "descriptionShort": "corto",
        "description": "largo",
        "descriptionShortEng": "short",
        "descriptionEng": "long",
    }
    payload = build_blog_payload(values, [7], [9], blog_type_id="2")
    assert payload["cleanUrlTitle"] == "hola-mundo"
    assert payload["blogTypeId"] == 2


def test_blog_type_choices_skip_rows_without_id():
    assert blog_type_choices([{"id": 1, "name": "Tech"}, {"name": "x"}, {"id": 2}]) == [("Tech", 1), ("2", 2)]


def test_home_payload():
    values = {
        "greeting": "Hola",
        "greetingEng": "Hi",
        "buttonWorkLabel": "Trabajo",
        "buttonWorkLabelEng": "Work",
        "buttonContactLabel": "Contacto",
        "buttonContactLabelEng": "Contact",
    }
    payload = build_home_payload(values, [2], [5, 6])
    assert payload["imageUrlId"] == 2
    assert payload["labelIds"] == [5, 6]
    with pytest.raises(ValueError, match="label"):
        build_home_payload(values, [2], [])


def test_home_form_state():
    record = {"greeting": "Hola", "imageUrl": {"id": 2}, "labels": [{"id": 5}, {"id": 6}]}
    values, image_ids, image, label_ids, labels = home_form_state(record)
    assert values["greeting"] == "Hola"
    assert image_ids == [2]
    assert image == {"id": 2}
    assert label_ids == [5, 6]
    assert len(labels) == 2


def test_skill_and_skill_type_payloads():
    values = {"name": "Python", "nameEng": "Python"}
    assert build_skill_payload(values, [1]) == {"name": "Python", "nameEng": "Python", "skillSonIds": [1]}
    assert build_skill_type_payload(values, [2, 3])["skillIds"] == [2, 3]
    with pytest.raises(ValueError):
        build_skill_payload(values, None)
    with pytest.raises(ValueError):
        build_skill_type_payload({"name": "", "nameEng": "x"}, [1])

    assert skill_form_state({"name": "Python", "skillSons": [{"id": 1}]})[1] == [1]
    assert skill_type_form_state({"name": "Backend", "skills": [{"id": 2}]})[1] == [2]
