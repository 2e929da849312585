"""Tests for the resource-specific selector wrappers."""

import gradio as gr
import pytest

from src.components.resource_selector.core_selector import SelectionMode
from src.components.resource_selector.image_selector import ImageSelector, image_preview_title
from src.components.resource_selector.label_selector import LabelSelector
from src.components.resource_selector.preview import image_thumbnail_cell
from src.components.resource_selector.row_sources import LoadedListSource, RemoteListingSource, RowView
from src.components.resource_selector.skill_selector import SkillSelector
from src.components.resource_selector.skill_son_selector import SkillSonSelector
from src.components.resource_selector.video_selector import VideoSelector
from src.providers import get_skill_sons, get_skills


def _noop(ids, rows):
    return None


@pytest.mark.parametrize(
    "selector_cls, label",
    [
        (ImageSelector, "Seleccionar imágenes"),
        (VideoSelector, "Seleccionar videos"),
        (SkillSelector, "Seleccionar habilidades"),
        (SkillSonSelector, "Seleccionar habilidades hijas"),
        (LabelSelector, "Seleccionar labels"),
    ],
)
def test_default_labels(selector_cls, label):
    modal = selector_cls(on_confirm=_noop).modal
    assert modal.title == label
    assert modal.button_label == label

    custom = selector_cls(on_confirm=_noop, button_label="Elegir", title="Elige uno").modal
    assert custom.button_label == "Elegir"
    assert custom.title == "Elige uno"


@pytest.mark.parametrize(
    "selector_cls, resource",
    [(ImageSelector, "image"), (VideoSelector, "video"), (LabelSelector, "label")],
)
def test_media_selectors_page_through_the_backend(selector_cls, resource):
    source = selector_cls(on_confirm=_noop).modal.row_source
    assert isinstance(source, RemoteListingSource)
    assert source.resource == resource
    assert source.paginated


@pytest.mark.parametrize(
    "selector_cls, loader",
    [(SkillSelector, get_skills), (SkillSonSelector, get_skill_sons)],
)
def test_skill_selectors_load_the_whole_list(selector_cls, loader):
    source = selector_cls(on_confirm=_noop).modal.row_source
    assert isinstance(source, LoadedListSource)
    assert source.loader is loader
    assert not source.paginated


@pytest.mark.parametrize(
    "selector_cls", [ImageSelector, VideoSelector, SkillSelector, SkillSonSelector, LabelSelector]
)
def test_options_are_forwarded_to_the_modal(selector_cls):
    seed = gr.State([3])
    outputs = [object(), object()]

    modal = selector_cls(
        on_confirm=_noop,
        selection_mode="single",
        initial_selected_ids=seed,
        disabled=True,
        confirm_outputs=outputs,
    ).modal

    assert modal.selection_mode is SelectionMode.SINGLE
    assert modal.initial_selected_ids is seed
    assert modal.disabled is True
    assert modal.on_confirm is _noop
    assert modal.confirm_outputs == outputs


def test_selectors_default_to_multiple_selection():
    modal = LabelSelector(on_confirm=_noop, initial_selected_ids=[1, "2"]).modal
    assert modal.selection_mode is SelectionMode.MULTIPLE
    assert modal.disabled is False
    assert modal._static_seed() == [1, 2]


def test_image_thumbnail_opens_the_preview_bridge():
    selector = ImageSelector(on_confirm=_noop)
    cell = image_thumbnail_cell(selector.bridge, {"id": 7, "name": "<logo>", "url": "https://cdn.test/a.png"})

    assert "src='https://cdn.test/a.png'" in cell
    assert selector.bridge.trigger_id in cell
    assert selector.bridge.box_id in cell
    assert "&lt;logo&gt;" in cell
    assert "<logo>" not in cell

    titles = [column.title for column in selector.modal.columns]
    assert titles == ["ID", "Nombre", "Nombre (inglés)", "Vista previa"]


def test_image_preview_holds_a_single_row():
    selector = ImageSelector(on_confirm=_noop)
    view = RowView.of(
        [
            {"id": 1, "name": "uno", "url": "https://cdn.test/1.png"},
            {"id": 2, "name": "dos", "url": "https://cdn.test/2.png"},
        ]
    )

    row, dialog, title, body = selector.open_preview("1", view)
    assert row["id"] == 1
    assert dialog["visible"] is True
    assert title == "### Imagen uno"
    assert "https://cdn.test/1.png" in body

    row, _, title, body = selector.open_preview("2", view)
    assert row["id"] == 2
    assert title == "### Imagen dos"
    assert "https://cdn.test/1.png" not in body

    row, dialog, title, body = selector.open_preview("99", view)
    assert row is None
    assert dialog["visible"] is False
    assert body == ""

    assert selector.close_preview() == (None, gr.update(visible=False), image_preview_title(None), "")


def test_each_selector_gets_its_own_bridge():
    first, second = ImageSelector(on_confirm=_noop), ImageSelector(on_confirm=_noop)
    assert first.bridge.trigger_id != second.bridge.trigger_id
