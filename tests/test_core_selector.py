"""Tests for the selector dialog state machine."""

from unittest.mock import MagicMock

import pytest

from src.components.resource_selector.core_selector import (
    CLOSED,
    Closed,
    Open,
    SelectionError,
    SelectionMode,
    apply_selection,
    can_confirm,
    cancel,
    confirm,
    count_label,
    open_dialog,
    pending_ids,
    pending_rows,
)


def test_open_seeds_ids_and_clears_rows():
    state = open_dialog(CLOSED, [1, 2], mode=SelectionMode.MULTIPLE)
    assert isinstance(state, Open)
    assert pending_ids(state) == [1, 2]
    assert pending_rows(state) == []


def test_reopen_discards_previous_pending_selection():
    state = open_dialog(CLOSED, [1], mode=SelectionMode.MULTIPLE)
    state = apply_selection(state, [1, 7], [{"id": 1}, {"id": 7}])
    state = cancel(state)

    reopened = open_dialog(state, [1], mode=SelectionMode.MULTIPLE)
    assert pending_ids(reopened) == [1]
    assert pending_rows(reopened) == []


def test_open_disabled_is_noop():
    assert open_dialog(CLOSED, [1], disabled=True) is CLOSED


def test_single_mode_never_holds_more_than_one_id():
    state = open_dialog(CLOSED, [4, 5, 6], mode=SelectionMode.SINGLE)
    assert pending_ids(state) == [4]

    rows = [{"id": 2, "name": "a"}, {"id": 3, "name": "b"}]
    state = apply_selection(state, [2, 3], rows, mode=SelectionMode.SINGLE)
    assert pending_ids(state) == [3]
    assert pending_rows(state) == [{"id": 3, "name": "b"}]


def test_selection_overwrites_pending():
    state = open_dialog(CLOSED, [1, 2])
    state = apply_selection(state, [9], [{"id": 9}])
    assert pending_ids(state) == [9]
    assert pending_rows(state) == [{"id": 9}]


def test_selection_requires_open_dialog():
    with pytest.raises(SelectionError):
        apply_selection(CLOSED, [1], [{"id": 1}])


def test_confirm_passes_selection_exactly_once():
    on_confirm = MagicMock(return_value="done")
    state = open_dialog(CLOSED, [], mode=SelectionMode.SINGLE)
    state = apply_selection(state, [3], [{"id": 3, "name": "x"}], mode=SelectionMode.SINGLE)

    new_state, result = confirm(state, on_confirm)

    on_confirm.assert_called_once_with([3], [{"id": 3, "name": "x"}])
    assert isinstance(new_state, Closed)
    assert result == "done"


def test_confirm_with_empty_selection_is_rejected():
    on_confirm = MagicMock()
    state = open_dialog(CLOSED, [])
    with pytest.raises(SelectionError):
        confirm(state, on_confirm)
    on_confirm.assert_not_called()


def test_confirm_on_closed_dialog_is_rejected():
    """A closed dialog raises SelectionError, not AssertionError."""
    on_confirm = MagicMock()
    with pytest.raises(SelectionError):
        confirm(CLOSED, on_confirm)
    with pytest.raises(SelectionError):
        confirm(Open(pending_ids=(), pending_rows=({"id": 1},)), on_confirm)
    on_confirm.assert_not_called()


def test_cancel_never_calls_back():
    on_confirm = MagicMock()
    state = open_dialog(CLOSED, [1])
    state = apply_selection(state, [1, 2], [{"id": 1}, {"id": 2}])
    assert cancel(state) == CLOSED
    on_confirm.assert_not_called()


def test_count_label_wording():
    multiple = open_dialog(CLOSED, [1, 2], mode=SelectionMode.MULTIPLE)
    single = open_dialog(CLOSED, [1], mode=SelectionMode.SINGLE)
    assert count_label(multiple, SelectionMode.MULTIPLE) == "2 seleccionados"
    assert count_label(single, SelectionMode.SINGLE) == "1 seleccionado"
    assert count_label(CLOSED, SelectionMode.MULTIPLE) == "0 seleccionados"


def test_confirm_gating_follows_selection():
    state = open_dialog(CLOSED, [])
    assert can_confirm(state) is False
    state = apply_selection(state, [5], [{"id": 5}])
    assert can_confirm(state) is True
    assert can_confirm(CLOSED) is False


def test_selection_mode_coerce():
    assert SelectionMode.coerce(None) is SelectionMode.MULTIPLE
    assert SelectionMode.coerce("single") is SelectionMode.SINGLE
    assert SelectionMode.coerce(" Multiple ") is SelectionMode.MULTIPLE
    assert SelectionMode.SINGLE.control_type == "radio"
    assert SelectionMode.MULTIPLE.control_type == "checkbox"
    with pytest.raises(ValueError):
        SelectionMode.coerce("many")
