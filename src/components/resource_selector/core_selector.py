"""
Selection state for the resource selector dialog.

The dialog is either ``Closed`` or ``Open``; an open dialog carries the pending
selection (ids plus the rows reported by the same selection event). The caller's
committed selection lives outside this module and only flows back in as the
seed ids for the next open.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar, Union

Row = Dict[str, Any]
T = TypeVar("T")


class SelectionError(ValueError):
    """Raised when a transition is not allowed in the current state."""


class SelectionMode(str, Enum):
    SINGLE = "single"
    MULTIPLE = "multiple"

    @classmethod
    def coerce(cls, value: Union["SelectionMode", str, None]) -> "SelectionMode":
        if value is None:
            return cls.MULTIPLE
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise ValueError(f"Unknown selection mode: {value!r}") from exc

    @property
    def control_type(self) -> str:
        return "radio" if self is SelectionMode.SINGLE else "checkbox"

    @property
    def count_noun(self) -> str:
        return "seleccionado" if self is SelectionMode.SINGLE else "seleccionados"


@dataclass(frozen=True)
class Closed:
    pass


@dataclass(frozen=True)
class Open:
    pending_ids: Tuple[int, ...] = ()
    pending_rows: Tuple[Row, ...] = ()


SelectorState = Union[Closed, Open]
CLOSED = Closed()


def normalize_ids(ids: Optional[Iterable[Any]]) -> Tuple[int, ...]:
    if not ids:
        return ()
    normalized: List[int] = []
    for value in ids:
        if value is None or value == "":
            continue
        normalized.append(int(value))
    return tuple(normalized)


def is_open(state: SelectorState) -> bool:
    return isinstance(state, Open)


def pending_ids(state: SelectorState) -> List[int]:
    return list(state.pending_ids) if isinstance(state, Open) else []


def pending_rows(state: SelectorState) -> List[Row]:
    return list(state.pending_rows) if isinstance(state, Open) else []


def open_dialog(
    state: SelectorState,
    initial_ids: Optional[Iterable[Any]] = None,
    *,
    mode: SelectionMode = SelectionMode.MULTIPLE,
    disabled: bool = False,
) -> SelectorState:
    """Closed -> Open, seeding pending ids only. No-op when disabled."""
    if disabled:
        return state
    seed = normalize_ids(initial_ids)
    if mode is SelectionMode.SINGLE:
        seed = seed[:1]
    return Open(pending_ids=seed, pending_rows=())


def apply_selection(
    state: SelectorState,
    ids: Optional[Iterable[Any]],
    rows: Optional[Sequence[Row]],
    *,
    mode: SelectionMode = SelectionMode.MULTIPLE,
) -> SelectorState:
    """Overwrite the pending selection with what the row control reported."""
    if not isinstance(state, Open):
        raise SelectionError("Selection changes are only accepted while the dialog is open.")
    new_ids = normalize_ids(ids)
    new_rows = tuple(rows or ())
    if mode is SelectionMode.SINGLE and len(new_ids) > 1:
        last_id = new_ids[-1]
        new_ids = (last_id,)
        new_rows = tuple(row for row in new_rows if _row_id(row) == last_id)[-1:]
    return Open(pending_ids=new_ids, pending_rows=new_rows)


def can_confirm(state: SelectorState) -> bool:
    return isinstance(state, Open) and len(state.pending_ids) > 0


def confirm(
    state: SelectorState,
    on_confirm: Callable[[List[int], List[Row]], T],
) -> Tuple[SelectorState, T]:
    if not isinstance(state, Open) or not state.pending_ids:
        raise SelectionError("Choose at least one row before confirming.")
    result = on_confirm(list(state.pending_ids), list(state.pending_rows))
    return CLOSED, result


def cancel(state: SelectorState) -> SelectorState:
    return CLOSED


def count_label(state: SelectorState, mode: SelectionMode) -> str:
    return f"{len(pending_ids(state))} {mode.count_noun}"


def _row_id(row: Row) -> Optional[int]:
    try:
        return int(row.get("id"))
    except (TypeError, ValueError, AttributeError):
        return None
