from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Protocol

from src.api_client import ApiClient, ApiError
from src.providers import list_page
from src.secrets import DEFAULT_SELECTOR_PAGE_SIZE, get_int_setting

logger = logging.getLogger(__name__)

Row = Dict[str, Any]
LOAD_ERROR_MESSAGE = "No se pudieron cargar los datos."


@dataclass(frozen=True)
class Pagination:
    current: int
    page_size: int
    total: int

    @property
    def page_count(self) -> int:
        if self.total <= 0 or self.page_size <= 0:
            return 1
        return max(1, math.ceil(self.total / self.page_size))

    @property
    def has_previous(self) -> bool:
        return self.current > 1

    @property
    def has_next(self) -> bool:
        return self.current < self.page_count

    @property
    def label(self) -> str:
        return f"Página {self.current} de {self.page_count} · {self.total} registros"


@dataclass(frozen=True)
class RowView:
    rows: List[Row] = field(default_factory=list)
    loading: bool = False
    pagination: Optional[Pagination] = None
    error: Optional[str] = None

    @classmethod
    def of(
        cls,
        rows: Optional[List[Row]],
        *,
        loading: bool = False,
        pagination: Optional[Pagination] = None,
        error: Optional[str] = None,
    ) -> "RowView":
        return cls(rows=list(rows or []), loading=loading, pagination=pagination, error=error)

    def row_ids(self) -> List[int]:
        ids: List[int] = []
        for row in self.rows:
            try:
                ids.append(int(row["id"]))
            except (KeyError, TypeError, ValueError):
                continue
        return ids

    def rows_for(self, ids: List[int]) -> List[Row]:
        wanted = set(ids)
        return [row for row in self.rows if safe_id(row) in wanted]


def safe_id(row: Row) -> Optional[int]:
    try:
        return int(row["id"])
    except (KeyError, TypeError, ValueError):
        return None


class RowSource(Protocol):
    paginated: bool

    def initial_view(self) -> RowView: ...

    def load(self, client: ApiClient, page: int = 1) -> RowView: ...


class RemoteListingSource:
    """Paginated listing of a backend resource."""

    paginated = True

    def __init__(self, resource: str, page_size: Optional[int] = None):
        self.resource = resource
        self.page_size = page_size or get_int_setting("SELECTOR_PAGE_SIZE", DEFAULT_SELECTOR_PAGE_SIZE)

    def initial_view(self) -> RowView:
        return RowView(
            loading=True,
            pagination=Pagination(current=1, page_size=self.page_size, total=0),
        )

    def load(self, client: ApiClient, page: int = 1) -> RowView:
        page = max(1, int(page or 1))
        try:
            rows, total = list_page(client, self.resource, page=page, page_size=self.page_size)
        except ApiError as exc:
            # Listing failures leave the table empty, same as an empty page.
            logger.warning("Listing %s page %s failed: %s", self.resource, page, exc)
            rows, total = [], 0
        return RowView.of(
            rows,
            pagination=Pagination(current=page, page_size=self.page_size, total=total),
        )


class LoadedListSource:
    """Full list fetched once per page mount (small vocabularies)."""

    paginated = False

    def __init__(self, loader: Callable[[ApiClient], Optional[List[Row]]], name: str = ""):
        self.loader = loader
        self.name = name or getattr(loader, "__name__", "rows")

    def initial_view(self) -> RowView:
        return RowView(loading=True)

    def load(self, client: ApiClient, page: int = 1) -> RowView:
        try:
            rows = self.loader(client)
        except ApiError as exc:
            logger.warning("Loading %s failed: %s", self.name, exc)
            return RowView(error=LOAD_ERROR_MESSAGE)
        return RowView.of(rows)
