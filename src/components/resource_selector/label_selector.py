from typing import List

from src.components.resource_selector.app_selector import BoundSelector
from src.components.resource_selector.columns import Column, name_columns
from src.components.resource_selector.row_sources import RemoteListingSource, RowSource
from src.providers import LABEL_RESOURCE


class LabelSelector(BoundSelector):
    default_label = "Seleccionar labels"

    def build_row_source(self) -> RowSource:
        return RemoteListingSource(LABEL_RESOURCE)

    def build_columns(self) -> List[Column]:
        return name_columns()
