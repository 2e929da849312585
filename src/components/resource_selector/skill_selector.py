from typing import List

from src.components.resource_selector.app_selector import BoundSelector
from src.components.resource_selector.columns import Column, name_columns
from src.components.resource_selector.row_sources import LoadedListSource, RowSource
from src.providers import get_skills


class SkillSelector(BoundSelector):
    default_label = "Seleccionar habilidades"

    def build_row_source(self) -> RowSource:
        return LoadedListSource(get_skills, name="skills")

    def build_columns(self) -> List[Column]:
        return name_columns()
