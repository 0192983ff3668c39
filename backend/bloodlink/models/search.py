from __future__ import annotations

from enum import Enum
from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, computed_field

from .blood_group import BloodGroup

T = TypeVar("T")


class MatchMode(str, Enum):
    COMPATIBLE = "compatible"
    EXACT = "exact"


class FilterCriteria(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: str = ""
    blood_group: BloodGroup | None = None
    location: str | None = None
    match_mode: MatchMode = MatchMode.COMPATIBLE


class Page(BaseModel, Generic[T]):
    items: List[T]
    page: int
    page_size: int
    total_items: int
    total_pages: int

    @computed_field
    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @computed_field
    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages
