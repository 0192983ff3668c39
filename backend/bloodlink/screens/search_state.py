from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Sequence, Tuple, Union

from ..matching.pagination import build_page, ensure_page_in_range, total_pages
from ..models.blood_group import BloodGroup
from ..models.donor import Donor
from ..models.search import FilterCriteria, MatchMode, Page

DEFAULT_EMPTY_MESSAGE = "No donors found."


@dataclass(frozen=True)
class SearchState:
    roster: Tuple[Donor, ...] = ()
    results: Tuple[Donor, ...] = ()
    query: str = ""
    blood_group: BloodGroup | None = None
    location: str | None = None
    match_mode: MatchMode = MatchMode.COMPATIBLE
    page: int = 1
    page_size: int = 6
    loading: bool = False
    error: str | None = None
    empty_message: str = field(default=DEFAULT_EMPTY_MESSAGE, compare=False)

    @property
    def criteria(self) -> FilterCriteria:
        return FilterCriteria(
            query=self.query,
            blood_group=self.blood_group,
            location=self.location,
            match_mode=self.match_mode,
        )

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.results), self.page_size)

    @property
    def no_results(self) -> bool:
        return not self.loading and self.error is None and not self.results

    @property
    def message(self) -> str | None:
        return self.empty_message if self.no_results else None

    def visible_page(self) -> Page[Donor]:
        return build_page(self.results, self.page, self.page_size)


def initial_search_state(
    roster: Sequence[Donor],
    page_size: int = 6,
    match_mode: MatchMode = MatchMode.COMPATIBLE,
    empty_message: str = DEFAULT_EMPTY_MESSAGE,
) -> SearchState:
    donors = tuple(roster)
    return SearchState(
        roster=donors,
        results=donors,
        page_size=page_size,
        match_mode=match_mode,
        empty_message=empty_message,
    )


@dataclass(frozen=True)
class SetQuery:
    query: str


@dataclass(frozen=True)
class SetBloodGroup:
    blood_group: BloodGroup | None


@dataclass(frozen=True)
class SetLocation:
    location: str | None


@dataclass(frozen=True)
class SetMatchMode:
    match_mode: MatchMode


@dataclass(frozen=True)
class SetRoster:
    roster: Tuple[Donor, ...]


@dataclass(frozen=True)
class SetResults:
    results: Tuple[Donor, ...]


@dataclass(frozen=True)
class GoToPage:
    page: int


@dataclass(frozen=True)
class NextPage:
    pass


@dataclass(frozen=True)
class PreviousPage:
    pass


@dataclass(frozen=True)
class SetLoading:
    loading: bool


@dataclass(frozen=True)
class SetError:
    error: str | None


@dataclass(frozen=True)
class Reset:
    pass


SearchAction = Union[
    SetQuery,
    SetBloodGroup,
    SetLocation,
    SetMatchMode,
    SetRoster,
    SetResults,
    GoToPage,
    NextPage,
    PreviousPage,
    SetLoading,
    SetError,
    Reset,
]


def transition(state: SearchState, action: SearchAction) -> SearchState:
    """Apply one user or system action; criteria changes always go back to page 1."""
    if isinstance(action, SetQuery):
        return replace(state, query=action.query, page=1)
    if isinstance(action, SetBloodGroup):
        return replace(state, blood_group=action.blood_group, page=1)
    if isinstance(action, SetLocation):
        return replace(state, location=action.location or None, page=1)
    if isinstance(action, SetMatchMode):
        return replace(state, match_mode=action.match_mode, page=1)
    if isinstance(action, SetRoster):
        return replace(state, roster=tuple(action.roster))
    if isinstance(action, SetResults):
        results = tuple(action.results)
        return replace(
            state,
            results=results,
            page=1,
            error=None,
        )
    if isinstance(action, GoToPage):
        page = ensure_page_in_range(action.page, len(state.results), state.page_size)
        return replace(state, page=page)
    if isinstance(action, NextPage):
        if state.page >= state.total_pages:
            return state
        return replace(state, page=state.page + 1)
    if isinstance(action, PreviousPage):
        if state.page <= 1:
            return state
        return replace(state, page=state.page - 1)
    if isinstance(action, SetLoading):
        return replace(state, loading=action.loading)
    if isinstance(action, SetError):
        return replace(state, error=action.error)
    if isinstance(action, Reset):
        return initial_search_state(
            state.roster,
            page_size=state.page_size,
            match_mode=state.match_mode,
            empty_message=state.empty_message,
        )
    raise TypeError(f"Unknown search action: {action!r}")
