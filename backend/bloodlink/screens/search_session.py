from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List

from loguru import logger

from ..database import Settings, settings as default_settings
from ..matching.compatibility import CompatibilityView, compatibility_view
from ..matching.search import search
from ..models.blood_group import BloodGroup
from ..models.donor import Donor
from ..models.search import MatchMode, Page
from ..providers import RosterProvider, StaticRosterProvider
from ..seed import HOME_LOCATIONS, SHARIATPUR_THANAS, emergency_roster, home_roster
from ..utils.debounce import Debouncer
from ..utils.logging import log_provider_error
from .search_state import (
    GoToPage,
    NextPage,
    PreviousPage,
    Reset,
    SearchAction,
    SearchState,
    SetBloodGroup,
    SetError,
    SetLoading,
    SetLocation,
    SetMatchMode,
    SetQuery,
    SetResults,
    SetRoster,
    initial_search_state,
    transition,
)


class SearchVariant(str, Enum):
    HOME = "home"
    EMERGENCY = "emergency"


@dataclass(frozen=True)
class VariantConfig:
    roster: Callable[[], List[Donor]]
    locations: List[str]
    empty_message: str


VARIANTS = {
    SearchVariant.HOME: VariantConfig(home_roster, HOME_LOCATIONS, "No donors found."),
    SearchVariant.EMERGENCY: VariantConfig(
        emergency_roster, SHARIATPUR_THANAS, "No emergency donors found."
    ),
}

LOAD_ERROR_MESSAGE = "Unable to load donors. Pull to refresh to try again."


class SearchSession:
    """Controller for one donor search screen: owns its state, roster and debounce timer."""

    def __init__(
        self,
        variant: SearchVariant = SearchVariant.HOME,
        provider: RosterProvider | None = None,
        config: Settings | None = None,
        match_mode: MatchMode = MatchMode.COMPATIBLE,
    ) -> None:
        config = config or default_settings
        self.variant = variant
        self.variant_config = VARIANTS[variant]
        self.provider = provider or StaticRosterProvider(
            self.variant_config.roster(), latency=config.roster_load_latency_s
        )
        self.refresh_latency = config.refresh_latency_s
        self.state = initial_search_state(
            self.variant_config.roster() if provider is None else [],
            page_size=config.donor_page_size,
            match_mode=match_mode,
            empty_message=self.variant_config.empty_message,
        )
        self.debouncer = Debouncer(config.search_debounce_s, self.run_search)

    @property
    def locations(self) -> List[str]:
        return list(self.variant_config.locations)

    def dispatch(self, action: SearchAction) -> SearchState:
        self.state = transition(self.state, action)
        return self.state

    async def load(self) -> SearchState:
        self.dispatch(SetLoading(True))
        try:
            roster = await self.provider.load()
        except Exception as exc:
            log_provider_error(f"{self.variant.value} search load", exc)
            self.dispatch(SetLoading(False))
            return self.dispatch(SetError(LOAD_ERROR_MESSAGE))
        self.dispatch(SetRoster(tuple(roster)))
        self.dispatch(Reset())
        return self.state

    def run_search(self) -> SearchState:
        self.dispatch(SetLoading(True))
        results = search(self.state.roster, self.state.criteria)
        self.dispatch(SetResults(tuple(results)))
        return self.dispatch(SetLoading(False))

    def _schedule(self) -> None:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            self.run_search()
            return
        self.debouncer.trigger()

    def type_query(self, text: str) -> SearchState:
        self.dispatch(SetQuery(text))
        self._schedule()
        return self.state

    def select_blood_group(self, group: BloodGroup | str | None) -> SearchState:
        self.dispatch(SetBloodGroup(BloodGroup.parse(group) if group else None))
        self._schedule()
        return self.state

    def select_location(self, location: str | None) -> SearchState:
        self.dispatch(SetLocation(location))
        self._schedule()
        return self.state

    def set_match_mode(self, mode: MatchMode) -> SearchState:
        self.dispatch(SetMatchMode(mode))
        self._schedule()
        return self.state

    def apply(
        self,
        query: str = "",
        blood_group: BloodGroup | str | None = None,
        location: str | None = None,
        match_mode: MatchMode | None = None,
    ) -> SearchState:
        """Set every criterion at once and search immediately, as an explicit submit does."""
        self.debouncer.cancel()
        self.dispatch(SetQuery(query))
        self.dispatch(SetBloodGroup(BloodGroup.parse(blood_group) if blood_group else None))
        self.dispatch(SetLocation(location))
        if match_mode is not None:
            self.dispatch(SetMatchMode(match_mode))
        return self.run_search()

    def submit(self) -> SearchState:
        self.debouncer.cancel()
        return self.run_search()

    async def settle(self) -> SearchState:
        await self.debouncer.wait()
        return self.state

    def clear(self) -> SearchState:
        self.debouncer.cancel()
        return self.dispatch(Reset())

    async def refresh(self) -> SearchState:
        logger.info("Refreshing {} donor search", self.variant.value)
        self.debouncer.cancel()
        self.dispatch(Reset())
        self.dispatch(SetLoading(True))
        await asyncio.sleep(self.refresh_latency)
        return self.dispatch(SetLoading(False))

    def next_page(self) -> SearchState:
        return self.dispatch(NextPage())

    def previous_page(self) -> SearchState:
        return self.dispatch(PreviousPage())

    def go_to_page(self, page: int) -> SearchState:
        return self.dispatch(GoToPage(page))

    def current_page(self) -> Page[Donor]:
        return self.state.visible_page()

    def compatibility(self) -> CompatibilityView | None:
        group = self.state.blood_group
        if group is None:
            return None
        return compatibility_view(group)
