from __future__ import annotations

from datetime import date, datetime
from typing import Any, Callable

from loguru import logger

from ..database import Settings, settings as default_settings
from ..errors import DonorUnavailable, NoPhoneNumber
from ..matching.availability import is_available_to_donate, next_eligible_date
from ..matching.compatibility import CompatibilityView, compatibility_view
from ..models.donor import Donation
from ..models.search import Page
from ..providers import ProfileProvider, StaticProfileProvider
from ..utils.logging import log_provider_error
from .profile_state import (
    CancelEdit,
    GoToPage,
    NextPage,
    PreviousPage,
    ProfileAction,
    ProfileState,
    SaveProfile,
    SetDonationHistory,
    SetError,
    SetLoading,
    SetProfile,
    StartEdit,
    UpdateDraft,
    transition,
)

LOAD_ERROR_MESSAGE = "Unable to load your profile."

Clock = Callable[[], datetime]


class ProfileSession:
    def __init__(
        self,
        provider: ProfileProvider | None = None,
        config: Settings | None = None,
        clock: Clock = datetime.now,
    ) -> None:
        config = config or default_settings
        self.provider = provider or StaticProfileProvider(latency=config.profile_load_latency_s)
        self.cooldown_days = config.donation_cooldown_days
        self.clock = clock
        self.state = ProfileState(page_size=config.history_page_size)

    def dispatch(self, action: ProfileAction) -> ProfileState:
        self.state = transition(self.state, action)
        return self.state

    async def load(self) -> ProfileState:
        self.dispatch(SetLoading(True))
        try:
            profile, history = await self.provider.load()
        except Exception as exc:
            log_provider_error("profile load", exc)
            self.dispatch(SetError(LOAD_ERROR_MESSAGE))
            return self.dispatch(SetLoading(False))
        self.dispatch(SetProfile(profile))
        self.dispatch(SetDonationHistory(tuple(history)))
        return self.dispatch(SetLoading(False))

    def start_edit(self) -> ProfileState:
        return self.dispatch(StartEdit())

    def update_draft(self, **changes: Any) -> ProfileState:
        return self.dispatch(UpdateDraft(changes))

    def cancel_edit(self) -> ProfileState:
        return self.dispatch(CancelEdit())

    def save(self) -> ProfileState:
        return self.dispatch(SaveProfile())

    def is_available(self) -> bool:
        return is_available_to_donate(
            self.state.profile.last_donation_date, self.clock(), self.cooldown_days
        )

    def next_eligible_date(self) -> date | None:
        return next_eligible_date(self.state.profile.last_donation_date, self.cooldown_days)

    def compatibility(self) -> CompatibilityView | None:
        group = self.state.profile.blood_group
        if group is None:
            return None
        return compatibility_view(group)

    def request_donation(self) -> str:
        if not self.is_available():
            raise DonorUnavailable(
                f"Next donation possible on {self.next_eligible_date().isoformat()}"
            )
        logger.info("Donation request sent for {}", self.state.profile.name)
        return "Donation request sent"

    def call(self) -> str:
        phone = self.state.profile.phone
        if not phone:
            raise NoPhoneNumber("No phone number available")
        return f"tel:{phone}"

    def next_page(self) -> ProfileState:
        return self.dispatch(NextPage())

    def previous_page(self) -> ProfileState:
        return self.dispatch(PreviousPage())

    def go_to_page(self, page: int) -> ProfileState:
        return self.dispatch(GoToPage(page))

    def history_page(self) -> Page[Donation]:
        return self.state.history_page()
