from __future__ import annotations

import asyncio
from typing import List, Protocol, Sequence, Tuple

from loguru import logger

from .models.donor import Donation, Donor, Profile
from .seed import DEFAULT_DONATION_HISTORY, DEFAULT_PROFILE


class RosterProvider(Protocol):
    async def load(self) -> List[Donor]: ...


class ProfileProvider(Protocol):
    async def load(self) -> Tuple[Profile, List[Donation]]: ...


class StaticRosterProvider:
    """Serves a fixed roster after an artificial delay, standing in for a donor API."""

    def __init__(self, donors: Sequence[Donor], latency: float = 0.0) -> None:
        self._donors = tuple(donors)
        self.latency = latency

    async def load(self) -> List[Donor]:
        if self.latency > 0:
            await asyncio.sleep(self.latency)
        logger.debug("Loaded static roster of {} donor(s)", len(self._donors))
        return list(self._donors)


class StaticProfileProvider:
    def __init__(
        self,
        profile: Profile = DEFAULT_PROFILE,
        history: Sequence[Donation] = DEFAULT_DONATION_HISTORY,
        latency: float = 0.0,
    ) -> None:
        self._profile = profile
        self._history = tuple(history)
        self.latency = latency

    async def load(self) -> Tuple[Profile, List[Donation]]:
        if self.latency > 0:
            await asyncio.sleep(self.latency)
        return self._profile, list(self._history)
