from __future__ import annotations

from typing import List

from loguru import logger
from pydantic import BaseModel
from pymongo.errors import PyMongoError

from ..errors import OnboardingStoreError
from ..storage.kv import KeyValueStore
from ..utils.logging import log_store_error

HAS_SEEN_ONBOARDING = "hasSeenOnboarding"


class OnboardingSlide(BaseModel):
    id: str
    title: str
    description: str
    image: str


SLIDES: List[OnboardingSlide] = [
    OnboardingSlide(
        id="1",
        title="Welcome to Blood Donation",
        description="Connect with donors and save lives effortlessly.",
        image="onboarding/welcome.png",
    ),
    OnboardingSlide(
        id="2",
        title="Be a Lifesaver",
        description="Your blood donation can make a difference in emergencies.",
        image="onboarding/lifesaver.png",
    ),
    OnboardingSlide(
        id="3",
        title="Find Donors Fast",
        description="Search for donors by blood group and location.",
        image="onboarding/find-donors.png",
    ),
    OnboardingSlide(
        id="4",
        title="Join the Movement",
        description="Register now and become part of our lifesaving community.",
        image="onboarding/join.png",
    ),
]


class OnboardingFlow:
    def __init__(self, store: KeyValueStore, slides: List[OnboardingSlide] | None = None) -> None:
        self.store = store
        self.slides = list(SLIDES if slides is None else slides)
        self.index = 0
        self.completed = False

    @property
    def current(self) -> OnboardingSlide:
        return self.slides[self.index]

    @property
    def is_last(self) -> bool:
        return self.index >= len(self.slides) - 1

    async def should_show(self) -> bool:
        try:
            seen = await self.store.get(HAS_SEEN_ONBOARDING)
        except (OSError, PyMongoError) as exc:
            log_store_error("onboarding status check", exc)
            return True
        return seen != "true"

    async def next(self) -> bool:
        """Advance one slide; on the last slide finish onboarding. Returns ``completed``."""
        if not self.is_last:
            self.index += 1
            return self.completed
        await self.complete()
        return self.completed

    async def skip(self) -> bool:
        await self.complete()
        return self.completed

    async def complete(self) -> None:
        self.completed = True
        try:
            await self.store.set(HAS_SEEN_ONBOARDING, "true")
        except (OSError, PyMongoError) as exc:
            log_store_error("saving onboarding status", exc)
            raise OnboardingStoreError("Could not save onboarding status") from exc
        logger.info("Onboarding completed")
