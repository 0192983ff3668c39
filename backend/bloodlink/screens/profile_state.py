from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Tuple, Union

from loguru import logger

from ..errors import RequiredFieldMissing
from ..matching.pagination import build_page, ensure_page_in_range, total_pages
from ..models.donor import Donation, Profile
from ..models.search import Page


REQUIRED_TEXT_FIELDS = ("name", "location")


def validate_profile(profile: Profile) -> Profile:
    missing = []
    if not profile.name.strip():
        missing.append("name")
    if profile.blood_group is None:
        missing.append("blood_group")
    if not profile.location.strip():
        missing.append("location")
    if missing:
        raise RequiredFieldMissing(missing)
    return profile


@dataclass(frozen=True)
class ProfileState:
    profile: Profile = Profile()
    donation_history: Tuple[Donation, ...] = ()
    loading: bool = False
    error: str | None = None
    editing: bool = False
    edited_profile: Profile = Profile()
    page: int = 1
    page_size: int = 3

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.donation_history), self.page_size)

    def history_page(self) -> Page[Donation]:
        return build_page(self.donation_history, self.page, self.page_size)


@dataclass(frozen=True)
class SetProfile:
    profile: Profile


@dataclass(frozen=True)
class SetDonationHistory:
    history: Tuple[Donation, ...]


@dataclass(frozen=True)
class SetLoading:
    loading: bool


@dataclass(frozen=True)
class SetError:
    error: str | None


@dataclass(frozen=True)
class StartEdit:
    pass


@dataclass(frozen=True)
class UpdateDraft:
    changes: Dict[str, Any]


@dataclass(frozen=True)
class CancelEdit:
    pass


@dataclass(frozen=True)
class SaveProfile:
    pass


@dataclass(frozen=True)
class GoToPage:
    page: int


@dataclass(frozen=True)
class NextPage:
    pass


@dataclass(frozen=True)
class PreviousPage:
    pass


ProfileAction = Union[
    SetProfile,
    SetDonationHistory,
    SetLoading,
    SetError,
    StartEdit,
    UpdateDraft,
    CancelEdit,
    SaveProfile,
    GoToPage,
    NextPage,
    PreviousPage,
]


def _apply_draft(draft: Profile, changes: Dict[str, Any]) -> Profile:
    cleared = {key: "" for key in REQUIRED_TEXT_FIELDS if key in changes and changes[key] is None}
    return Profile.model_validate({**draft.model_dump(), **changes, **cleared})


def _save(state: ProfileState) -> ProfileState:
    try:
        saved = validate_profile(state.edited_profile)
    except RequiredFieldMissing as exc:
        logger.info("Profile save rejected: {}", exc)
        return replace(state, error=exc.user_message)
    logger.info("Profile saved for {}", saved.name)
    return replace(state, profile=saved, editing=False, error=None)


def transition(state: ProfileState, action: ProfileAction) -> ProfileState:
    if isinstance(action, SetProfile):
        return replace(state, profile=action.profile)
    if isinstance(action, SetDonationHistory):
        return replace(state, donation_history=tuple(action.history), page=1)
    if isinstance(action, SetLoading):
        return replace(state, loading=action.loading)
    if isinstance(action, SetError):
        return replace(state, error=action.error)
    if isinstance(action, StartEdit):
        return replace(state, editing=True, edited_profile=state.profile, error=None)
    if isinstance(action, UpdateDraft):
        return replace(
            state,
            edited_profile=_apply_draft(state.edited_profile, action.changes),
        )
    if isinstance(action, CancelEdit):
        return replace(state, editing=False, edited_profile=state.profile, error=None)
    if isinstance(action, SaveProfile):
        if not state.editing:
            return state
        return _save(state)
    if isinstance(action, GoToPage):
        page = ensure_page_in_range(action.page, len(state.donation_history), state.page_size)
        return replace(state, page=page)
    if isinstance(action, NextPage):
        if state.page >= state.total_pages:
            return state
        return replace(state, page=state.page + 1)
    if isinstance(action, PreviousPage):
        if state.page <= 1:
            return state
        return replace(state, page=state.page - 1)
    raise TypeError(f"Unknown profile action: {action!r}")
