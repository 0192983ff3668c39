from __future__ import annotations

from datetime import date
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from loguru import logger
from pydantic import BaseModel, ValidationError

from ..errors import DonorUnavailable, PageOutOfRange, RequiredFieldMissing
from ..matching.compatibility import CompatibilityView
from ..models.donor import Donation, Profile, ProfileUpdate
from ..models.search import Page
from ..screens.profile_session import ProfileSession

router = APIRouter(prefix="/profile", tags=["profile"])


def get_profile_session(request: Request) -> ProfileSession:
    return request.app.state.profile_session


class ProfileOut(BaseModel):
    profile: Profile
    available: bool
    next_eligible_date: date | None = None
    compatibility: CompatibilityView | None = None


class AvailabilityOut(BaseModel):
    available: bool
    last_donation_date: date | None = None
    next_eligible_date: date | None = None


def _profile_out(session: ProfileSession) -> ProfileOut:
    return ProfileOut(
        profile=session.state.profile,
        available=session.is_available(),
        next_eligible_date=session.next_eligible_date(),
        compatibility=session.compatibility(),
    )


@router.get("", response_model=ProfileOut)
async def get_profile(session: ProfileSession = Depends(get_profile_session)) -> ProfileOut:
    if session.state.error:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=session.state.error)
    return _profile_out(session)


@router.put("", response_model=ProfileOut)
async def update_profile(
    payload: ProfileUpdate,
    session: ProfileSession = Depends(get_profile_session),
) -> ProfileOut:
    session.start_edit()
    try:
        session.update_draft(**payload.model_dump(exclude_unset=True))
        state = session.save()
    except ValidationError as exc:
        session.cancel_edit()
        logger.info("Profile draft rejected: {}", exc.errors())
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=RequiredFieldMissing.user_message,
        ) from exc
    except Exception:
        session.cancel_edit()
        raise
    if state.editing:
        message = state.error
        session.cancel_edit()
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=message)
    return _profile_out(session)


@router.get("/availability", response_model=AvailabilityOut)
async def get_availability(session: ProfileSession = Depends(get_profile_session)) -> AvailabilityOut:
    return AvailabilityOut(
        available=session.is_available(),
        last_donation_date=session.state.profile.last_donation_date,
        next_eligible_date=session.next_eligible_date(),
    )


@router.get("/donations", response_model=Page[Donation])
async def list_donations(
    page: int = Query(default=1),
    session: ProfileSession = Depends(get_profile_session),
) -> Page[Donation]:
    try:
        session.go_to_page(page)
    except PageOutOfRange as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return session.history_page()


@router.post("/request-donation")
async def request_donation(session: ProfileSession = Depends(get_profile_session)) -> Dict[str, Any]:
    try:
        message = session.request_donation()
    except DonorUnavailable as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return {"status": "sent", "message": message}
