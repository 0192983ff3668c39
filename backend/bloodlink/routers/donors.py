from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from loguru import logger
from pydantic import BaseModel

from ..database import Settings
from ..errors import InvalidBloodGroup, PageOutOfRange
from ..matching.compatibility import CompatibilityView, compatibility_view
from ..models.blood_group import BLOOD_GROUPS, BloodGroup
from ..models.donor import Donor
from ..models.search import FilterCriteria, MatchMode, Page
from ..screens.search_session import SearchSession, SearchVariant

router = APIRouter(tags=["donors"])

_SIGNLESS_GROUPS = {"A", "B", "AB", "O"}


def get_config(request: Request) -> Settings:
    return request.app.state.config


class SearchResponse(BaseModel):
    variant: SearchVariant
    criteria: FilterCriteria
    page: Page[Donor]
    compatibility: CompatibilityView | None = None
    message: str | None = None


def parse_group_param(raw: str) -> BloodGroup:
    """Parse a blood group from a URL, where an unencoded ``+`` arrives as a space."""
    value = raw.strip().upper()
    if raw.endswith(" ") and value in _SIGNLESS_GROUPS:
        value += "+"
    try:
        return BloodGroup.parse(value)
    except InvalidBloodGroup as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc


@router.get("/blood-groups", response_model=List[BloodGroup])
async def list_blood_groups() -> List[BloodGroup]:
    return BLOOD_GROUPS


@router.get("/blood-groups/{group}/compatibility", response_model=CompatibilityView)
async def get_compatibility(group: str) -> CompatibilityView:
    return compatibility_view(parse_group_param(group))


@router.get("/donors/locations", response_model=List[str])
async def list_locations(
    variant: SearchVariant = SearchVariant.HOME,
    config: Settings = Depends(get_config),
) -> List[str]:
    return SearchSession(variant, config=config).locations


@router.get("/donors/search", response_model=SearchResponse)
async def search_donors(
    variant: SearchVariant = SearchVariant.HOME,
    q: str = "",
    blood_group: str | None = None,
    location: str | None = None,
    match_mode: MatchMode = MatchMode.COMPATIBLE,
    page: int = Query(default=1),
    config: Settings = Depends(get_config),
) -> SearchResponse:
    group = parse_group_param(blood_group) if blood_group else None
    session = SearchSession(variant, config=config)
    session.apply(query=q, blood_group=group, location=location, match_mode=match_mode)
    try:
        session.go_to_page(page)
    except PageOutOfRange as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    state = session.state
    logger.debug("{} search page {}/{}", variant.value, state.page, state.total_pages)
    return SearchResponse(
        variant=variant,
        criteria=state.criteria,
        page=session.current_page().model_dump(),
        compatibility=session.compatibility(),
        message=state.message,
    )
