from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel

from ..errors import OnboardingStoreError
from ..screens.onboarding import OnboardingFlow, OnboardingSlide

router = APIRouter(prefix="/onboarding", tags=["onboarding"])


def get_flow(request: Request) -> OnboardingFlow:
    return request.app.state.onboarding_flow


class OnboardingOut(BaseModel):
    show: bool
    index: int
    total: int
    slide: OnboardingSlide
    completed: bool


async def _snapshot(flow: OnboardingFlow) -> OnboardingOut:
    return OnboardingOut(
        show=not flow.completed and await flow.should_show(),
        index=flow.index,
        total=len(flow.slides),
        slide=flow.current,
        completed=flow.completed,
    )


@router.get("", response_model=OnboardingOut)
async def get_onboarding(flow: OnboardingFlow = Depends(get_flow)) -> OnboardingOut:
    return await _snapshot(flow)


@router.post("/next", response_model=OnboardingOut)
async def next_slide(flow: OnboardingFlow = Depends(get_flow)) -> OnboardingOut:
    try:
        await flow.next()
    except OnboardingStoreError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return await _snapshot(flow)


@router.post("/skip", response_model=OnboardingOut)
async def skip(flow: OnboardingFlow = Depends(get_flow)) -> OnboardingOut:
    try:
        await flow.skip()
    except OnboardingStoreError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return await _snapshot(flow)
