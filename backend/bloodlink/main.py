from __future__ import annotations

from typing import Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from .database import Settings, settings as default_settings
from .routers import donors, onboarding, profile
from .screens.onboarding import OnboardingFlow
from .screens.profile_session import ProfileSession
from .storage.kv import KeyValueStore, create_store


def create_app(config: Settings | None = None, store: KeyValueStore | None = None) -> FastAPI:
    config = config or default_settings
    app = FastAPI(title="BloodLink API", version="1.0.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    profile_session = ProfileSession(config=config)
    flow = OnboardingFlow(store or create_store(config.kv_backend, config.kv_collection))

    app.state.config = config
    app.state.profile_session = profile_session
    app.state.onboarding_flow = flow

    app.include_router(donors.router)
    app.include_router(profile.router)
    app.include_router(onboarding.router)

    @app.get("/health")
    async def healthcheck() -> Dict[str, str]:
        return {"status": "ok"}

    @app.on_event("startup")
    async def load_profile() -> None:
        await profile_session.load()
        logger.info("Profile loaded; {} donation(s) in history", len(profile_session.state.donation_history))

    return app


app = create_app()
