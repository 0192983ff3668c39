from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import motor.motor_asyncio
from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict
from pymongo.errors import ConfigurationError
from pymongo.uri_parser import parse_uri


BASE_DIR = Path(__file__).resolve().parents[1]
ENV_FILES = [BASE_DIR / ".env.local", BASE_DIR / ".env"]


class Settings(BaseSettings):
    mongodb_url: str = "mongodb://localhost:27017/bloodlink"
    mongo_server_timeout_ms: int = 2000
    mongo_connect_timeout_ms: int = 2000
    mongo_socket_timeout_ms: int = 2000
    kv_backend: str = "memory"
    kv_collection: str = "settings"
    search_debounce_ms: int = 300
    donor_page_size: int = 6
    history_page_size: int = 3
    donation_cooldown_days: int = 90
    profile_load_latency_ms: int = 1000
    refresh_latency_ms: int = 500
    roster_load_latency_ms: int = 0

    model_config = SettingsConfigDict(
        env_file=[str(path) for path in ENV_FILES],
        case_sensitive=False,
        env_prefix="BLOODLINK_",
    )

    @property
    def search_debounce_s(self) -> float:
        return self.search_debounce_ms / 1000

    @property
    def profile_load_latency_s(self) -> float:
        return self.profile_load_latency_ms / 1000

    @property
    def refresh_latency_s(self) -> float:
        return self.refresh_latency_ms / 1000

    @property
    def roster_load_latency_s(self) -> float:
        return self.roster_load_latency_ms / 1000


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
FALLBACK_MONGO_URL = "mongodb://localhost:27017/bloodlink"


def _create_client(uri: str) -> motor.motor_asyncio.AsyncIOMotorClient:
    connect_kwargs = {
        "serverSelectionTimeoutMS": settings.mongo_server_timeout_ms,
        "connectTimeoutMS": settings.mongo_connect_timeout_ms,
        "socketTimeoutMS": settings.mongo_socket_timeout_ms,
    }
    try:
        return motor.motor_asyncio.AsyncIOMotorClient(uri, **connect_kwargs)
    except ConfigurationError as exc:
        if uri == FALLBACK_MONGO_URL:
            raise
        logger.warning(
            "MongoDB DNS resolution failed for {} ({}). Falling back to local Mongo at {}.",
            uri,
            exc,
            FALLBACK_MONGO_URL,
        )
        return motor.motor_asyncio.AsyncIOMotorClient(FALLBACK_MONGO_URL, **connect_kwargs)


def _resolve_database_name(uri: str | None) -> str:
    if uri:
        try:
            parsed = parse_uri(uri)
            if parsed.get("database"):
                return parsed["database"]
        except Exception as exc:  # pragma: no cover - malformed URI
            logger.warning("Unable to parse Mongo URI {} ({}). Using fallback database name.", uri, exc)
    return "bloodlink"


@lru_cache
def get_database() -> motor.motor_asyncio.AsyncIOMotorDatabase:
    """Open the Mongo database lazily; only the ``mongo`` key-value backend needs it."""
    client = _create_client(settings.mongodb_url)
    return client.get_database(_resolve_database_name(settings.mongodb_url))
