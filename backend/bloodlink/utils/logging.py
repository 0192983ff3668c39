from __future__ import annotations

from loguru import logger


def log_store_error(context: str, exc: Exception) -> None:
    logger.error("Key-value store error in {}: {}", context, exc)


def log_provider_error(context: str, exc: Exception) -> None:
    logger.error("Data provider error in {}: {}", context, exc)
