from __future__ import annotations

from datetime import datetime
from typing import Dict, Protocol

from motor.motor_asyncio import AsyncIOMotorCollection


class KeyValueStore(Protocol):
    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...


class InMemoryKeyValueStore:
    def __init__(self, initial: Dict[str, str] | None = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._values.get(key)

    async def set(self, key: str, value: str) -> None:
        self._values[key] = value


class MongoKeyValueStore:
    """One document per key: ``{"_id": key, "value": value, "updated_at": ...}``."""

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        self.collection = collection

    async def get(self, key: str) -> str | None:
        document = await self.collection.find_one({"_id": key})
        if not document:
            return None
        return document.get("value")

    async def set(self, key: str, value: str) -> None:
        await self.collection.update_one(
            {"_id": key},
            {"$set": {"value": value, "updated_at": datetime.utcnow()}},
            upsert=True,
        )


def create_store(backend: str, collection_name: str = "settings") -> KeyValueStore:
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "mongo":
        from ..database import get_database

        return MongoKeyValueStore(get_database().get_collection(collection_name))
    raise ValueError(f"Unknown key-value backend: {backend}")
