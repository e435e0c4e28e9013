import asyncio
import json
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

import aiosqlite
import structlog

logger = structlog.get_logger()


class Collection(StrEnum):
    weddings = "weddings"
    registrations = "registrations"
    users = "users"
    session = "user"


class CollectionStore(ABC):
    """Named key-value store holding JSON values.

    Collections are plain keys whose value is a list of records. No schema
    validation happens here; callers own read-modify-write correctness and
    should wrap it in ``transaction()``.
    """

    @abstractmethod
    async def get(self, key: str) -> Any | None: ...

    @abstractmethod
    async def set(self, key: str, value: Any) -> None: ...

    @abstractmethod
    async def remove(self, key: str) -> None: ...

    @abstractmethod
    async def exists(self, key: str) -> bool: ...

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]: ...

    async def read(self, collection: str) -> list[dict]:
        value = await self.get(collection)
        if value is None:
            return []
        if not isinstance(value, list):
            logger.warning(
                "store_collection_malformed",
                collection=collection,
                value_type=type(value).__name__,
            )
            return []
        return value

    async def write(self, collection: str, records: list[dict]) -> None:
        await self.set(collection, records)


class SqliteCollectionStore(CollectionStore):
    def __init__(self, db: aiosqlite.Connection) -> None:
        self._db = db
        self._lock = asyncio.Lock()
        self._owner: asyncio.Task | None = None

    async def get(self, key: str) -> Any | None:
        cursor = await self._db.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
        row = await cursor.fetchone()
        await cursor.close()
        if row is None:
            return None
        try:
            return json.loads(row[0])
        except json.JSONDecodeError:
            logger.warning("store_value_corrupt", key=key)
            return None

    async def set(self, key: str, value: Any) -> None:
        payload = json.dumps(value)
        now = datetime.now(UTC).isoformat()
        await self._run(
            """
            INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
            ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
            """,
            (key, payload, now),
        )

    async def remove(self, key: str) -> None:
        await self._run("DELETE FROM kv_store WHERE key = ?", (key,))

    async def exists(self, key: str) -> bool:
        cursor = await self._db.execute("SELECT 1 FROM kv_store WHERE key = ?", (key,))
        row = await cursor.fetchone()
        await cursor.close()
        return row is not None

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with self._lock:
            self._owner = asyncio.current_task()
            try:
                yield
            except BaseException:
                await self._db.rollback()
                raise
            else:
                await self._db.commit()
            finally:
                self._owner = None

    async def _run(self, sql: str, params: tuple) -> None:
        if self._owner is not None and self._owner is asyncio.current_task():
            await self._db.execute(sql, params)
            return

        # Writes outside a transaction still queue behind the active writer.
        async with self._lock:
            await self._db.execute(sql, params)
            await self._db.commit()
