"""Shared fixtures.

The environment is prepared before any application module is imported so
that ``settings`` picks up an in-memory database.
"""

import os

os.environ["WW_DB_PATH"] = ":memory:"
os.environ["WW_SEARCH_DEBOUNCE_SECONDS"] = "0.01"

import asyncio  # noqa: E402
import json  # noqa: E402
from collections.abc import AsyncIterator  # noqa: E402
from contextlib import asynccontextmanager  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from helpers import make_wedding  # noqa: E402

from weddingwander.accounts.repository import AccountRepository  # noqa: E402
from weddingwander.accounts.service import AccountService  # noqa: E402
from weddingwander.notifications.service import NotificationService  # noqa: E402
from weddingwander.registrations.repository import RegistrationRepository  # noqa: E402
from weddingwander.registrations.service import LedgerService  # noqa: E402
from weddingwander.store import Collection, CollectionStore  # noqa: E402
from weddingwander.weddings.repository import WeddingRepository  # noqa: E402
from weddingwander.weddings.seed import seed_if_needed  # noqa: E402
from weddingwander.weddings.service import WeddingService  # noqa: E402


class InMemoryCollectionStore(CollectionStore):
    """Dict-backed store; values round-trip through JSON like the real one."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Any | None:
        raw = self.data.get(key)
        return None if raw is None else json.loads(raw)

    async def set(self, key: str, value: Any) -> None:
        self.data[key] = json.dumps(value)

    async def remove(self, key: str) -> None:
        self.data.pop(key, None)

    async def exists(self, key: str) -> bool:
        return key in self.data

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with self._lock:
            snapshot = dict(self.data)
            try:
                yield
            except BaseException:
                self.data = snapshot
                raise


@pytest.fixture
def store() -> InMemoryCollectionStore:
    return InMemoryCollectionStore()


@pytest.fixture
async def seeded_store(store: InMemoryCollectionStore) -> InMemoryCollectionStore:
    await seed_if_needed(store)
    return store


@pytest.fixture
def wedding_service(seeded_store: InMemoryCollectionStore) -> WeddingService:
    return WeddingService(WeddingRepository(seeded_store))


@pytest.fixture
def notifications() -> NotificationService:
    return NotificationService()


@pytest.fixture
def account_service(seeded_store: InMemoryCollectionStore) -> AccountService:
    return AccountService(seeded_store, AccountRepository(seeded_store))


@pytest.fixture
def make_ledger(seeded_store: InMemoryCollectionStore, notifications: NotificationService):
    def _make(**kwargs) -> LedgerService:
        return LedgerService(
            seeded_store,
            WeddingRepository(seeded_store),
            RegistrationRepository(seeded_store),
            AccountRepository(seeded_store),
            notifications,
            **kwargs,
        )

    return _make


@pytest.fixture
def ledger(make_ledger) -> LedgerService:
    return make_ledger()


@pytest.fixture
async def small_wedding(seeded_store: InMemoryCollectionStore) -> dict:
    """A capacity-1 wedding appended to the seeded catalog."""
    wedding = make_wedding()
    weddings = await seeded_store.read(Collection.weddings)
    weddings.append(wedding)
    await seeded_store.write(Collection.weddings, weddings)
    return wedding


@pytest.fixture
def client():
    from weddingwander.main import app

    with TestClient(app) as test_client:
        yield test_client
