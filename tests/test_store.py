import asyncio

import aiosqlite
import pytest

from helpers import make_wedding

from weddingwander.accounts.repository import AccountRepository
from weddingwander.database import create_schema
from weddingwander.exceptions import CapacityExceededError
from weddingwander.notifications.service import NotificationService
from weddingwander.registrations.repository import RegistrationRepository
from weddingwander.registrations.service import LedgerService
from weddingwander.store import Collection, SqliteCollectionStore
from weddingwander.weddings.repository import WeddingRepository
from weddingwander.weddings.seed import SEED_WEDDINGS, seed_if_needed


@pytest.fixture
async def db():
    conn = await aiosqlite.connect(":memory:")
    conn.row_factory = aiosqlite.Row
    await create_schema(conn)
    yield conn
    await conn.close()


@pytest.fixture
def sqlite_store(db) -> SqliteCollectionStore:
    return SqliteCollectionStore(db)


class TestSqliteCollectionStore:
    async def test_read_missing_collection_is_empty(self, sqlite_store):
        assert await sqlite_store.read(Collection.registrations) == []
        assert await sqlite_store.exists(Collection.registrations) is False

    async def test_write_then_read(self, sqlite_store):
        records = [{"id": "a", "guests": 2}, {"id": "b", "guests": 1}]
        await sqlite_store.write(Collection.registrations, records)

        assert await sqlite_store.read(Collection.registrations) == records
        assert await sqlite_store.exists(Collection.registrations) is True

    async def test_write_replaces_previous_value(self, sqlite_store):
        await sqlite_store.write(Collection.users, [{"id": "1"}])
        await sqlite_store.write(Collection.users, [{"id": "2"}])

        assert await sqlite_store.read(Collection.users) == [{"id": "2"}]

    async def test_remove_deletes_key(self, sqlite_store):
        await sqlite_store.set(Collection.session, {"id": "u1"})
        await sqlite_store.remove(Collection.session)

        assert await sqlite_store.get(Collection.session) is None
        assert await sqlite_store.exists(Collection.session) is False

    async def test_corrupt_value_reads_as_empty(self, sqlite_store, db):
        await db.execute(
            "INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)",
            ("weddings", "{not json", "2025-01-01T00:00:00+00:00"),
        )
        await db.commit()

        assert await sqlite_store.get(Collection.weddings) is None
        assert await sqlite_store.read(Collection.weddings) == []

    async def test_non_list_collection_reads_as_empty(self, sqlite_store):
        await sqlite_store.set(Collection.weddings, {"id": "wedding-001"})

        assert await sqlite_store.read(Collection.weddings) == []

    async def test_transaction_commits_all_writes(self, sqlite_store):
        async with sqlite_store.transaction():
            await sqlite_store.write(Collection.users, [{"id": "1"}])
            await sqlite_store.write(Collection.registrations, [{"id": "r1"}])

        assert await sqlite_store.read(Collection.users) == [{"id": "1"}]
        assert await sqlite_store.read(Collection.registrations) == [{"id": "r1"}]

    async def test_transaction_rolls_back_on_error(self, sqlite_store):
        await sqlite_store.write(Collection.users, [{"id": "1"}])

        with pytest.raises(RuntimeError):
            async with sqlite_store.transaction():
                await sqlite_store.write(Collection.users, [{"id": "1"}, {"id": "2"}])
                raise RuntimeError("boom")

        assert await sqlite_store.read(Collection.users) == [{"id": "1"}]


class TestSeeding:
    async def test_seeds_empty_store(self, sqlite_store):
        await seed_if_needed(sqlite_store)

        weddings = await sqlite_store.read(Collection.weddings)
        assert [w["id"] for w in weddings] == [w["id"] for w in SEED_WEDDINGS]
        assert len(weddings) == 6
        assert await sqlite_store.read(Collection.registrations) == []
        assert await sqlite_store.read(Collection.users) == []
        assert await sqlite_store.exists(Collection.users) is True

    async def test_existing_collections_are_kept(self, sqlite_store):
        await sqlite_store.write(Collection.weddings, [SEED_WEDDINGS[0]])
        await sqlite_store.write(Collection.users, [{"id": "u1"}])

        await seed_if_needed(sqlite_store)

        assert len(await sqlite_store.read(Collection.weddings)) == 1
        assert await sqlite_store.read(Collection.users) == [{"id": "u1"}]
        assert await sqlite_store.read(Collection.registrations) == []


class TestConcurrentWriters:
    @pytest.fixture
    def sqlite_ledger(self, sqlite_store) -> LedgerService:
        return LedgerService(
            sqlite_store,
            WeddingRepository(sqlite_store),
            RegistrationRepository(sqlite_store),
            AccountRepository(sqlite_store),
            NotificationService(),
        )

    async def test_last_seat_goes_to_exactly_one_of_concurrent_registrations(
        self, sqlite_store, sqlite_ledger
    ):
        await sqlite_store.write(Collection.weddings, [make_wedding(capacity=1)])

        outcomes = await asyncio.gather(
            *(sqlite_ledger.register(f"u{i}", "wedding-test", 1) for i in range(5)),
            return_exceptions=True,
        )

        errors = [o for o in outcomes if isinstance(o, Exception)]
        assert len(outcomes) - len(errors) == 1
        assert len(errors) == 4
        assert all(isinstance(e, CapacityExceededError) for e in errors)

        weddings = await sqlite_store.read(Collection.weddings)
        assert weddings[0]["registered"] == 1
        assert len(await sqlite_store.read(Collection.registrations)) == 1

    async def test_concurrent_cancel_and_register_keep_count_consistent(
        self, sqlite_store, sqlite_ledger
    ):
        await sqlite_store.write(Collection.weddings, [make_wedding(capacity=2)])
        first = await sqlite_ledger.register("u0", "wedding-test", 2)

        await asyncio.gather(
            sqlite_ledger.cancel(first.id),
            sqlite_ledger.register("u1", "wedding-test", 1),
            return_exceptions=True,
        )

        weddings = await sqlite_store.read(Collection.weddings)
        registrations = await sqlite_store.read(Collection.registrations)
        active_guests = sum(r["guests"] for r in registrations if r["status"] == "confirmed")
        assert weddings[0]["registered"] == active_guests
