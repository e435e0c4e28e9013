import aiosqlite
import structlog

from weddingwander.config import settings
from weddingwander.store import SqliteCollectionStore

logger = structlog.get_logger()

_db: aiosqlite.Connection | None = None
_store: SqliteCollectionStore | None = None

DDL_STATEMENTS = [
    """
    CREATE TABLE IF NOT EXISTS kv_store (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
    """,
]


async def create_schema(db: aiosqlite.Connection) -> None:
    for ddl in DDL_STATEMENTS:
        await db.execute(ddl)
    await db.commit()


async def init_database(db_path: str | None = None) -> None:
    global _db, _store
    path = db_path or settings.db_path
    _db = await aiosqlite.connect(path)
    _db.row_factory = aiosqlite.Row
    if path != ":memory:":
        await _db.execute("PRAGMA journal_mode=WAL")

    await create_schema(_db)
    _store = SqliteCollectionStore(_db)

    logger.info("database_initialized", path=path)


async def close_database() -> None:
    global _db, _store
    if _db is not None:
        await _db.close()
        _db = None
        _store = None
        logger.info("database_closed")


def get_db() -> aiosqlite.Connection:
    if _db is None:
        raise RuntimeError("Database not initialized. Call init_database() first.")
    return _db


def get_store() -> SqliteCollectionStore:
    if _store is None:
        raise RuntimeError("Database not initialized. Call init_database() first.")
    return _store


async def check_health() -> None:
    db = get_db()
    cursor = await db.execute("SELECT 1")
    await cursor.close()
