from weddingwander.store import Collection, CollectionStore


class AccountRepository:
    def __init__(self, store: CollectionStore) -> None:
        self._store = store

    async def list_all(self) -> list[dict]:
        return await self._store.read(Collection.users)

    async def get_by_id(self, account_id: str) -> dict | None:
        for row in await self.list_all():
            if row.get("id") == account_id:
                return row
        return None

    async def get_by_email(self, email: str) -> dict | None:
        for row in await self.list_all():
            if row.get("email") == email:
                return row
        return None

    async def add(self, account: dict) -> None:
        rows = await self.list_all()
        rows.append(account)
        await self._store.write(Collection.users, rows)

    async def get_session(self) -> dict | None:
        value = await self._store.get(Collection.session)
        return value if isinstance(value, dict) else None

    async def set_session(self, account: dict) -> None:
        await self._store.set(Collection.session, account)

    async def clear_session(self) -> None:
        await self._store.remove(Collection.session)
