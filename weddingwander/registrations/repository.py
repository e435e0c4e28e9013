from weddingwander.store import Collection, CollectionStore


class RegistrationRepository:
    def __init__(self, store: CollectionStore) -> None:
        self._store = store

    async def list_all(self) -> list[dict]:
        return await self._store.read(Collection.registrations)

    async def get_by_id(self, registration_id: str) -> dict | None:
        for row in await self.list_all():
            if row.get("id") == registration_id:
                return row
        return None

    async def list_for_user(self, user_id: str) -> list[dict]:
        return [row for row in await self.list_all() if row.get("user_id") == user_id]

    async def find_for(self, user_id: str, wedding_id: str) -> list[dict]:
        return [
            row
            for row in await self.list_for_user(user_id)
            if row.get("wedding_id") == wedding_id
        ]

    async def add(self, registration: dict) -> None:
        rows = await self.list_all()
        rows.append(registration)
        await self._store.write(Collection.registrations, rows)

    async def update(self, registration: dict) -> bool:
        rows = await self.list_all()
        for index, row in enumerate(rows):
            if row.get("id") == registration["id"]:
                rows[index] = registration
                await self._store.write(Collection.registrations, rows)
                return True
        return False
