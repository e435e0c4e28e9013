from weddingwander.store import Collection, CollectionStore


class WeddingRepository:
    def __init__(self, store: CollectionStore) -> None:
        self._store = store

    async def list_all(self) -> list[dict]:
        return await self._store.read(Collection.weddings)

    async def get_by_id(self, wedding_id: str) -> dict | None:
        for row in await self.list_all():
            if row.get("id") == wedding_id:
                return row
        return None

    async def save(self, wedding: dict) -> None:
        rows = await self.list_all()
        for index, row in enumerate(rows):
            if row.get("id") == wedding["id"]:
                rows[index] = wedding
                break
        else:
            rows.append(wedding)
        await self._store.write(Collection.weddings, rows)
