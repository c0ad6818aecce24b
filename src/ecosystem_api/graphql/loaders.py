import asyncio

from strawberry.dataloader import DataLoader

from ..store.base import Record, RecordStore


class Loaders:
    """Per-request loaders. Nothing here outlives the request."""

    def __init__(self, store: RecordStore):
        self.store = store
        self.collections: DataLoader[str, list[Record]] = DataLoader(
            load_fn=self.load_collections
        )

    async def load_collections(self, names: list[str]) -> list[list[Record]]:
        """Batch load whole collections by name."""
        return list(await asyncio.gather(*(self.store.fetch_all(name) for name in names)))
