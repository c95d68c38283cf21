"""Pad repository for content storage."""

from ..store import IKeyValueStore


class PadRepository:
    """Repository mapping pad identifiers to their content."""

    def __init__(self, store: IKeyValueStore, prefix: str):
        self.store = store
        self.prefix = prefix

    def key_for(self, pad_id: str) -> str:
        # separate sub-namespace so no pad id can collide with the counter key
        return f"{self.prefix}:pad:{pad_id}"

    async def get(self, pad_id: str) -> str:
        """Get pad content, empty string if never written."""
        content = await self.store.get(self.key_for(pad_id))
        return content if content is not None else ""

    async def set(self, pad_id: str, content: str) -> None:
        """Overwrite pad content."""
        await self.store.set(self.key_for(pad_id), content)
