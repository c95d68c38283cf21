"""Pad service implementation."""

import logging

from ..hashid import HashIDEncoder
from ..repositories.counter_repository import CounterRepository
from ..repositories.pad_repository import PadRepository
from ..store import IKeyValueStore
from .interfaces import IPadService

logger = logging.getLogger(__name__)


class PadService(IPadService):
    """Pad service implementation.

    Identifiers are capability tokens: whoever holds one may read and
    overwrite the pad. There is no owner record to check against.
    """

    def __init__(self, store: IKeyValueStore, encoder: HashIDEncoder, prefix: str):
        self.encoder = encoder
        self.counter_repo = CounterRepository(store, prefix)
        self.pad_repo = PadRepository(store, prefix)

    async def allocate_id(self) -> str:
        """Mint a new pad identifier.

        StoreUnavailable propagates as is; retrying is up to the caller.
        """
        value = await self.counter_repo.next()
        pad_id = self.encoder.encode(value)
        logger.info(f"Allocated pad {pad_id}")
        return pad_id

    async def read(self, pad_id: str) -> str:
        """Get pad content.

        The identifier is not validated: unknown or malformed ids simply
        read as empty, same as a pad nobody has written yet.
        """
        return await self.pad_repo.get(pad_id)

    async def write(self, pad_id: str, content: str) -> None:
        """Overwrite pad content, last write wins."""
        await self.pad_repo.set(pad_id, content)
        logger.info(f"Updated pad {pad_id} ({len(content)} chars)")

    def decode_id(self, pad_id: str) -> int:
        """Recover the counter value behind an identifier."""
        return self.encoder.decode(pad_id)
