"""
Backing store contract shared by the counter and the pad content.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IKeyValueStore(ABC):
    """Key-value store with the three atomic primitives the core relies on."""

    @abstractmethod
    async def connect(self) -> None:
        """Open the connection."""
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """Close the connection."""
        pass

    @abstractmethod
    async def incr(self, key: str) -> int:
        """Atomically increment an integer key and return the new value."""
        pass

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Get a value, None when missing."""
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Overwrite a value."""
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """Check connectivity."""
        pass
