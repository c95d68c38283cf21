"""Repository layer for data access."""

from .counter_repository import CounterRepository
from .pad_repository import PadRepository

__all__ = [
    "CounterRepository",
    "PadRepository",
]
