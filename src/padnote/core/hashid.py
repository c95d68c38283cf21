"""Salted short identifiers for pads, backed by hashids."""

from hashids import Hashids

from .exceptions import MalformedIdentifier

# Redis counters are 64 bit; nothing outside this range is ever issued
MAX_COUNTER = 2**64 - 1


class HashIDEncoder:
    """Bidirectional mapping between counter values and identifiers.

    Output is drawn from ``[a-zA-Z0-9]`` so identifiers can be embedded in a
    URL path segment without escaping. The salt shuffles the alphabet, so two
    deployments with different salts produce unrelated identifiers for the
    same counter value.
    """

    def __init__(self, salt: str, min_length: int = 0):
        self.min_length = min_length
        self._hashids = Hashids(salt=salt, min_length=min_length)

    def encode(self, value: int) -> str:
        """Encode a counter value."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Counter value must be an integer, got {type(value).__name__}")
        if value < 0 or value > MAX_COUNTER:
            raise ValueError(f"Counter value {value} outside 0..{MAX_COUNTER}")
        return self._hashids.encode(value)

    def decode(self, identifier: str) -> int:
        """Decode an identifier back into its counter value.

        Raises:
            MalformedIdentifier: the string was not produced by ``encode``
                with this salt.
        """
        if not isinstance(identifier, str) or not identifier:
            raise MalformedIdentifier(str(identifier), "empty identifier")

        # hashids re-encodes the result and returns () on any mismatch
        numbers = self._hashids.decode(identifier)
        if len(numbers) != 1:
            raise MalformedIdentifier(identifier)

        value = numbers[0]
        if value > MAX_COUNTER:
            raise MalformedIdentifier(identifier, "value out of range")
        return value


def encode_with_salt(salt: str, value: int, min_length: int = 0) -> str:
    """Encode a single value under ``salt``."""
    return HashIDEncoder(salt, min_length).encode(value)
