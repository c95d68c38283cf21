"""
Error taxonomy for the pad core.

    PadError (base)
    ├── StoreUnavailable     → 500, backing store failed
    └── MalformedIdentifier  → 400, string is not a valid identifier

Reading a pad that was never written is not an error.
"""

from typing import Any, Dict, Optional


class PadError(Exception):
    """Base exception for all pad errors."""

    def __init__(self, message: str = "An unexpected error occurred", context: Optional[Dict[str, Any]] = None):
        self.message = message
        # only the identifier of a MalformedIdentifier is ever echoed to clients
        self.context = context or {}
        super().__init__(self.message)


class StoreUnavailable(PadError):
    """The backing store could not complete an operation."""

    def __init__(self, message: str = "Backing store unavailable", context: Optional[Dict[str, Any]] = None):
        super().__init__(message, context)


class MalformedIdentifier(PadError):
    """The string is not an identifier produced under the configured salt."""

    def __init__(self, identifier: str, reason: str = "not a valid identifier"):
        self.identifier = identifier
        super().__init__(f"Malformed identifier {identifier!r}: {reason}", {"identifier": identifier})
