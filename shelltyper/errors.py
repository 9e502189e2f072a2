from __future__ import annotations


class InvariantError(ValueError):
    """Raised when a caller breaks a contract of the typing engine.

    These are programming errors (empty dictionary, malformed word offsets,
    illegal state transitions), not conditions to recover from at runtime.
    """
