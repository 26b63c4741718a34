"""Exceptions raised by the pure domain rules."""


class InvalidTransitionError(ValueError):
    """Raised when a state machine guard rejects a requested transition."""
