"""bellamy_fp exception classes."""

from typing import Any


class FpError(Exception):
    """Base exception for bellamy_fp errors."""
    pass


class UnwrapError(FpError, ValueError):
    """A value was requested from a ``Nothing`` or a ``Failure``.

    Only raised by the explicit ``get_or_else_throw`` escapes. ``error`` holds
    the failure payload, or ``None`` when the source was an empty Option.
    """

    def __init__(self, message: str, error: Any = None) -> None:
        super().__init__(message)
        self.error = error


__all__ = ["FpError", "UnwrapError"]
