from __future__ import annotations


class ScopeError(Exception):
    """Base class for errors raised by scoped itself."""


class ContinuationNotInvokedError(ScopeError):
    """Acquisition primitive returned without ever calling its continuation."""

    primitive: object

    def __init__(self, primitive: object) -> None:
        self.primitive = primitive
        super().__init__(f"{primitive!r} returned without invoking its continuation")


__all__ = ("ContinuationNotInvokedError", "ScopeError")
