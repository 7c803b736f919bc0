"""
Log - immutable output record
=============================

Default output of WriterLayer and RWSLayer. A tuple, so an output handed
back by one run can never leak into the next.
"""

from __future__ import annotations


class Log[A](tuple[A, ...]):
    """
    Ordered, immutable sequence of entries written during a scope.

    empty is Log(), combine is concatenation. Neither side is modified.
    """

    __slots__ = ()

    @staticmethod
    def of[T](*entries: T) -> Log[T]:
        return Log(entries)

    def combine(self, other: Log[A], /) -> Log[A]:
        """Entries of self followed by entries of other."""
        return Log((*self, *other))

    def tell(self, entry: A, /) -> Log[A]:
        """Copy with one more entry at the end."""
        return Log((*self, entry))

    def __repr__(self) -> str:
        return f"Log.of({', '.join(map(repr, self))})"


__all__ = ("Log",)
