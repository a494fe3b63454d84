"""
Log - monoidal accumulator for writer bridges
=============================================
"""

from __future__ import annotations

from collections.abc import Iterable


class Log[A](list[A]):
    """
    Ordered log entries attached to a WriterResult.

    A list with monoid operations; combining never mutates either side:
    - empty:   Log()
    - combine: concatenation, Log().combine(x) == x == x.combine(Log())
    """

    @staticmethod
    def of[T](*entries: T) -> Log[T]:
        """Create log with entries."""
        return Log[T](entries)

    @staticmethod
    def concat[T](logs: Iterable[Log[T]]) -> Log[T]:
        """Fold many logs into one, left to right."""
        merged: Log[T] = Log()
        for log in logs:
            merged.extend(log)
        return merged

    def combine(self, other: Log[A], /) -> Log[A]:
        """Log.of("a").combine(Log.of("b"))  # Log(["a", "b"])"""
        merged: Log[A] = Log(self)
        merged.extend(other)
        return merged

    def tell(self, entry: A, /) -> Log[A]:
        """Copy with one more entry."""
        return self.combine(Log.of(entry))


__all__ = ("Log",)
