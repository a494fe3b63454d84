"""
WriterResult - Result paired with a log
=======================================
"""

from __future__ import annotations

from kungfu import Error, Ok, Result

from .log import Log


class WriterResult[T, E, W]:
    """
    Element type of writer sources and outcome of writer bridges.

    Pairs a Result[T, E] with the log W produced while computing it.
    """

    __slots__ = ("_result", "_log")
    __match_args__ = ("_result", "_log")

    def __init__(self, result: Result[T, E], log: W) -> None:
        self._result = result
        self._log = log

    @staticmethod
    def ok[V, A](value: V, *entries: A) -> WriterResult[V, object, Log[A]]:
        """Success with the given log entries."""
        return WriterResult(Ok(value), Log.of(*entries))

    @staticmethod
    def error[Err, A](err: Err, *entries: A) -> WriterResult[object, Err, Log[A]]:
        """Failure with the given log entries."""
        return WriterResult(Error(err), Log.of(*entries))

    @property
    def result(self) -> Result[T, E]:
        return self._result

    @property
    def log(self) -> W:
        return self._log

    def __repr__(self) -> str:
        return f"WriterResult({self._result!r}, log={self._log!r})"


__all__ = ("WriterResult",)
