"""
Tracking adapter
================

Presents an iterable of fallible elements as a plain iterator of success
values, recording the first failure it meets.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable, Iterator

from kungfu import Error, Ok

from ._errors import AdapterClosedError, NotAResultError
from ._helpers import close_iterator, identity
from ._types import Extract, Observer


class TryContinueIter[Raw, T, E](Iterator[T]):
    """
    Iterator handed to a continuation by the bridges.

    Each pull takes one raw element from the source and extracts its Result:
    - Ok(value)  -> value is yielded
    - Error(err) -> err is recorded, iteration ends

    Failure and exhaustion both look like StopIteration to the consumer.
    Once a failure is recorded the source is never touched again, and the
    first recorded error is the only one kept.
    """

    __slots__ = ("_source", "_extract", "_observe", "_error", "_failed", "_closed", "_pulled")

    def __init__(
        self,
        source: Iterable[Raw],
        /,
        *,
        extract: Extract[Raw, T, E] = identity,  # type: ignore[assignment]
        observe: Observer[Raw] | None = None,
    ) -> None:
        self._source: Iterator[Raw] = iter(source)
        self._extract = extract
        self._observe = observe
        self._error: E | None = None
        self._failed = False
        self._closed = False
        self._pulled = 0

    @property
    def failed(self) -> bool:
        """True once an Error element has been pulled."""
        return self._failed

    @property
    def error(self) -> E | None:
        """The recorded error. None until `failed`; may also be a legitimate None error."""
        return self._error

    @property
    def pulled(self) -> int:
        """Number of raw elements taken from the source, failing one included."""
        return self._pulled

    @property
    def closed(self) -> bool:
        return self._closed

    def __iter__(self) -> TryContinueIter[Raw, T, E]:
        return self

    def __next__(self) -> T:
        if self._closed:
            raise AdapterClosedError(self._pulled)
        if self._failed:
            raise StopIteration

        raw = next(self._source)
        self._pulled += 1
        if self._observe is not None:
            self._observe(raw)

        match self._extract(raw):
            case Ok(value):
                return value
            case Error(err):
                self._record(err)
                raise StopIteration
            case other:
                raise NotAResultError(other)

    def _record(self, err: E) -> None:
        # First failure wins.
        if not self._failed:
            self._error = err
            self._failed = True

    def close(self, *, source: bool = True) -> None:
        """
        End the adapter's lifetime.

        Further pulls raise AdapterClosedError. With `source=True` the
        underlying iterator is closed too, so a generator source runs its
        cleanup now instead of at garbage collection. Idempotent.
        """
        if self._closed:
            return
        self._closed = True
        if source:
            close_iterator(typing.cast(Iterator[object], self._source))


__all__ = ("TryContinueIter",)
