"""
Core type definitions for try_continue.

Aliases shared by the adapter, the bridges and the writer variants.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from kungfu import Result

# ============================================================================
# Type aliases
# ============================================================================

# FallibleIterable = source of Ok/Error elements, consumed by a bridge
type FallibleIterable[T, E] = Iterable[Result[T, E]]

# Continuation = caller logic that only ever sees plain values
type Continuation[T, R] = Callable[[Iterator[T]], R]

# Extract = turns a raw source element into a Result
# NOTE: applied lazily, only to elements the adapter actually pulls.
type Extract[Raw, T, E] = Callable[[Raw], Result[T, E]]

# Handler = fallible function mapped over plain input items
type Handler[A, T, E] = Callable[[A], Result[T, E]]

# Observer = sees every raw element the adapter pulls (failing one included)
type Observer[Raw] = Callable[[Raw], None]

__all__ = (
    "FallibleIterable",
    "Continuation",
    "Extract",
    "Handler",
    "Observer",
)
