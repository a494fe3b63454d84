"""
Writer bridges
==============

try_continue over WriterResult elements, merging the logs of what was pulled.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from kungfu import Error, Ok, Result

from .._types import Continuation
from ..bridge import try_continueM
from ..policy import DEFAULT_POLICY, TryContinuePolicy
from .log import Log
from .result import WriterResult


def extract_writer_result[T, E, W](wr: WriterResult[T, E, Log[W]]) -> Result[T, E]:
    """Writer sources yield WriterResult; the adapter only needs its Result."""
    return wr.result


def _bridge_w[A, T, E, W, R](
    items: Iterable[A],
    extract: Callable[[A], WriterResult[T, E, Log[W]]],
    continuation: Continuation[T, R],
    policy: TryContinuePolicy,
) -> WriterResult[R, E, Log[W]]:
    logs: list[Log[W]] = []

    def pull(item: A) -> Result[T, E]:
        wr = extract(item)
        logs.append(wr.log)
        return extract_writer_result(wr)

    # combine_* run after the continuation returned, so `logs` is final.
    return try_continueM(
        items,
        continuation,
        extract=pull,
        combine_ok=lambda value: WriterResult(Ok(value), Log.concat(logs)),
        combine_err=lambda err: WriterResult(Error(err), Log.concat(logs)),
        policy=policy,
    )


def try_continue_w[T, E, W, R](
    items: Iterable[WriterResult[T, E, Log[W]]],
    continuation: Continuation[T, R],
    *,
    policy: TryContinuePolicy = DEFAULT_POLICY,
) -> WriterResult[R, E, Log[W]]:
    """
    Bridge with log merging.

    The outcome's log is the concatenation, in pull order, of the logs of
    every element the adapter took from `items`, the failing one included.
    Elements never pulled contribute nothing.
    """
    return _bridge_w(items, lambda wr: wr, continuation, policy)


def try_continue_map_w[A, T, E, W, R](
    items: Iterable[A],
    handler: Callable[[A], WriterResult[T, E, Log[W]]],
    continuation: Continuation[T, R],
    *,
    policy: TryContinuePolicy = DEFAULT_POLICY,
) -> WriterResult[R, E, Log[W]]:
    """Map a logging, fallible handler over `items`, then bridge with log merging."""
    return _bridge_w(items, handler, continuation, policy)


__all__ = ("extract_writer_result", "try_continue_w", "try_continue_map_w")
