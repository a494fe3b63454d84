"""
Bridge combinators
==================

Run plain-iterator logic over fallible elements, with extract + combine pattern.

The continuation sees only success values. After it returns, the adapter's
recorded state decides the outcome: Ok(its value) if nothing failed,
Error(first failure) otherwise.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Iterator
from functools import wraps

from kungfu import Error, LazyCoroResult, Ok, Result

from ._helpers import identity
from ._types import Continuation, Extract, FallibleIterable, Handler, Observer
from .adapter import TryContinueIter
from .policy import DEFAULT_POLICY, TryContinuePolicy


# ============================================================================
# Generic combinator (extract + combine pattern)
# ============================================================================


def try_continueM[M, Raw, T, E, R](
    items: Iterable[Raw],
    continuation: Continuation[T, R],
    *,
    extract: Extract[Raw, T, E],
    combine_ok: Callable[[R], M],
    combine_err: Callable[[E], M],
    observe: Observer[Raw] | None = None,
    policy: TryContinuePolicy = DEFAULT_POLICY,
) -> M:
    """
    Generic bridge.

    The continuation is called exactly once with a TryContinueIter over
    `items`. Whatever it returns is handed to `combine_ok`, unless the adapter
    recorded a failure, in which case the value is dropped and the error goes
    to `combine_err`.

    Exceptions raised by the continuation propagate unchanged; the adapter is
    closed either way.
    """
    adapter: TryContinueIter[Raw, T, E] = TryContinueIter(items, extract=extract, observe=observe)
    try:
        output = continuation(adapter)
    finally:
        adapter.close(source=policy.close_source)

    if adapter.failed:
        return combine_err(typing.cast(E, adapter.error))
    return combine_ok(output)


# ============================================================================
# Sugar for kungfu Result
# ============================================================================


def try_continue[T, E, R](
    results: FallibleIterable[T, E],
    continuation: Continuation[T, R],
    *,
    policy: TryContinuePolicy = DEFAULT_POLICY,
) -> Result[R, E]:
    """
    Process the Ok values of `results` as a plain iterator.

    Example:
        results = (parse(s) for s in ["1", "2", "3", "24", "28"])
        try_continue(results, lambda it: sum(1 for n in it if n % 2 == 0))
        # Ok(3)

    The first Error ends iteration for the continuation and replaces its
    result. A continuation that stops before reaching an Error succeeds.
    """
    return try_continueM(
        results,
        continuation,
        extract=identity,
        combine_ok=Ok,
        combine_err=Error,
        policy=policy,
    )


def try_continue_map[A, T, E, R](
    items: Iterable[A],
    handler: Handler[A, T, E],
    continuation: Continuation[T, R],
    *,
    policy: TryContinuePolicy = DEFAULT_POLICY,
) -> Result[R, E]:
    """
    Map a fallible handler over `items`, then bridge.

    `handler` runs only for pulled items: nothing after the first Error is
    ever handled.
    """
    return try_continueM(
        items,
        continuation,
        extract=handler,
        combine_ok=Ok,
        combine_err=Error,
        policy=policy,
    )


def try_continue_catching[A, T, E, R](
    items: Iterable[A],
    func: Callable[[A], T],
    continuation: Continuation[T, R],
    *,
    on_error: Callable[[Exception], E],
    policy: TryContinuePolicy = DEFAULT_POLICY,
) -> Result[R, E]:
    """
    Like try_continue_map, for functions that raise instead of returning Result.

    Example:
        try_continue_catching(
            ["1", "2", "three"],
            int,
            lambda it: sum(it),
            on_error=lambda e: ParseError(str(e)),
        )
        # Error(ParseError("invalid literal for int() with base 10: 'three'"))

    NOTE: Catches Exception subclasses raised by `func` only. Exceptions from
          the continuation itself are not converted.
    """
    def handler(item: A) -> Result[T, E]:
        try:
            return Ok(func(item))
        except Exception as exc:
            return Error(on_error(exc))

    return try_continue_map(items, handler, continuation, policy=policy)


def try_continue_lazy[T, E, R](
    results: FallibleIterable[T, E],
    continuation: Continuation[T, R],
    *,
    policy: TryContinuePolicy = DEFAULT_POLICY,
) -> LazyCoroResult[R, E]:
    """
    Defer try_continue into a LazyCoroResult.

    Nothing is pulled from `results` until the interp is awaited, so the
    bridge can be composed with other LazyCoroResult pipelines.
    """
    async def run() -> Result[R, E]:
        return try_continue(results, continuation, policy=policy)

    return LazyCoroResult(run)


def continuing[T, R, **P](
    func: Callable[typing.Concatenate[Iterator[T], P], R],
) -> Callable[typing.Concatenate[FallibleIterable[T, typing.Any], P], Result[R, typing.Any]]:
    """
    Decorator: write plain-iterator logic, call it with fallible elements.

    Example:
        @continuing
        def count_even(numbers: Iterator[int]) -> int:
            return sum(1 for n in numbers if n % 2 == 0)

        count_even(parse(s) for s in raw)  # Ok(count) or Error(first failure)
    """
    @wraps(func)
    def wrapper(
        results: FallibleIterable[T, typing.Any],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Result[R, typing.Any]:
        return try_continue(results, lambda it: func(it, *args, **kwargs))

    return wrapper


__all__ = (
    "try_continue",
    "try_continue_map",
    "try_continue_catching",
    "try_continue_lazy",
    "continuing",
    "try_continueM",
)
