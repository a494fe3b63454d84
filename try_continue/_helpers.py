"""Internal helpers for try_continue.

Functions shared across bridge modules.
These are not part of the public API but can be passed to try_continueM."""

from __future__ import annotations

from collections.abc import Iterator

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

# Source helpers
def close_iterator(it: Iterator[object]) -> None:
    """
    Close a generator-like iterator, if it supports closing.

    Plain iterators (list_iterator, map, ...) have nothing to release.
    """
    close = getattr(it, "close", None)
    if callable(close):
        close()

__all__ = (
    "identity",
    "close_iterator",
)
