"""
Bridge policy
=============

What happens to the source iterator once a bridge call finishes.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TryContinuePolicy:
    """
    Bridge configuration.

    close_source:
        Close the source iterator (when it has ``close()``, e.g. generators)
        as soon as the continuation returns. The source is owned by the call,
        so this is the default. Turn it off to keep consuming a shared
        iterator after the call.
    """

    close_source: bool = True

    @staticmethod
    def owning() -> TryContinuePolicy:
        """Source belongs to the call: close it afterwards."""
        return TryContinuePolicy(close_source=True)

    @staticmethod
    def borrowing() -> TryContinuePolicy:
        """Source belongs to the caller: leave the unconsumed remainder open."""
        return TryContinuePolicy(close_source=False)


DEFAULT_POLICY = TryContinuePolicy.owning()


__all__ = ("DEFAULT_POLICY", "TryContinuePolicy")
