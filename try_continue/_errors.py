from __future__ import annotations

import typing

class AdapterClosedError(RuntimeError):
    """Adapter pulled after its bridge call already finished."""

    pulled: int

    def __init__(self, pulled: int) -> None:
        self.pulled = pulled
        super().__init__(f"Adapter is closed (pulled {pulled} elements before closing)")

class NotAResultError(TypeError):
    """Source element is neither Ok nor Error."""

    value: typing.Any

    def __init__(self, value: typing.Any) -> None:
        self.value = value
        super().__init__(f"Expected Ok or Error, got {type(value).__name__}: {value!r}")

__all__ = ("AdapterClosedError", "NotAResultError")
