"""Test helpers (small, reusable doubles and Result assertions)."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from kungfu import Error, Ok, Result


@dataclass(frozen=True, slots=True)
class ParseError:
    text: str


def parse_int(text: str) -> Result[int, ParseError]:
    try:
        return Ok(int(text))
    except ValueError:
        return Error(ParseError(text))


def expect_ok(result: Result[Any, Any]) -> Any:
    match result:
        case Ok(value):
            return value
        case Error(err):
            raise AssertionError(f"expected Ok, got Error({err!r})")


def expect_error(result: Result[Any, Any]) -> Any:
    match result:
        case Error(err):
            return err
        case Ok(value):
            raise AssertionError(f"expected Error, got Ok({value!r})")


@dataclass
class TrackedSource:
    """Generator-backed source that records what was pulled and whether it was closed."""

    elements: list[Any]
    pulled: list[Any] = field(default_factory=list)
    closed: bool = False

    def __iter__(self) -> Iterator[Any]:
        return self._generate()

    def _generate(self) -> Iterator[Any]:
        try:
            for element in self.elements:
                self.pulled.append(element)
                yield element
        finally:
            self.closed = True
