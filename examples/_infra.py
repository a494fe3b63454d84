from __future__ import annotations

from dataclasses import dataclass

from kungfu import Error, Ok, Result


@dataclass(frozen=True, slots=True)
class ParseFailure:
    text: str
    reason: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return f"cannot parse {self.text!r}: {self.reason}"


def parse_u8(text: str) -> Result[int, ParseFailure]:
    try:
        value = int(text)
    except ValueError as exc:
        return Error(ParseFailure(text, str(exc)))
    if not 0 <= value <= 255:
        return Error(ParseFailure(text, "out of range for u8"))
    return Ok(value)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")
