from __future__ import annotations

from collections.abc import Iterator

from _infra import ParseFailure, banner, parse_u8

from kungfu import Error, Ok, Result
from try_continue import continuing, try_continue


def count_even_number_strings(elements: list[str]) -> Result[int, ParseFailure]:
    # Plain iterator logic; parse failures never show up inside the lambda.
    return try_continue(
        (parse_u8(s) for s in elements),
        lambda numbers: sum(1 for n in numbers if n % 2 == 0),
    )


@continuing
def total(numbers: Iterator[int]) -> int:
    return sum(numbers)


def show(result: Result[int, ParseFailure]) -> None:
    match result:
        case Ok(value):
            print(f"  ok: {value}")
        case Error(err):
            print(f"  error: {err}")


def main() -> None:
    banner("01_quickstart: count even number strings")
    show(count_even_number_strings(["1", "2", "3", "24", "28"]))
    show(count_even_number_strings(["1", "2", "three", "-4", "28"]))

    banner("01_quickstart: @continuing")
    show(total(parse_u8(s) for s in ["1", "2", "3", "4"]))
    show(total(parse_u8(s) for s in ["1", "2", "300", "4"]))


if __name__ == "__main__":
    main()
