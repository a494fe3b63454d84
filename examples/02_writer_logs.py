from __future__ import annotations

from _infra import ParseFailure, banner, parse_u8

from kungfu import Error, Ok
from try_continue import Log, WriterResult, try_continue_map_w


def parse_logged(text: str) -> WriterResult[int, ParseFailure, Log[str]]:
    result = parse_u8(text)
    match result:
        case Ok(value):
            return WriterResult(result, Log.of(f"{text!r} -> {value}"))
        case Error(err):
            return WriterResult(result, Log.of(f"{text!r} rejected: {err.reason}"))


def main() -> None:
    banner("02_writer_logs: logs of every pulled element")

    for raw in (["10", "20", "30"], ["10", "oops", "30"]):
        outcome = try_continue_map_w(raw, parse_logged, sum)
        print(f"  {raw} => {outcome.result!r}")
        for line in outcome.log:
            print(f"    {line}")


if __name__ == "__main__":
    main()
