"""
Writer bridges
==============

try_continue for sources whose elements carry a log:
- Log            (monoidal accumulator)
- WriterResult   (Result[T, E] + Log)
- try_continue_w (bridge merging the logs of pulled elements)
"""

from .log import Log
from .result import WriterResult
from .bridge import extract_writer_result, try_continue_map_w, try_continue_w

__all__ = (
    "Log",
    "WriterResult",
    "extract_writer_result",
    "try_continue_w",
    "try_continue_map_w",
)
