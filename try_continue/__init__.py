"""
try_continue: plain-iterator logic over fallible elements.

Hand an iterator of Ok values to any consumer (sum, filter, itertools, ...)
and get back Ok(its result), or Error(the first failure it ran into).

Architecture:
- Generic bridge (try_continueM) works with any raw element via extract + combine pattern
- Sugar functions for kungfu Result (no suffix)
- Sugar functions for WriterResult (*_w suffix)
"""

# Core types
from ._types import Continuation, Extract, FallibleIterable, Handler, Observer

# Internal helpers (for custom bridges)
from . import _helpers

# Adapter
from .adapter import TryContinueIter

# Configuration
from .policy import DEFAULT_POLICY, TryContinuePolicy

# Bridges
from .bridge import (
    # kungfu Result
    continuing,
    try_continue,
    try_continue_catching,
    try_continue_lazy,
    try_continue_map,
    # Generic
    try_continueM,
)

# Writer
from . import writer
from .writer import Log, WriterResult, try_continue_map_w, try_continue_w

# Errors
from ._errors import AdapterClosedError, NotAResultError

__all__ = (
    # Types
    "Continuation",
    "Extract",
    "FallibleIterable",
    "Handler",
    "Observer",
    # Internal helpers (for custom bridges)
    "_helpers",
    # Adapter
    "TryContinueIter",
    # Configuration
    "DEFAULT_POLICY",
    "TryContinuePolicy",
    # Bridges - kungfu Result
    "continuing",
    "try_continue",
    "try_continue_catching",
    "try_continue_lazy",
    "try_continue_map",
    # Bridges - Generic
    "try_continueM",
    # Writer
    "writer",
    "Log",
    "WriterResult",
    "try_continue_w",
    "try_continue_map_w",
    # Errors
    "AdapterClosedError",
    "NotAResultError",
)
