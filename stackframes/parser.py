import logging
import traceback
from typing import Any, Iterable, Optional

from . import config
from .base import PatternFamily, StackFrame, capture
from .classifier import classify
from .patterns import NATIVE_FAMILY

log = logging.getLogger(__name__)


def _to_line_number(value: Optional[str]) -> Optional[int]:
    if not value or not value.isascii():
        return None
    try:
        number = int(value)
    except ValueError:
        return None
    return number if number > 0 else None


def _unparsed_message(line: str) -> str:
    return (
        f"can't parse '{line}' "
        f"(please file an issue so we can fix it: {config.ISSUES_URL})"
    )


def parse_frame(family: PatternFamily, line: str, logger=None) -> StackFrame:
    """
    Parse one backtrace line with ``family``, falling back to the native family.

    A line nothing matches comes back with the whole text as its function and
    is reported once through ``logger.warning``.
    """
    match = family.match(line)
    if match is None and family is not NATIVE_FAMILY:
        match = NATIVE_FAMILY.match(line)

    if match is None:
        sink = logger if logger is not None else log
        sink.warning(_unparsed_message(line))
        return StackFrame(file=None, line=None, function=line)

    return StackFrame(
        file=capture(match, "file"),
        line=_to_line_number(capture(match, "line")),
        function=capture(match, "function") or "",
    )


def parse_lines(
    lines: Iterable[str],
    family: PatternFamily = NATIVE_FAMILY,
    logger=None,
) -> list[StackFrame]:
    return [parse_frame(family, str(line), logger) for line in lines]


def _render_frame(frame: traceback.FrameSummary) -> str:
    if frame.lineno is None:
        return f"{frame.filename}:in `{frame.name}'"
    return f"{frame.filename}:{frame.lineno}:in `{frame.name}'"


def backtrace_lines(exception: Any) -> list[str]:
    """
    Raw backtrace of ``exception``.

    Uses its ``backtrace`` attribute when it has one. Python exceptions
    without it get their traceback rendered as ``file:line:in `function'``,
    innermost frame first.
    """
    backtrace = getattr(exception, "backtrace", None)
    if backtrace is not None:
        return [str(line) for line in backtrace]

    tb = getattr(exception, "__traceback__", None)
    if tb is None:
        return []
    return [_render_frame(frame) for frame in reversed(traceback.extract_tb(tb))]


def parse(exception: Any, logger=None) -> list[StackFrame]:
    """Parse the backtrace of ``exception`` into one StackFrame per line."""
    lines = backtrace_lines(exception)
    if not lines:
        return []

    family = classify(exception, lines)
    return parse_lines(lines, family, logger)
