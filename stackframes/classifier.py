"""Pick the pattern family for an exception from where it came from."""

from typing import Any, Optional, Sequence

from . import config
from .base import PatternFamily
from .patterns import (
    BRIDGE_FRAME_SIMPLIFIED,
    DATABASE_DRIVER_FAMILY,
    MANAGED_VM_FAMILY,
    NATIVE_FAMILY,
    SCRIPT_BRIDGE_FAMILY,
)
from .runtime import Feature, runtime_type

# Returned by cause_of() for values with no causal chain to inspect.
NO_CAUSE_CHAIN = object()


def cause_of(exception: Any) -> Any:
    """The exception that caused ``exception``, None, or NO_CAUSE_CHAIN."""
    if isinstance(exception, BaseException):
        if exception.__cause__ is not None:
            return exception.__cause__
        if exception.__suppress_context__:
            return None
        return exception.__context__
    return getattr(exception, "cause", NO_CAUSE_CHAIN)


def _is_instance(exception: Any, feature: Feature) -> bool:
    types = runtime_type(feature)
    return types is not None and isinstance(exception, types)


def is_managed_vm_exception(exception: Any) -> bool:
    return _is_instance(exception, Feature.MANAGED_VM)


def is_database_driver_exception(exception: Any) -> bool:
    return _is_instance(exception, Feature.DATABASE_DRIVER)


def is_script_bridge_exception(exception: Any, lines: Optional[Sequence[str]] = None) -> bool:
    if runtime_type(Feature.SCRIPT_BRIDGE) is None:
        return False
    if _is_instance(exception, Feature.SCRIPT_BRIDGE):
        return True

    cause = cause_of(exception)
    if cause is NO_CAUSE_CHAIN:
        if lines is None:
            lines = getattr(exception, "backtrace", None) or ()
        # No way to follow the chain; look for bridge frames at the top instead.
        return any(
            BRIDGE_FRAME_SIMPLIFIED.fullmatch(str(line))
            for line in list(lines)[: config.BRIDGE_SCAN_DEPTH]
        )
    return _is_instance(cause, Feature.SCRIPT_BRIDGE)


def classify(exception: Any, lines: Optional[Sequence[str]] = None) -> PatternFamily:
    """
    Return the pattern family for ``exception``.

    ``lines`` is the raw backtrace (defaults to ``exception.backtrace``),
    consulted only when bridge detection has to fall back to scanning
    frames. Never raises.
    """
    if is_managed_vm_exception(exception):
        return MANAGED_VM_FAMILY
    if is_database_driver_exception(exception):
        return DATABASE_DRIVER_FAMILY
    if is_script_bridge_exception(exception, lines):
        return SCRIPT_BRIDGE_FAMILY
    return NATIVE_FAMILY
