from .base import FamilyName, PatternFamily, StackFrame
from .classifier import (
    classify,
    is_database_driver_exception,
    is_managed_vm_exception,
    is_script_bridge_exception,
)
from .parser import backtrace_lines, parse, parse_frame, parse_lines
from .patterns import (
    DATABASE_DRIVER_FAMILY,
    FAMILIES,
    MANAGED_VM_FAMILY,
    NATIVE_FAMILY,
    SCRIPT_BRIDGE_FAMILY,
    UnknownFamilyError,
    family_by_name,
)
from .runtime import Feature, register_runtime_type, runtime_supports, unregister_runtime_type

__all__ = [
    "StackFrame", "PatternFamily", "FamilyName", "Feature",
    "parse", "parse_lines", "parse_frame", "backtrace_lines",
    "classify", "is_managed_vm_exception", "is_database_driver_exception",
    "is_script_bridge_exception",
    "NATIVE_FAMILY", "MANAGED_VM_FAMILY", "DATABASE_DRIVER_FAMILY",
    "SCRIPT_BRIDGE_FAMILY", "FAMILIES", "family_by_name", "UnknownFamilyError",
    "runtime_supports", "register_runtime_type", "unregister_runtime_type",
]
