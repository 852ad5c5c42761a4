"""Capability queries for optional foreign runtimes.

A runtime counts as available only once its module has been imported by the
host application; nothing here imports on its own.
"""

import logging
import sys
import threading
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class Feature(str, Enum):
    MANAGED_VM = "managed_vm"
    DATABASE_DRIVER = "database_driver"
    SCRIPT_BRIDGE = "script_bridge"


# (module, attribute) pairs naming the base exception type of each runtime.
KNOWN_TYPES: dict[Feature, tuple[tuple[str, str], ...]] = {
    Feature.MANAGED_VM: (("jpype", "JException"),),
    Feature.DATABASE_DRIVER: (("oracledb", "Error"), ("cx_Oracle", "Error")),
    Feature.SCRIPT_BRIDGE: (("execjs", "RuntimeError"),),
}

_registered: dict[Feature, list[type]] = {feature: [] for feature in Feature}
_lock = threading.Lock()


def register_runtime_type(feature: Feature, exc_type: type) -> None:
    """Declare ``exc_type`` as a base exception type of ``feature``."""
    with _lock:
        if exc_type not in _registered[feature]:
            _registered[feature].append(exc_type)


def unregister_runtime_type(feature: Feature, exc_type: type) -> None:
    with _lock:
        if exc_type in _registered[feature]:
            _registered[feature].remove(exc_type)


def _loaded_type(module_name: str, attribute: str) -> Optional[type]:
    module = sys.modules.get(module_name)
    if module is None:
        return None
    candidate = getattr(module, attribute, None)
    if not isinstance(candidate, type):
        logger.debug("%s.%s is not a type, ignoring", module_name, attribute)
        return None
    return candidate


def runtime_type(feature: Feature) -> Optional[tuple[type, ...]]:
    """Base types for ``feature`` usable with isinstance, or None if unavailable."""
    with _lock:
        types = list(_registered[feature])
    for module_name, attribute in KNOWN_TYPES[feature]:
        loaded = _loaded_type(module_name, attribute)
        if loaded is not None and loaded not in types:
            types.append(loaded)
    return tuple(types) or None


def runtime_supports(feature: Feature) -> bool:
    return runtime_type(feature) is not None
