import logging
import os

logger = logging.getLogger(__name__)


def _int_setting(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("%s=%r is not an integer, using %d", name, value, default)
        return default


ISSUES_URL = os.getenv(
    "STACKFRAMES_ISSUES_URL", "https://github.com/stackframes/stackframes/issues/new"
)
LOG_LEVEL = os.getenv("STACKFRAMES_LOG_LEVEL", "WARNING").upper()
# Leading lines checked for bridge frames when the exception has no cause chain.
BRIDGE_SCAN_DEPTH = _int_setting("STACKFRAMES_BRIDGE_SCAN_DEPTH", 3)
