import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FamilyName(str, Enum):
    NATIVE = "native"
    MANAGED_VM = "managed_vm"
    DATABASE_DRIVER = "database_driver"
    SCRIPT_BRIDGE = "script_bridge"


@dataclass(frozen=True)
class StackFrame:
    file: Optional[str]
    line: Optional[int]
    function: str = ""

    def to_dict(self) -> dict:
        return {"file": self.file, "line": self.line, "function": self.function}


@dataclass(frozen=True)
class PatternFamily:
    """Ordered whole-line rules sharing the file/line/function capture slots.

    A rule may capture one slot through alternative groups named
    ``<slot>`` or ``<slot>_<suffix>``; the first group that took part in
    the match wins.
    """
    name: FamilyName
    rules: tuple[re.Pattern, ...]

    def match(self, line: str) -> Optional[re.Match]:
        for rule in self.rules:
            match = rule.fullmatch(line)
            if match:
                return match
        return None


def capture(match: re.Match, slot: str) -> Optional[str]:
    """Return the value captured for ``slot``, or None if no group took part."""
    for group, value in match.groupdict().items():
        if value is None:
            continue
        if group == slot or group.startswith(slot + "_"):
            return value
    return None
