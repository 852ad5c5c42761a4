"""Pattern families used to parse backtrace lines.

Every rule is matched against the whole line with ``re.fullmatch``.
"""

import re

from .base import FamilyName, PatternFamily

_FLAGS = re.VERBOSE | re.ASCII


class UnknownFamilyError(KeyError):
    """Raised when a family name does not resolve to a known family."""


# Pattern: ./spec/notice_spec.rb:43:in `block (3 levels) in <top (required)>'
INTERPRETER_FRAME = re.compile(
    r"""
    (?P<file>.+)        # ./spec/notice_spec.rb
    :
    (?P<line>\d+)       # 43
    :in\s
    `(?P<function>.*)'  # `block (3 levels) in <top (required)>'
    """,
    _FLAGS,
)

# Whatever a hand-built backtrace may look like: /foo/bar.ext:43, from x:1:in y
GENERIC_FRAME = re.compile(
    r"""
    (?:from\s)?
    (?P<file>.+)                # /foo/bar/baz.ext
    :
    (?P<line>\d+)?              # 43 or nothing
    (?:
        in\s`(?P<function>.+)'  # in `func'
    |
        :in\s(?P<function_in>.+)  # :in func
    )?
    """,
    _FLAGS,
)

# Pattern: org.jruby.ast.NewlineNode.interpret(NewlineNode.java:105)
MANAGED_VM_FRAME = re.compile(
    r"""
    (?P<function>.+)  # org.jruby.ast.NewlineNode.interpret
    \(
        (?P<file>[^:]+)  # NewlineNode.java
        :?
        (?P<line>\d+)?   # 105
    \)
    """,
    _FLAGS,
)

# Pattern: ORA-06512: at "STORE.LI_LICENSES_PACK", line 1945
ORACLE_FRAME = re.compile(
    r"""
    ORA-\d{5}
    :\sat\s
    (?:"(?P<function>.+)",\s)?
    line\s(?P<line>\d+)
    """,
    _FLAGS,
)

# Pattern: compile ((execjs):6692:19)
BRIDGE_CALL_FRAME = re.compile(
    r"(?P<function>.+)\s\((?P<file>.+):(?P<line>\d+):\d+\)",
    _FLAGS,
)

# Pattern: bootstrap_node.js:467:3
BRIDGE_BARE_FRAME = re.compile(
    r"(?P<file>.+):(?P<line>\d+):\d+(?P<function>)",
    _FLAGS,
)

# Detection only, never used to extract frames.
BRIDGE_FRAME_SIMPLIFIED = re.compile(r".+ \(.+:\d+:\d+\)")


NATIVE_FAMILY = PatternFamily(
    FamilyName.NATIVE,
    (INTERPRETER_FRAME, GENERIC_FRAME),
)

MANAGED_VM_FAMILY = PatternFamily(
    FamilyName.MANAGED_VM,
    (MANAGED_VM_FRAME,),
)

DATABASE_DRIVER_FAMILY = PatternFamily(
    FamilyName.DATABASE_DRIVER,
    (ORACLE_FRAME,) + NATIVE_FAMILY.rules,
)

SCRIPT_BRIDGE_FAMILY = PatternFamily(
    FamilyName.SCRIPT_BRIDGE,
    (BRIDGE_CALL_FRAME, BRIDGE_BARE_FRAME, INTERPRETER_FRAME),
)

FAMILIES = {
    family.name: family
    for family in (
        NATIVE_FAMILY,
        MANAGED_VM_FAMILY,
        DATABASE_DRIVER_FAMILY,
        SCRIPT_BRIDGE_FAMILY,
    )
}


def family_by_name(name: str) -> PatternFamily:
    """Resolve ``native``, ``managed_vm``, ... (case-insensitive, '-' allowed)."""
    key = name.strip().lower().replace("-", "_")
    try:
        return FAMILIES[FamilyName(key)]
    except ValueError:
        raise UnknownFamilyError(name) from None
