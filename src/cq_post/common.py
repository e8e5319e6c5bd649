"""
Every word on a line of G-code is either a command or a variable.

Commands are identified by their letter address and a fixed code (G90, M3, ...).
Most of them belong to a modal group: the machine remembers the active member of the
group until another member of the same group replaces it, so the command only needs to
be repeated when the group state changes.

Variables carry a value supplied by the caller (X12.5, F1000, S18000, ...). Their value
is remembered by the controller as well, so an unchanged variable can be left out.

Whether an unchanged word is still written out is decided by its emit policy.
"""

from enum import Enum


class PostEnum(Enum):
    def __repr__(self):
        return f"{self.__class__.__name__}.{self._name_}"

    def __str__(self):
        return self._value_


class EmitPolicy(PostEnum):
    ALWAYS = "always"
    IF_CHANGED = "ifChanged"


class TokenKind(PostEnum):
    COMMAND = "command"
    VARIABLE = "variable"


class UnitType(PostEnum):
    MILLIMETER = "millimeter"
    INCH = "inch"


class Ternary(PostEnum):
    YES = "yes"
    NO = "no"
    MAYBE = "maybe"
