"""
A post processor adapts the generic instructions of a program (move to a point, start the spindle, ...) to the
dialect of one controller. It owns the tokens of that controller, decides which of them make up each instruction
and how numbers are formatted.

Instruction methods return a list of token groups, one group per output line. The groups must be assembled right
away since the tokens are stateful: the next instruction stages new values into the same tokens.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol

from cq_post.address import Token
from cq_post.common import Ternary, UnitType
from cq_post.engine import LineFormatSpec, LineNumberFormatSpec

TokenGroups = list[list[Token]]


class PointLike(Protocol):
    x: float | None
    y: float | None
    z: float | None


@dataclass(frozen=True)
class Point:
    x: float | None = None
    y: float | None = None
    z: float | None = None


@dataclass(frozen=True)
class Vector3:
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Vendor:
    name: str
    url: str


@dataclass(frozen=True)
class Machine:
    name: str
    working_dimensions: Vector3 | None = None
    vendor: Vendor | None = None
    capability: int | None = None
    has_spindle: Ternary | None = None
    has_tool_changer: Ternary | None = None


class PostProcessor(ABC):
    name: str
    extension: str = "nc"
    description: str = ""
    version: str = "1.0"
    vendor: Vendor | None = None
    machines: tuple[Machine, ...] = ()
    unit_type: UnitType
    feed_unit: str
    line_format: LineFormatSpec = LineFormatSpec()
    line_number_format: LineNumberFormatSpec | None = None
    has_spindle: Ternary = Ternary.MAYBE
    has_tool_changer: Ternary = Ternary.MAYBE
    header: str | None = None
    footer: str | None = None

    def __init__(self, unit_type: UnitType = UnitType.MILLIMETER):
        if not isinstance(unit_type, UnitType):
            raise ValueError(f"Unknown unit type: {unit_type!r}")
        self.unit_type = unit_type

    def __repr__(self):
        return f"{self.__class__.__name__}({self.unit_type!r})"

    @abstractmethod
    def begin(self) -> TokenGroups:
        pass

    @abstractmethod
    def move_to_machine_origin(self) -> TokenGroups:
        pass

    @abstractmethod
    def load_tool(self, tool: int) -> TokenGroups:
        pass

    @abstractmethod
    def set_spindle_speed(self, speed: float, clockwise: bool = True) -> TokenGroups:
        pass

    @abstractmethod
    def stop_spindle(self) -> TokenGroups:
        pass

    @abstractmethod
    def start_flood(self) -> TokenGroups:
        pass

    @abstractmethod
    def start_mist(self) -> TokenGroups:
        pass

    @abstractmethod
    def stop_flood_and_mist(self) -> TokenGroups:
        pass

    @abstractmethod
    def set_absolute_positioning(self) -> TokenGroups:
        pass

    @abstractmethod
    def set_incremental_positioning(self) -> TokenGroups:
        pass

    @abstractmethod
    def fast_move_to(self, point: PointLike) -> TokenGroups:
        pass

    @abstractmethod
    def move_to(self, point: PointLike, feed: float) -> TokenGroups:
        pass

    @abstractmethod
    def end(self) -> TokenGroups:
        pass

    @abstractmethod
    def comment(self, text: str) -> str:
        pass
