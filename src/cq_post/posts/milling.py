"""
Three axis milling posts share the same set of words, only the formatting and the start of the program differ.

Modal groups, each sharing one state cell:
- Spindle: M3 (CW), M4 (CCW), M5 (OFF)
- Coolant: M7 (Mist), M8 (Flood), M9 (OFF)
- Program: M0 (Pause), M1 (Optional pause), M30 (End and reset)
- Units: G20 (inch), G21 (mm)
- Plane: G17 (XY), G18 (XZ), G19 (YZ)
- Distance: G90 (Absolute), G91 (Incremental)

Stateless: G0 (Rapid), G1 (Linear), G94 (Units per minute) and G28 (Home), the latter written on every use.

Coordinates come in three sets. Absolute coordinates are suppressed when unchanged. Incremental coordinates are
written whenever a delta is given, since repeating a delta repeats the move. Origin coordinates used with G28 are
always written.
"""

from __future__ import annotations

from abc import ABC

from cq_post.address import Scalar, Token, command, commands, variable, variables
from cq_post.common import EmitPolicy, UnitType
from cq_post.formatter import NumberFormatter, comment_formatter
from cq_post.post import PointLike, PostProcessor, TokenGroups

AXES = ("X", "Y", "Z")


class MillingPost(PostProcessor, ABC):
    decimals: int
    feed_decimals: int

    command_formatter: NumberFormatter
    coordinate_formatter: NumberFormatter
    feed_formatter: NumberFormatter
    integer_formatter: NumberFormatter

    def _build_tokens(self):
        """Create the long lived tokens, called once the formatters are set"""
        if_changed = EmitPolicy.IF_CHANGED
        cmd = self.command_formatter

        self.spindle_state = Scalar(self.decimals)
        self.coolant_state = Scalar(self.decimals)
        self.program_state = Scalar(self.decimals)
        self.unit_state = Scalar(self.decimals)
        self.plane_state = Scalar(self.decimals)
        self.distance_mode = Scalar(self.decimals)

        self.spindle = commands("M", (3, 4, 5), if_changed, cmd, self.spindle_state)
        self.coolant = commands("M", (7, 8, 9), if_changed, cmd, self.coolant_state)
        self.program = commands("M", (0, 1, 30), if_changed, cmd, self.program_state)
        self.units = commands("G", (20, 21), if_changed, cmd, self.unit_state)
        self.plane = commands("G", (17, 18, 19), if_changed, cmd, self.plane_state)
        self.distance = commands("G", (90, 91), if_changed, cmd, self.distance_mode)
        self.motion = commands("G", (0, 1, 94), if_changed, cmd)
        self.home = command("G", 28, EmitPolicy.ALWAYS, cmd)

        decimals = self.decimals
        xyz = self.coordinate_formatter
        # Cells round to the decimals of their formatter
        feed = Scalar(self.feed_decimals)
        self.F = variable("F", if_changed, self.feed_formatter, feed)
        self.S = variable("S", if_changed, self.integer_formatter, Scalar(0))
        self.T = variable("T", if_changed, self.integer_formatter, Scalar(0))
        self.absolute = variables(AXES, if_changed, xyz, decimals)
        self.incremental = variables(AXES, if_changed, xyz, decimals)
        self.origin = variables(AXES, EmitPolicy.ALWAYS, xyz, decimals)

        self._comment = comment_formatter()

    def is_absolute(self) -> bool:
        return self.distance_mode.get() == self.distance["G90"].code

    def unit_command(self) -> Token:
        if self.unit_type == UnitType.MILLIMETER:
            return self.units["G21"]
        return self.units["G20"]

    def move_to_machine_origin(self) -> TokenGroups:
        # First move up in Z to avoid any collision
        x, y, z = (self.origin[axis].set(0) for axis in AXES)
        return [
            [self.home, z],
            [self.home, x, y, z],
        ]

    def load_tool(self, tool: int) -> TokenGroups:
        return [[self.T.set(tool)]]

    def set_spindle_speed(self, speed: float, clockwise: bool = True) -> TokenGroups:
        direction = self.spindle["M3"] if clockwise else self.spindle["M4"]
        return [[self.S.set(speed), direction]]

    def stop_spindle(self) -> TokenGroups:
        return [[self.spindle["M5"]]]

    def start_flood(self) -> TokenGroups:
        return [[self.coolant["M8"]]]

    def start_mist(self) -> TokenGroups:
        return [[self.coolant["M7"]]]

    def stop_flood_and_mist(self) -> TokenGroups:
        return [[self.coolant["M9"]]]

    def set_absolute_positioning(self) -> TokenGroups:
        return [[self.distance["G90"]]]

    def set_incremental_positioning(self) -> TokenGroups:
        if self.is_absolute():
            # Absolute coordinates have to be announced again when switching back
            for token in self.absolute.values():
                token.reset()
        return [[self.distance["G91"]]]

    def _coordinates(self, point: PointLike) -> list[Token]:
        values = (point.x, point.y, point.z)
        if self.is_absolute():
            return [self.absolute[axis].set(v) for axis, v in zip(AXES, values)]

        tokens = []
        for axis, v in zip(AXES, values):
            token = self.incremental[axis]
            token.value.set(v)
            token.reset()
            tokens.append(token)
        return tokens

    def fast_move_to(self, point: PointLike) -> TokenGroups:
        return [[self.motion["G0"], *self._coordinates(point)]]

    def move_to(self, point: PointLike, feed: float) -> TokenGroups:
        self.F.set(feed)
        return [[self.motion["G1"], *self._coordinates(point), self.F]]

    def end(self) -> TokenGroups:
        return [
            *self.stop_flood_and_mist(),
            *self.stop_spindle(),
            *self.set_absolute_positioning(),
            [self.program["M30"]],
        ]

    def comment(self, text: str) -> str:
        return self._comment(text)
