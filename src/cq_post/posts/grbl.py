from __future__ import annotations

from cq_post.common import Ternary, UnitType
from cq_post.engine import LineFormatSpec
from cq_post.formatter import integer_formatter, number_formatter
from cq_post.post import Machine, TokenGroups, Vendor
from cq_post.posts.milling import MillingPost

BULKMAN3D = Vendor(name="Bulkman3d", url="https://bulkman3d.com")


class Grbl(MillingPost):
    name = "Grbl"
    extension = "nc"
    description = "Generic milling post for Grbl."
    version = "1.0"
    line_format = LineFormatSpec(newline="\r\n")
    has_spindle = Ternary.MAYBE
    has_tool_changer = Ternary.NO
    machines = tuple(
        Machine(
            name,
            vendor=BULKMAN3D,
            has_spindle=Ternary.MAYBE,
            has_tool_changer=Ternary.NO,
        )
        for name in ("UltimateBee", "Oxman", "QueenBee", "WorkBee", "Lead")
    ) + (Machine("3018", has_spindle=Ternary.YES, has_tool_changer=Ternary.NO),)

    def __init__(self, unit_type: UnitType = UnitType.MILLIMETER):
        super().__init__(unit_type)
        self.decimals = 2 if unit_type == UnitType.MILLIMETER else 3
        self.feed_decimals = 0
        self.feed_unit = f"{unit_type}/min"

        self.coordinate_formatter = number_formatter(decimals=self.decimals)
        self.command_formatter = integer_formatter()
        self.integer_formatter = self.command_formatter
        self.feed_formatter = self.command_formatter
        self._build_tokens()

    def begin(self) -> TokenGroups:
        return [
            [self.distance["G90"], self.motion["G94"]],
            [self.plane["G17"]],
            [self.unit_command()],
        ]
