from __future__ import annotations

from cq_post.address import command
from cq_post.common import EmitPolicy, Ternary, UnitType
from cq_post.engine import LineFormatSpec, LineNumberFormatSpec
from cq_post.formatter import integer_formatter, number_formatter
from cq_post.post import Machine, TokenGroups, Vendor
from cq_post.posts.milling import MillingPost


class Mekanika(MillingPost):
    """Mekanika CNC routers driven by a PlanetCNC controller"""

    name = "Mekanika"
    extension = "nc"
    description = "Post for the Mekanika CNC routers used with a PlanetCNC controller."
    version = "1.0"
    vendor = Vendor(name="Mekanika", url="https://www.mekanika.io")
    machines = (Machine("EVO"), Machine("PRO"), Machine("FAB"))
    line_format = LineFormatSpec(newline="\n\r")
    line_number_format = LineNumberFormatSpec(prefix="N", start=1, increment=5)
    has_spindle = Ternary.MAYBE
    has_tool_changer = Ternary.MAYBE
    header = "%"
    footer = "%"

    def __init__(self, unit_type: UnitType = UnitType.MILLIMETER):
        super().__init__(unit_type)
        self.decimals = 3
        self.feed_decimals = 3
        self.feed_unit = f"{unit_type} per minute"

        # Reals always carry the separator, 10 is written as "10."
        real = number_formatter(decimals=3, force_separator=True)
        self.coordinate_formatter = real
        self.feed_formatter = real
        self.command_formatter = integer_formatter()
        self.integer_formatter = integer_formatter()
        self._build_tokens()

        # Incremental arc distance mode, announced on every begin
        self.arc_distance = command("G", 91.1, EmitPolicy.ALWAYS, real)

    def begin(self) -> TokenGroups:
        return [
            [
                self.distance["G90"],
                self.motion["G94"],
                self.plane["G17"],
                self.arc_distance,
            ],
            [self.unit_command()],
        ]
