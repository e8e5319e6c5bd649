from __future__ import annotations

import logging
from io import StringIO

from cq_post.common import Ternary
from cq_post.engine import LineAssembler, LineWriter
from cq_post.post import PointLike, PostProcessor, TokenGroups

logger = logging.getLogger(__name__)


class Program:
    """
    One generation session: the lines of a single output document.

    Tokens are stateful, so every instruction is assembled into lines as soon as it
    is issued. A program should not share its post processor with another program.
    """

    def __init__(self, post: PostProcessor, name: str = "Program"):
        self.post = post
        self.name = name
        self.assembler = LineAssembler(post.line_format, post.line_number_format)
        self.lines: list[str] = []

    def __repr__(self):
        return f"{self.__class__.__name__}({self.post!r}, name={self.name!r})"

    @property
    def line_number(self) -> int:
        return self.assembler.line_number

    def _add(self, instruction: str, groups: TokenGroups) -> Program:
        lines = [self.assembler.assemble(group) for group in groups]
        logger.debug(
            "%s: %s produced %d of %d lines",
            self.name,
            instruction,
            sum(1 for line in lines if line),
            len(lines),
        )
        self.lines.extend(lines)
        return self

    def begin(self) -> Program:
        return self._add("begin", self.post.begin())

    def move_to_machine_origin(self) -> Program:
        return self._add("move_to_machine_origin", self.post.move_to_machine_origin())

    def load_tool(self, tool: int) -> Program:
        if self.post.has_tool_changer == Ternary.NO:
            logger.warning("%s has no tool changer, loading tool %s", self.post.name, tool)
        return self._add("load_tool", self.post.load_tool(tool))

    def set_spindle_speed(self, speed: float, clockwise: bool = True) -> Program:
        if self.post.has_spindle == Ternary.NO:
            logger.warning("%s has no spindle, setting speed %s", self.post.name, speed)
        return self._add(
            "set_spindle_speed", self.post.set_spindle_speed(speed, clockwise)
        )

    def stop_spindle(self) -> Program:
        return self._add("stop_spindle", self.post.stop_spindle())

    def start_flood(self) -> Program:
        return self._add("start_flood", self.post.start_flood())

    def start_mist(self) -> Program:
        return self._add("start_mist", self.post.start_mist())

    def stop_flood_and_mist(self) -> Program:
        return self._add("stop_flood_and_mist", self.post.stop_flood_and_mist())

    def set_absolute_positioning(self) -> Program:
        return self._add(
            "set_absolute_positioning", self.post.set_absolute_positioning()
        )

    def set_incremental_positioning(self) -> Program:
        return self._add(
            "set_incremental_positioning", self.post.set_incremental_positioning()
        )

    def fast_move_to(self, point: PointLike) -> Program:
        return self._add("fast_move_to", self.post.fast_move_to(point))

    def move_to(self, point: PointLike, feed: float) -> Program:
        return self._add("move_to", self.post.move_to(point, feed))

    def end(self) -> Program:
        return self._add("end", self.post.end())

    def comment(self, text: str) -> Program:
        self.lines.append(self.post.comment(text))
        return self

    def line(self, text: str) -> Program:
        """Append a raw line, bypassing modal suppression and line numbering"""
        self.lines.append(text)
        return self

    def document(self) -> list[str]:
        """Header, lines and footer, empty entries are left out when written"""
        return [self.post.header or "", *self.lines, self.post.footer or ""]

    def write(self, stream) -> None:
        LineWriter(stream, self.post.line_format).write(self.document())

    def to_gcode(self) -> str:
        buffer = StringIO()
        self.write(buffer)
        return buffer.getvalue()

    def save_gcode(self, file_name) -> None:
        gcode = self.to_gcode()
        # newline="" keeps the line separators of the post untouched
        with open(file_name, "w", encoding="utf-8", newline="") as f:
            f.write(gcode)
        written = sum(1 for line in self.document() if line)
        logger.info("Saved %s (%d lines) to %s", self.name, written, file_name)
