import logging

import pytest

from cq_post.common import UnitType
from cq_post.post import Point
from cq_post.posts import Grbl, Mekanika
from cq_post.program import Program


def test_grbl_program(grbl):
    program = (
        Program(grbl)
        .begin()
        .move_to_machine_origin()
        .set_spindle_speed(18000)
        .fast_move_to(Point(0, 0, 5))
        .move_to(Point(z=-1), 600)
        .move_to(Point(10, 0), 600)
        .move_to(Point(10, 0), 600)
        .move_to(Point(10, 5.555), 600)
        .fast_move_to(Point(z=5))
        .end()
    )
    expected = "\r\n".join(
        [
            "G90 G94",
            "G17",
            "G21",
            "G28 Z0",
            "G28 X0 Y0 Z0",
            "S18000 M3",
            "G0 X0 Y0 Z5",
            "G1 Z-1 F600",
            "X10",
            "Y5.56",
            "G0 Z5",
            "M9",
            "M5",
            "M30",
        ]
    )
    assert program.to_gcode() == expected
    assert program.line_number == 14


def test_grbl_inch():
    program = Program(Grbl(UnitType.INCH)).begin()
    program.fast_move_to(Point(1.2345, 0.5, 0.1))
    assert program.to_gcode() == "G90 G94\r\nG17\r\nG20\r\nG0 X1.235 Y0.5 Z0.1"


def test_mekanika_program(mekanika):
    program = (
        Program(mekanika)
        .begin()
        .fast_move_to(Point(10, 20, 5))
        .move_to(Point(12.5, 20, -1), 1000)
        .end()
    )
    expected = "\n\r".join(
        [
            "%",
            "N1 G90 G94 G17 G91.1",
            "N6 G21",
            "N11 G0 X10. Y20. Z5.",
            "N16 G1 X12.5 Z-1. F1000.",
            "N21 M9",
            "N26 M5",
            "N31 M30",
            "%",
        ]
    )
    assert program.to_gcode() == expected


def test_incremental_moves_repeat(grbl):
    program = Program(grbl).begin().set_incremental_positioning()
    program.fast_move_to(Point(x=5)).fast_move_to(Point(x=5))
    program.move_to(Point(y=-2), 300)
    assert program.lines[-4:] == ["G91", "G0 X5", "X5", "G1 Y-2 F300"]


def test_back_to_absolute_announces_coordinates(grbl):
    program = Program(grbl).begin().fast_move_to(Point(1, 2, 3))
    program.set_incremental_positioning().fast_move_to(Point(z=1))
    program.set_absolute_positioning().fast_move_to(Point(1, 2, 3))
    assert program.lines[-5:] == [
        "G0 X1 Y2 Z3",
        "G91",
        "G0 Z1",
        "G90",
        "G0 X1 Y2 Z3",
    ]


def test_spindle_and_coolant(grbl):
    program = Program(grbl).begin()
    program.set_spindle_speed(1000).set_spindle_speed(1000)
    program.set_spindle_speed(2000, clockwise=False)
    program.start_flood().start_mist().start_mist()
    program.stop_flood_and_mist().stop_spindle()
    assert program.lines[3:] == [
        "S1000 M3",
        "",
        "S2000 M4",
        "M8",
        "M7",
        "",
        "M9",
        "M5",
    ]


def test_repeated_begin_only_repeats_stateless(grbl):
    program = Program(grbl).begin().begin()
    assert program.lines == ["G90 G94", "G17", "G21", "G94", "", ""]


def test_load_tool_warns_without_changer(grbl, caplog):
    with caplog.at_level(logging.WARNING, logger="cq_post.program"):
        program = Program(grbl).load_tool(2)
    assert program.lines == ["T2"]
    assert "no tool changer" in caplog.text


def test_comment_and_raw_line(mekanika):
    program = Program(mekanika).begin().comment("Pocket (1)").line("M0")
    assert program.lines == ["N1 G90 G94 G17 G91.1", "N6 G21", "(Pocket 1)", "M0"]
    assert program.line_number == 2


def test_save_gcode_keeps_newlines(grbl, tmp_path):
    program = Program(grbl).begin()
    file_name = tmp_path / "out.nc"
    program.save_gcode(file_name)
    assert file_name.read_bytes() == b"G90 G94\r\nG17\r\nG21"


def test_empty_program(mekanika):
    assert Program(mekanika).to_gcode() == "%\n\r%"


def test_programs_use_their_own_post():
    first = Program(Grbl()).begin()
    second = Program(Grbl()).begin()
    assert first.to_gcode() == second.to_gcode()


@pytest.mark.parametrize(
    ["post", "expected"],
    [[Grbl, "G0 X1 Y2 Z3"], [Mekanika, "N11 G0 X1. Y2. Z3."]],
)
def test_point_like_objects(post, expected):
    class Vec:
        def __init__(self, x, y, z):
            self.x, self.y, self.z = x, y, z

    program = Program(post()).begin().fast_move_to(Vec(1, 2, 3))
    assert program.lines[-1] == expected


def test_integer_words_suppressed_when_output_unchanged(grbl):
    program = Program(grbl).begin()
    program.move_to(Point(x=1), 600.4).move_to(Point(x=2), 600.3)
    program.set_spindle_speed(1000.2).set_spindle_speed(1000.1)
    program.load_tool(2.2).load_tool(1.9)
    assert program.lines[3:] == ["G1 X1 F600", "X2", "S1000 M3", "", "T2", ""]


def test_mekanika_feed_keeps_decimals(mekanika):
    program = Program(mekanika).begin()
    program.move_to(Point(x=1), 100.25).move_to(Point(x=2), 100.5)
    assert program.lines[2:] == ["N11 G1 X1. F100.25", "N16 X2. F100.5"]


def test_comment_stays_on_one_line(grbl):
    program = Program(grbl).comment("rough\nM30 pass")
    assert program.to_gcode() == "(rough M30 pass)"


def test_save_gcode_is_utf8(grbl, tmp_path):
    file_name = tmp_path / "out.nc"
    Program(grbl).line("(Bohrung ø 3)").save_gcode(file_name)
    assert file_name.read_bytes() == "(Bohrung ø 3)".encode("utf-8")


def test_save_gcode_logs_written_lines(mekanika, tmp_path, caplog):
    program = Program(mekanika).begin().comment("Pocket")
    with caplog.at_level(logging.INFO, logger="cq_post.program"):
        program.save_gcode(tmp_path / "out.nc")
    # Header, two numbered lines, comment and footer
    assert "(5 lines)" in caplog.text
