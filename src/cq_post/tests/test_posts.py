import pytest

from cq_post.common import Ternary, UnitType
from cq_post.engine import LineAssembler
from cq_post.post import Point, PostProcessor
from cq_post.posts import POST_PROCESSORS, Grbl, Mekanika, get_post_processor


@pytest.mark.parametrize(["name", "cls"], [["grbl", Grbl], ["Mekanika", Mekanika]])
def test_get_post_processor(name, cls):
    post = get_post_processor(name, UnitType.INCH)
    assert isinstance(post, cls)
    assert post.unit_type == UnitType.INCH


def test_unknown_post_processor():
    with pytest.raises(ValueError, match="Unknown post processor"):
        get_post_processor("fanuc")


def test_unknown_unit_type():
    with pytest.raises(ValueError, match="Unknown unit type"):
        Grbl("mm")


def test_registry():
    assert set(POST_PROCESSORS) == {"grbl", "mekanika"}


def test_grbl_metadata():
    post = Grbl(UnitType.MILLIMETER)
    assert post.extension == "nc"
    assert post.feed_unit == "millimeter/min"
    assert post.line_format.newline == "\r\n"
    assert post.line_number_format is None
    assert post.has_tool_changer == Ternary.NO
    assert [m.name for m in post.machines] == [
        "UltimateBee",
        "Oxman",
        "QueenBee",
        "WorkBee",
        "Lead",
        "3018",
    ]
    assert post.machines[0].vendor.name == "Bulkman3d"
    assert post.machines[-1].vendor is None


def test_mekanika_metadata():
    post = Mekanika(UnitType.INCH)
    assert post.vendor.url == "https://www.mekanika.io"
    assert post.feed_unit == "inch per minute"
    assert post.line_number_format.start == 1
    assert post.header == post.footer == "%"


def test_grbl_decimals_follow_unit():
    assert Grbl(UnitType.MILLIMETER).decimals == 2
    assert Grbl(UnitType.INCH).decimals == 3


def test_move_to_machine_origin_groups(grbl):
    groups = grbl.move_to_machine_origin()
    assert [[str(token) for token in group] for group in groups] == [
        ["G28", "Z0"],
        ["G28", "X0", "Y0", "Z0"],
    ]


def test_end_groups(mekanika):
    assembler = LineAssembler()
    lines = [assembler.assemble(group) for group in mekanika.end()]
    assert lines == ["M9", "M5", "G90", "M30"]


def test_groups_before_begin_are_incremental(grbl):
    """Without G90 the distance mode is unknown and moves are treated as deltas"""
    assert not grbl.is_absolute()
    (group,) = grbl.fast_move_to(Point(x=1))
    assert group[1] is grbl.incremental["X"]


def test_comment(grbl):
    assert grbl.comment("Tool #2: 3mm") == "(Tool 2: 3mm)"


def test_machines_are_not_shared():
    assert isinstance(Grbl.machines, tuple)
    assert isinstance(Mekanika.machines, tuple)
    assert PostProcessor.machines == ()
