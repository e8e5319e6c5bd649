from io import StringIO

import pytest

from cq_post.address import Scalar, command, commands, variable
from cq_post.common import EmitPolicy, UnitType
from cq_post.engine import LineAssembler, LineNumberFormatSpec
from cq_post.formatter import integer_formatter, number_formatter
from cq_post.posts import Grbl, Mekanika


@pytest.fixture
def int_f():
    return integer_formatter()


@pytest.fixture
def real_f():
    return number_formatter(decimals=3)


@pytest.fixture
def distance(int_f):
    """G90 / G91 sharing one state cell"""
    return commands("G", (90, 91), EmitPolicy.IF_CHANGED, int_f, Scalar())


@pytest.fixture
def g0(int_f):
    return command("G", 0, EmitPolicy.IF_CHANGED, int_f)


@pytest.fixture
def g28(int_f):
    return command("G", 28, EmitPolicy.ALWAYS, int_f)


@pytest.fixture
def x(real_f):
    return variable("X", EmitPolicy.IF_CHANGED, real_f)


@pytest.fixture
def y(real_f):
    return variable("Y", EmitPolicy.IF_CHANGED, real_f)


@pytest.fixture
def assembler():
    return LineAssembler()


@pytest.fixture
def numbered_assembler():
    return LineAssembler(line_number_format=LineNumberFormatSpec())


@pytest.fixture
def stream():
    return StringIO()


@pytest.fixture
def grbl():
    return Grbl(UnitType.MILLIMETER)


@pytest.fixture
def mekanika():
    return Mekanika(UnitType.MILLIMETER)
