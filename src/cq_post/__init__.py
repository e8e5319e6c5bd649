from cq_post.common import EmitPolicy, Ternary, TokenKind, UnitType
from cq_post.engine import LineAssembler, LineFormatSpec, LineNumberFormatSpec, LineWriter
from cq_post.post import Point, PostProcessor
from cq_post.posts import get_post_processor
from cq_post.program import Program

MILLIMETER = UnitType.MILLIMETER
INCH = UnitType.INCH

__all__ = [
    "EmitPolicy",
    "TokenKind",
    "Ternary",
    "UnitType",
    "LineAssembler",
    "LineWriter",
    "LineFormatSpec",
    "LineNumberFormatSpec",
    "Point",
    "PostProcessor",
    "Program",
    "get_post_processor",
    "MILLIMETER",
    "INCH",
]
