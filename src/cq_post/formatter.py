from __future__ import annotations

import math
import re
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Callable

from cq_post.utils import fixed_point

if TYPE_CHECKING:
    from cq_post.address import Token


@dataclass(frozen=True)
class NumberFormatSpec:
    decimals: int = 3
    force_sign: bool = False
    separator: str = "."
    scale: float = 1
    offset: float = 0
    force_separator: bool = False
    minimum: float | None = None
    maximum: float | None = None
    min_digits_left: int | None = None
    min_digits_right: int | None = None


def format_number(value: float | None, spec: NumberFormatSpec) -> str | None:
    """
    Format a raw value, None when there is nothing to output.

    Bounds are checked against the raw value and the bound itself is written out,
    bypassing scale and offset. With maximum=100 and scale=2 the raw value 150 is
    written as 100, not 300 or 200.
    """
    if value is None:
        return None

    v = (value + spec.offset) * spec.scale
    if spec.maximum is not None and value > spec.maximum:
        v = spec.maximum
    if spec.minimum is not None and value < spec.minimum:
        v = spec.minimum

    if math.isnan(v):
        return "nan"
    if math.isinf(v):
        return ("-" if v < 0 else "+" if spec.force_sign else "") + "inf"

    integer, fraction = fixed_point(abs(v), spec.decimals)
    fraction = fraction.rstrip("0")
    if spec.min_digits_right is not None:
        fraction = fraction.ljust(spec.min_digits_right, "0")
    if spec.min_digits_left is not None:
        integer = integer.rjust(spec.min_digits_left, "0")

    # Sign follows the rounded magnitude, -0.0001 is written as 0
    negative = v < 0 and (integer.strip("0") or fraction.strip("0"))
    sign = "-" if negative else "+" if spec.force_sign else ""
    separator = spec.separator if fraction or spec.force_separator else ""
    return sign + integer + separator + fraction


class NumberFormatter:
    spec: NumberFormatSpec

    def __init__(self, spec: NumberFormatSpec | None = None):
        self.spec = NumberFormatSpec() if spec is None else spec

    def __repr__(self):
        return f"{self.__class__.__name__}({self.spec!r})"

    def __call__(self, token: Token) -> str | None:
        text = format_number(token.output_value(), self.spec)
        if text is None:
            return None
        return token.prefix + text


def number_formatter(**overrides) -> NumberFormatter:
    return NumberFormatter(replace(NumberFormatSpec(), **overrides))


def integer_formatter(**overrides) -> NumberFormatter:
    return number_formatter(**{**overrides, "decimals": 0})


###############################################################################
# Comments

_COMMENT_ALLOWED = re.compile(r"[^a-zA-Z0-9_ \-.=/:]")
_WHITESPACE = re.compile(r"\s+")
COMMENT_LENGTH = 30


def sanitize(text: str) -> str:
    """Keep a comment on a single line, line breaks and tabs become spaces"""
    text = _WHITESPACE.sub(" ", text)
    return _COMMENT_ALLOWED.sub("", text)[:COMMENT_LENGTH]


@dataclass(frozen=True)
class CommentFormatSpec:
    begin: str = "("
    end: str = ")"
    sanitize: Callable[[str], str] = field(default=sanitize)


def comment_formatter(spec: CommentFormatSpec | None = None) -> Callable[[str], str]:
    spec = CommentFormatSpec() if spec is None else spec

    def comment(text: str) -> str:
        return f"{spec.begin}{spec.sanitize(text)}{spec.end}"

    return comment
