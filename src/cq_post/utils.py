import math
from decimal import ROUND_HALF_UP, Context, Decimal

# Wide enough for every finite float at any sensible number of decimals
_CONTEXT = Context(prec=400)


def _quantize(value: float, decimals: int) -> Decimal:
    quantum = Decimal(1).scaleb(-decimals)
    return Decimal(repr(float(value))).quantize(
        quantum, rounding=ROUND_HALF_UP, context=_CONTEXT
    )


def round_half_up(value: float, decimals: int) -> float:
    """Round halves away from zero, 1.005 -> 1.01 rather than 1.0"""
    if not math.isfinite(value):
        return value
    return float(_quantize(value, decimals))


def fixed_point(value: float, decimals: int) -> tuple[str, str]:
    """Split a non-negative finite value into integer and fractional digits"""
    integer, _, fraction = f"{_quantize(value, decimals):f}".partition(".")
    return integer, fraction
