from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any, Dict, Optional

from .base import AlignFunc, Handler


# -----------------------------
# helpers
# -----------------------------

def _non_finite(value: Any) -> Optional[str]:
    if not isinstance(value, float) or math.isfinite(value):
        return None
    if math.isnan(value):
        return "nan"
    return "infinity" if value > 0 else "-infinity"


def _rounded(value: Any) -> int:
    # halves round up, -2.5 -> -2
    if isinstance(value, int):
        return value
    return math.floor(value + 0.5)


def _integer(value: Any, base_code: str) -> str:
    special = _non_finite(value)
    if special is not None:
        return special
    return f"{_rounded(value):{base_code}}"


def _fixed(value: Any, precision: int) -> str:
    """
    Fixed point on the exact binary value, halves away from zero.
    A zero input (including -0.0) never gets a sign.
    """
    special = _non_finite(value)
    if special is not None:
        return special
    exact = Decimal(value)
    if exact.is_zero():
        exact = exact.copy_abs()
    digits = max(exact.adjusted(), 0) + precision + 2
    quantized = exact.quantize(
        Decimal(1).scaleb(-precision),
        rounding=ROUND_HALF_UP,
        context=Context(prec=digits),
    )
    return f"{quantized:f}"


def _exponential(value: Any, precision: int) -> str:
    """
    Exponent is written unpadded with an explicit sign: 1.500000e+0
    """
    special = _non_finite(value)
    if special is not None:
        return special
    mantissa, _, exp = f"{value:.{precision}e}".partition("e")
    return f"{mantissa}e{int(exp):+d}"


# -----------------------------
# handlers: (value, precision) -> str
# -----------------------------

def format_str(value: Any, precision: int) -> str:
    return str(value)


def format_bin(value: Any, precision: int) -> str:
    return _integer(value, "b")


def format_char(value: Any, precision: int) -> str:
    return chr(int(value))


def format_int(value: Any, precision: int) -> str:
    return _fixed(value, 0)


def format_oct(value: Any, precision: int) -> str:
    return _integer(value, "o")


def format_hex(value: Any, precision: int) -> str:
    return _integer(value, "x")


def format_hex_upper(value: Any, precision: int) -> str:
    return format_hex(value, precision).upper()


def format_exp(value: Any, precision: int) -> str:
    return _exponential(value, precision)


def format_exp_upper(value: Any, precision: int) -> str:
    return _exponential(value, precision).upper()


def format_fixed(value: Any, precision: int) -> str:
    return _fixed(value, precision)


def format_fixed_upper(value: Any, precision: int) -> str:
    return _fixed(value, precision).upper()


def format_percent(value: Any, precision: int) -> str:
    return _fixed(value * 100, precision) + "%"


DEFAULT_HANDLERS: Dict[str, Handler] = {
    "s": format_str,
    "b": format_bin,
    "c": format_char,
    "d": format_int,
    "o": format_oct,
    "x": format_hex,
    "X": format_hex_upper,
    "e": format_exp,
    "E": format_exp_upper,
    "f": format_fixed,
    "F": format_fixed_upper,
    "%": format_percent,
}


# -----------------------------
# alignment: (text, width) -> str
# -----------------------------

def align_left(text: str, width: int) -> str:
    return text.ljust(width)


def align_right(text: str, width: int) -> str:
    return text.rjust(width)


def align_center(text: str, width: int) -> str:
    # left side first, so an odd pad character ends up on the right
    return text.rjust(width // 2).ljust(width)


DEFAULT_ALIGN: Dict[str, AlignFunc] = {
    "": align_right,
    "<": align_left,
    "^": align_center,
    ">": align_right,
}
