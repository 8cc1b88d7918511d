"""Fail-soft numeric parsing shared by the numericality rule.

Untrusted input never makes these helpers raise: anything that does not
cleanly parse comes back as ``None`` (or ``False``), and the caller turns
that into a failed validation.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from fractions import Fraction
from typing import Any

_INTEGER_PATTERN = re.compile(r"[0-9]+")
_INTEGER_OR_EMPTY_PATTERN = re.compile(r"[0-9]*")


def parse_float(value: Any) -> float | None:
    """Strictly parse *value* as a finite float.

    Accepts ints, floats, :class:`~decimal.Decimal`, :class:`~fractions.Fraction`
    and numeric strings (surrounding whitespace and ``_`` digit separators
    allowed).  Booleans, ``None``, NaN, infinities and everything else
    return ``None``.

    Examples:
        >>> parse_float(" 12.5 ")
        12.5
        >>> parse_float("12abc") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, int | float | Decimal | Fraction):
            result = float(value)
        elif isinstance(value, str):
            result = float(value.strip())
        else:
            return None
    except (ValueError, OverflowError):
        return None
    if not math.isfinite(result):
        return None
    return result


def is_integer_string(value: Any, *, allow_empty: bool = False) -> bool:
    """Check that the text form of *value* consists only of ASCII digits.

    ``None`` is treated as the empty string, which only passes with
    *allow_empty*.  Signs, decimal points and whitespace never pass.
    """
    text = "" if value is None else str(value)
    pattern = _INTEGER_OR_EMPTY_PATTERN if allow_empty else _INTEGER_PATTERN
    return pattern.fullmatch(text) is not None
