"""Normalizing raw grade and weight values."""

import decimal
import math
import re
from typing import Optional, Union

#: the only value returned when a grade cannot be computed
NOT_AVAILABLE = "N/A"

RawValue = Union[str, int, float, None]

_GRADE_PATTERN = re.compile(r"-?\d+(?:\.\d+)?(?:\s*/\s*\d+(?:\.\d+)?)?")

_HUNDREDTH = decimal.Decimal("0.01")


# private helpers ======================================================================


def _round_half_up(value: float) -> float:
    """Round to two places, half away from zero, using the float's shortest repr."""
    rounded = decimal.Decimal(repr(value)).quantize(
        _HUNDREDTH, rounding=decimal.ROUND_HALF_UP
    )
    return float(rounded)


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _has_underscore(value) -> bool:
    # float() accepts digit separators like "1_000", which are not numbers here
    return isinstance(value, str) and "_" in value


# public functions =====================================================================


def parse_fraction_or_float(value: RawValue) -> Optional[float]:
    """Convert a raw grade into a percentage.

    Grades may be given as plain numbers, which are taken to be percentages
    already, or as fractions like ``"17/20"``, which are converted to a
    percentage. Whitespace around the value and around the slash is ignored.

    Parameters
    ----------
    value : str, int, float, or None
        The raw grade.

    Returns
    -------
    Optional[float]
        The percentage, rounded to two decimal places, or ``None`` if the value
        is missing or malformed.

    Example
    -------
    >>> parse_fraction_or_float("17/20")
    85.0
    >>> parse_fraction_or_float("1/3")
    33.33
    >>> parse_fraction_or_float("85/0") is None
    True

    """
    if _is_blank(value):
        return None

    try:
        text = str(value).strip()

        if _GRADE_PATTERN.fullmatch(text) is None:
            return None

        if text.count("-") > 1 or text.count("/") > 1:
            return None

        if "/" in text:
            numerator, denominator = (float(part) for part in text.split("/"))
            if denominator == 0:
                return None
            result = (numerator / denominator) * 100
        else:
            result = float(text)

        if not math.isfinite(result):
            return None

        return _round_half_up(result)
    except (ValueError, TypeError, ArithmeticError):
        return None


def parse_weight(value: RawValue) -> Optional[float]:
    """Read a weight as a float, or ``None`` if it is absent or not numeric."""
    if _is_blank(value) or isinstance(value, bool) or _has_underscore(value):
        return None

    try:
        weight = float(value)  # pyright: ignore
    except (ValueError, TypeError):
        return None

    if not math.isfinite(weight):
        return None

    return weight


def parse_target(value) -> Optional[float]:
    """Read a desired grade. Falsy, non-numeric and non-finite values give ``None``."""
    if not value or isinstance(value, bool) or _has_underscore(value):
        return None

    try:
        target = float(value)
    except (ValueError, TypeError):
        return None

    if not math.isfinite(target):
        return None

    return target


def format_percentage(value: float) -> str:
    """Format a number with exactly two decimal places.

    Ties are broken away from zero on the exact binary value of the float, so
    ``format_percentage(0.125)`` is ``"0.13"``.

    A negative value that rounds to zero keeps its sign, so
    ``format_percentage(-0.001)`` is ``"-0.00"``. Zero itself, including
    ``-0.0``, is ``"0.00"``.

    """
    if value == 0:
        value = 0.0
    rounded = decimal.Decimal(value).quantize(_HUNDREDTH, rounding=decimal.ROUND_HALF_UP)
    return f"{rounded:.2f}"
