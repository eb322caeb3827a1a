"""Measurement parsing, shipping limits, and the pricing formula.

Pure functions over floats.  Text that is not a finite, non-negative
number raises :class:`InvalidMeasurementError`; callers decide whether
that means "ask again".
"""

from __future__ import annotations

import math
import re

from pydantic import BaseModel, Field

TOO_HEAVY_MESSAGE = "Package too heavy to be shipped via Package Express. Have a good day."
TOO_BIG_MESSAGE = "Package too big to be shipped via Package Express."


class QuoteLimits(BaseModel):
    """Shipping limits and pricing divisor, code-baked."""

    model_config = {"frozen": True}

    max_weight: float = Field(default=50.0, gt=0)
    max_dimension_total: float = Field(default=50.0, gt=0)
    cost_divisor: float = Field(default=100.0, gt=0)


# Optional sign, digits (plain or comma-grouped) with optional fraction, optional exponent.
_NUMBER_RE = re.compile(
    r"""
    ^
    (?P<sign>[+-])?
    (?P<mantissa>
        (?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d*)?
        |
        \.\d+
    )
    (?P<exponent>[eE][+-]?\d+)?
    $
    """,
    re.VERBOSE,
)


class InvalidMeasurementError(ValueError):
    """Raised when input text is not a usable measurement."""

    def __init__(self, raw: str, reason: str) -> None:
        super().__init__(f"{raw!r}: {reason}")
        self.raw = raw
        self.reason = reason


def parse_measurement(raw: str) -> float:
    """Parse a line of user input into a non-negative finite float.

    Surrounding whitespace is ignored and comma thousands grouping is
    accepted (``"1,250.5"``).  Words, ``nan``/``inf`` spellings, and
    negative values are rejected.

    Raises:
        InvalidMeasurementError: If *raw* is not a valid measurement.
    """
    text = raw.strip()
    if not text:
        raise InvalidMeasurementError(raw, "empty input")

    match = _NUMBER_RE.match(text)
    if match is None:
        raise InvalidMeasurementError(raw, "not a number")

    value = float(text.replace(",", ""))
    if not math.isfinite(value):
        raise InvalidMeasurementError(raw, "not a finite number")
    if value < 0:
        raise InvalidMeasurementError(raw, "negative value")
    # -0.0 becomes 0.0
    return value + 0.0


def exceeds(value: float, limit: float) -> bool:
    """Limits are inclusive: only a value strictly above *limit* fails."""
    return value > limit


def dimension_total(width: float, height: float, length: float) -> float:
    return width + height + length


def shipping_cost(
    *,
    weight: float,
    width: float,
    height: float,
    length: float,
    divisor: float = 100.0,
) -> float:
    """Compute the unrounded shipping cost.

    ``cost = width * height * length * weight / divisor``
    """
    return (width * height * length * weight) / divisor
