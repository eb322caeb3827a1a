"""Quote lifecycle states and measurement axes.

A quote moves strictly forward through its states.  Parse failures never
transition; limit failures jump to ``failed`` from the two check points.
"""

from __future__ import annotations

from enum import StrEnum


class QuoteState(StrEnum):
    """Lifecycle state of the in-flight quote."""

    START = "start"
    WEIGHT_PENDING = "weight_pending"
    WEIGHT_ACCEPTED = "weight_accepted"
    DIMENSIONS_PENDING = "dimensions_pending"
    DIMENSIONS_ACCEPTED = "dimensions_accepted"
    PRICED = "priced"
    FAILED = "failed"


class Axis(StrEnum):
    """Package dimension axes, in collection order."""

    WIDTH = "width"
    HEIGHT = "height"
    LENGTH = "length"


AXIS_ORDER: tuple[Axis, ...] = (Axis.WIDTH, Axis.HEIGHT, Axis.LENGTH)

QUOTE_TRANSITIONS: dict[str, list[str]] = {
    "start": ["weight_pending"],
    "weight_pending": ["weight_accepted", "failed"],
    "weight_accepted": ["dimensions_pending"],
    "dimensions_pending": ["dimensions_accepted", "failed"],
    "dimensions_accepted": ["priced"],
    "priced": [],
    "failed": [],
}


def is_valid_transition(
    current: str,
    target: str,
    transitions: dict[str, list[str]] = QUOTE_TRANSITIONS,
) -> bool:
    """Check if transitioning from *current* to *target* is allowed."""
    allowed = transitions.get(current, [])
    return target in allowed
