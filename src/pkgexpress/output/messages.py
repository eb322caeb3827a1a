"""User-facing message text for the quote conversation.

Every line written to stdout comes from here so the transcript stays
byte-for-byte stable across output modes.
"""

from __future__ import annotations

from pkgexpress.domain.measurements import TOO_BIG_MESSAGE, TOO_HEAVY_MESSAGE

__all__ = [
    "INVALID_INPUT",
    "THANK_YOU",
    "TOO_BIG_MESSAGE",
    "TOO_HEAVY_MESSAGE",
    "WELCOME",
    "format_money",
    "format_total",
    "prompt_for",
]

WELCOME = "Welcome to Package Express. Please follow the instructions below."
INVALID_INPUT = "Invalid input. Please enter a numeric value."
THANK_YOU = "Thank you!"

_PROMPTS: dict[str, str] = {
    "weight": "Please enter the package weight:",
    "width": "Please enter the package width:",
    "height": "Please enter the package height:",
    "length": "Please enter the package length:",
}


def prompt_for(field: str) -> str:
    """Return the prompt line for ``weight`` or a dimension axis."""
    return _PROMPTS[str(field)]


def format_money(amount: float) -> str:
    return f"${amount:.2f}"


def format_total(cost: float) -> str:
    return f"Your estimated total for shipping this package is: {format_money(cost)}"
