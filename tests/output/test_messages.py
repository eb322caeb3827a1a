"""Tests for message text and money formatting."""

import pytest

from pkgexpress.output.messages import (
    INVALID_INPUT,
    THANK_YOU,
    TOO_BIG_MESSAGE,
    TOO_HEAVY_MESSAGE,
    WELCOME,
    format_money,
    format_total,
    prompt_for,
)


class TestMessages:
    def test_fixed_lines(self) -> None:
        assert WELCOME == "Welcome to Package Express. Please follow the instructions below."
        assert INVALID_INPUT == "Invalid input. Please enter a numeric value."
        assert THANK_YOU == "Thank you!"
        assert TOO_HEAVY_MESSAGE == (
            "Package too heavy to be shipped via Package Express. Have a good day."
        )
        assert TOO_BIG_MESSAGE == "Package too big to be shipped via Package Express."

    @pytest.mark.parametrize("field", ["weight", "width", "height", "length"])
    def test_prompts(self, field: str) -> None:
        assert prompt_for(field) == f"Please enter the package {field}:"

    def test_unknown_prompt(self) -> None:
        with pytest.raises(KeyError):
            prompt_for("depth")


class TestMoney:
    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (2.4, "$2.40"),
            (0.0, "$0.00"),
            (0.1149, "$0.11"),
            (1250.0, "$1250.00"),
            (3.14159, "$3.14"),
        ],
    )
    def test_two_decimals(self, amount: float, expected: str) -> None:
        assert format_money(amount) == expected

    def test_total_line(self) -> None:
        assert format_total(2.4) == "Your estimated total for shipping this package is: $2.40"
