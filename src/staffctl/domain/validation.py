"""Input validation predicates used by interactive prompts.

Each predicate takes the raw line typed by the user and returns a bool.
Predicates never raise; callers decide whether to re-prompt.
"""

from __future__ import annotations

from collections.abc import Callable

from staffctl.domain.rates import RateTable

Validator = Callable[[str], bool]

YES = "Yes"
NO = "No"


def is_string_input_valid(value: str) -> bool:
    """True when *value* has non-whitespace content."""
    return value.strip() != ""


def is_boolean_input_valid(value: str) -> bool:
    """True for exactly ``Yes`` or ``No`` (case-sensitive)."""
    return value in (YES, NO)


def transform_boolean_value(value: str) -> bool:
    return value == YES


def parse_integer(value: str) -> int | None:
    """Parse a base-10 integer, or return None.

    Examples:
        >>> parse_integer(" 42 ")
        42
        >>> parse_integer("1.5") is None
        True
    """
    try:
        return int(value.strip(), 10)
    except ValueError:
        return None


def is_integer_valid(minimum: int, maximum: int) -> Validator:
    """Build a predicate accepting integers in ``[minimum, maximum]``."""

    def _validator(value: str) -> bool:
        number = parse_integer(value)
        return number is not None and minimum <= number <= maximum

    return _validator


def is_currency_code_valid(code: str, rates: RateTable) -> bool:
    """True when *code* is a key of the rate table."""
    return code in rates


def currency_code_validator(rates: RateTable) -> Validator:
    """Bind *rates* into a one-argument predicate for prompting."""

    def _validator(value: str) -> bool:
        return is_currency_code_valid(value, rates)

    return _validator
