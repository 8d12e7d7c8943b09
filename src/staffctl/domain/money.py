"""Salary formatting with currency conversion.

Amounts are stored in USD and converted on display. Formatting follows
CLDR locale rules via Babel, so ``en_US`` renders ``$50,000.00`` and
``€45,000.00``.
"""

from __future__ import annotations

import logging

from babel.numbers import format_currency

from staffctl.domain.rates import RateTable

logger = logging.getLogger(__name__)

INVALID_CURRENCY = "Invalid currency"

DEFAULT_LOCALE = "en_US"


def format_salary(
    amount_usd: int,
    code: str,
    rates: RateTable,
    *,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Convert *amount_usd* into *code* and format it for *locale*.

    Returns :data:`INVALID_CURRENCY` instead of raising when *code* is not
    in the rate table; the problem is logged at error level.
    """
    if code not in rates:
        logger.error("Currency code '%s' is invalid.", code)
        return INVALID_CURRENCY

    amount = rates.convert(amount_usd, code)
    return format_currency(amount, code, locale=locale)
