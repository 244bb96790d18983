from __future__ import annotations

from babel.numbers import UnknownCurrencyError, format_currency as babel_format_currency, validate_currency

from app.core.config import get_settings

# ISO 4217 codes that do not denote a currency: "no currency" and testing.
NON_CURRENCY_CODES = frozenset({"XXX", "XTS"})


def normalize_currency(currency_code: str) -> str:
    if not isinstance(currency_code, str):
        raise UnknownCurrencyError(str(currency_code))
    code = currency_code.strip().upper()
    if len(code) != 3 or code in NON_CURRENCY_CODES:
        raise UnknownCurrencyError(currency_code)
    validate_currency(code)
    return code


def format_currency(amount: float, currency_code: str, locale: str | None = None) -> str:
    """Format ``amount`` in ``currency_code`` with exactly two decimals.

    Symbol placement and separators follow the locale's own currency pattern.

    Raises ``babel.numbers.UnknownCurrencyError`` when the
    code is not a recognised ISO 4217 currency.
    """
    code = normalize_currency(currency_code)
    return babel_format_currency(
        amount,
        code,
        locale=locale or get_settings().display_locale,
        currency_digits=False,
    )
