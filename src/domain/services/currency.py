"""Currency display formatting."""

from decimal import Decimal

from src.domain.constants import CURRENCY_SYMBOLS, DEFAULT_CURRENCY
from src.domain.errors import InvalidAmountError
from src.domain.services.normalization import normalize_currency_code
from src.utils.decimal_utils import coerce_decimal, quantize_cents


def currency_symbol(currency_code: str | None) -> str:
    """Return the display prefix for a currency code.

    Unknown codes fall back to the code followed by a space.
    """
    code = normalize_currency_code(currency_code) or DEFAULT_CURRENCY
    return CURRENCY_SYMBOLS.get(code, f"{code} ")


def format_currency(
    amount: Decimal | int | float | str,
    currency_code: str = DEFAULT_CURRENCY,
) -> str:
    """Format an amount with its currency symbol and two decimals.

    Grouping uses three-digit thousands separators for every currency and
    the minus sign precedes the symbol (``-$1,234.56``).

    Args:
        amount: Finite numeric amount.
        currency_code: ISO currency code, ``INR`` by default.

    Returns:
        str: Display string such as ``₹1,234.56``.

    Raises:
        InvalidAmountError: If the amount is NaN, infinite or not numeric.
    """
    try:
        value = coerce_decimal(amount)
    except ValueError as exc:
        raise InvalidAmountError(str(exc)) from exc
    if not value.is_finite():
        raise InvalidAmountError(f"Cannot format non-finite amount: {amount}")

    rounded = quantize_cents(value)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{currency_symbol(currency_code)}{abs(rounded):,.2f}"


__all__ = ["currency_symbol", "format_currency"]
