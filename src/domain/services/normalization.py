"""Domain normalization helpers."""

from src.domain.models.transactions import TransactionType


def normalize_currency_code(code: str | None) -> str | None:
    """Normalize currency code values.

    Args:
        code: Raw currency code from a source record.

    Returns:
        str | None: Upper-cased code, or None when blank.
    """
    if not code:
        return None
    cleaned = code.strip()
    return cleaned.upper() if cleaned else None


def normalize_transaction_type(value: str | TransactionType) -> TransactionType:
    """Normalize a raw transaction type.

    Args:
        value: Raw type such as ``"Credit"`` or ``" debit "``.

    Returns:
        TransactionType: Matching enum member.

    Raises:
        ValueError: If the value is not debit, credit or refund.
    """
    if isinstance(value, TransactionType):
        return value
    cleaned = (value or "").strip().lower()
    try:
        return TransactionType(cleaned)
    except ValueError as exc:
        raise ValueError(f"Unknown transaction type: {value!r}") from exc


def normalize_merchant_name(name: str | None) -> str | None:
    """Return a stripped merchant name, or None when blank."""
    if not name:
        return None
    cleaned = name.strip()
    return cleaned or None


def type_label(value: str | TransactionType) -> str:
    """Return the plain string form of a transaction type."""
    if isinstance(value, TransactionType):
        return value.value
    return str(value)


__all__ = [
    "normalize_currency_code",
    "normalize_transaction_type",
    "normalize_merchant_name",
    "type_label",
]
