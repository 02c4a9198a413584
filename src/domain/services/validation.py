"""Domain validation helpers."""

from logging import Logger

from src.domain.models.transactions import Transaction
from src.domain.services.normalization import type_label


def validate_amount_sign(transaction: Transaction, logger: Logger) -> bool:
    """Warn when an amount's sign disagrees with its transaction type.

    Credits and refunds are expected to be non-negative and debits
    non-positive. Aggregation relies on the type, so a mismatch only
    produces a warning.

    Args:
        transaction: Transaction to check.
        logger: Logger used for warnings.

    Returns:
        bool: True when the sign matches the type.
    """
    amount = transaction.amount
    if transaction.is_credit and amount < 0:
        logger.warning(
            f"Negative amount on {type_label(transaction.type)} transaction "
            f"id={transaction.id}: {amount}"
        )
        return False
    if not transaction.is_credit and amount > 0:
        logger.warning(
            f"Positive amount on debit transaction id={transaction.id}: "
            f"{amount}"
        )
        return False
    return True


__all__ = ["validate_amount_sign"]
