"""Domain models for transactions and their calendar aggregates."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from src.domain.constants import CREDIT_TYPES, DEFAULT_CURRENCY, UNCATEGORIZED


class TransactionType(str, Enum):
    """Kind of money movement recorded on a transaction."""

    DEBIT = "debit"
    CREDIT = "credit"
    REFUND = "refund"


@dataclass(frozen=True)
class Transaction:
    """Transaction record supplied by a storage collaborator.

    Attributes:
        id: Opaque unique identifier.
        account_id: Owning account identifier, passed through untouched.
        timestamp: ISO-8601 instant, UTC encoded.
        amount: Signed amount. Aggregation uses its absolute value.
        type: Debit, credit or refund.
        currency: Currency code of the amount.
        merchant_name: Counterparty name when known.
        status: Pending, completed or failed.
        raw_meta: Free-form provider metadata (``category`` is read).
    """

    id: str
    account_id: str
    timestamp: str
    amount: Decimal
    type: TransactionType
    currency: str = DEFAULT_CURRENCY
    merchant_name: str | None = None
    status: str = "completed"
    raw_meta: Mapping[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.type, TransactionType):
            raw = str(self.type).strip().lower()
            try:
                coerced = TransactionType(raw)
            except ValueError as exc:
                raise ValueError(
                    f"Unknown transaction type: {self.type!r}"
                ) from exc
            object.__setattr__(self, "type", coerced)

    @property
    def is_credit(self) -> bool:
        """Return True when the transaction counts as money received."""
        return self.type in CREDIT_TYPES

    @property
    def category(self) -> str:
        """Return the metadata category or ``Uncategorized``."""
        value = self.raw_meta.get("category") if self.raw_meta else None
        return str(value) if value else UNCATEGORIZED


@dataclass(frozen=True)
class DayTotal:
    """Aggregate of the transactions falling on one local calendar date.

    ``total`` is derived from the type-based split, so a credit recorded
    with a negative amount still increases it.
    """

    date: str
    count: int
    credit_total: Decimal
    debit_total: Decimal

    @property
    def total(self) -> Decimal:
        """Return credit_total minus debit_total."""
        return self.credit_total - self.debit_total

    @classmethod
    def empty(cls, date: str) -> "DayTotal":
        """Return a zero-valued bucket for ``date``."""
        return cls(
            date=date,
            count=0,
            credit_total=Decimal("0"),
            debit_total=Decimal("0"),
        )


@dataclass(frozen=True)
class MonthSummary:
    """Totals reduced from a set of day buckets."""

    total_spent: Decimal
    total_received: Decimal
    transaction_count: int
    month: str | None = None

    @property
    def net(self) -> Decimal:
        """Return total_received minus total_spent."""
        return self.total_received - self.total_spent


@dataclass(frozen=True)
class CategoryTotal:
    """Absolute amount and count for one metadata category."""

    category: str
    count: int
    total: Decimal


@dataclass(frozen=True)
class MonthlyStatistics:
    """Month summary enriched with averages and a category breakdown."""

    month: str
    summary: MonthSummary
    days_with_transactions: int
    avg_daily_spending: Decimal
    avg_daily_received: Decimal
    categories: list[CategoryTotal]


__all__ = [
    "TransactionType",
    "Transaction",
    "DayTotal",
    "MonthSummary",
    "CategoryTotal",
    "MonthlyStatistics",
]
