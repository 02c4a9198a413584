"""Application port for reading stored transactions."""

from typing import Protocol

from src.domain.models import Transaction


class TransactionSourcePort(Protocol):
    """Port exposing read access to previously stored transactions.

    Sources return immutable snapshots, newest first. They never aggregate;
    month scoping by local calendar is left to the aggregation engine.
    """

    def fetch_transactions(
        self,
        account_id: str | None = None,
    ) -> list[Transaction]:
        """Return stored transactions, optionally for one account."""

    def fetch_transactions_for_month(
        self,
        month_iso: str,
        account_id: str | None = None,
    ) -> list[Transaction]:
        """Return transactions that may fall inside ``month_iso``.

        Implementations may over-fetch around the month boundaries; callers
        narrow the result with the engine's month filter.
        """


__all__ = ["TransactionSourcePort"]
