"""Shared fixtures for the transaction calendar tests."""

import json
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.models import Transaction, TransactionType
from src.infrastructure.logging import logger as logger_module
from src.infrastructure.settings import TransactionCalendarSettings


@pytest.fixture(autouse=True)
def _isolated_log_dir(monkeypatch, tmp_path):
    """Keep log files written during tests out of the project tree."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)


@pytest.fixture
def make_transaction():
    """Return a factory building transactions with sensible defaults."""

    def _make(
        id: str = "tx",
        timestamp: str = "2025-12-01T10:00:00.000Z",
        amount: str = "-10.00",
        type: TransactionType = TransactionType.DEBIT,
        **overrides,
    ) -> Transaction:
        values = {
            "account_id": "acc1",
            "currency": "USD",
            "merchant_name": None,
            "status": "completed",
            "raw_meta": {},
        }
        values.update(overrides)
        return Transaction(
            id=id,
            timestamp=timestamp,
            amount=Decimal(amount),
            type=type,
            **values,
        )

    return _make


@pytest.fixture
def reference_transactions(make_transaction) -> list[Transaction]:
    """Coffee, salary and groceries spread over two December days."""
    return [
        make_transaction(
            id="1",
            timestamp="2025-12-01T10:00:00.000Z",
            amount="-25.50",
            type=TransactionType.DEBIT,
            merchant_name="Coffee Shop",
            raw_meta={"category": "Food"},
        ),
        make_transaction(
            id="2",
            timestamp="2025-12-01T15:30:00.000Z",
            amount="1200.00",
            type=TransactionType.CREDIT,
            merchant_name="Salary",
            raw_meta={"category": "Income"},
        ),
        make_transaction(
            id="3",
            timestamp="2025-12-02T08:00:00.000Z",
            amount="-50.00",
            type=TransactionType.DEBIT,
            merchant_name="Grocery Store",
            raw_meta={"category": "Food"},
        ),
    ]


@pytest.fixture
def reference_records() -> list[dict]:
    """Reference transactions in the camelCase storage format."""
    return [
        {
            "id": "1",
            "accountId": "acc1",
            "timestamp": "2025-12-01T10:00:00.000Z",
            "amount": -25.50,
            "currency": "USD",
            "merchantName": "Coffee Shop",
            "type": "debit",
            "status": "completed",
            "rawMeta": {"category": "Food"},
            "createdAt": "2025-12-01T10:00:01.000Z",
            "updatedAt": "2025-12-01T10:00:01.000Z",
        },
        {
            "id": "2",
            "accountId": "acc1",
            "timestamp": "2025-12-01T15:30:00.000Z",
            "amount": 1200.00,
            "currency": "USD",
            "merchantName": "Salary",
            "type": "credit",
            "status": "completed",
            "rawMeta": {"category": "Income"},
        },
        {
            "id": "3",
            "accountId": "acc2",
            "timestamp": "2025-12-02T08:00:00.000Z",
            "amount": -50.00,
            "currency": "USD",
            "merchantName": "Grocery Store",
            "type": "debit",
            "status": "completed",
            "rawMeta": {"category": "Food"},
        },
    ]


@pytest.fixture
def cli_settings(tmp_path, reference_records):
    """Settings pointing at a JSON file with the reference records."""
    path = tmp_path / "transactions.json"
    path.write_text(json.dumps(reference_records), encoding="utf-8")
    return TransactionCalendarSettings(currency="USD", json_file=path)


@pytest.fixture
def patch_cli(monkeypatch, cli_settings):
    """Replace settings and loggers of a CLI module; return the loggers."""

    def _patch(module):
        loggers = {"app": MagicMock(), "usage": MagicMock()}
        monkeypatch.setattr(module, "build_settings", lambda: cli_settings)
        monkeypatch.setattr(module, "get_app_logger", lambda: loggers["app"])
        if hasattr(module, "get_usage_logger"):
            monkeypatch.setattr(
                module,
                "get_usage_logger",
                lambda: loggers["usage"],
            )
        return loggers

    return _patch
