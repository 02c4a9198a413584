"""Mapping of stored records onto Transaction models."""

from collections.abc import Mapping
from datetime import datetime
import json
from typing import Any

from src.domain.constants import DEFAULT_CURRENCY
from src.domain.errors import TransactionSourceError
from src.domain.models import Transaction
from src.domain.services.calendar import parse_instant
from src.domain.services.normalization import (
    normalize_currency_code,
    normalize_merchant_name,
    normalize_transaction_type,
)
from src.utils.decimal_utils import coerce_decimal

# Stored records use camelCase keys; SQL rows use snake_case.
_ALIASES = {
    "account_id": ("account_id", "accountId"),
    "merchant_name": ("merchant_name", "merchantName"),
    "raw_meta": ("raw_meta", "rawMeta"),
    "created_at": ("created_at", "createdAt"),
    "updated_at": ("updated_at", "updatedAt"),
}


def transaction_from_record(record: Mapping[str, Any]) -> Transaction:
    """Build a Transaction from a stored record.

    Timestamps are kept as stored; they are parsed when aggregated.

    Args:
        record: Mapping with either camelCase or snake_case keys.

    Returns:
        Transaction: Normalized transaction.

    Raises:
        TransactionSourceError: If a required field is missing or invalid.
    """
    record_id = _require(record, "id")
    try:
        amount = coerce_decimal(_require(record, "amount"))
        transaction_type = normalize_transaction_type(_require(record, "type"))
    except ValueError as exc:
        raise TransactionSourceError(
            f"Invalid transaction record id={record_id}: {exc}"
        ) from exc

    return Transaction(
        id=str(record_id),
        account_id=str(_require(record, "account_id")),
        timestamp=str(_require(record, "timestamp")),
        amount=amount,
        type=transaction_type,
        currency=(
            normalize_currency_code(record.get("currency"))
            or DEFAULT_CURRENCY
        ),
        merchant_name=normalize_merchant_name(_get(record, "merchant_name")),
        status=str(record.get("status") or "completed"),
        raw_meta=_load_meta(_get(record, "raw_meta"), record_id),
        created_at=_load_datetime(_get(record, "created_at")),
        updated_at=_load_datetime(_get(record, "updated_at")),
    )


def _get(record: Mapping[str, Any], field: str):
    for key in _ALIASES.get(field, (field,)):
        if key in record:
            return record[key]
    return None


def _require(record: Mapping[str, Any], field: str):
    value = _get(record, field)
    if value is None:
        raise TransactionSourceError(
            f"Transaction record is missing '{field}': {dict(record)!r}"
        )
    return value


def _load_meta(value, record_id) -> dict[str, Any]:
    if value is None or value == "":
        return {}
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError as exc:
            raise TransactionSourceError(
                f"Invalid rawMeta JSON on transaction id={record_id}"
            ) from exc
    if not isinstance(value, Mapping):
        raise TransactionSourceError(
            f"rawMeta must be an object on transaction id={record_id}"
        )
    return dict(value)


def _load_datetime(value) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return parse_instant(str(value))


__all__ = ["transaction_from_record"]
