"""Read-only transaction sources."""

from .json_file_source import JsonFileTransactionSource
from .records import transaction_from_record
from .sqlalchemy_source import SqlAlchemyTransactionSource

__all__ = [
    "JsonFileTransactionSource",
    "SqlAlchemyTransactionSource",
    "transaction_from_record",
]
