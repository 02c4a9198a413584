"""Application ports package."""

from .database import DatabaseEnginePort
from .transaction_source import TransactionSourcePort

__all__ = [
    "DatabaseEnginePort",
    "TransactionSourcePort",
]
