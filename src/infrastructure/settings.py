"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

import dotenv

from src.domain.constants import DEFAULT_CURRENCY, DEFAULT_TIMEZONE
from src.domain.services.normalization import normalize_currency_code
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

SOURCE_JSON = "json"
SOURCE_SQLALCHEMY = "sqlalchemy"


@dataclass(frozen=True)
class TransactionCalendarSettings:
    """Settings for bucketing and for selecting the transaction source.

    Attributes:
        timezone: IANA zone used for local calendar dates, or ``local``.
        currency: Default currency code for formatted amounts.
        source: Source identifier (json or sqlalchemy).
        json_file: Optional path to the JSON transaction file.
        db_url: Optional SQLAlchemy URL of the transaction store.
    """

    timezone: str = DEFAULT_TIMEZONE
    currency: str = DEFAULT_CURRENCY
    source: str = SOURCE_JSON
    json_file: Optional[Path] = None
    db_url: Optional[str] = None

    @classmethod
    def from_env(cls) -> "TransactionCalendarSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            TransactionCalendarSettings: Settings sourced from the environment.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        timezone = os.getenv("TXN_TIMEZONE", "").strip() or DEFAULT_TIMEZONE
        currency = (
            normalize_currency_code(os.getenv("TXN_CURRENCY"))
            or DEFAULT_CURRENCY
        )
        source = os.getenv("TXN_SOURCE", SOURCE_JSON).strip().lower()
        if source not in (SOURCE_JSON, SOURCE_SQLALCHEMY):
            logger.warning(
                f"Unknown TXN_SOURCE '{source}'. Falling back to json."
            )
            source = SOURCE_JSON
        raw_json = os.getenv("TXN_JSON_FILE")
        if raw_json:
            json_file = cls._normalize_path(raw_json, logger=logger)
        else:
            json_file = cls._default_json_file()
        db_url = os.getenv("TXN_DB_URL") or None
        return cls(
            timezone=timezone,
            currency=currency,
            source=source,
            json_file=json_file,
            db_url=db_url,
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the JSON file path or ``file://`` URI.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Resolved filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Transaction file does not exist at {path}")
        return path

    @staticmethod
    def _default_json_file() -> Path | None:
        """Return ``data/transactions.json`` when it exists.

        Returns:
            Path | None: Default path if present under the project root.
        """
        candidate = get_project_root() / "data" / "transactions.json"
        if candidate.exists():
            return candidate.resolve()
        return None


__all__ = [
    "SOURCE_JSON",
    "SOURCE_SQLALCHEMY",
    "TransactionCalendarSettings",
]
