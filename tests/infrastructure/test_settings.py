"""Tests for infrastructure settings."""

from pathlib import Path

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import TransactionCalendarSettings

_ENV_VARS = (
    "TXN_TIMEZONE",
    "TXN_CURRENCY",
    "TXN_SOURCE",
    "TXN_JSON_FILE",
    "TXN_DB_URL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Ignore .env files and inherited variables."""
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults(monkeypatch, tmp_path: Path) -> None:
    """Without variables UTC, INR and the json source are used."""
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)

    settings = TransactionCalendarSettings.from_env()

    assert settings.timezone == "UTC"
    assert settings.currency == "INR"
    assert settings.source == "json"
    assert settings.json_file is None
    assert settings.db_url is None


def test_from_env_finds_default_json_file(monkeypatch, tmp_path: Path) -> None:
    """data/transactions.json under the project root is picked up."""
    data_file = tmp_path / "data" / "transactions.json"
    data_file.parent.mkdir()
    data_file.write_text("[]", encoding="utf-8")
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)

    settings = TransactionCalendarSettings.from_env()

    assert settings.json_file == data_file.resolve()


def test_from_env_reads_variables(monkeypatch, tmp_path: Path) -> None:
    """Explicit variables override the defaults."""
    data_file = tmp_path / "txns.json"
    data_file.write_text("[]", encoding="utf-8")
    monkeypatch.setenv("TXN_TIMEZONE", "Asia/Kolkata")
    monkeypatch.setenv("TXN_CURRENCY", " usd ")
    monkeypatch.setenv("TXN_SOURCE", "SQLAlchemy")
    monkeypatch.setenv("TXN_JSON_FILE", str(data_file))
    monkeypatch.setenv("TXN_DB_URL", "sqlite:///ledger.db")

    settings = TransactionCalendarSettings.from_env()

    assert settings.timezone == "Asia/Kolkata"
    assert settings.currency == "USD"
    assert settings.source == "sqlalchemy"
    assert isinstance(settings.json_file, Path)
    assert settings.json_file == data_file.resolve()
    assert settings.db_url == "sqlite:///ledger.db"


def test_from_env_accepts_file_uri(monkeypatch, tmp_path: Path) -> None:
    """file:// URIs resolve to filesystem paths."""
    data_file = tmp_path / "my txns.json"
    data_file.write_text("[]", encoding="utf-8")
    monkeypatch.setenv("TXN_JSON_FILE", data_file.as_uri())

    settings = TransactionCalendarSettings.from_env()

    assert settings.json_file == data_file.resolve()


def test_from_env_falls_back_on_unknown_source(monkeypatch) -> None:
    """Unknown sources are reported and replaced by json."""
    logger = _StubLogger()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    monkeypatch.setenv("TXN_SOURCE", "sqlite")

    settings = TransactionCalendarSettings.from_env()

    assert settings.source == "json"
    assert any("sqlite" in message for message in logger.warnings)


def test_from_env_warns_about_missing_file(monkeypatch, tmp_path: Path) -> None:
    """A missing JSON file is kept but reported."""
    logger = _StubLogger()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    missing = tmp_path / "missing.json"
    monkeypatch.setenv("TXN_JSON_FILE", str(missing))

    settings = TransactionCalendarSettings.from_env()

    assert settings.json_file == missing.resolve()
    assert len(logger.warnings) == 1


class _StubLogger:
    def __init__(self) -> None:
        self.warnings: list[str] = []

    def warning(self, msg: str) -> None:
        self.warnings.append(msg)

    def info(self, msg: str) -> None:
        pass
