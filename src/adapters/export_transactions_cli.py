"""CLI adapter exporting a month of transactions as CSV.

Reads ``EXPORT_MONTH`` (default: current month), ``EXPORT_ACCOUNT_ID`` and
``EXPORT_OUTPUT``; without an output path the CSV goes to stdout.
"""

import os
from pathlib import Path

from src.application.use_cases.export_transactions_csv import (
    ExportTransactionsCsvUseCase,
)
from src.domain.errors import TransactionCalendarError
from src.infrastructure.container import (
    build_aggregation_engine,
    build_settings,
    build_transaction_source,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def main() -> None:
    """Run the CSV export."""
    logger = get_app_logger()
    settings = build_settings()
    account_id = os.getenv("EXPORT_ACCOUNT_ID") or None
    output = os.getenv("EXPORT_OUTPUT") or None

    try:
        engine = build_aggregation_engine(settings)
        month = os.getenv("EXPORT_MONTH") or engine.current_month_iso()
        use_case = ExportTransactionsCsvUseCase(
            build_transaction_source(settings),
            engine=engine,
            logger=logger,
        )
        content = use_case.execute(month, account_id=account_id)
    except (TransactionCalendarError, RuntimeError) as exc:
        logger.error(str(exc))
        raise SystemExit(1) from exc

    get_usage_logger().info(f"export month={month} output={output}")
    if output:
        path = Path(output).expanduser()
        path.write_text(content, encoding="utf-8")
        print(f"Exported transactions for {month} to {path}")
    else:
        print(content, end="")


if __name__ == "__main__":  # pragma: no cover
    main()
