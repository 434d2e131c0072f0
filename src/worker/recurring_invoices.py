"""Recurring Invoice Background Worker

Runs the recurring invoice generator on a schedule. Same use case as
POST /services/generate-recurring-invoices, so both paths share the
monthly dedup and the all-or-nothing transaction.
Can be run as a standalone script (cron) or continuously.
"""

import asyncio
import logging
import time
from datetime import date
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories import (
    SqlAlchemyClientServiceRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemyInvoiceItemRepository,
    SqlAlchemySystemSettingRepository,
)
from src.adapter.services import SqlAlchemyUnitOfWork, ZeroRateTaxService
from src.app.services.billing_settings import BillingSettingsResolver
from src.app.use_cases.billing import GenerateRecurringInvoices, RecurringInvoiceRunDTO

logger = logging.getLogger(__name__)


class RecurringInvoiceRunError(Exception):
    """Raised when a scheduled run ends with an error result"""

    def __init__(self, error):
        super().__init__(f"{error.code}: {error.message}")
        self.error = error


class RecurringInvoiceWorker:
    """
    Background worker for recurring invoice generation

    Features:
    - Invoices every due active service with recurring billing enabled
    - Idempotent within a month: re-runs skip already invoiced services
    - One transaction per run
    - Can run once or continuously

    Usage:
        # Run once for today (typical cron usage)
        worker = RecurringInvoiceWorker()
        run = await worker.run_once()

        # Run once for a given date
        run = await worker.run_once(today=date(2024, 3, 5))

        # Run continuously
        await worker.run_forever()
    """

    def __init__(self, db_uri: Optional[str] = None):
        """
        Initialize the worker

        Args:
            db_uri: Database URI (defaults to ApplicationConfig.DB_URI)
        """
        self.db_uri = db_uri or ApplicationConfig.DB_URI

        self.engine = create_async_engine(self.db_uri, echo=False, future=True)
        self.async_session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

        logger.info("RecurringInvoiceWorker initialized")

    async def run_once(self, today: Optional[date] = None) -> RecurringInvoiceRunDTO:
        """
        Run generation once

        Args:
            today: Run date (defaults to the current date)

        Returns:
            RecurringInvoiceRunDTO with summary

        Raises:
            RecurringInvoiceRunError: the run was rolled back
        """
        start_time = time.time()

        async with self.async_session_factory() as session:
            use_case = GenerateRecurringInvoices(
                uow=SqlAlchemyUnitOfWork(session),
                service_repo=SqlAlchemyClientServiceRepository(session),
                invoice_repo=SqlAlchemyInvoiceRepository(session),
                invoice_item_repo=SqlAlchemyInvoiceItemRepository(session),
                settings_resolver=BillingSettingsResolver(SqlAlchemySystemSettingRepository(session)),
                tax_service=ZeroRateTaxService(),
            )
            result = await use_case.execute(today)

        execution_time_ms = int((time.time() - start_time) * 1000)

        if result.is_err():
            logger.error(
                f"Recurring invoice run failed after {execution_time_ms}ms: "
                f"{result.error.code} - {result.error.reason}"
            )
            raise RecurringInvoiceRunError(result.error)

        run = result.value
        logger.info(
            f"Recurring invoice run complete: "
            f"{run.invoices_created} created, {run.skipped} skipped, "
            f"{run.candidates} candidates, {execution_time_ms}ms"
        )
        return run

    async def run_forever(self, check_interval_seconds: Optional[int] = None):
        """
        Run generation repeatedly

        A failed run is logged and retried on the next cycle.

        Args:
            check_interval_seconds: Seconds between runs (default: config, daily)
        """
        interval = check_interval_seconds or ApplicationConfig.RECURRING_INVOICES_INTERVAL_SECONDS
        logger.info(f"Starting continuous recurring invoice generation with {interval}s interval")

        while True:
            try:
                await self.run_once()
            except RecurringInvoiceRunError as e:
                logger.error(f"Recurring invoice cycle failed: {e}")

            await asyncio.sleep(interval)

    async def shutdown(self):
        """Cleanup resources"""
        await self.engine.dispose()
        logger.info("RecurringInvoiceWorker shutdown complete")


async def main(argv=None) -> int:
    """
    Entry point for running the worker as a standalone script

    Usage:
        # Run for today
        python -m src.worker.recurring_invoices

        # Run for a specific date
        python -m src.worker.recurring_invoices --date 2024-03-05

        # Run continuously
        python -m src.worker.recurring_invoices --continuous

    Returns:
        Process exit status (0 success, 1 failure)
    """
    import sys
    import argparse

    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )

    parser = argparse.ArgumentParser(description="Recurring Invoice Worker")
    parser.add_argument("--date", type=date.fromisoformat, help="Run date (YYYY-MM-DD)")
    parser.add_argument(
        "--continuous", action="store_true", help="Run continuously"
    )
    args = parser.parse_args(argv)

    if not ApplicationConfig.RECURRING_INVOICES_ENABLED:
        logger.info("Recurring invoice generation is disabled")
        return 0

    worker = RecurringInvoiceWorker()

    try:
        if args.continuous:
            await worker.run_forever()
        else:
            run = await worker.run_once(today=args.date)
            print(f"Recurring invoice generation complete:")
            print(f"  Run date: {run.run_date.isoformat()}")
            print(f"  Candidates: {run.candidates}")
            print(f"  Skipped: {run.skipped}")
            print(f"  Invoices created: {run.invoices_created}")
            for invoice in run.invoices:
                print(
                    f"    {invoice.invoice_number}  {invoice.client_name}  "
                    f"{invoice.service_name}  {invoice.amount}"
                )
        return 0
    except RecurringInvoiceRunError as e:
        print(f"Recurring invoice generation failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Received shutdown signal")
        return 0
    finally:
        await worker.shutdown()


if __name__ == "__main__":
    import sys

    sys.exit(asyncio.run(main()))
