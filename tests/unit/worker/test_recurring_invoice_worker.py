"""Unit tests for RecurringInvoiceWorker

Tests cover:
- run_once success and failure
- run_forever keeps going after a failed cycle
- main() exit status and argument handling
"""

import asyncio
import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, patch

from libs.result import Return, Error
from src.app.use_cases.billing.dtos import GeneratedInvoiceDTO, RecurringInvoiceRunDTO
from src.worker import recurring_invoices
from src.worker.recurring_invoices import RecurringInvoiceWorker, RecurringInvoiceRunError


@pytest.fixture
def mock_session():
    """Mock async session"""
    session = MagicMock()
    session.__aenter__ = AsyncMock(return_value=session)
    session.__aexit__ = AsyncMock(return_value=False)
    return session


@pytest.fixture
def worker(mock_session):
    worker = RecurringInvoiceWorker(db_uri="sqlite+aiosqlite://")
    worker.async_session_factory = MagicMock(return_value=mock_session)
    return worker


@pytest.fixture
def sample_run():
    return RecurringInvoiceRunDTO(
        run_date=date(2024, 3, 5),
        candidates=2,
        skipped=1,
        invoices=[
            GeneratedInvoiceDTO(
                invoice_number="INV-2024-000001",
                client_name="Acme Corp",
                service_name="Fiber 100",
                amount=Decimal("29.99"),
            )
        ],
    )


@pytest.mark.asyncio
class TestRecurringInvoiceWorkerRunOnce:

    async def test_returns_run_summary(self, worker, sample_run):
        with patch.object(recurring_invoices, "GenerateRecurringInvoices") as use_case_cls:
            use_case_cls.return_value.execute = AsyncMock(return_value=Return.ok(sample_run))

            run = await worker.run_once(today=date(2024, 3, 5))

        assert run.invoices_created == 1
        assert run.skipped == 1
        use_case_cls.return_value.execute.assert_awaited_once_with(date(2024, 3, 5))

    async def test_error_result_raises(self, worker):
        error = Error(code="GENERATE_RECURRING_INVOICES_FAILED", message="Failed", reason="boom")
        with patch.object(recurring_invoices, "GenerateRecurringInvoices") as use_case_cls:
            use_case_cls.return_value.execute = AsyncMock(return_value=Return.err(error))

            with pytest.raises(RecurringInvoiceRunError) as exc_info:
                await worker.run_once()

        assert exc_info.value.error.code == "GENERATE_RECURRING_INVOICES_FAILED"

    async def test_run_forever_survives_failed_cycle(self, worker, sample_run):
        error = Error(code="INVOICE_CONFLICT", message="Conflict")
        worker.run_once = AsyncMock(side_effect=[RecurringInvoiceRunError(error), sample_run])

        with patch.object(recurring_invoices.asyncio, "sleep", AsyncMock(side_effect=[None, asyncio.CancelledError()])):
            with pytest.raises(asyncio.CancelledError):
                await worker.run_forever(check_interval_seconds=1)

        assert worker.run_once.await_count == 2


@pytest.mark.asyncio
class TestRecurringInvoiceWorkerMain:

    async def test_success_exit_status(self, sample_run, capsys):
        with patch.object(recurring_invoices, "RecurringInvoiceWorker") as worker_cls:
            worker_cls.return_value.run_once = AsyncMock(return_value=sample_run)
            worker_cls.return_value.shutdown = AsyncMock()

            status = await recurring_invoices.main(["--date", "2024-03-05"])

        assert status == 0
        worker_cls.return_value.run_once.assert_awaited_once_with(today=date(2024, 3, 5))
        worker_cls.return_value.shutdown.assert_awaited_once()
        assert "INV-2024-000001" in capsys.readouterr().out

    async def test_failure_exit_status(self):
        error = Error(code="GENERATE_RECURRING_INVOICES_FAILED", message="Failed")
        with patch.object(recurring_invoices, "RecurringInvoiceWorker") as worker_cls:
            worker_cls.return_value.run_once = AsyncMock(side_effect=RecurringInvoiceRunError(error))
            worker_cls.return_value.shutdown = AsyncMock()

            status = await recurring_invoices.main([])

        assert status == 1
        worker_cls.return_value.shutdown.assert_awaited_once()

    async def test_disabled_generation_does_nothing(self):
        with patch.object(recurring_invoices.ApplicationConfig, "RECURRING_INVOICES_ENABLED", False):
            with patch.object(recurring_invoices, "RecurringInvoiceWorker") as worker_cls:
                status = await recurring_invoices.main([])

        assert status == 0
        worker_cls.assert_not_called()
