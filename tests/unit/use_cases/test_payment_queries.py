"""Unit tests for payment lookups and the single-invoice payment entry point"""

import pytest
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from libs.result import Return
from src.app.use_cases.payments import (
    GetClientCredit,
    GetPayment,
    ListClientPayments,
    RecordInvoicePayment,
)
from src.domain.client import Client
from src.domain.invoice import Invoice
from src.domain.payment import Payment, PaymentAllocation


def make_payment(payment_id: int, payment_date: date) -> Payment:
    return Payment(
        id=payment_id,
        client_id=3,
        amount=Decimal("20.00"),
        payment_date=payment_date,
        payment_method="cash",
        created_at=datetime(2024, 3, 10, 9, 0, 0),
    )


@pytest.fixture
def mock_payment_repo():
    return MagicMock()


@pytest.fixture
def mock_allocation_repo():
    return MagicMock()


@pytest.mark.asyncio
class TestListClientPayments:

    async def test_page_with_allocations(self, mock_payment_repo, mock_allocation_repo):
        payments = [make_payment(2, date(2024, 3, 5)), make_payment(1, date(2024, 3, 1))]
        mock_payment_repo.get_by_client_id = AsyncMock(return_value=payments)
        mock_payment_repo.count_by_client_id = AsyncMock(return_value=5)
        mock_allocation_repo.get_by_payment_ids = AsyncMock(
            return_value={2: [(PaymentAllocation(payment_id=2, invoice_id=9, amount=Decimal("20.00")), "INV-2024-000009")]}
        )

        result = await ListClientPayments(mock_payment_repo, mock_allocation_repo).execute(3, page=2, limit=2)

        assert result.is_ok()
        history = result.value
        assert history.pagination.total_count == 5
        assert history.pagination.total_pages == 3
        assert history.payments[0].allocations[0].invoice_number == "INV-2024-000009"
        assert history.payments[1].allocations == []
        mock_payment_repo.get_by_client_id.assert_awaited_once_with(3, limit=2, offset=2)

    async def test_limit_is_capped(self, mock_payment_repo, mock_allocation_repo):
        mock_payment_repo.get_by_client_id = AsyncMock(return_value=[])
        mock_payment_repo.count_by_client_id = AsyncMock(return_value=0)
        mock_allocation_repo.get_by_payment_ids = AsyncMock(return_value={})

        result = await ListClientPayments(mock_payment_repo, mock_allocation_repo).execute(3, page=0, limit=500)

        assert result.value.pagination.page == 1
        assert result.value.pagination.limit == 100
        assert result.value.pagination.total_pages == 0


@pytest.mark.asyncio
class TestPaymentLookups:

    async def test_payment_not_found(self, mock_payment_repo, mock_allocation_repo):
        mock_payment_repo.get_by_id = AsyncMock(return_value=None)

        result = await GetPayment(mock_payment_repo, mock_allocation_repo).execute(42)

        assert result.error.code == "PAYMENT_NOT_FOUND"

    async def test_client_credit(self):
        repo = MagicMock()
        repo.get_by_id = AsyncMock(
            return_value=Client(id=3, client_code="CLI-0003", company_name="Acme", credit_balance=Decimal("12.5"))
        )

        result = await GetClientCredit(repo).execute(3)

        assert result.value.credit_balance == Decimal("12.50")

    async def test_client_credit_unknown_client(self):
        repo = MagicMock()
        repo.get_by_id = AsyncMock(return_value=None)

        result = await GetClientCredit(repo).execute(3)

        assert result.error.code == "CLIENT_NOT_FOUND"


@pytest.mark.asyncio
class TestRecordInvoicePayment:

    async def test_delegates_single_full_allocation(self):
        invoice_repo = MagicMock()
        invoice_repo.get_by_id = AsyncMock(
            return_value=Invoice(
                id=9,
                invoice_number="INV-2024-000009",
                client_id=3,
                issue_date=date(2024, 3, 1),
                due_date=date(2024, 3, 16),
                subtotal=Decimal("100.00"),
                total=Decimal("100.00"),
            )
        )
        register_payment = MagicMock()
        register_payment.execute = AsyncMock(return_value=Return.ok("registered"))

        result = await RecordInvoicePayment(invoice_repo, register_payment).execute(
            9, amount=Decimal("150.00"), payment_date=date(2024, 3, 10), payment_method="cash"
        )

        assert result.value == "registered"
        command = register_payment.execute.call_args.args[0]
        assert command.client_id == 3
        assert command.amount == Decimal("150.00")
        assert [(a.invoice_id, a.amount) for a in command.invoice_allocations] == [(9, Decimal("150.00"))]

    async def test_unknown_invoice(self):
        invoice_repo = MagicMock()
        invoice_repo.get_by_id = AsyncMock(return_value=None)
        register_payment = MagicMock()
        register_payment.execute = AsyncMock()

        result = await RecordInvoicePayment(invoice_repo, register_payment).execute(
            9, amount=Decimal("10.00"), payment_date=date(2024, 3, 10), payment_method="cash"
        )

        assert result.error.code == "INVOICE_NOT_FOUND"
        register_payment.execute.assert_not_awaited()
