"""Unit tests for RegisterPayment use case

Tests cover:
- Validation before any write
- Ordered, clamped allocations and credit overflow
- Ownership check and overflow rejection with rollback
- Error mapping for database failures
"""

import pytest
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from sqlalchemy.exc import IntegrityError

from src.app.use_cases.payments.register_payment import RegisterPayment
from src.app.use_cases.payments.dtos import RegisterPaymentCommandDTO, InvoiceAllocationDTO
from src.domain.client import Client
from src.domain.invoice import Invoice, InvoiceStatus


def make_invoice(invoice_id: int, total: str, paid: str = "0.00") -> Invoice:
    return Invoice(
        id=invoice_id,
        invoice_number=f"INV-2024-{invoice_id:06d}",
        client_id=3,
        issue_date=date(2024, 3, 1),
        due_date=date(2024, 3, 16),
        subtotal=Decimal(total),
        tax=Decimal("0.00"),
        total=Decimal(total),
        amount_paid=Decimal(paid),
        status=InvoiceStatus.PENDING,
    )


def command(amount="120.00", allocations=(), **overrides) -> RegisterPaymentCommandDTO:
    values = dict(
        client_id=3,
        amount=Decimal(amount) if amount is not None else None,
        payment_date=date(2024, 3, 10),
        payment_method="cash",
        invoice_allocations=[
            InvoiceAllocationDTO(invoice_id=invoice_id, amount=Decimal(value))
            for invoice_id, value in allocations
        ],
    )
    values.update(overrides)
    return RegisterPaymentCommandDTO(**values)


@pytest.fixture
def sample_client():
    return Client(id=3, client_code="CLI-0003", company_name="Acme Corp", credit_balance=Decimal("5.00"))


@pytest.fixture
def mock_client_repo(sample_client):
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=sample_client)

    async def add_credit(client, amount):
        client.credit_balance = client.credit_balance + amount
        return client

    repo.add_credit = AsyncMock(side_effect=add_credit)
    return repo


@pytest.fixture
def invoices():
    return {}


@pytest.fixture
def mock_invoice_repo(invoices):
    repo = MagicMock()
    repo.get_for_client = AsyncMock(side_effect=lambda invoice_id, client_id, for_update=False: invoices.get(invoice_id))
    repo.update = AsyncMock(side_effect=lambda invoice: invoice)
    return repo


@pytest.fixture
def mock_payment_repo():
    repo = MagicMock()

    async def create(payment):
        payment.id = 501
        payment.created_at = datetime(2024, 3, 10, 9, 0, 0)
        return payment

    repo.create = AsyncMock(side_effect=create)
    return repo


@pytest.fixture
def mock_allocation_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=lambda allocation: allocation)
    return repo


@pytest.fixture
def use_case(mock_uow, mock_client_repo, mock_invoice_repo, mock_payment_repo, mock_allocation_repo):
    return RegisterPayment(
        uow=mock_uow,
        client_repo=mock_client_repo,
        invoice_repo=mock_invoice_repo,
        payment_repo=mock_payment_repo,
        allocation_repo=mock_allocation_repo,
    )


@pytest.mark.asyncio
class TestRegisterPaymentValidation:

    @pytest.mark.parametrize(
        "overrides",
        [
            {"amount": None},
            {"payment_date": None},
            {"payment_method": None},
            {"payment_method": ""},
        ],
    )
    async def test_missing_required_field(self, use_case, mock_payment_repo, mock_uow, overrides):
        result = await use_case.execute(command(**overrides))

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        assert result.error.message == "Client ID, amount, payment date, and payment method are required"
        mock_payment_repo.create.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()

    @pytest.mark.parametrize("amount", ["0", "-10.00", "0.001", "0.004"])
    async def test_non_positive_amount(self, use_case, mock_payment_repo, amount):
        result = await use_case.execute(command(amount=amount))

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        assert result.error.message == "Payment amount must be greater than zero"
        mock_payment_repo.create.assert_not_awaited()


@pytest.mark.asyncio
class TestRegisterPaymentAllocation:

    async def test_allocates_and_credits_remainder(
        self, use_case, mock_uow, mock_client_repo, mock_allocation_repo, invoices
    ):
        """
        Given: Client with 5.00 credit and a 100.00 invoice
        When: 120.00 is paid with 100.00 allocated
        Then: Invoice paid, 20.00 added to credit (25.00 total)
        """
        invoices[1] = make_invoice(1, "100.00")

        result = await use_case.execute(command("120.00", [(1, "100.00")]))

        assert result.is_ok()
        assert result.value.total_allocated == Decimal("100.00")
        assert result.value.credit_added == Decimal("20.00")
        assert result.value.current_credit == Decimal("25.00")
        assert result.value.payment.id == 501

        assert invoices[1].amount_paid == Decimal("100.00")
        assert invoices[1].status == InvoiceStatus.PAID
        mock_client_repo.get_by_id.assert_awaited_once_with(3, for_update=True)
        mock_allocation_repo.create.assert_awaited_once()
        mock_uow.commit.assert_awaited_once()

    async def test_clamps_to_amount_due(self, use_case, mock_allocation_repo, invoices):
        invoices[1] = make_invoice(1, "100.00", paid="50.00")

        result = await use_case.execute(command("80.00", [(1, "80.00")]))

        allocation = mock_allocation_repo.create.call_args.args[0]
        assert allocation.amount == Decimal("50.00")
        assert result.value.credit_added == Decimal("30.00")
        assert invoices[1].status == InvoiceStatus.PAID

    async def test_skips_non_positive_requests_and_settled_invoices(
        self, use_case, mock_allocation_repo, mock_invoice_repo, invoices
    ):
        invoices[1] = make_invoice(1, "100.00", paid="100.00")
        invoices[2] = make_invoice(2, "40.00")

        result = await use_case.execute(command("40.00", [(2, "0"), (1, "10.00"), (2, "40.00")]))

        assert result.value.total_allocated == Decimal("40.00")
        assert mock_allocation_repo.create.await_count == 1
        assert mock_invoice_repo.get_for_client.await_count == 2

    async def test_allocations_follow_request_order(self, use_case, mock_allocation_repo, invoices):
        invoices[1] = make_invoice(1, "30.00")
        invoices[2] = make_invoice(2, "30.00")

        await use_case.execute(command("60.00", [(2, "30.00"), (1, "30.00")]))

        allocated = [call.args[0].invoice_id for call in mock_allocation_repo.create.call_args_list]
        assert allocated == [2, 1]

    async def test_no_allocations_credits_everything(self, use_case, mock_client_repo):
        result = await use_case.execute(command("15.00"))

        assert result.value.total_allocated == Decimal("0.00")
        assert result.value.credit_added == Decimal("15.00")
        mock_client_repo.add_credit.assert_awaited_once()

    async def test_fully_allocated_payment_adds_no_credit(self, use_case, mock_client_repo, invoices):
        invoices[1] = make_invoice(1, "15.00")

        result = await use_case.execute(command("15.00", [(1, "15.00")]))

        assert result.value.credit_added == Decimal("0.00")
        mock_client_repo.add_credit.assert_not_awaited()


@pytest.mark.asyncio
class TestRegisterPaymentErrors:

    async def test_unknown_client(self, use_case, mock_uow, mock_client_repo, mock_payment_repo):
        mock_client_repo.get_by_id = AsyncMock(return_value=None)

        result = await use_case.execute(command())

        assert result.error.code == "CLIENT_NOT_FOUND"
        mock_payment_repo.create.assert_not_awaited()
        mock_uow.rollback.assert_awaited_once()

    async def test_foreign_invoice_aborts(self, use_case, mock_uow, mock_client_repo, invoices):
        invoices[1] = make_invoice(1, "30.00")

        result = await use_case.execute(command("60.00", [(1, "30.00"), (77, "30.00")]))

        assert result.is_err()
        assert result.error.code == "INVOICE_NOT_FOUND"
        assert "77" in result.error.message
        mock_uow.rollback.assert_awaited_once()
        mock_uow.commit.assert_not_awaited()
        mock_client_repo.add_credit.assert_not_awaited()

    async def test_allocations_exceeding_payment_rejected(self, use_case, mock_uow, invoices):
        invoices[1] = make_invoice(1, "40.00")
        invoices[2] = make_invoice(2, "40.00")

        result = await use_case.execute(command("50.00", [(1, "40.00"), (2, "40.00")]))

        assert result.error.code == "ALLOCATION_EXCEEDS_PAYMENT"
        mock_uow.rollback.assert_awaited_once()
        mock_uow.commit.assert_not_awaited()

    async def test_overflow_error_does_not_read_rows_after_rollback(self, use_case, mock_uow, invoices):
        invoices[1] = make_invoice(1, "40.00")
        invoices[2] = make_invoice(2, "40.00")

        def expire_rows():
            for invoice in invoices.values():
                invoice.id = None

        mock_uow.rollback = AsyncMock(side_effect=expire_rows)

        result = await use_case.execute(command("50.00", [(1, "40.00"), (2, "40.00")]))

        assert result.error.code == "ALLOCATION_EXCEEDS_PAYMENT"
        assert "invoice 2" in result.error.reason

    async def test_integrity_error_maps_to_conflict(self, use_case, mock_uow, mock_payment_repo):
        mock_payment_repo.create = AsyncMock(
            side_effect=IntegrityError("INSERT INTO payments", {}, Exception("check constraint"))
        )

        result = await use_case.execute(command())

        assert result.error.code == "PAYMENT_CONFLICT"
        mock_uow.rollback.assert_awaited_once()

    async def test_unexpected_error_is_generic_failure(self, use_case, mock_uow, mock_payment_repo):
        mock_payment_repo.create = AsyncMock(side_effect=RuntimeError("connection reset"))

        result = await use_case.execute(command())

        assert result.error.code == "REGISTER_PAYMENT_FAILED"
        assert result.error.reason == "connection reset"
        mock_uow.rollback.assert_awaited_once()
