"""Payment API Routes

FastAPI routes for payment registration and client payment lookups.
"""

from typing import List
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.payment_request import RegisterPaymentRequestSchema
from src.app.use_cases.payments import (
    RegisterPayment,
    GetUnpaidInvoices,
    GetClientCredit,
    ListClientPayments,
    GetPayment,
    InvoiceAllocationDTO,
    RegisterPaymentCommandDTO,
    RegisterPaymentResponseDTO,
    UnpaidInvoiceDTO,
    ClientCreditDTO,
    PaymentHistoryDTO,
    PaymentDetailDTO,
)
from src.adapter.repositories import (
    SqlAlchemyClientRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemyPaymentRepository,
    SqlAlchemyPaymentAllocationRepository,
)
from src.adapter.services import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError, status_for

router = APIRouter(prefix="/payments", tags=["Payments"])


def build_register_payment(session: AsyncSession) -> RegisterPayment:
    return RegisterPayment(
        uow=SqlAlchemyUnitOfWork(session),
        client_repo=SqlAlchemyClientRepository(session),
        invoice_repo=SqlAlchemyInvoiceRepository(session),
        payment_repo=SqlAlchemyPaymentRepository(session),
        allocation_repo=SqlAlchemyPaymentAllocationRepository(session),
    )


def register_payment_status(code: str) -> int:
    """Allocation against an unknown or foreign invoice is a bad request, not a missing resource"""
    if code == "CLIENT_NOT_FOUND":
        return status.HTTP_404_NOT_FOUND
    if code == "REGISTER_PAYMENT_FAILED":
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


@router.post(
    "",
    response_model=RegisterPaymentResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {
            "description": "Validation or allocation error",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVOICE_NOT_FOUND",
                            "message": "Invoice 1001 not found or does not belong to client"
                        }
                    }
                }
            }
        },
        404: {"description": "Client not found"},
    }
)
async def register_payment(
    request: RegisterPaymentRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Register a payment and allocate it to invoices.

    Allocations are applied in the order given, each clamped to the invoice's
    amount due. Whatever is not allocated is added to the client's credit.
    Nothing is written unless the whole request succeeds.

    **Request body:**
    - `clientId`, `amount` (> 0), `paymentDate`, `paymentMethod` (required)
    - `transactionId`, `notes` (optional)
    - `invoiceAllocations` (optional): `[{invoiceId, amount}]`

    **Returns:**
    - 201: `{payment, totalAllocated, creditAdded, currentCredit}`
    - 400: Missing fields, non-positive amount, invoice not owned by client,
      or allocations exceeding the payment
    - 404: Client not found
    """
    command = RegisterPaymentCommandDTO(
        client_id=request.client_id,
        amount=request.amount,
        payment_date=request.payment_date,
        payment_method=request.payment_method,
        transaction_id=request.transaction_id,
        notes=request.notes,
        invoice_allocations=[
            InvoiceAllocationDTO(invoice_id=a.invoice_id, amount=a.amount)
            for a in request.invoice_allocations
        ],
    )

    result = await build_register_payment(session).execute(command)

    if result.is_err():
        raise ClientError(result.error, status_code=register_payment_status(result.error.code))

    return result.value


@router.get(
    "/client/{client_id}/unpaid-invoices",
    response_model=List[UnpaidInvoiceDTO],
    status_code=status.HTTP_200_OK,
)
async def get_unpaid_invoices(
    client_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Invoices of a client with an amount still due, oldest due date first.
    """
    use_case = GetUnpaidInvoices(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(client_id)

    if result.is_err():
        raise ClientError(result.error, status_code=status_for(result.error))

    return result.value


@router.get(
    "/client/{client_id}/credit",
    response_model=ClientCreditDTO,
    status_code=status.HTTP_200_OK,
    responses={
        404: {
            "description": "Client not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "CLIENT_NOT_FOUND",
                            "message": "Client 42 not found"
                        }
                    }
                }
            }
        }
    }
)
async def get_client_credit(
    client_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Current credit balance of a client.
    """
    use_case = GetClientCredit(SqlAlchemyClientRepository(session))
    result = await use_case.execute(client_id)

    if result.is_err():
        raise ClientError(result.error, status_code=status_for(result.error))

    return result.value


@router.get(
    "/client/{client_id}/history",
    response_model=PaymentHistoryDTO,
    status_code=status.HTTP_200_OK,
)
async def get_payment_history(
    client_id: int,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    session: AsyncSession = Depends(get_session)
):
    """
    Payment history of a client, newest first, with allocations.

    **Query parameters:**
    - `page` (optional): Page number, default 1
    - `limit` (optional): Page size, default 20, max 100
    """
    use_case = ListClientPayments(
        SqlAlchemyPaymentRepository(session),
        SqlAlchemyPaymentAllocationRepository(session),
    )
    result = await use_case.execute(client_id, page=page, limit=limit)

    if result.is_err():
        raise ClientError(result.error, status_code=status_for(result.error))

    return result.value


@router.get(
    "/{payment_id}",
    response_model=PaymentDetailDTO,
    status_code=status.HTTP_200_OK,
    responses={404: {"description": "Payment not found"}},
)
async def get_payment(
    payment_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    A single payment with its invoice allocations.
    """
    use_case = GetPayment(
        SqlAlchemyPaymentRepository(session),
        SqlAlchemyPaymentAllocationRepository(session),
    )
    result = await use_case.execute(payment_id)

    if result.is_err():
        raise ClientError(result.error, status_code=status_for(result.error))

    return result.value
