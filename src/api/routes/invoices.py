"""Invoice API Routes

FastAPI routes for single-invoice payments and invoice documents.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.schemas.payment_request import InvoicePaymentRequestSchema
from src.api.routes.payments import build_register_payment, register_payment_status
from src.app.use_cases.billing import GenerateInvoicePdf
from src.app.use_cases.payments import (
    RecordInvoicePayment,
    ListInvoicePayments,
    RegisterPaymentResponseDTO,
    InvoicePaymentDTO,
)
from src.adapter.repositories import (
    SqlAlchemyClientRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemyInvoiceItemRepository,
    SqlAlchemyPaymentAllocationRepository,
)
from src.adapter.services import ReportLabPdfService
from src.depends import get_session
from src.api.error import ClientError, status_for

router = APIRouter(prefix="/invoices", tags=["Invoices"])

INVOICE_NOT_FOUND_RESPONSE = {
    "description": "Invoice not found",
    "content": {
        "application/json": {
            "example": {
                "error": {
                    "code": "INVOICE_NOT_FOUND",
                    "message": "Invoice with ID 123 not found"
                }
            }
        }
    }
}


@router.post(
    "/{invoice_id}/payments",
    response_model=RegisterPaymentResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={404: INVOICE_NOT_FOUND_RESPONSE},
)
async def record_invoice_payment(
    invoice_id: int,
    request: InvoicePaymentRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Record a payment against a single invoice.

    Equivalent to `POST /payments` for the invoice's client with one
    allocation of the full amount; any excess over the amount due becomes
    client credit.

    **Returns:**
    - 201: `{payment, totalAllocated, creditAdded, currentCredit}`
    - 400: Missing fields or non-positive amount
    - 404: Invoice not found
    """
    use_case = RecordInvoicePayment(
        SqlAlchemyInvoiceRepository(session),
        build_register_payment(session),
    )
    result = await use_case.execute(
        invoice_id,
        amount=request.amount,
        payment_date=request.payment_date,
        payment_method=request.payment_method,
        transaction_id=request.transaction_id,
        notes=request.notes,
    )

    if result.is_err():
        if result.error.code == "INVOICE_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        raise ClientError(result.error, status_code=register_payment_status(result.error.code))

    return result.value


@router.get(
    "/{invoice_id}/payments",
    response_model=List[InvoicePaymentDTO],
    status_code=status.HTTP_200_OK,
    responses={404: INVOICE_NOT_FOUND_RESPONSE},
)
async def list_invoice_payments(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Payments allocated to an invoice, with the allocated share of each.
    """
    use_case = ListInvoicePayments(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyPaymentAllocationRepository(session),
    )
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError(result.error, status_code=status_for(result.error))

    return result.value


@router.get(
    "/{invoice_id}/pdf",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        },
        404: INVOICE_NOT_FOUND_RESPONSE,
    }
)
async def download_invoice_pdf(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Download an invoice as a PDF file.

    **Returns:**
    - 200: PDF file as binary response
    - 404: Invoice not found
    """
    use_case = GenerateInvoicePdf(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
        SqlAlchemyClientRepository(session),
        ReportLabPdfService(),
        company_name=ApplicationConfig.COMPANY_NAME,
        company_address=ApplicationConfig.COMPANY_ADDRESS,
        currency=ApplicationConfig.CURRENCY,
    )
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError(result.error, status_code=status_for(result.error))

    return Response(
        content=result.value.pdf,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename={result.value.filename}"
        }
    )
