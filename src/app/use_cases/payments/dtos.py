"""Data Transfer Objects for Payment Use Cases

Pydantic models for payment registration and payment/invoice lookups.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import Field
from src.app.use_cases.dtos import CamelModel, Money, PaginationDTO, RowModel


class InvoiceAllocationDTO(CamelModel):
    """Requested share of a payment for one invoice"""

    invoice_id: int = Field(
        ...,
        description="Invoice to allocate to (must belong to the paying client)"
    )

    amount: Decimal = Field(
        ...,
        description="Requested amount; non-positive requests are ignored"
    )


class RegisterPaymentCommandDTO(CamelModel):
    """
    Command DTO for registering a payment

    Used as input to RegisterPayment use case. Required fields are checked
    by the use case so that a missing field is a validation error, not a
    construction failure.
    """

    client_id: int = Field(
        ...,
        description="Paying client"
    )

    amount: Optional[Decimal] = Field(
        default=None,
        description="Amount received (must be > 0)"
    )

    payment_date: Optional[date] = Field(
        default=None,
        description="Date the money was received"
    )

    payment_method: Optional[str] = Field(
        default=None,
        description="Payment method (e.g., cash, bank_transfer)"
    )

    transaction_id: Optional[str] = Field(
        default=None,
        description="External transaction reference"
    )

    notes: Optional[str] = Field(
        default=None,
    )

    invoice_allocations: List[InvoiceAllocationDTO] = Field(
        default_factory=list,
        description="Ordered allocation requests"
    )


class PaymentDTO(CamelModel):
    id: int
    client_id: int
    amount: Money
    payment_date: date
    payment_method: str
    transaction_id: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime


class RegisterPaymentResponseDTO(CamelModel):
    """
    Response DTO for payment registration

    Serialized as {payment, totalAllocated, creditAdded, currentCredit}.
    """

    payment: PaymentDTO

    total_allocated: Money = Field(
        ...,
        description="Sum of amounts allocated to invoices"
    )

    credit_added: Money = Field(
        ...,
        description="Remainder banked as client credit"
    )

    current_credit: Money = Field(
        ...,
        description="Client credit balance after the payment"
    )


class UnpaidInvoiceDTO(RowModel):
    """Invoice row plus its computed amount_due"""

    id: int
    invoice_number: str
    client_id: int
    issue_date: date
    due_date: date
    subtotal: Money
    tax: Money
    total: Money
    amount_paid: Money
    amount_due: Money
    status: str


class ClientCreditDTO(CamelModel):
    client_id: int
    credit_balance: Money


class PaymentAllocationDTO(CamelModel):
    invoice_id: int
    invoice_number: str
    amount: Money


class PaymentDetailDTO(PaymentDTO):
    allocations: List[PaymentAllocationDTO] = Field(default_factory=list)


class PaymentHistoryDTO(CamelModel):
    payments: List[PaymentDetailDTO]
    pagination: PaginationDTO


class InvoicePaymentDTO(CamelModel):
    """A payment as seen from one invoice: only the allocated share counts"""

    allocation_id: int
    payment_id: int
    amount: Money
    payment_date: date
    payment_method: str
    transaction_id: Optional[str] = None
    notes: Optional[str] = None
