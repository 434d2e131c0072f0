"""Request schemas for Payment API

Pydantic models for validating incoming HTTP requests. Bodies are camelCase.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelRequestSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InvoiceAllocationSchema(CamelRequestSchema):
    invoice_id: int = Field(..., description="Invoice to allocate to")
    amount: Decimal = Field(..., description="Requested allocation amount")


class RegisterPaymentRequestSchema(CamelRequestSchema):
    """
    Request schema for registering a payment

    Used for POST /payments endpoint. Presence of amount, payment date and
    payment method is checked by the use case so the caller gets one
    readable validation message.
    """

    client_id: int = Field(
        ...,
        description="Paying client (required)"
    )

    amount: Optional[Decimal] = Field(
        default=None,
        description="Amount received (required, must be > 0)"
    )

    payment_date: Optional[date] = Field(
        default=None,
        description="Date the money was received (required)"
    )

    payment_method: Optional[str] = Field(
        default=None,
        description="Payment method (required, e.g., 'cash', 'bank_transfer')"
    )

    transaction_id: Optional[str] = Field(
        default=None,
        max_length=100,
        description="External transaction reference"
    )

    notes: Optional[str] = None

    invoice_allocations: List[InvoiceAllocationSchema] = Field(
        default_factory=list,
        description="Ordered allocation requests"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "clientId": 42,
                "amount": "120.00",
                "paymentDate": "2024-03-05",
                "paymentMethod": "bank_transfer",
                "transactionId": "TRX-88231",
                "invoiceAllocations": [
                    {"invoiceId": 1001, "amount": "100.00"}
                ]
            }
        }


class InvoicePaymentRequestSchema(CamelRequestSchema):
    """
    Request schema for paying a single invoice

    Used for POST /invoices/{invoice_id}/payments endpoint.
    """

    amount: Optional[Decimal] = None
    payment_date: Optional[date] = None
    payment_method: Optional[str] = None
    transaction_id: Optional[str] = Field(default=None, max_length=100)
    notes: Optional[str] = None
