"""Payment Domain Entities

A Payment records money received from a client. PaymentAllocations link
a payment to the invoices it settles; any unallocated remainder becomes
client credit.
"""

from datetime import datetime, date
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, CheckConstraint, Date, ForeignKey, Numeric, String, Text
from src.domain.base import BaseModel, id_column, timestamp_column, utc_now


class Payment(BaseModel, table=True):
    """
    Payment - Money received from a client

    Domain Rules:
    - amount must be positive
    - Payments are immutable once created
    - Sum of allocations never exceeds amount
    """

    __tablename__ = "payments"
    __table_args__ = (
        CheckConstraint('amount > 0', name='payment_amount_positive'),
        Index('ix_payments_client_id', 'client_id'),
        Index('ix_payments_payment_date', 'payment_date'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=id_column(),
        description="Unique payment identifier (auto-increment)"
    )

    client_id: int = Field(
        sa_column=Column(BigInteger, ForeignKey("clients.id"), nullable=False),
        description="Foreign key to Client"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="Amount received"
    )

    payment_date: date = Field(
        sa_column=Column(Date, nullable=False),
    )

    payment_method: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Payment method (e.g., cash, bank_transfer, card)"
    )

    transaction_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="External transaction reference"
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=timestamp_column(),
        description="Payment registration timestamp (immutable)"
    )


class PaymentAllocation(BaseModel, table=True):
    """
    Payment Allocation - Portion of a payment applied to one invoice

    Domain Rules:
    - amount is positive and never exceeds the invoice's amount due at allocation time
    """

    __tablename__ = "payment_allocations"
    __table_args__ = (
        CheckConstraint('amount > 0', name='allocation_amount_positive'),
        Index('ix_payment_allocations_payment_id', 'payment_id'),
        Index('ix_payment_allocations_invoice_id', 'invoice_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=id_column(),
    )

    payment_id: int = Field(
        sa_column=Column(BigInteger, ForeignKey("payments.id", ondelete="CASCADE"), nullable=False),
    )

    invoice_id: int = Field(
        sa_column=Column(BigInteger, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=timestamp_column(),
    )
