"""Invoice Domain Entity

Tracks client invoices and how much of each has been paid.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, Date, ForeignKey, Numeric, String, Text
from src.domain.base import BaseModel, id_column, timestamp_column, utc_now


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class Invoice(BaseModel, table=True):
    """
    Invoice - Amount billed to a client

    Domain Rules:
    - invoice_number must be unique
    - total = subtotal + tax
    - amount_paid is the running sum of payment allocations and never exceeds total
    - Status becomes paid once amount_paid >= total
    - At most one recurring invoice per (client_service_id, billing_period)
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_client_id', 'client_id'),
        Index('ix_invoices_status', 'status'),
        Index('ix_invoices_invoice_number', 'invoice_number', unique=True),
        Index('ux_invoices_service_period', 'client_service_id', 'billing_period', unique=True),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=id_column(),
        description="Unique invoice identifier (auto-increment)"
    )

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Unique invoice number (e.g., INV-2024-000001)"
    )

    client_id: int = Field(
        sa_column=Column(BigInteger, ForeignKey("clients.id"), nullable=False),
        description="Foreign key to Client"
    )

    client_service_id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigInteger, ForeignKey("client_services.id", ondelete="SET NULL"), nullable=True),
        description="Service billed by a recurring invoice (None for manual invoices)"
    )

    billing_period: Optional[str] = Field(
        default=None,
        sa_column=Column(String(7), nullable=True),
        description="Billing month of a recurring invoice (YYYY-MM)"
    )

    issue_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Issue date"
    )

    due_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Payment due date"
    )

    subtotal: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
    )

    tax: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(12, 2), nullable=False, default=0),
    )

    total: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
    )

    amount_paid: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(12, 2), nullable=False, default=0),
        description="Sum of payment allocations received"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.PENDING,
        description="Invoice status (pending, paid, overdue, cancelled)"
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=timestamp_column(),
        description="Invoice creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=timestamp_column(),
        description="Last update timestamp"
    )

    @property
    def amount_due(self) -> Decimal:
        """Outstanding balance; cancelled invoices owe nothing"""
        if self.status == InvoiceStatus.CANCELLED:
            return Decimal("0.00")
        due = Decimal(self.total) - Decimal(self.amount_paid or 0)
        return due if due > 0 else Decimal("0.00")
