"""Invoice Item Domain Entity

Line items within an invoice. Recurring invoices carry exactly one.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, ForeignKey, Numeric, String
from src.domain.base import BaseModel, id_column, timestamp_column, utc_now


class InvoiceItem(BaseModel, table=True):
    """
    Invoice Item - Individual line within an invoice

    Domain Rules:
    - Each item belongs to exactly one invoice
    - total = quantity * unit_price
    """

    __tablename__ = "invoice_items"
    __table_args__ = (
        Index('ix_invoice_items_invoice_id', 'invoice_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=id_column(),
        description="Unique invoice item identifier (auto-increment)"
    )

    invoice_id: int = Field(
        sa_column=Column(BigInteger, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    client_service_id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigInteger, ForeignKey("client_services.id", ondelete="SET NULL"), nullable=True),
        description="Service this line bills, if any"
    )

    description: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Line description (e.g., 'Fiber 100 - monthly billing')"
    )

    quantity: Decimal = Field(
        default=Decimal("1"),
        sa_column=Column(Numeric(10, 2), nullable=False, default=1),
    )

    unit_price: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
    )

    total: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="quantity * unit_price"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=timestamp_column(),
    )
