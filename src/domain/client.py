"""Client Domain Entity

The billing party of the ISP. Holds the running credit balance produced
when payments exceed the amounts allocated to invoices.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import CheckConstraint, Numeric, String
from src.domain.base import BaseModel, id_column, timestamp_column, utc_now


class ClientStatus(str, Enum):
    """Client status types"""
    ACTIVE = "active"
    INACTIVE = "inactive"


class Client(BaseModel, table=True):
    """
    Client - ISP customer and billing party

    Domain Rules:
    - client_code is unique
    - credit_balance must be non-negative
    - credit_balance is only adjusted by payment registration
    """

    __tablename__ = "clients"
    __table_args__ = (
        CheckConstraint('credit_balance >= 0', name='credit_balance_non_negative'),
        Index('ix_clients_status', 'status'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=id_column(),
        description="Unique client identifier (auto-increment)"
    )

    client_code: str = Field(
        sa_column=Column(String(50), nullable=False, unique=True),
        description="Human-readable client code (e.g., CL-0001)"
    )

    company_name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Display name used on invoices"
    )

    email: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Billing contact email"
    )

    status: ClientStatus = Field(
        default=ClientStatus.ACTIVE,
        description="Client status (active, inactive)"
    )

    credit_balance: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(12, 2), nullable=False, default=0),
        description="Unallocated payment surplus (must be >= 0)"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=timestamp_column(),
        description="Client creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=timestamp_column(),
        description="Last update timestamp"
    )
