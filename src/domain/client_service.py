"""Client Service Domain Entity

A client's subscription to a service plan, provisioned with RADIUS
credentials and optionally billed on a recurring basis.
"""

from datetime import datetime, date
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, Boolean, CheckConstraint, Date, ForeignKey, Integer, String
from src.domain.base import BaseModel, id_column, timestamp_column, utc_now


class ServiceStatus(str, Enum):
    """Client service status types"""
    ACTIVE = "active"
    SUSPENDED = "suspended"
    CANCELLED = "cancelled"


class ClientService(BaseModel, table=True):
    """
    Client Service - Subscription of a client to a plan

    Domain Rules:
    - username is unique (it is the RADIUS login)
    - billing_day_of_month override must be within 1..28
    - last_invoice_date is only advanced by recurring invoice generation
    - Only active services with recurring billing enabled are invoiced
    """

    __tablename__ = "client_services"
    __table_args__ = (
        CheckConstraint(
            'billing_day_of_month IS NULL OR (billing_day_of_month >= 1 AND billing_day_of_month <= 28)',
            name='billing_day_in_range',
        ),
        CheckConstraint('days_until_due IS NULL OR days_until_due >= 0', name='days_until_due_non_negative'),
        Index('ix_client_services_client_id', 'client_id'),
        Index('ix_client_services_status', 'status'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=id_column(),
        description="Unique service identifier (auto-increment)"
    )

    client_id: int = Field(
        sa_column=Column(BigInteger, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Client"
    )

    service_plan_id: int = Field(
        sa_column=Column(BigInteger, ForeignKey("service_plans.id"), nullable=False),
        description="Foreign key to ServicePlan"
    )

    username: str = Field(
        sa_column=Column(String(64), nullable=False, unique=True),
        description="RADIUS username"
    )

    password: str = Field(
        sa_column=Column(String(64), nullable=False),
        description="RADIUS password"
    )

    status: ServiceStatus = Field(
        default=ServiceStatus.ACTIVE,
        description="Service status (active, suspended, cancelled)"
    )

    recurring_billing_enabled: bool = Field(
        default=True,
        sa_column=Column(Boolean, nullable=False, default=True),
        description="Whether recurring invoice generation considers this service"
    )

    billing_day_of_month: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, nullable=True),
        description="Per-service billing day override (1-28, None = system default)"
    )

    days_until_due: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, nullable=True),
        description="Per-service days-to-pay override (None = system default)"
    )

    last_invoice_date: Optional[date] = Field(
        default=None,
        sa_column=Column(Date, nullable=True),
        description="Issue date of the most recent recurring invoice"
    )

    activation_date: Optional[date] = Field(
        default=None,
        sa_column=Column(Date, nullable=True),
        description="Date the service was activated"
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(String(500), nullable=True),
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=timestamp_column(),
        description="Service creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=timestamp_column(),
        description="Last update timestamp"
    )

    def invoiced_in_month(self, on: date) -> bool:
        """True if the last recurring invoice falls in the calendar month of `on`"""
        if self.last_invoice_date is None:
            return False
        return (
            self.last_invoice_date.year == on.year
            and self.last_invoice_date.month == on.month
        )
