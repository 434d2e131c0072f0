"""Service Plan Domain Entity

Priced offering a client subscribes to. Reference data for invoicing.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import Numeric, String
from src.domain.base import BaseModel, id_column, timestamp_column, utc_now


class ServicePlan(BaseModel, table=True):
    """
    Service Plan - Priced internet service offering

    Domain Rules:
    - price is the amount billed once per billing cycle
    - Plans are not modified by invoicing
    """

    __tablename__ = "service_plans"

    id: Optional[int] = Field(
        default=None,
        sa_column=id_column(),
        description="Unique plan identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Plan name (e.g., 'Fiber 100')"
    )

    price: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="Price per billing cycle"
    )

    billing_cycle: str = Field(
        default="monthly",
        sa_column=Column(String(20), nullable=False, default="monthly"),
        description="Billing cycle label (e.g., monthly)"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=timestamp_column(),
        description="Plan creation timestamp"
    )
