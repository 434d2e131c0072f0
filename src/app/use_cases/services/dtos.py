"""Data Transfer Objects for Client Service Use Cases"""

from datetime import date, datetime
from typing import Optional
from pydantic import Field
from src.app.use_cases.dtos import CamelModel


class ProvisionServiceCommandDTO(CamelModel):
    """
    Command DTO for provisioning a client service

    Blank username or password are filled with generated credentials.
    """

    client_id: int = Field(..., description="Owning client")

    service_plan_id: int = Field(..., description="Subscribed plan")

    username: Optional[str] = Field(
        default=None,
        description="RADIUS username (generated when blank)"
    )

    password: Optional[str] = Field(
        default=None,
        description="RADIUS password (generated when blank)"
    )

    activation_date: Optional[date] = None

    recurring_billing_enabled: bool = True

    billing_day_of_month: Optional[int] = Field(
        default=None,
        ge=1,
        le=28,
        description="Per-service billing day override"
    )

    days_until_due: Optional[int] = Field(
        default=None,
        ge=0,
        description="Per-service days-to-pay override"
    )

    notes: Optional[str] = None


class ClientServiceDTO(CamelModel):
    id: int
    client_id: int
    service_plan_id: int
    username: str
    password: str
    status: str
    recurring_billing_enabled: bool
    billing_day_of_month: Optional[int] = None
    days_until_due: Optional[int] = None
    last_invoice_date: Optional[date] = None
    activation_date: Optional[date] = None
    notes: Optional[str] = None
    created_at: datetime


class CredentialsDTO(CamelModel):
    username: str
    password: str
