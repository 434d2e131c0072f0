"""Request schemas for Service and Settings API"""

from datetime import date
from typing import Optional
from pydantic import Field
from src.api.schemas.payment_request import CamelRequestSchema


class ProvisionServiceRequestSchema(CamelRequestSchema):
    """
    Request schema for provisioning a client service

    Used for POST /services/client-services endpoint.
    """

    client_id: int = Field(..., description="Owning client (required)")

    service_plan_id: int = Field(..., description="Service plan (required)")

    username: Optional[str] = Field(
        default=None,
        max_length=64,
        description="RADIUS username, generated when blank"
    )

    password: Optional[str] = Field(
        default=None,
        max_length=64,
        description="RADIUS password, generated when blank"
    )

    activation_date: Optional[date] = None

    recurring_billing_enabled: bool = True

    billing_day_of_month: Optional[int] = Field(
        default=None,
        ge=1,
        le=28,
        description="Billing day override (1-28)"
    )

    days_until_due: Optional[int] = Field(
        default=None,
        ge=0,
        description="Days-to-pay override"
    )

    notes: Optional[str] = Field(default=None, max_length=500)

    class Config:
        json_schema_extra = {
            "example": {
                "clientId": 42,
                "servicePlanId": 3,
                "username": "",
                "password": "",
                "activationDate": "2024-03-01",
                "billingDayOfMonth": 5,
            }
        }


class UpdateSettingRequestSchema(CamelRequestSchema):
    value: Optional[str] = Field(default=None, description="Raw setting value")
