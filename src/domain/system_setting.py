"""System Setting Domain Entity

Untyped key/value store for system-wide settings such as
default_billing_day and default_days_to_pay.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import String, Text
from src.domain.base import BaseModel, timestamp_column, utc_now


DEFAULT_BILLING_DAY_KEY = "default_billing_day"
DEFAULT_DAYS_TO_PAY_KEY = "default_days_to_pay"


class SystemSetting(BaseModel, table=True):
    """System Setting - key/value pair, values stored as text"""

    __tablename__ = "system_settings"

    key: str = Field(
        sa_column=Column(String(100), primary_key=True),
        description="Setting key"
    )

    value: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Raw setting value"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=timestamp_column(),
        description="Last update timestamp"
    )
