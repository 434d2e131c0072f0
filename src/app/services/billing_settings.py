"""Billing Settings Resolver

Turns the untyped system_settings rows into one typed BillingSettings value
and applies per-service overrides on top of it.
"""

import re
from typing import Optional
from pydantic import BaseModel, Field
from src.app.repositories.system_setting_repository import SystemSettingRepository
from src.domain.client_service import ClientService
from src.domain.system_setting import DEFAULT_BILLING_DAY_KEY, DEFAULT_DAYS_TO_PAY_KEY

FALLBACK_BILLING_DAY = 1
FALLBACK_DAYS_TO_PAY = 15

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_setting_int(raw: Optional[str], default: int) -> int:
    """
    Parse the leading integer of a raw setting value

    Absent, non-numeric and non-positive values yield the default.

    Examples:
        parse_setting_int("10", 1) -> 10
        parse_setting_int("20 days", 15) -> 20
        parse_setting_int("abc", 15) -> 15
        parse_setting_int("0", 1) -> 1
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(str(raw))
    if not match:
        return default
    value = int(match.group(1))
    return value if value > 0 else default


class BillingSettings(BaseModel):
    """
    Effective system-wide billing defaults
    """

    default_billing_day: int = Field(
        default=FALLBACK_BILLING_DAY,
        description="Day of month services without an override are billed"
    )

    default_days_to_pay: int = Field(
        default=FALLBACK_DAYS_TO_PAY,
        description="Days between issue and due date without an override"
    )

    def billing_day_for(self, service: ClientService) -> int:
        """Effective billing day: service override, else system default"""
        if service.billing_day_of_month is not None:
            return service.billing_day_of_month
        return self.default_billing_day

    def days_until_due_for(self, service: ClientService) -> int:
        """Effective days until due: service override, else system default"""
        if service.days_until_due is not None:
            return service.days_until_due
        return self.default_days_to_pay


class BillingSettingsResolver:
    """
    Reads default_billing_day and default_days_to_pay from the settings store

    Store errors propagate to the caller.
    """

    def __init__(self, settings_repo: SystemSettingRepository):
        self.settings_repo = settings_repo

    async def resolve(self) -> BillingSettings:
        values = await self.settings_repo.get_values(
            [DEFAULT_BILLING_DAY_KEY, DEFAULT_DAYS_TO_PAY_KEY]
        )
        return BillingSettings(
            default_billing_day=parse_setting_int(
                values.get(DEFAULT_BILLING_DAY_KEY), FALLBACK_BILLING_DAY
            ),
            default_days_to_pay=parse_setting_int(
                values.get(DEFAULT_DAYS_TO_PAY_KEY), FALLBACK_DAYS_TO_PAY
            ),
        )
