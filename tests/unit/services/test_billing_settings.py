"""Unit tests for billing settings resolution"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.services.billing_settings import (
    BillingSettings,
    BillingSettingsResolver,
    parse_setting_int,
)
from src.domain.client_service import ClientService


class TestParseSettingInt:

    @pytest.mark.parametrize(
        "raw,default,expected",
        [
            ("10", 1, 10),
            (" 7", 1, 7),
            ("20 days", 15, 20),
            ("abc", 15, 15),
            ("", 15, 15),
            (None, 1, 1),
            ("0", 1, 1),
            ("-5", 15, 15),
        ],
    )
    def test_parse(self, raw, default, expected):
        assert parse_setting_int(raw, default) == expected


class TestBillingSettings:

    def test_service_overrides_win(self):
        settings = BillingSettings(default_billing_day=10, default_days_to_pay=30)
        service = ClientService(username="u", password="p", client_id=1, service_plan_id=1,
                                billing_day_of_month=5, days_until_due=7)

        assert settings.billing_day_for(service) == 5
        assert settings.days_until_due_for(service) == 7

    def test_defaults_apply_without_overrides(self):
        settings = BillingSettings(default_billing_day=10, default_days_to_pay=30)
        service = ClientService(username="u", password="p", client_id=1, service_plan_id=1)

        assert settings.billing_day_for(service) == 10
        assert settings.days_until_due_for(service) == 30

    def test_zero_days_override_is_respected(self):
        settings = BillingSettings()
        service = ClientService(username="u", password="p", client_id=1, service_plan_id=1,
                                days_until_due=0)

        assert settings.days_until_due_for(service) == 0


@pytest.mark.asyncio
class TestBillingSettingsResolver:

    async def test_missing_settings_use_fallbacks(self):
        repo = MagicMock()
        repo.get_values = AsyncMock(return_value={})

        settings = await BillingSettingsResolver(repo).resolve()

        assert settings.default_billing_day == 1
        assert settings.default_days_to_pay == 15

    async def test_stored_values_are_parsed(self):
        repo = MagicMock()
        repo.get_values = AsyncMock(
            return_value={"default_billing_day": "12", "default_days_to_pay": "junk"}
        )

        settings = await BillingSettingsResolver(repo).resolve()

        assert settings.default_billing_day == 12
        assert settings.default_days_to_pay == 15
        repo.get_values.assert_awaited_once_with(["default_billing_day", "default_days_to_pay"])

    async def test_store_errors_propagate(self):
        repo = MagicMock()
        repo.get_values = AsyncMock(side_effect=RuntimeError("database unavailable"))

        with pytest.raises(RuntimeError):
            await BillingSettingsResolver(repo).resolve()
