"""System Setting Use Cases

Read and upsert system-wide key/value settings. Values are stored as text;
interpretation (for example the billing defaults) happens where they are read.
"""

import logging
from typing import List, Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.system_setting_repository import SystemSettingRepository
from .dtos import SystemSettingDTO

logger = logging.getLogger(__name__)


class ListSettings:

    def __init__(self, settings_repo: SystemSettingRepository):
        self.settings_repo = settings_repo

    async def execute(self) -> Result[List[SystemSettingDTO]]:
        settings = await self.settings_repo.list_all()
        return Return.ok([SystemSettingDTO.model_validate(s) for s in settings])


class GetSetting:

    def __init__(self, settings_repo: SystemSettingRepository):
        self.settings_repo = settings_repo

    async def execute(self, key: str) -> Result[SystemSettingDTO]:
        setting = await self.settings_repo.get_by_key(key)
        if not setting:
            return Return.err(
                Error(
                    code="SETTING_NOT_FOUND",
                    message=f"Setting {key} not found",
                )
            )
        return Return.ok(SystemSettingDTO.model_validate(setting))


class UpdateSetting:
    """
    Use Case: Create or replace a setting value

    The value is stored as given; a junk value for a billing default is
    accepted here and ignored when billing settings are resolved.
    """

    def __init__(self, uow: UnitOfWork, settings_repo: SystemSettingRepository):
        self.uow = uow
        self.settings_repo = settings_repo

    async def execute(self, key: str, value: Optional[str]) -> Result[SystemSettingDTO]:
        if not key or not key.strip():
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Setting key is required",
                )
            )

        try:
            setting = await self.settings_repo.upsert(key, value)
            await self.uow.commit()
            logger.info(f"Setting {key} updated")
            return Return.ok(SystemSettingDTO.model_validate(setting))
        except Exception as e:
            await self.uow.rollback()
            logger.exception(f"Failed to update setting {key}")
            return Return.err(
                Error(
                    code="UPDATE_SETTING_FAILED",
                    message="Failed to update setting",
                    reason=str(e),
                )
            )
