"""SQLAlchemy System Setting Repository Implementation"""

from typing import Dict, Iterable, List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.system_setting_repository import SystemSettingRepository
from src.domain.base import utc_now
from src.domain.system_setting import SystemSetting


class SqlAlchemySystemSettingRepository(SystemSettingRepository):
    """
    SQLAlchemy implementation of SystemSettingRepository
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_values(self, keys: Iterable[str]) -> Dict[str, Optional[str]]:
        """
        Retrieve raw values for the given keys in a single query

        Args:
            keys: Setting keys to look up

        Returns:
            Mapping of key to raw value for the keys that exist
        """
        statement = select(SystemSetting).where(SystemSetting.key.in_(list(keys)))
        result = await self.session.execute(statement)
        return {setting.key: setting.value for setting in result.scalars().all()}

    async def get_by_key(self, key: str) -> Optional[SystemSetting]:
        result = await self.session.execute(
            select(SystemSetting).where(SystemSetting.key == key)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> List[SystemSetting]:
        result = await self.session.execute(select(SystemSetting).order_by(SystemSetting.key))
        return list(result.scalars().all())

    async def upsert(self, key: str, value: Optional[str]) -> SystemSetting:
        setting = await self.get_by_key(key)
        if setting is None:
            setting = SystemSetting(key=key, value=value)
        else:
            setting.value = value
            setting.updated_at = utc_now()
        self.session.add(setting)
        await self.session.flush()
        await self.session.refresh(setting)
        return setting
