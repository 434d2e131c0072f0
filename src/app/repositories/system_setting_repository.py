"""System Setting Repository Interface"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional
from src.domain.system_setting import SystemSetting


class SystemSettingRepository(ABC):
    """
    Repository interface for SystemSetting persistence

    Values are raw strings; typed parsing lives in the billing settings resolver.
    """

    @abstractmethod
    async def get_values(self, keys: Iterable[str]) -> Dict[str, Optional[str]]:
        """
        Retrieve raw values for the given keys

        Args:
            keys: Setting keys to look up

        Returns:
            Mapping of key to raw value for the keys that exist
        """
        pass

    @abstractmethod
    async def get_by_key(self, key: str) -> Optional[SystemSetting]:
        pass

    @abstractmethod
    async def list_all(self) -> List[SystemSetting]:
        pass

    @abstractmethod
    async def upsert(self, key: str, value: Optional[str]) -> SystemSetting:
        """
        Insert the setting or overwrite its value

        Args:
            key: Setting key
            value: Raw value to store

        Returns:
            Stored SystemSetting
        """
        pass
