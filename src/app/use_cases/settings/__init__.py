from .manage_settings import ListSettings, GetSetting, UpdateSetting
from .dtos import SystemSettingDTO

__all__ = ["ListSettings", "GetSetting", "UpdateSetting", "SystemSettingDTO"]
