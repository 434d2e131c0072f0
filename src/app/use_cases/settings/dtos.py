"""Data Transfer Objects for System Setting Use Cases"""

from datetime import datetime
from typing import Optional
from src.app.use_cases.dtos import CamelModel


class SystemSettingDTO(CamelModel):
    key: str
    value: Optional[str] = None
    updated_at: datetime
