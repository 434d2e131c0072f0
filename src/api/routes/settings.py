"""Settings API Routes

FastAPI routes for system-wide key/value settings.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.service_request import UpdateSettingRequestSchema
from src.app.use_cases.settings import ListSettings, GetSetting, UpdateSetting, SystemSettingDTO
from src.adapter.repositories import SqlAlchemySystemSettingRepository
from src.adapter.services import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError, status_for

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("", response_model=List[SystemSettingDTO], status_code=status.HTTP_200_OK)
async def list_settings(session: AsyncSession = Depends(get_session)):
    """All settings ordered by key."""
    result = await ListSettings(SqlAlchemySystemSettingRepository(session)).execute()
    return result.value


@router.get(
    "/{key}",
    response_model=SystemSettingDTO,
    status_code=status.HTTP_200_OK,
    responses={404: {"description": "Setting not found"}},
)
async def get_setting(key: str, session: AsyncSession = Depends(get_session)):
    result = await GetSetting(SqlAlchemySystemSettingRepository(session)).execute(key)

    if result.is_err():
        raise ClientError(result.error, status_code=status_for(result.error))

    return result.value


@router.put("/{key}", response_model=SystemSettingDTO, status_code=status.HTTP_200_OK)
async def update_setting(
    key: str,
    request: UpdateSettingRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Create or replace a setting.

    `default_billing_day` and `default_days_to_pay` drive recurring invoice
    generation; values that are not positive integers fall back to the
    built-in defaults (1 and 15) when invoices are generated.
    """
    use_case = UpdateSetting(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemySystemSettingRepository(session),
    )
    result = await use_case.execute(key, request.value)

    if result.is_err():
        raise ClientError(result.error, status_code=status_for(result.error))

    return result.value
