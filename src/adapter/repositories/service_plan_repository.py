"""SQLAlchemy Service Plan Repository Implementation"""

from typing import Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.service_plan_repository import ServicePlanRepository
from src.domain.service_plan import ServicePlan


class SqlAlchemyServicePlanRepository(ServicePlanRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, plan: ServicePlan) -> ServicePlan:
        self.session.add(plan)
        await self.session.flush()
        await self.session.refresh(plan)
        return plan

    async def get_by_id(self, plan_id: int) -> Optional[ServicePlan]:
        result = await self.session.execute(select(ServicePlan).where(ServicePlan.id == plan_id))
        return result.scalar_one_or_none()
