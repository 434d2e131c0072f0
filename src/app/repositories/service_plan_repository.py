"""Service Plan Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.service_plan import ServicePlan


class ServicePlanRepository(ABC):
    """Repository interface for ServicePlan persistence"""

    @abstractmethod
    async def create(self, plan: ServicePlan) -> ServicePlan:
        pass

    @abstractmethod
    async def get_by_id(self, plan_id: int) -> Optional[ServicePlan]:
        pass
