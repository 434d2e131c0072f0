"""RADIUS Repository Interface"""

from abc import ABC, abstractmethod
from src.domain.radius import RadCheck


class RadiusRepository(ABC):
    """Writes rows consumed by the external RADIUS server"""

    @abstractmethod
    async def add_check(self, check: RadCheck) -> RadCheck:
        pass
