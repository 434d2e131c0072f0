"""SQLAlchemy RADIUS Repository Implementation"""

from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.radius_repository import RadiusRepository
from src.domain.radius import RadCheck


class SqlAlchemyRadiusRepository(RadiusRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def add_check(self, check: RadCheck) -> RadCheck:
        self.session.add(check)
        await self.session.flush()
        return check
