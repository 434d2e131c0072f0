from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig


def engine_options(db_uri: str) -> dict:
    # SQLite (aiosqlite) does not take pool sizing arguments
    if db_uri.startswith("sqlite"):
        return {}
    return {"pool_size": ApplicationConfig.DB_POOL_SIZE, "pool_pre_ping": True}


engine = create_async_engine(
    ApplicationConfig.DB_URI, echo=False, future=True, **engine_options(ApplicationConfig.DB_URI)
)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session
