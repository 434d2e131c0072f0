import pytest
import pytest_asyncio
from datetime import date
from decimal import Decimal
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.depends import get_session
from src.domain import Client, ServicePlan, ClientService


class ApiTestConfig(ApplicationConfig):
    API_PREFIX = ""
    ENABLE_LOGGING_MIDDLEWARE = False
    ENABLE_SENTRY = 0
    ENVIRONMENT = "test"


@pytest_asyncio.fixture(scope="function")
async def engine():
    """In-memory SQLite engine shared by every connection of one test"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        echo=False,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    """Create test client with database session override"""
    from src.api.app import create_app

    app = create_app(ApiTestConfig)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def billing_client(db_session):
    """Client without credit"""
    record = Client(client_code="CLI-0001", company_name="Acme Corp", email="billing@acme.test")
    db_session.add(record)
    await db_session.commit()
    await db_session.refresh(record)
    return record


@pytest_asyncio.fixture
async def fiber_plan(db_session):
    plan = ServicePlan(name="Fiber 100", price=Decimal("29.99"), billing_cycle="monthly")
    db_session.add(plan)
    await db_session.commit()
    await db_session.refresh(plan)
    return plan


@pytest.fixture
def make_service(db_session, billing_client, fiber_plan):
    """Factory for client services of billing_client on fiber_plan"""

    async def factory(username: str, **overrides) -> ClientService:
        service = ClientService(
            client_id=billing_client.id,
            service_plan_id=fiber_plan.id,
            username=username,
            password="secret",
            activation_date=date(2024, 1, 1),
            **overrides,
        )
        db_session.add(service)
        await db_session.commit()
        await db_session.refresh(service)
        return service

    return factory
