import os

# Set test environment
os.environ["DEBUG"] = "true"
os.environ["AUTH_ENABLED"] = "true"
os.environ["AUTH_USERNAME"] = "admin"
os.environ["AUTH_PASSWORD"] = "s3cret-pass"
os.environ["AUTH_SECRET"] = "test-signing-secret"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:////tmp/navhive_test_app.db"

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from navhive.config import AuthConfig
from navhive.database import Base, enable_sqlite_foreign_keys, get_db
from navhive.main import app
from navhive.models import Group, Site
from navhive.services.token_service import TokenService, get_token_service

TEST_USERNAME = "admin"
TEST_PASSWORD = "s3cret-pass"
TEST_SECRET = "test-signing-secret"


@pytest_asyncio.fixture(scope="function")
async def async_engine(tmp_path):
    """Create async engine for each test, on a throwaway SQLite file by default."""
    database_url = os.getenv(
        "TEST_DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'navhive_test.db'}"
    )
    engine = create_async_engine(database_url, echo=False)
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for each test."""
    async_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session_maker() as session:
        yield session


@pytest.fixture
def auth_config() -> AuthConfig:
    return AuthConfig(
        enabled=True,
        username=TEST_USERNAME,
        password=TEST_PASSWORD,
        secret=TEST_SECRET,
    )


@pytest.fixture
def token_service(auth_config: AuthConfig) -> TokenService:
    return TokenService(auth_config)


@pytest_asyncio.fixture(scope="function")
async def client(
    db_session: AsyncSession, token_service: TokenService
) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client with database session and auth overrides."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_token_service] = lambda: token_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(token_service: TokenService) -> dict[str, str]:
    """Create authorization headers for authenticated requests."""
    token = token_service.issue(TEST_USERNAME)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def test_groups(db_session: AsyncSession) -> list[Group]:
    """Three groups at order_num 0, 1, 2."""
    groups = [Group(name=f"Group {i}", order_num=i) for i in range(3)]
    db_session.add_all(groups)
    await db_session.commit()
    for group in groups:
        await db_session.refresh(group)
    return groups


@pytest_asyncio.fixture
async def test_sites(db_session: AsyncSession, test_groups: list[Group]) -> list[Site]:
    """Three sites in the first group at order_num 0, 1, 2."""
    sites = [
        Site(
            group_id=test_groups[0].id,
            name=f"Site {i}",
            url=f"https://example{i}.com",
            order_num=i,
        )
        for i in range(3)
    ]
    db_session.add_all(sites)
    await db_session.commit()
    for site in sites:
        await db_session.refresh(site)
    return sites
