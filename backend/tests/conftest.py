from collections.abc import AsyncIterator, Iterator
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

import campus_api.models  # noqa: F401 - registers models with Base.metadata
from campus_api.db.session import Base, get_db
from campus_api.main import app
from campus_api.repositories import building as building_repository
from campus_api.repositories import campus as campus_repository

# Fixtures in other modules are only visible when registered as plugins here.
pytest_plugins = ["tests.seeds"]

TEST_DATABASE_URL = "postgresql+asyncpg://campus@localhost:5432/campus_test"

engine = create_async_engine(TEST_DATABASE_URL, poolclass=NullPool)
async_session = async_sessionmaker(engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db() -> AsyncIterator[AsyncSession]:
    """Create tables and yield a session, then drop tables after test.

    Skips the test when the Postgres test database can't be reached.
    """
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except (OSError, SQLAlchemyError) as exc:
        pytest.skip(f"test database unavailable: {exc}")

    async with async_session() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncIterator[AsyncClient]:
    """HTTP client that uses the test database session."""

    async def override_get_db() -> AsyncIterator[AsyncSession]:
        yield db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def session_stub() -> Iterator[MagicMock]:
    """Stand-in session for tests that patch the repositories."""
    yield MagicMock(spec=AsyncSession)


@pytest_asyncio.fixture
async def api_client(session_stub: MagicMock) -> AsyncIterator[AsyncClient]:
    """HTTP client over the real routers and handlers, with no database behind it."""

    async def override_get_db() -> AsyncIterator[AsyncSession]:
        yield session_stub

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()


def _patch_module(
    monkeypatch: pytest.MonkeyPatch, module: object, names: tuple[str, ...]
) -> SimpleNamespace:
    mocks = {name: AsyncMock(name=name) for name in names}
    for name, mock in mocks.items():
        monkeypatch.setattr(module, name, mock)
    return SimpleNamespace(**mocks)


@pytest.fixture
def building_repo(monkeypatch: pytest.MonkeyPatch) -> SimpleNamespace:
    """Replace every building repository function with an AsyncMock."""
    return _patch_module(
        monkeypatch,
        building_repository,
        (
            "save_building",
            "merge_building",
            "get_building",
            "list_buildings",
            "list_buildings_by_owner",
            "get_building_by_training_lead",
            "delete_building",
        ),
    )


@pytest.fixture
def campus_repo(monkeypatch: pytest.MonkeyPatch) -> SimpleNamespace:
    """Replace every campus repository function with an AsyncMock."""
    return _patch_module(
        monkeypatch,
        campus_repository,
        (
            "save_campus",
            "merge_campus",
            "get_campus",
            "list_campuses",
            "get_campus_by_name",
            "get_campus_by_training_manager",
            "get_campus_by_staging_manager",
            "get_campus_by_hr_lead",
            "delete_campus",
        ),
    )
