"""
Test infrastructure for the Blog API.

Strategy
--------
- SQLite in-memory via aiosqlite, so no Postgres instance is needed.
- StaticPool makes every task share one connection; an in-memory SQLite
  database only exists for the connection that created it.
- The app's get_db dependency is overridden so every request uses the
  test session factory.
- All tables are created before each test and dropped after it.
"""
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db, json_serializer
from app.main import app
from app.middleware import install_query_counter
from app.models import User
from app.repositories import BlogRepository, UserRepository
from app.services.blog_service import BlogService

# ---------------------------------------------------------------------------
# Test database engine — SQLite in-memory with aiosqlite
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
    json_serializer=json_serializer,
)

install_query_counter(engine_test)

async_session_test = async_sessionmaker(
    engine_test,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ---------------------------------------------------------------------------
# Dependency override — replace production get_db with the test session factory
# ---------------------------------------------------------------------------

async def override_get_db():
    async with async_session_test() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


app.dependency_overrides[get_db] = override_get_db


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

class RecordingReporter:
    """Collects (message, status) pairs passed to the service's reporter."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, int]] = []

    def __call__(self, message: str, status: int) -> None:
        self.calls.append((message, status))


@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Create all tables before each test, drop after to guarantee isolation."""
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def db_session() -> AsyncSession:
    """Yield a live AsyncSession for tests that work below the HTTP layer."""
    async with async_session_test() as session:
        yield session


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def blog_service(db_session: AsyncSession, reporter: RecordingReporter) -> BlogService:
    return BlogService(BlogRepository(db_session), UserRepository(db_session), reporter=reporter)


@pytest_asyncio.fixture
async def make_user(db_session: AsyncSession):
    """Factory fixture: persist a user and return it."""
    counter = 0

    async def _make(first_name: str = "Jane", last_name: str = "Janssen") -> User:
        nonlocal counter
        counter += 1
        user = User(first_name=first_name, last_name=last_name, email=f"user{counter}@example.com")
        db_session.add(user)
        await db_session.flush()
        return user

    return _make


@pytest_asyncio.fixture
async def async_client() -> AsyncClient:
    """Yield an httpx.AsyncClient wired to the FastAPI app via ASGITransport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
