"""
Pytest fixtures - in-memory store, repository, rule services, API client.
Challenge: Isolated tests; every test gets a fresh store, nothing touches Redis.
"""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from freelancehub.db.repositories import Repository
from freelancehub.db.store import InMemoryStore
from freelancehub.main import create_app
from freelancehub.schemas.user import User
from freelancehub.services.auth_service import AuthService
from freelancehub.services.booking_service import BookingService
from freelancehub.services.catalog_service import CatalogService
from freelancehub.services.profile_service import ProfileService


class TickingClock:
    """Deterministic clock: each call returns a time one minute after the last."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(minutes=1)):
        self.current = start or datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current += self.step
        return value


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def repo(store: InMemoryStore) -> Repository:
    return Repository(store)


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def auth(repo: Repository, clock: TickingClock) -> AuthService:
    return AuthService(repo, clock)


@pytest.fixture
def catalog(repo: Repository, clock: TickingClock) -> CatalogService:
    return CatalogService(repo, clock)


@pytest.fixture
def bookings(repo: Repository, clock: TickingClock) -> BookingService:
    return BookingService(repo, clock)


@pytest.fixture
def profiles(repo: Repository) -> ProfileService:
    return ProfileService(repo)


@pytest_asyncio.fixture
async def alice(auth: AuthService) -> User:
    return await auth.register("alice@x.com", "secret", "Alice", "client")


@pytest_asyncio.fixture
async def bob(auth: AuthService) -> User:
    return await auth.register("bob@x.com", "secret", "Bob", "freelancer")


@pytest_asyncio.fixture
async def client():
    app = create_app(Repository(InMemoryStore()))
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
