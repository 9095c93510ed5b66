"""
Test fixtures for the Account API test suite.

  - db_engine / db_session: Fresh in-memory SQLite database for each test
  - client: Async HTTP test client backed by the real SQLAlchemy store
  - make_account: Builds transient Accounts with random field values
  - store_factory: Creates unverified MockAccountStore instances
  - mock_store: Programmable AccountStore substitute, verified at teardown
  - mock_client: Async HTTP test client whose account store is mock_store

Key design decisions:
  - In-memory SQLite (sqlite+aiosqlite://) is used for speed and isolation.
    Each test gets a completely fresh database.
  - We override FastAPI dependencies (get_db, get_account_store) so the
    router code runs exactly as it does in production.
  - mock_store.verify() runs after the test body, so an unmet call-count
    expectation fails the test even if every response assertion passed.
    Each get_account() expectation is programmed up front:

        mock_store.expect_get_account(42, times=1, returns=account)
        mock_store.expect_get_account(42, times=1, raises=AccountNotFoundError(42))
        mock_store.expect_get_account(ANY, times=0)
"""

import random
import string
from dataclasses import dataclass, field
from unittest.mock import ANY

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from account_api.database import Base, get_db
from account_api.dependencies import get_account_store
from account_api.main import app
from account_api.models.account import Account
from account_api.repositories.base import AccountStore
from account_api.schemas.account import SUPPORTED_CURRENCIES


# In-memory SQLite for fast, isolated tests
TEST_DATABASE_URL = "sqlite+aiosqlite://"


# ---------------------------------------------------------------------------
# Random account values
# ---------------------------------------------------------------------------

def random_account(account_id: int | None = None) -> Account:
    """Build a transient (unsaved) Account with random field values."""
    return Account(
        id=account_id if account_id is not None else random.randint(1, 1000),
        owner="".join(random.choices(string.ascii_lowercase, k=6)),
        # Cents, occasionally negative (overdrawn)
        balance=random.randint(-10_000_00, 1_000_000_00),
        currency=random.choice(SUPPORTED_CURRENCIES),
    )


# ---------------------------------------------------------------------------
# Substitute account store
# ---------------------------------------------------------------------------

@dataclass
class Expectation:
    """One programmed get_account() behaviour."""
    account_id: object
    times: int
    returns: Account | None = None
    raises: BaseException | None = None
    calls: int = 0

    def matches(self, account_id: int) -> bool:
        return self.account_id is ANY or self.account_id == account_id


@dataclass
class MockAccountStore(AccountStore):
    """In-memory AccountStore driven by programmed expectations."""
    expectations: list[Expectation] = field(default_factory=list)
    calls: list[int] = field(default_factory=list)
    unexpected_calls: list[int] = field(default_factory=list)

    def expect_get_account(
        self,
        account_id: object,
        times: int = 1,
        returns: Account | None = None,
        raises: BaseException | None = None,
    ) -> Expectation:
        """
        Program the result of get_account(account_id).

        Pass unittest.mock.ANY as account_id to match every id. Exactly
        one of ``returns`` / ``raises`` should be given unless times=0.
        """
        if returns is not None and raises is not None:
            raise ValueError("Program either returns or raises, not both")
        expectation = Expectation(account_id, times, returns=returns, raises=raises)
        self.expectations.append(expectation)
        return expectation

    async def get_account(self, account_id: int) -> Account:
        self.calls.append(account_id)
        for expectation in self.expectations:
            if expectation.matches(account_id):
                expectation.calls += 1
                if expectation.calls > expectation.times:
                    raise AssertionError(
                        f"get_account({account_id!r}) called more than "
                        f"{expectation.times} time(s)"
                    )
                if expectation.raises is not None:
                    raise expectation.raises
                return expectation.returns
        self.unexpected_calls.append(account_id)
        raise AssertionError(f"Unexpected get_account({account_id!r}) call")

    def verify(self) -> None:
        """Assert every expectation was met exactly and nothing else was called."""
        assert not self.unexpected_calls, (
            f"Unexpected get_account calls: {self.unexpected_calls}"
        )
        for expectation in self.expectations:
            assert expectation.calls == expectation.times, (
                f"get_account({expectation.account_id!r}) expected "
                f"{expectation.times} call(s), got {expectation.calls}"
            )


@pytest_asyncio.fixture
async def db_engine():
    """Create a fresh async engine with all tables for each test."""
    engine = create_async_engine(TEST_DATABASE_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    """Provide an async session bound to the test engine."""
    async_session = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with async_session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_engine):
    """
    Async HTTP test client with the test database injected.

    This overrides the get_db dependency so all requests hit the
    in-memory test database instead of the real one.
    """
    async_session = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db():
        async with async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def make_account():
    """Factory for transient Accounts with random values."""
    return random_account


@pytest.fixture
def store_factory():
    """Factory for substitute stores the test verifies itself."""
    return MockAccountStore


@pytest.fixture
def mock_store():
    """A fresh substitute store; its expectations are checked after the test."""
    store = MockAccountStore()
    yield store
    store.verify()


@pytest_asyncio.fixture
async def mock_client(mock_store):
    """Async HTTP test client whose account store is mock_store."""
    app.dependency_overrides[get_account_store] = lambda: mock_store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
