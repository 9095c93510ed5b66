"""
FastAPI dependencies shared by the routers.

Route handlers depend on the AccountStore interface, never on a concrete
backend. get_account_store() wires the production SQLAlchemy store to
the per-request session; tests replace it through
app.dependency_overrides to drive the handler against a substitute.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from account_api.database import get_db
from account_api.repositories.base import AccountStore
from account_api.repositories.sqlalchemy_store import SQLAlchemyAccountStore


async def get_account_store(
    db: AsyncSession = Depends(get_db),
) -> AccountStore:
    """Provide the account store for the current request."""
    return SQLAlchemyAccountStore(db)
