"""
SQLAlchemy implementation of the account store.

A single-row SELECT keyed by primary key. SQLAlchemy's NoResultFound is
the driver-independent "no such row" condition; every other
SQLAlchemyError (and OS-level connection errors raised by some drivers)
is reported as a backend failure.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from account_api.exceptions import AccountNotFoundError, BackendFailureError
from account_api.models.account import Account
from account_api.repositories.base import AccountStore


logger = logging.getLogger(__name__)


class SQLAlchemyAccountStore(AccountStore):
    """Account store backed by an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_account(self, account_id: int) -> Account:
        try:
            result = await self.db.execute(
                select(Account).where(Account.id == account_id)
            )
            return result.scalar_one()
        except NoResultFound:
            raise AccountNotFoundError(account_id) from None
        except (SQLAlchemyError, OSError) as exc:
            logger.error("Account lookup %s failed: %s", account_id, exc)
            raise BackendFailureError(account_id) from exc
