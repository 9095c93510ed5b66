"""
Account storage package.

The service and router layers depend only on the AccountStore interface.
SQLAlchemyAccountStore is the production implementation; tests swap in
an in-memory substitute through the get_account_store dependency.
"""

from account_api.repositories.base import AccountStore  # noqa: F401
from account_api.repositories.sqlalchemy_store import SQLAlchemyAccountStore  # noqa: F401
