"""
Account service: retrieval and outcome classification.

fetch_account() is the single place where a store lookup is turned into
one of three outcomes the router can answer with:

  - the Account                      -> 200
  - AccountNotFoundError             -> 404
  - BackendFailureError              -> 500

Store implementations are expected to raise only the two domain errors,
but any other exception escaping a store is also treated as a backend
failure so it is answered with a 500 instead of crashing the request.
There are no retries: a failed lookup is reported immediately.

Cancellation (asyncio.CancelledError) is a BaseException and is never
caught here; it propagates to the in-flight lookup unchanged.
"""

import asyncio
import logging

from account_api.exceptions import AccountNotFoundError, BackendFailureError
from account_api.models.account import Account
from account_api.repositories.base import AccountStore


logger = logging.getLogger(__name__)


async def _lookup(store: AccountStore, account_id: int) -> Account:
    """Call the store once, classifying every failure it raises."""
    try:
        return await store.get_account(account_id)
    except AccountNotFoundError:
        logger.info("Account %s not found", account_id)
        raise
    except BackendFailureError:
        raise
    except Exception as exc:
        logger.exception("Unexpected error looking up account %s", account_id)
        raise BackendFailureError(account_id) from exc


async def fetch_account(
    store: AccountStore,
    account_id: int,
    timeout: float | None = None,
) -> Account:
    """
    Look up one account, calling the store exactly once.

    Args:
        store: The account store to read from.
        account_id: A validated, positive account id.
        timeout: Seconds to wait for the store before giving up.
            None waits indefinitely.

    Returns:
        The Account instance.

    Raises:
        AccountNotFoundError: If the store has no such account.
        BackendFailureError: If the store failed or timed out.
    """
    logger.debug("Fetching account %s", account_id)
    try:
        # Store errors, including its own TimeoutErrors, are already
        # classified by _lookup; only the deadline surfaces here.
        return await asyncio.wait_for(_lookup(store, account_id), timeout)
    except asyncio.TimeoutError as exc:
        logger.error("Account lookup %s timed out after %ss", account_id, timeout)
        raise BackendFailureError(account_id) from exc
