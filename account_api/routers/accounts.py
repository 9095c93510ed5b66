"""
Accounts router: account retrieval endpoint.

    GET /accounts/{account_id}  Get one account's owner, balance and currency

Every request runs the same three steps, in order:

  1. Validate the path id (400 on failure; the store is never touched)
  2. Look the account up through the AccountStore, exactly once
  3. Classify the outcome: 200 with the account, 404, or 500

The id is taken as a raw string rather than an int path parameter so
that malformed ids are answered with 400 by our own validator instead
of FastAPI's generic 422.
"""

from fastapi import APIRouter, Depends

from account_api.config import settings
from account_api.dependencies import get_account_store
from account_api.repositories.base import AccountStore
from account_api.schemas.account import AccountResponse
from account_api.services import account_service
from account_api.validation import parse_account_id

router = APIRouter()


@router.get(
    "/{account_id}",
    response_model=AccountResponse,
    summary="Get account details",
    responses={
        400: {"description": "Account id is not a positive integer"},
        404: {"description": "No account with this id"},
        500: {"description": "Account storage failure"},
    },
)
async def get_account(
    account_id: str,
    store: AccountStore = Depends(get_account_store),
):
    """
    Get the owner, balance and currency of a single account.
    """
    validated_id = parse_account_id(account_id)
    return await account_service.fetch_account(
        store,
        validated_id,
        timeout=settings.LOOKUP_TIMEOUT_SECONDS,
    )
