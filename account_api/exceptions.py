"""
Custom exception classes and FastAPI exception handlers.

The validator, the storage layer and the service layer raise domain
errors without importing HTTP concepts. The handlers registered here
translate each one into a status code and a consistent JSON body:
{"detail": "...", "error_type": "..."}.

Exception hierarchy:
    BankAPIError (base)
    ├── InvalidAccountIDError   - path id is malformed or not positive (400)
    ├── AccountNotFoundError    - well-formed id, no matching record (404)
    └── BackendFailureError     - any other storage fault (500)
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


# ---------------------------------------------------------------------------
# Base exception
# ---------------------------------------------------------------------------

class BankAPIError(Exception):
    """Base exception for all Account API domain errors."""

    def __init__(self, detail: str = "An error occurred"):
        self.detail = detail
        super().__init__(self.detail)


# ---------------------------------------------------------------------------
# Domain exceptions
# ---------------------------------------------------------------------------

class InvalidAccountIDError(BankAPIError):
    """
    Raised when the client-supplied account id cannot be used.

    Attributes:
        raw_value: The path segment exactly as received.
    """

    def __init__(self, raw_value: str, reason: str = "must be a positive integer"):
        self.raw_value = raw_value
        shown = raw_value if len(raw_value) <= 40 else raw_value[:40] + "..."
        super().__init__(f"Invalid account id {shown!r}: {reason}")


class AccountNotFoundError(BankAPIError):
    """Raised when a requested account does not exist."""

    def __init__(self, account_id: int):
        self.account_id = account_id
        super().__init__(f"Account {account_id} not found")


class BackendFailureError(BankAPIError):
    """
    Raised when the account store fails for any reason other than a
    missing row (lost connection, driver error, timeout, ...).

    The detail is deliberately generic; the underlying cause is kept on
    ``__cause__`` for logging only.
    """

    def __init__(self, account_id: int):
        self.account_id = account_id
        super().__init__(f"Failed to load account {account_id}")


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register custom exception handlers with the FastAPI application.

    This is called once during app creation in main.py.
    """

    @app.exception_handler(InvalidAccountIDError)
    async def invalid_account_id_handler(
        request: Request, exc: InvalidAccountIDError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"detail": exc.detail, "error_type": "invalid_account_id"},
        )

    @app.exception_handler(AccountNotFoundError)
    async def account_not_found_handler(
        request: Request, exc: AccountNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={"detail": exc.detail, "error_type": "account_not_found"},
        )

    @app.exception_handler(BackendFailureError)
    async def backend_failure_handler(
        request: Request, exc: BackendFailureError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content={"detail": exc.detail, "error_type": "backend_failure"},
        )
