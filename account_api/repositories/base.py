"""Account store interface."""

from abc import ABC, abstractmethod

from account_api.models.account import Account


class AccountStore(ABC):
    """
    Read access to persisted accounts.

    Implementations must keep the two failure modes apart so the caller
    can classify them:

      - AccountNotFoundError: no account has the requested id
      - BackendFailureError: anything else went wrong in the backend

    Lookups are awaited by the caller, which may cancel them (request
    disconnect, lookup timeout). Implementations must not shield the
    underlying I/O from cancellation.
    """

    @abstractmethod
    async def get_account(self, account_id: int) -> Account:
        """
        Fetch one account by id.

        Args:
            account_id: A validated, positive account id.

        Returns:
            The matching Account.

        Raises:
            AccountNotFoundError: If no row matches.
            BackendFailureError: On any other storage fault.
        """
