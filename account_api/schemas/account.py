"""
Pydantic schemas for Account endpoints.

The response body carries exactly the fields of the Account entity so a
client can rebuild an equal object from it. Monetary amounts are integer
minor units.
"""

from pydantic import BaseModel


SUPPORTED_CURRENCIES = ("USD", "EUR", "CAD")


class AccountResponse(BaseModel):
    """Public representation of a bank account."""
    id: int
    owner: str
    balance: int
    currency: str

    model_config = {"from_attributes": True}
