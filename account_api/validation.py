"""
Request validation for account endpoints.

Path parameters arrive as raw strings. They are validated here, before any
storage access, so a malformed id never reaches the account store.
"""

import logging

from account_api.exceptions import InvalidAccountIDError


logger = logging.getLogger(__name__)

# Ids are assigned by the database starting at 1 and stored as signed 64-bit
MIN_ACCOUNT_ID = 1
MAX_ACCOUNT_ID = 2**63 - 1

_MAX_ID_DIGITS = len(str(MAX_ACCOUNT_ID))


def parse_account_id(raw: str) -> int:
    """
    Parse and constrain an account id taken from the URL path.

    Only plain ASCII digits are accepted, with an optional leading minus
    sign so negative ids get a range error rather than a format error.
    Whitespace, "+" and underscores, which int() would tolerate, are
    rejected. Leading zeros are ignored.

    Raises:
        InvalidAccountIDError: If the value is not an integer or falls
            outside [MIN_ACCOUNT_ID, MAX_ACCOUNT_ID].
    """
    negative = raw.startswith("-")
    digits = raw[1:] if negative else raw
    if not digits or not digits.isascii() or not digits.isdigit():
        logger.debug("Rejected non-integer account id %.40r", raw)
        raise InvalidAccountIDError(raw)

    # Length check before int(): very long digit strings exceed the
    # interpreter's int conversion limit.
    significant = digits.lstrip("0") or "0"
    if negative or len(significant) > _MAX_ID_DIGITS:
        account_id = None
    else:
        account_id = int(significant)

    if account_id is None or not MIN_ACCOUNT_ID <= account_id <= MAX_ACCOUNT_ID:
        logger.debug("Rejected out-of-range account id %.40r", raw)
        raise InvalidAccountIDError(
            raw, f"must be between {MIN_ACCOUNT_ID} and {MAX_ACCOUNT_ID}"
        )
    return account_id
