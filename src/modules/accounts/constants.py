"""Account domain constants.

Account numbers are ten digits and always start with ``1``: a random
offset below ``ACCOUNT_NUMBER_RANGE`` is added to ``ACCOUNT_NUMBER_BASE``.
"""

from __future__ import annotations

from dataclasses import dataclass

from django.conf import settings

ACCOUNT_NUMBER_BASE = 1_000_000_000
ACCOUNT_NUMBER_RANGE = 90_000_000

STATUS_200 = "200"
MESSAGE_200 = "Request processed successfully"
STATUS_201 = "201"
MESSAGE_201 = "Account created successfully"
STATUS_417 = "417"
MESSAGE_417_UPDATE = "Update operation failed. Please try again or contact Dev team"
MESSAGE_417_DELETE = "Delete operation failed. Please try again or contact Dev team"


@dataclass(frozen=True)
class AccountDefaults:
    """Values stamped on every newly opened account."""

    account_type: str
    branch_address: str

    @classmethod
    def from_settings(cls) -> AccountDefaults:
        return cls(
            account_type=settings.ACCOUNTS_DEFAULT_TYPE,
            branch_address=settings.ACCOUNTS_DEFAULT_BRANCH_ADDRESS,
        )
