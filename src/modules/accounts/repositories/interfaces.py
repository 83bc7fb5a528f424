"""Account repository interface.

Extends ``IRepository[Account, int]`` (keyed by account number) with the
customer back-reference look-ups used by fetch and delete.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.accounts.models import Account


class IAccountRepository(IRepository["Account", int]):
    """Repository contract for the Account record."""

    @abstractmethod
    def get_by_customer_id(self, customer_id: int) -> Optional[Account]:
        """Retrieve the account that references ``customer_id``."""

    @abstractmethod
    def delete_by_customer_id(self, customer_id: int) -> int:
        """Remove every account referencing ``customer_id``.

        Returns the number of rows removed.
        """
