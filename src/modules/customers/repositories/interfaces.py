"""Customer repository interface.

Extends ``IRepository[Customer, int]`` with the mobile-number look-up the
account service uses as its external key, and hard deletion by identity.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer", int]):
    """Repository contract for the Customer record."""

    @abstractmethod
    def get_by_mobile_number(self, mobile_number: str) -> Optional[Customer]:
        """Retrieve a customer by mobile number."""

    @abstractmethod
    def delete(self, id: int) -> bool:
        """Remove a customer by identity.

        Returns whether a row was removed.
        """
