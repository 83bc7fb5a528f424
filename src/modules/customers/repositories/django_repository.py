"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising, and the Service Layer decides how to translate a
missing customer into a domain error.  Integrity errors from ``save``
propagate untouched.
"""

from __future__ import annotations

from typing import Optional

import structlog
from django.db import transaction

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Customer]:
        """Retrieve a customer by primary key.

        Returns ``None`` for non-existent or non-numeric IDs.
        """
        try:
            return Customer.objects.filter(customer_id=id).first()
        except (TypeError, ValueError):
            return None

    def get_by_mobile_number(self, mobile_number: str) -> Optional[Customer]:
        """Retrieve a customer by mobile number."""
        return Customer.objects.filter(mobile_number=mobile_number).first()

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        """Persist (create or update) a customer.

        Runs in its own savepoint so a unique-constraint violation leaves
        the caller's transaction usable.
        """
        is_new = entity._state.adding
        entity.save()
        logger.info(
            "customer.saved",
            customer_id=entity.customer_id,
            is_new=is_new,
        )
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Hard-delete a customer by ID."""
        deleted, _ = Customer.objects.filter(customer_id=id).delete()
        logger.info("customer.deleted", customer_id=id, deleted=bool(deleted))
        return bool(deleted)
