"""Django ORM implementation of the Account repository.

Satisfies ``IAccountRepository`` using Django's QuerySet API.
Look-ups return ``None`` for missing rows; the Service Layer decides how
to report them.
"""

from __future__ import annotations

from typing import Optional

import structlog
from django.db import transaction

from modules.accounts.models import Account
from modules.accounts.repositories.interfaces import IAccountRepository

logger = structlog.get_logger(__name__)


class AccountDjangoRepository(IAccountRepository):
    """Concrete Account repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Account]:
        """Retrieve an account by account number."""
        try:
            return Account.objects.filter(account_number=id).first()
        except (TypeError, ValueError):
            return None

    def get_by_customer_id(self, customer_id: int) -> Optional[Account]:
        return Account.objects.filter(customer_id=customer_id).first()

    @transaction.atomic
    def save(self, entity: Account) -> Account:
        """Persist (create or update) an account.

        New accounts are written with ``force_insert`` so an account number
        that is already taken raises ``IntegrityError`` instead of silently
        overwriting the existing row.
        """
        is_new = entity._state.adding
        entity.save(force_insert=is_new)
        logger.info(
            "account.saved",
            account_number=entity.account_number,
            customer_id=entity.customer_id,
            is_new=is_new,
        )
        return entity

    @transaction.atomic
    def delete_by_customer_id(self, customer_id: int) -> int:
        deleted, _ = Account.objects.filter(customer_id=customer_id).delete()
        logger.info("account.deleted", customer_id=customer_id, count=deleted)
        return deleted
