"""Account model.

- ``account_number`` is the primary key, assigned once by the account
  service at creation time and never reassigned.
- ``customer_id`` is a plain back-reference to ``customers.Customer``
  used for look-ups only; it is intentionally not a ``ForeignKey``.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import AuditedModel


class Account(AuditedModel):
    """Financial account owned by exactly one customer."""

    account_number = models.BigIntegerField(primary_key=True)
    customer_id = models.BigIntegerField(db_index=True)
    account_type = models.CharField(max_length=100)
    branch_address = models.CharField(max_length=200)

    class Meta:
        db_table = "accounts"
        ordering = ["account_number"]

    def __str__(self) -> str:
        return f"{self.account_number} ({self.account_type})"
