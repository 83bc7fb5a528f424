"""Customer model.

A customer is the identity half of a provisioned account:
- ``customer_id`` is assigned by the database on first save.
- ``mobile_number`` is the natural external key.  ``unique=True`` makes the
  database the final arbiter of duplicates; the account service turns the
  resulting ``IntegrityError`` into a ``DuplicateEntity`` error.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import AuditedModel


class Customer(AuditedModel):
    """Account holder identity record."""

    customer_id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=100)
    email = models.EmailField(max_length=254)
    mobile_number = models.CharField(max_length=20, unique=True)

    class Meta:
        db_table = "customers"
        ordering = ["customer_id"]

    def __str__(self) -> str:
        suffix = self.mobile_number[-4:] if self.mobile_number else "????"
        return f"{self.name} (mobile: ******{suffix})"
