"""Base abstract models for the accounts service.

Provides:
- ``AuditedModel``: created/updated timestamps plus the actor that
  performed each write (``created_by`` / ``updated_by``).

Design decisions:
- The actor is read from ``settings.AUDIT_ACTOR`` on every save; the
  service has no authenticated user, so all writes are attributed to
  the service itself.
- ``created_by`` is only stamped while the row is being inserted.
- ``save()`` guard ensures the audit columns are included when
  ``update_fields`` is specified (Django skips ``auto_now`` fields otherwise).
"""

from __future__ import annotations

from django.conf import settings
from django.db import models

AUDIT_FIELDS = ("updated_at", "updated_by")


def current_auditor() -> str:
    """Return the actor recorded in the audit columns."""
    return settings.AUDIT_ACTOR


class AuditedModel(models.Model):
    """Abstract base with timestamp and actor bookkeeping."""

    created_at = models.DateTimeField(auto_now_add=True)
    created_by = models.CharField(max_length=50, editable=False)
    updated_at = models.DateTimeField(auto_now=True)
    updated_by = models.CharField(max_length=50, blank=True, default="")

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Stamp the audit actor and refresh ``updated_*`` on partial saves."""
        auditor = current_auditor()
        if self._state.adding and not self.created_by:
            self.created_by = auditor
        self.updated_by = auditor

        update_fields = kwargs.get("update_fields")
        if update_fields is not None:
            missing = [f for f in AUDIT_FIELDS if f not in update_fields]
            kwargs["update_fields"] = list(update_fields) + missing
        super().save(*args, **kwargs)
