"""Account domain exceptions.

Raised by the Service Layer when a look-up fails or a business rule is
violated.  Each error carries the entity ``kind`` and the ``field`` /
``key`` pair used for the look-up so callers can inspect it.  The API
layer (Views) catches these and translates them into HTTP responses.
"""

from __future__ import annotations

from typing import Any


class DuplicateEntity(Exception):
    """A customer with the same mobile number is already registered."""

    def __init__(self, kind: str, field: str, key: Any) -> None:
        self.kind = kind
        self.field = field
        self.key = key
        super().__init__(f"{kind} already registered with given {field} {key}")


class EntityNotFound(Exception):
    """The customer or account looked up by ``field`` does not exist."""

    def __init__(self, kind: str, field: str, key: Any) -> None:
        self.kind = kind
        self.field = field
        self.key = key
        super().__init__(
            f"{kind} not found with the given input data {field}: '{key}'"
        )


class AccountNumberUnavailable(Exception):
    """No free account number was found within the retry budget."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(
            f"Failed to generate unique account_number after {attempts} attempts"
        )
