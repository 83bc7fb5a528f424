"""Account number generation."""

from __future__ import annotations

import secrets
from typing import Callable

from modules.accounts.constants import ACCOUNT_NUMBER_BASE, ACCOUNT_NUMBER_RANGE


class AccountNumberGenerator:
    """Draws candidate account numbers in ``[1_000_000_000, 1_090_000_000)``.

    Candidates are not checked against stored accounts; the service retries
    on collision.  ``randbelow`` can be swapped for a deterministic source
    in tests.
    """

    def __init__(self, randbelow: Callable[[int], int] = secrets.randbelow) -> None:
        self._randbelow = randbelow

    def generate(self) -> int:
        return ACCOUNT_NUMBER_BASE + self._randbelow(ACCOUNT_NUMBER_RANGE)
