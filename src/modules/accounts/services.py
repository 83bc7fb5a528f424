"""Account provisioning service layer (Use Cases).

Keeps exactly one Account per Customer across create, fetch, update and
delete, delegating persistence to the injected ``ICustomerRepository``
and ``IAccountRepository``.

Rules enforced here:
- The mobile number identifies a customer; a second registration with the
  same number fails with ``DuplicateEntity``.  The look-up is a fast path,
  the unique index on ``mobile_number`` is authoritative.
- Every command is atomic: the customer and account writes of create (and
  the two deletes of delete) commit or roll back together.
- Account numbers are random; collisions are retried up to
  ``max_retries`` times.
- Update locates the account by its own number and the customer through
  the account's ``customer_id``, never through the mobile number in the
  request.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import structlog
from django.conf import settings
from django.db import IntegrityError, transaction

from modules.accounts.constants import AccountDefaults
from modules.accounts.exceptions import (
    AccountNumberUnavailable,
    DuplicateEntity,
    EntityNotFound,
)
from modules.accounts.generators import AccountNumberGenerator
from modules.accounts.mappers import (
    to_account_model,
    to_customer_dto,
    to_customer_model,
)
from modules.accounts.models import Account
from modules.customers.models import Customer

if TYPE_CHECKING:
    from modules.accounts.dtos import CustomerDTO
    from modules.accounts.repositories.interfaces import IAccountRepository
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class AccountService:
    """Application service for account provisioning use-cases.

    Receives both repositories via constructor injection (DIP).  The
    generator, the new-account defaults and the retry budget fall back
    to settings when not supplied.
    """

    def __init__(
        self,
        customer_repository: ICustomerRepository,
        account_repository: IAccountRepository,
        generator: Optional[AccountNumberGenerator] = None,
        defaults: Optional[AccountDefaults] = None,
        max_retries: Optional[int] = None,
    ) -> None:
        self._customer_repo = customer_repository
        self._account_repo = account_repository
        self._generator = generator or AccountNumberGenerator()
        self._defaults = defaults or AccountDefaults.from_settings()
        self._max_retries = (
            max_retries
            if max_retries is not None
            else settings.ACCOUNT_NUMBER_MAX_RETRIES
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_account(self, dto: CustomerDTO) -> None:
        """Register a customer and open their account.

        Raises:
            DuplicateEntity: if the mobile number is already registered.
            AccountNumberUnavailable: if no free account number was found.
        """
        log = logger.bind(mobile_suffix=dto.mobile_number[-4:])

        if self._customer_repo.get_by_mobile_number(dto.mobile_number):
            log.warning("customer.duplicate_mobile_number")
            raise DuplicateEntity("Customer", "mobile_number", dto.mobile_number)

        try:
            customer = self._customer_repo.save(to_customer_model(dto, Customer()))
        except IntegrityError as exc:
            log.warning("customer.duplicate_mobile_number", detected_by="constraint")
            raise DuplicateEntity(
                "Customer", "mobile_number", dto.mobile_number
            ) from exc

        account = self._open_account(customer)
        log.info(
            "account.created",
            customer_id=customer.customer_id,
            account_number=account.account_number,
        )

    @transaction.atomic
    def update_account(self, dto: CustomerDTO) -> bool:
        """Overwrite an account and its owning customer.

        Returns ``False`` without writing anything when ``dto`` carries no
        account sub-view.

        Raises:
            EntityNotFound: if the account number, or the customer it
                references, does not exist.
            DuplicateEntity: if the new mobile number belongs to another
                customer.
        """
        account_dto = dto.account
        if account_dto is None:
            logger.info("account.update_skipped", reason="no_account_details")
            return False

        account = self._account_repo.get_by_id(account_dto.account_number)
        if account is None:
            raise EntityNotFound(
                "Account", "account_number", account_dto.account_number
            )
        account = self._account_repo.save(to_account_model(account_dto, account))

        customer_id = account.customer_id
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFound("Customer", "customer_id", customer_id)

        try:
            self._customer_repo.save(to_customer_model(dto, customer))
        except IntegrityError as exc:
            logger.warning(
                "customer.duplicate_mobile_number",
                customer_id=customer_id,
                detected_by="constraint",
            )
            raise DuplicateEntity(
                "Customer", "mobile_number", dto.mobile_number
            ) from exc

        logger.info(
            "account.updated",
            account_number=account.account_number,
            customer_id=customer_id,
        )
        return True

    @transaction.atomic
    def delete_account(self, mobile_number: str) -> bool:
        """Remove a customer together with their accounts.

        Always returns ``True`` once the customer has been found.

        Raises:
            EntityNotFound: if no customer has this mobile number.
        """
        customer = self._customer_repo.get_by_mobile_number(mobile_number)
        if customer is None:
            raise EntityNotFound("Customer", "mobile_number", mobile_number)

        customer_id = customer.customer_id
        self._account_repo.delete_by_customer_id(customer_id)
        self._customer_repo.delete(customer_id)
        logger.info("account.deleted", customer_id=customer_id)
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def fetch_account(self, mobile_number: str) -> CustomerDTO:
        """Return the customer and account details for a mobile number.

        Raises:
            EntityNotFound: if the customer, or their account, is missing.
        """
        customer = self._customer_repo.get_by_mobile_number(mobile_number)
        if customer is None:
            raise EntityNotFound("Customer", "mobile_number", mobile_number)

        account = self._account_repo.get_by_customer_id(customer.customer_id)
        if account is None:
            raise EntityNotFound("Account", "customer_id", customer.customer_id)

        logger.info("account.retrieved", customer_id=customer.customer_id)
        return to_customer_dto(customer, account)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _open_account(self, customer: Customer) -> Account:
        for attempt in range(1, self._max_retries + 1):
            candidate = self._generator.generate()
            if self._account_repo.get_by_id(candidate) is not None:
                logger.warning("account.number_collision", attempt=attempt)
                continue

            account = Account(
                account_number=candidate,
                customer_id=customer.customer_id,
                account_type=self._defaults.account_type,
                branch_address=self._defaults.branch_address,
            )
            try:
                return self._account_repo.save(account)
            except IntegrityError:
                logger.warning(
                    "account.number_collision", attempt=attempt, detected_by="constraint"
                )

        raise AccountNumberUnavailable(self._max_retries)
