"""Unit tests for AccountService.

Covers:
- create_account: happy path, duplicate mobile number (look-up and
  constraint), account defaults, account number collisions.
- fetch_account: happy path, missing customer, missing account.
- update_account: no account details, missing account, missing customer,
  customer resolved through the account, mobile number collision.
- delete_account: happy path, missing customer, unconditional ``True``.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from django.db import IntegrityError

from modules.accounts.constants import AccountDefaults
from modules.accounts.dtos import AccountDTO, CustomerDTO
from modules.accounts.exceptions import (
    AccountNumberUnavailable,
    DuplicateEntity,
    EntityNotFound,
)
from modules.accounts.models import Account
from modules.accounts.services import AccountService
from modules.customers.models import Customer

pytestmark = pytest.mark.unit

MOBILE = "9876543210"
ACCOUNT_NUMBER = 1_012_345_678
DEFAULTS = AccountDefaults(account_type="Savings", branch_address="1 Test Plaza")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def customer_repo():
    return MagicMock()


@pytest.fixture()
def account_repo():
    repo = MagicMock()
    repo.get_by_id.return_value = None
    return repo


@pytest.fixture()
def generator():
    gen = MagicMock()
    gen.generate.return_value = ACCOUNT_NUMBER
    return gen


@pytest.fixture()
def service(customer_repo, account_repo, generator):
    return AccountService(
        customer_repository=customer_repo,
        account_repository=account_repo,
        generator=generator,
        defaults=DEFAULTS,
        max_retries=3,
    )


def _saved_customer(customer: Customer) -> Customer:
    customer.customer_id = 17
    return customer


def _make_customer(**overrides) -> Customer:
    defaults = {
        "customer_id": 17,
        "name": "John Doe",
        "email": "john@x.com",
        "mobile_number": MOBILE,
    }
    defaults.update(overrides)
    return Customer(**defaults)


def _make_account(**overrides) -> Account:
    defaults = {
        "account_number": ACCOUNT_NUMBER,
        "customer_id": 17,
        "account_type": "Savings",
        "branch_address": "1 Test Plaza",
    }
    defaults.update(overrides)
    return Account(**defaults)


def _create_dto(**overrides) -> CustomerDTO:
    data = {"name": "John Doe", "email": "john@x.com", "mobile_number": MOBILE}
    data.update(overrides)
    return CustomerDTO(**data)


def _update_dto(account_number: int = ACCOUNT_NUMBER, **overrides) -> CustomerDTO:
    data = {
        "name": "John Updated",
        "email": "john.updated@x.com",
        "mobile_number": "9000000001",
        "account": AccountDTO(
            account_number=account_number,
            account_type="Current",
            branch_address="99 Side Road",
        ),
    }
    data.update(overrides)
    return CustomerDTO(**data)


# ===========================================================================
# create_account
# ===========================================================================


class TestCreateAccount:
    def test_success_saves_customer_then_account(
        self, service, customer_repo, account_repo
    ):
        customer_repo.get_by_mobile_number.return_value = None
        customer_repo.save.side_effect = _saved_customer
        account_repo.save.side_effect = lambda a: a

        service.create_account(_create_dto())

        saved_customer = customer_repo.save.call_args.args[0]
        assert saved_customer.name == "John Doe"
        assert saved_customer.email == "john@x.com"
        assert saved_customer.mobile_number == MOBILE

        saved_account = account_repo.save.call_args.args[0]
        assert saved_account.account_number == ACCOUNT_NUMBER
        assert saved_account.customer_id == 17

    def test_new_account_uses_injected_defaults(
        self, service, customer_repo, account_repo
    ):
        customer_repo.get_by_mobile_number.return_value = None
        customer_repo.save.side_effect = _saved_customer
        account_repo.save.side_effect = lambda a: a

        service.create_account(_create_dto())

        saved_account = account_repo.save.call_args.args[0]
        assert saved_account.account_type == "Savings"
        assert saved_account.branch_address == "1 Test Plaza"

    def test_returns_none(self, service, customer_repo, account_repo):
        customer_repo.get_by_mobile_number.return_value = None
        customer_repo.save.side_effect = _saved_customer
        account_repo.save.side_effect = lambda a: a

        assert service.create_account(_create_dto()) is None

    def test_duplicate_mobile_number_raises(self, service, customer_repo, account_repo):
        customer_repo.get_by_mobile_number.return_value = _make_customer()

        with pytest.raises(DuplicateEntity) as exc_info:
            service.create_account(_create_dto())

        assert exc_info.value.kind == "Customer"
        assert exc_info.value.field == "mobile_number"
        assert exc_info.value.key == MOBILE
        customer_repo.save.assert_not_called()
        account_repo.save.assert_not_called()

    def test_constraint_violation_raises_duplicate(
        self, service, customer_repo, account_repo
    ):
        customer_repo.get_by_mobile_number.return_value = None
        customer_repo.save.side_effect = IntegrityError("UNIQUE constraint failed")

        with pytest.raises(DuplicateEntity, match="mobile_number"):
            service.create_account(_create_dto())

        account_repo.save.assert_not_called()

    def test_skips_account_numbers_already_stored(
        self, service, customer_repo, account_repo, generator
    ):
        customer_repo.get_by_mobile_number.return_value = None
        customer_repo.save.side_effect = _saved_customer
        generator.generate.side_effect = [ACCOUNT_NUMBER, ACCOUNT_NUMBER + 1]
        account_repo.get_by_id.side_effect = [_make_account(), None]
        account_repo.save.side_effect = lambda a: a

        service.create_account(_create_dto())

        saved_account = account_repo.save.call_args.args[0]
        assert saved_account.account_number == ACCOUNT_NUMBER + 1
        account_repo.save.assert_called_once()

    def test_retries_when_insert_hits_taken_number(
        self, service, customer_repo, account_repo, generator
    ):
        customer_repo.get_by_mobile_number.return_value = None
        customer_repo.save.side_effect = _saved_customer
        generator.generate.side_effect = [ACCOUNT_NUMBER, ACCOUNT_NUMBER + 1]
        account_repo.save.side_effect = [IntegrityError("PRIMARY KEY"), _make_account()]

        service.create_account(_create_dto())

        assert account_repo.save.call_count == 2
        assert account_repo.save.call_args.args[0].account_number == ACCOUNT_NUMBER + 1

    def test_gives_up_after_max_retries(
        self, service, customer_repo, account_repo, generator
    ):
        customer_repo.get_by_mobile_number.return_value = None
        customer_repo.save.side_effect = _saved_customer
        account_repo.get_by_id.return_value = _make_account()

        with pytest.raises(AccountNumberUnavailable) as exc_info:
            service.create_account(_create_dto())

        assert exc_info.value.attempts == 3
        assert generator.generate.call_count == 3
        account_repo.save.assert_not_called()


# ===========================================================================
# fetch_account
# ===========================================================================


class TestFetchAccount:
    def test_returns_composite_view(self, service, customer_repo, account_repo):
        customer_repo.get_by_mobile_number.return_value = _make_customer()
        account_repo.get_by_customer_id.return_value = _make_account()

        dto = service.fetch_account(MOBILE)

        assert dto.name == "John Doe"
        assert dto.email == "john@x.com"
        assert dto.mobile_number == MOBILE
        assert dto.account.account_number == ACCOUNT_NUMBER
        assert dto.account.account_type == "Savings"
        assert dto.account.branch_address == "1 Test Plaza"
        account_repo.get_by_customer_id.assert_called_once_with(17)

    def test_customer_not_found_raises(self, service, customer_repo, account_repo):
        customer_repo.get_by_mobile_number.return_value = None

        with pytest.raises(EntityNotFound) as exc_info:
            service.fetch_account(MOBILE)

        assert exc_info.value.kind == "Customer"
        assert exc_info.value.key == MOBILE
        account_repo.get_by_customer_id.assert_not_called()

    def test_account_not_found_raises(self, service, customer_repo, account_repo):
        customer_repo.get_by_mobile_number.return_value = _make_customer()
        account_repo.get_by_customer_id.return_value = None

        with pytest.raises(EntityNotFound) as exc_info:
            service.fetch_account(MOBILE)

        assert exc_info.value.kind == "Account"
        assert exc_info.value.field == "customer_id"
        assert exc_info.value.key == 17


# ===========================================================================
# update_account
# ===========================================================================


class TestUpdateAccount:
    def test_without_account_details_returns_false(
        self, service, customer_repo, account_repo
    ):
        assert service.update_account(_create_dto()) is False

        account_repo.get_by_id.assert_not_called()
        account_repo.save.assert_not_called()
        customer_repo.save.assert_not_called()

    def test_success_overwrites_account_and_customer(
        self, service, customer_repo, account_repo
    ):
        account_repo.get_by_id.return_value = _make_account()
        account_repo.save.side_effect = lambda a: a
        customer_repo.get_by_id.return_value = _make_customer()
        customer_repo.save.side_effect = lambda c: c

        assert service.update_account(_update_dto()) is True

        saved_account = account_repo.save.call_args.args[0]
        assert saved_account.account_type == "Current"
        assert saved_account.branch_address == "99 Side Road"
        saved_customer = customer_repo.save.call_args.args[0]
        assert saved_customer.name == "John Updated"
        assert saved_customer.email == "john.updated@x.com"
        assert saved_customer.mobile_number == "9000000001"

    def test_customer_resolved_through_account(
        self, service, customer_repo, account_repo
    ):
        account_repo.get_by_id.return_value = _make_account(customer_id=99)
        account_repo.save.side_effect = lambda a: a
        customer_repo.get_by_id.return_value = _make_customer(customer_id=99)
        customer_repo.save.side_effect = lambda c: c

        service.update_account(_update_dto())

        customer_repo.get_by_id.assert_called_once_with(99)
        customer_repo.get_by_mobile_number.assert_not_called()

    def test_account_not_found_raises(self, service, customer_repo, account_repo):
        account_repo.get_by_id.return_value = None

        with pytest.raises(EntityNotFound) as exc_info:
            service.update_account(_update_dto(account_number=1_000_000_001))

        assert exc_info.value.kind == "Account"
        assert exc_info.value.field == "account_number"
        assert exc_info.value.key == 1_000_000_001
        account_repo.save.assert_not_called()
        customer_repo.save.assert_not_called()

    def test_customer_not_found_raises(self, service, customer_repo, account_repo):
        account_repo.get_by_id.return_value = _make_account()
        account_repo.save.side_effect = lambda a: a
        customer_repo.get_by_id.return_value = None

        with pytest.raises(EntityNotFound) as exc_info:
            service.update_account(_update_dto())

        assert exc_info.value.kind == "Customer"
        assert exc_info.value.field == "customer_id"
        assert exc_info.value.key == 17
        customer_repo.save.assert_not_called()

    def test_mobile_number_collision_raises_duplicate(
        self, service, customer_repo, account_repo
    ):
        account_repo.get_by_id.return_value = _make_account()
        account_repo.save.side_effect = lambda a: a
        customer_repo.get_by_id.return_value = _make_customer()
        customer_repo.save.side_effect = IntegrityError("UNIQUE constraint failed")

        with pytest.raises(DuplicateEntity):
            service.update_account(_update_dto())


# ===========================================================================
# delete_account
# ===========================================================================


class TestDeleteAccount:
    def test_deletes_accounts_then_customer(self, service, customer_repo, account_repo):
        customer_repo.get_by_mobile_number.return_value = _make_customer()
        calls = []
        account_repo.delete_by_customer_id.side_effect = (
            lambda cid: calls.append(("accounts", cid)) or 1
        )
        customer_repo.delete.side_effect = (
            lambda cid: calls.append(("customer", cid)) or True
        )

        assert service.delete_account(MOBILE) is True
        assert calls == [("accounts", 17), ("customer", 17)]

    def test_returns_true_even_when_nothing_removed(
        self, service, customer_repo, account_repo
    ):
        customer_repo.get_by_mobile_number.return_value = _make_customer()
        account_repo.delete_by_customer_id.return_value = 0
        customer_repo.delete.return_value = False

        assert service.delete_account(MOBILE) is True

    def test_customer_not_found_raises(self, service, customer_repo, account_repo):
        customer_repo.get_by_mobile_number.return_value = None

        with pytest.raises(EntityNotFound) as exc_info:
            service.delete_account(MOBILE)

        assert exc_info.value.kind == "Customer"
        assert exc_info.value.field == "mobile_number"
        account_repo.delete_by_customer_id.assert_not_called()
        customer_repo.delete.assert_not_called()


# ===========================================================================
# construction
# ===========================================================================


class TestServiceDefaults:
    def test_defaults_and_retries_read_from_settings(self, settings):
        settings.ACCOUNTS_DEFAULT_TYPE = "Checking"
        settings.ACCOUNTS_DEFAULT_BRANCH_ADDRESS = "5 Harbour St"
        settings.ACCOUNT_NUMBER_MAX_RETRIES = 1
        customer_repo = MagicMock()
        customer_repo.get_by_mobile_number.return_value = None
        customer_repo.save.side_effect = _saved_customer
        account_repo = MagicMock()
        account_repo.get_by_id.return_value = None
        account_repo.save.side_effect = lambda a: a

        service = AccountService(
            customer_repository=customer_repo, account_repository=account_repo
        )
        service.create_account(_create_dto())

        saved_account = account_repo.save.call_args.args[0]
        assert saved_account.account_type == "Checking"
        assert saved_account.branch_address == "5 Harbour St"
        assert 1_000_000_000 <= saved_account.account_number < 1_090_000_000
