import pytest

from rest_framework.test import APIClient

from modules.accounts.models import Account
from modules.customers.models import Customer


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def registered_customer():
    """A persisted Customer with its Account."""
    customer = Customer.objects.create(
        name="John Doe",
        email="john@x.com",
        mobile_number="9876543210",
    )
    Account.objects.create(
        account_number=1_012_345_678,
        customer_id=customer.customer_id,
        account_type="Savings",
        branch_address="123 Main Street, New York",
    )
    return customer
