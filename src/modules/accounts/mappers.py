"""Field transcription between DTOs and persisted models.

Plain functions, no validation and no defaulting: the DTO side is built
with ``model_construct`` because persisted data was validated on the way in.
The ``to_*_model`` functions mutate and return the model they are given.
"""

from __future__ import annotations

from typing import Optional

from modules.accounts.dtos import AccountDTO, CustomerDTO
from modules.accounts.models import Account
from modules.customers.models import Customer


def to_account_dto(account: Account) -> AccountDTO:
    return AccountDTO.model_construct(
        account_number=account.account_number,
        account_type=account.account_type,
        branch_address=account.branch_address,
    )


def to_account_model(dto: AccountDTO, account: Account) -> Account:
    account.account_number = dto.account_number
    account.account_type = dto.account_type
    account.branch_address = dto.branch_address
    return account


def to_customer_dto(
    customer: Customer, account: Optional[Account] = None
) -> CustomerDTO:
    return CustomerDTO.model_construct(
        name=customer.name,
        email=customer.email,
        mobile_number=customer.mobile_number,
        account=to_account_dto(account) if account is not None else None,
    )


def to_customer_model(dto: CustomerDTO, customer: Customer) -> Customer:
    customer.name = dto.name
    customer.email = dto.email
    customer.mobile_number = dto.mobile_number
    return customer
