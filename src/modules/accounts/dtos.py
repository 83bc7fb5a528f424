"""Account DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

Field names are snake_case in Python and camelCase on the wire
(``mobileNumber``, ``accountsDto``...); both spellings are accepted
on input.

- ``AccountDTO``: account facts (number, type, branch).
- ``CustomerDTO``: customer identity plus the optional account sub-view.
  It is the input of create/update and the composite view of fetch.
- ``ResponseDTO`` / ``ErrorResponseDTO``: HTTP response envelopes.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    StringConstraints,
    TypeAdapter,
)

MOBILE_NUMBER_PATTERN = r"^[0-9]{10}$"

MobileNumber = Annotated[str, StringConstraints(pattern=MOBILE_NUMBER_PATTERN)]

mobile_number_adapter: TypeAdapter[str] = TypeAdapter(MobileNumber)


def validate_mobile_number(value: object) -> str:
    """Validate a raw (e.g. query-string) mobile number.

    Raises:
        pydantic.ValidationError: if the value is not exactly 10 digits.
    """
    return mobile_number_adapter.validate_python(value)


class AccountDTO(BaseModel):
    """Immutable account sub-view."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    account_number: int = Field(alias="accountNumber")
    account_type: str = Field(alias="accountType", min_length=1, max_length=100)
    branch_address: str = Field(alias="branchAddress", min_length=1, max_length=200)


class CustomerDTO(BaseModel):
    """Immutable customer view with an optional nested account.

    Validates:
    - ``name`` is between 3 and 30 characters.
    - ``email`` is a well-formed address (Pydantic ``EmailStr``).
    - ``mobile_number`` is exactly 10 digits.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=3, max_length=30)
    email: EmailStr
    mobile_number: MobileNumber = Field(alias="mobileNumber")
    account: Optional[AccountDTO] = Field(default=None, alias="accountsDto")


class ResponseDTO(BaseModel):
    """Success envelope returned by the command endpoints."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status_code: str = Field(alias="statusCode")
    status_msg: str = Field(alias="statusMsg")


class ErrorResponseDTO(BaseModel):
    """Error envelope returned when an operation fails."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    api_path: str = Field(alias="apiPath")
    error_code: int = Field(alias="errorCode")
    error_message: str = Field(alias="errorMessage")
    error_time: datetime = Field(alias="errorTime")
