"""Account API views.

Exposes the ``AccountService`` via HTTP using DRF APIViews.
Input is validated by the Pydantic DTOs (malformed JSON bodies get the
same 400 error envelope); domain exceptions are caught
and translated into HTTP status codes:

- ``DuplicateEntity``          -> 400
- ``EntityNotFound``           -> 404
- ``AccountNumberUnavailable`` -> 500
- ``False`` from update/delete -> 417

The views never swallow generic exceptions.
"""

from __future__ import annotations

from django.utils import timezone
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.accounts.constants import (
    MESSAGE_200,
    MESSAGE_201,
    MESSAGE_417_DELETE,
    MESSAGE_417_UPDATE,
    STATUS_200,
    STATUS_201,
    STATUS_417,
)
from modules.accounts.dtos import (
    CustomerDTO,
    ErrorResponseDTO,
    ResponseDTO,
    validate_mobile_number,
)
from modules.accounts.exceptions import (
    AccountNumberUnavailable,
    DuplicateEntity,
    EntityNotFound,
)
from modules.accounts.repositories.django_repository import AccountDjangoRepository
from modules.accounts.services import AccountService
from modules.customers.repositories.django_repository import CustomerDjangoRepository


def build_account_service() -> AccountService:
    """Wire the service with the Django ORM repositories."""
    return AccountService(
        customer_repository=CustomerDjangoRepository(),
        account_repository=AccountDjangoRepository(),
    )


def _envelope(status_code: str, message: str, http_status: int) -> Response:
    body = ResponseDTO(status_code=status_code, status_msg=message)
    return Response(body.model_dump(by_alias=True), status=http_status)


def _error(request: Request, message: str, http_status: int) -> Response:
    body = ErrorResponseDTO(
        api_path=f"uri={request.path}",
        error_code=http_status,
        error_message=message,
        error_time=timezone.now(),
    )
    return Response(body.model_dump(by_alias=True, mode="json"), status=http_status)


def _validation_message(exc: PydanticValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'input'}: {err['msg']}"
        for err in exc.errors()
    )


class AccountAPIView(APIView):
    """Base view holding the service and the shared error translation."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = build_account_service()

    def domain_error(self, request: Request, exc: Exception) -> Response:
        if isinstance(exc, DuplicateEntity):
            return _error(request, str(exc), status.HTTP_400_BAD_REQUEST)
        if isinstance(exc, EntityNotFound):
            return _error(request, str(exc), status.HTTP_404_NOT_FOUND)
        return _error(request, str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)


class CreateAccountView(AccountAPIView):
    def post(self, request: Request) -> Response:
        """POST /api/create"""
        try:
            dto = CustomerDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _error(request, _validation_message(exc), status.HTTP_400_BAD_REQUEST)
        except ParseError as exc:
            return _error(request, str(exc.detail), status.HTTP_400_BAD_REQUEST)

        try:
            self._service.create_account(dto)
        except (DuplicateEntity, AccountNumberUnavailable) as exc:
            return self.domain_error(request, exc)

        return _envelope(STATUS_201, MESSAGE_201, status.HTTP_201_CREATED)


class FetchAccountView(AccountAPIView):
    def get(self, request: Request) -> Response:
        """GET /api/fetch?mobileNumber=..."""
        try:
            mobile_number = validate_mobile_number(
                request.query_params.get("mobileNumber")
            )
        except PydanticValidationError as exc:
            return _error(request, _validation_message(exc), status.HTTP_400_BAD_REQUEST)

        try:
            dto = self._service.fetch_account(mobile_number)
        except EntityNotFound as exc:
            return self.domain_error(request, exc)

        return Response(dto.model_dump(by_alias=True))


class UpdateAccountView(AccountAPIView):
    def put(self, request: Request) -> Response:
        """PUT /api/update"""
        try:
            dto = CustomerDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _error(request, _validation_message(exc), status.HTTP_400_BAD_REQUEST)
        except ParseError as exc:
            return _error(request, str(exc.detail), status.HTTP_400_BAD_REQUEST)

        try:
            updated = self._service.update_account(dto)
        except (EntityNotFound, DuplicateEntity) as exc:
            return self.domain_error(request, exc)

        if not updated:
            return _envelope(
                STATUS_417, MESSAGE_417_UPDATE, status.HTTP_417_EXPECTATION_FAILED
            )
        return _envelope(STATUS_200, MESSAGE_200, status.HTTP_200_OK)


class DeleteAccountView(AccountAPIView):
    def delete(self, request: Request) -> Response:
        """DELETE /api/delete?mobileNumber=..."""
        try:
            mobile_number = validate_mobile_number(
                request.query_params.get("mobileNumber")
            )
        except PydanticValidationError as exc:
            return _error(request, _validation_message(exc), status.HTTP_400_BAD_REQUEST)

        try:
            deleted = self._service.delete_account(mobile_number)
        except EntityNotFound as exc:
            return self.domain_error(request, exc)

        if not deleted:
            return _envelope(
                STATUS_417, MESSAGE_417_DELETE, status.HTTP_417_EXPECTATION_FAILED
            )
        return _envelope(STATUS_200, MESSAGE_200, status.HTTP_200_OK)
