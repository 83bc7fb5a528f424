"""Account URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.accounts.views import (
    CreateAccountView,
    DeleteAccountView,
    FetchAccountView,
    UpdateAccountView,
)

urlpatterns = [
    path("create", CreateAccountView.as_view(), name="account_create"),
    path("fetch", FetchAccountView.as_view(), name="account_fetch"),
    path("update", UpdateAccountView.as_view(), name="account_update"),
    path("delete", DeleteAccountView.as_view(), name="account_delete"),
]
