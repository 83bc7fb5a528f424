from django.urls import path

from modules.core.views import (
    BuildInfoView,
    ContactInfoView,
    RuntimeVersionView,
    health_check,
)

urlpatterns = [
    path("health", health_check, name="health_check"),
    path("api/build-info", BuildInfoView.as_view(), name="build_info"),
    path("api/python-version", RuntimeVersionView.as_view(), name="python_version"),
    path("api/contact-info", ContactInfoView.as_view(), name="contact_info"),
]
