"""Operational endpoints: health, build and runtime information, support contacts.

These views sit beside the account API and expose deployment metadata
read from settings.  None of them touch the account tables.
"""

import platform
import time
from typing import Any, Dict

import structlog
from django.conf import settings
from django.db import connections
from django.db.utils import DatabaseError
from django.http import HttpRequest, JsonResponse
from django.utils import timezone
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

logger = structlog.get_logger()


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    overall_healthy = True

    try:
        start = time.monotonic()
        conn = connections["default"]
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        services["database"] = {
            "status": "up",
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
    except DatabaseError:
        services["database"] = {"status": "down"}
        overall_healthy = False
        logger.error("health_check_db_failure")

    status_code = 200 if overall_healthy else 503

    logger.info(
        "health_check_completed", status="healthy" if overall_healthy else "unhealthy"
    )

    return JsonResponse(
        {
            "status": "healthy" if overall_healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=status_code,
    )


class BuildInfoView(APIView):
    """GET /api/build-info: the build string deployed with this service."""

    def get(self, request: Request) -> Response:
        return Response(settings.BUILD_INFO)


class RuntimeVersionView(APIView):
    """GET /api/python-version: interpreter version running the service."""

    def get(self, request: Request) -> Response:
        return Response(platform.python_version())


class ContactInfoView(APIView):
    """GET /api/contact-info: who to reach when the service misbehaves."""

    def get(self, request: Request) -> Response:
        return Response(
            {
                "message": settings.CONTACT_INFO["message"],
                "contactDetails": {
                    "name": settings.CONTACT_INFO["name"],
                    "email": settings.CONTACT_INFO["email"],
                },
                "onCallSupport": list(settings.CONTACT_INFO["on_call_support"]),
            }
        )
