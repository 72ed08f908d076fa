import time
from typing import Any, Dict

import structlog
from django.db import connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework.decorators import api_view, renderer_classes
from rest_framework.renderers import StaticHTMLRenderer
from rest_framework.request import Request
from rest_framework.response import Response

from modules.core.errors import ErrorCode
from modules.core.exception_handler import error_body

logger = structlog.get_logger()

REQUIRED_TABLES = ("customer", "accounts")


@extend_schema(
    summary="Hello World endpoint",
    description="Simple endpoint to verify the service is running",
    responses={200: str},
)
@api_view(["GET"])
@renderer_classes([StaticHTMLRenderer])
def hello(request: Request) -> Response:
    return Response("Hello, World!", content_type="text/plain")


def _check_database() -> Dict[str, Any]:
    """Ping the default database and confirm the domain tables are migrated."""
    start = time.monotonic()
    conn = connections["default"]
    conn.ensure_connection()
    with conn.cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()
    tables = set(conn.introspection.table_names())
    missing = [name for name in REQUIRED_TABLES if name not in tables]

    result: Dict[str, Any] = {
        "status": "down" if missing else "up",
        "response_time_ms": round((time.monotonic() - start) * 1000, 2),
    }
    if missing:
        result["missing_tables"] = missing
    return result


def health_check(request: HttpRequest) -> JsonResponse:
    try:
        services = {"database": _check_database()}
    except Exception:
        logger.exception("health_check_db_failure")
        services = {"database": {"status": "down"}}

    healthy = all(service["status"] == "up" for service in services.values())
    overall = "healthy" if healthy else "unhealthy"
    logger.info("health_check_completed", status=overall)

    return JsonResponse(
        {"status": overall, "timestamp": timezone.now().isoformat(), "services": services},
        status=200 if healthy else 503,
    )


# ---------------------------------------------------------------------------
# Django-level error handlers (outside DRF views)
# ---------------------------------------------------------------------------


def not_found(request: HttpRequest, exception: Exception) -> JsonResponse:
    code = ErrorCode.RESOURCE_NOT_FOUND
    return JsonResponse(
        error_body(request.path, code.code, f"No endpoint {request.method} {request.path}"),
        status=code.http_status,
    )


def server_error(request: HttpRequest) -> JsonResponse:
    code = ErrorCode.INTERNAL_SERVER_ERROR
    return JsonResponse(
        error_body(request.path, code.code, code.default_message),
        status=code.http_status,
    )
