# PATH: apps/api/common/exception_handler.py
from __future__ import annotations

import logging

from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.api.common.exceptions import DomainError

logger = logging.getLogger(__name__)


def domain_exception_handler(exc, context):
    """
    REST_FRAMEWORK["EXCEPTION_HANDLER"]

    - DomainError → {"detail", "code"} + error.http_status
    - everything else → DRF default
    """
    if isinstance(exc, DomainError):
        view = context.get("view")
        logger.warning(
            "domain error in %s: code=%s detail=%s",
            view.__class__.__name__ if view else "-",
            exc.code,
            exc.message,
        )
        return Response(
            {"detail": exc.message, "code": exc.code},
            status=exc.http_status,
        )

    return drf_exception_handler(exc, context)
