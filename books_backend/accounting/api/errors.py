# accounting/api/errors.py

"""
SERVICE ERROR -> HTTP RESPONSE

Views catch AccountingServiceError and hand it here:
- status code and body come from the exception (code, detail, key fields)
- persistence failures are logged with the traceback and answered with a
  generic message
"""

from __future__ import annotations

import logging

from rest_framework.response import Response

from accounting.services.exceptions import AccountingServiceError, PersistenceError

logger = logging.getLogger(__name__)

GENERIC_PERSISTENCE_DETAIL = "The request could not be stored. Please try again later."


def service_error_response(exc: AccountingServiceError, *, action: str) -> Response:
    if isinstance(exc, PersistenceError):
        logger.error(
            "Persistence failure",
            exc_info=exc,
            extra={"action": action, "error": str(exc)},
        )
        return Response(
            {"detail": GENERIC_PERSISTENCE_DETAIL, "code": exc.code},
            status=exc.status_code,
        )

    logger.info(
        "Request rejected",
        extra={"action": action, "code": exc.code, "error": str(exc)},
    )
    return Response(exc.as_payload(), status=exc.status_code)
