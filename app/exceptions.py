"""
Error types raised by the service layer.

Every error carries the HTTP status it maps to so that ``app.main`` can
translate it with a single exception handler.  Soft failures (problems
that degrade a response without aborting it) are not raised at all;
they are passed to an ``ErrorReporter`` callable instead.
"""
import logging
from typing import Callable

logger = logging.getLogger(__name__)

ErrorReporter = Callable[[str, int], None]


class ServiceError(Exception):
    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(ServiceError):
    status_code = 404


class ValidationError(ServiceError):
    status_code = 400


def log_reported_error(message: str, status: int) -> None:
    """Default reporter: record soft failures in the application log."""
    logger.warning("Reported error (status=%d): %s", status, message)
