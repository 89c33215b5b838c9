"""Domain errors rendered as ``{error, detail?, issues?}`` JSON bodies.

Handlers and services raise these; ``backoffice.main`` registers a single
exception handler that maps them to their HTTP status.
"""

from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


class BackofficeError(Exception):
    status_code: int = 500

    def __init__(
        self,
        message: str,
        detail: Optional[str] = None,
        *,
        issues: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail
        self.issues = issues
        self.extra = extra or {}
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        if self.detail is not None:
            body["detail"] = self.detail
        if self.issues is not None:
            body["issues"] = self.issues
        body.update(self.extra)
        return body


class ValidationError(BackofficeError):
    status_code = 400


class NotFoundError(BackofficeError):
    status_code = 404


class ConflictError(BackofficeError):
    status_code = 409


class ConfigurationError(BackofficeError):
    status_code = 500


class UpstreamError(BackofficeError):
    """Google Maps returned a non-OK status or could not be reached."""

    status_code = 400


class AddressNotFound(UpstreamError):
    pass


class NoRouteFound(UpstreamError):
    pass


class AuthenticationError(BackofficeError):
    status_code = 401


class ForbiddenError(BackofficeError):
    status_code = 403


class AlreadyConvertedError(ConflictError):
    pass


class TeamNotFoundError(NotFoundError):
    pass


class InvalidStatusTransition(ConflictError):
    pass


def error_response(
    message: str,
    field_errors: Dict[str, str],
    code: int = 400,
) -> ValidationError:
    """Return a ValidationError with field-level issues and log details."""
    logger.warning("%s %s", message, field_errors)
    issues = {
        "formErrors": [],
        "fieldErrors": {field: [err] for field, err in field_errors.items()},
    }
    return ValidationError(message, issues=issues, status_code=code)
