"""
Application error hierarchy.

Every error raised by the service layer carries the HTTP status it maps to,
so routes stay free of try/except and the app registers a single handler.
"""

from enum import Enum


class AppError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500
    code: str = "internal_error"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)


class BadRequest(AppError):
    status_code = 400
    code = "bad_request"


class AuthRequired(AppError):
    status_code = 401
    code = "auth_required"


class PaymentRequired(AppError):
    status_code = 402
    code = "payment_required"


class Forbidden(AppError):
    status_code = 403
    code = "forbidden"


class NotFound(AppError):
    status_code = 404
    code = "not_found"


class ConfigurationError(AppError):
    status_code = 500
    code = "configuration_error"


class ExternalServiceError(AppError):
    status_code = 502
    code = "external_service_error"


class GenerationErrorKind(str, Enum):
    """Why an AI generation produced no usable output."""

    PROVIDER_UNAVAILABLE = "provider_unavailable"
    NO_STRUCTURED_OUTPUT = "no_structured_output"
    MALFORMED_JSON = "malformed_json"
    SCHEMA_MISMATCH = "schema_mismatch"


class GenerationError(AppError):
    """An AI generation failed.

    The kind is kept so callers can decide between retrying, falling back
    to mock content, or surfacing the failure.
    """

    status_code = 500

    def __init__(self, kind: GenerationErrorKind, message: str, raw: str = ""):
        self.kind = kind
        self.raw = raw
        super().__init__(message, code=kind.value)
