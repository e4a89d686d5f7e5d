"""Application error types.

Services raise these; the API layer maps them to HTTP responses in one
place (see ``fullsco.api.handlers``).
"""

from typing import Any


class AppError(Exception):
    """Base class for errors that carry an HTTP status."""

    status_code = 500

    def __init__(self, message: str, errors: Any = None):
        super().__init__(message)
        self.message = message
        self.errors = errors


class ValidationFailedError(AppError):
    """Input failed schema or business validation."""

    status_code = 400


class AuthenticationError(AppError):
    status_code = 401


class PermissionDeniedError(AppError):
    status_code = 403


class NotFoundError(AppError):
    """The requested record does not exist."""

    status_code = 404

    def __init__(self, entity: str, key: Any, field: str = "id"):
        super().__init__(f"{entity} with {field} {key!r} not found")
        self.entity = entity
        self.key = key
        self.field = field


class ConflictError(AppError):
    """A unique field already holds the submitted value."""

    status_code = 409

    def __init__(self, entity: str, field: str, value: Any, message: str | None = None):
        super().__init__(message or f"{entity} with {field} {value!r} already exists")
        self.entity = entity
        self.field = field
        self.value = value
        self.errors = [{"field": field, "value": value}]


def validation_details(errors: list[dict]) -> list[dict]:
    """Flatten pydantic error dicts to ``{field, message, type}``."""
    return [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())),
            "message": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in errors
    ]
