"""Custom exceptions and helpers for consistent error responses."""

import json
from typing import Any, Dict


class AppError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(AppError):
    """Raised when a requested route or resource is missing."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class ProbeError(AppError):
    """Base class for failures raised by connectivity probes."""

    def __init__(self, message: str):
        super().__init__(message, status_code=500)


class SecretRetrievalError(ProbeError):
    """Database credentials could not be read from Secrets Manager."""


class DatabaseConnectionError(ProbeError):
    """The database refused or dropped the connection."""


class DatabaseQueryError(ProbeError):
    """The connection opened but the query failed."""


class DnsResolutionError(ProbeError):
    """The public hostname could not be resolved."""


def to_response(error: AppError, **extra: Any) -> Dict[str, Any]:
    """Convert an AppError into a Lambda proxy integration response."""
    return {
        "statusCode": error.status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps({"message": str(error), "status": "error", **extra}),
    }
