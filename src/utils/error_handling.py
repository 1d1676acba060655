"""Custom exceptions and helpers for consistent error responses."""

import json
from typing import Any, Dict, Optional

from models.transfer import TransferResult

TRANSFER_FAILED = "Failed to transfer chat."


class AppError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message}


class MethodNotAllowedError(AppError):
    """Raised for any HTTP verb other than POST."""

    def __init__(self, message: str = "Method Not Allowed"):
        super().__init__(message, status_code=405)


class ServerMisconfiguredError(AppError):
    """Raised when a required setting is missing at invocation time."""

    def __init__(self, setting: str):
        super().__init__(
            f"Server configuration error: {setting} is missing.", status_code=500
        )
        self.setting = setting


class BadRequestError(AppError):
    """Raised when the inbound payload fails validation."""

    def __init__(self, message: str = "Invalid request"):
        super().__init__(message, status_code=400)


class NotFoundError(AppError):
    """Raised when a requested resource is missing."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class TransferFailedError(AppError):
    """Base for failures reported as "Failed to transfer chat."."""

    def __init__(self, message: str):
        super().__init__(message, status_code=500)

    def to_body(self) -> Dict[str, Any]:
        return TransferResult(
            success=False, error=TRANSFER_FAILED, details=self.message
        ).to_body()


class UpstreamError(TransferFailedError):
    """Raised when a Z-Pro call fails (non-2xx, transport error, bad payload)."""

    def __init__(
        self,
        message: str,
        url: str,
        upstream_status: Optional[int] = None,
        payload: Any = None,
    ):
        super().__init__(message)
        self.url = url
        self.upstream_status = upstream_status
        self.payload = payload


class UnhandledError(TransferFailedError):
    """Catch-all wrapping any unexpected exception at the handler boundary."""

    def __init__(self, cause: Exception):
        super().__init__(str(cause) or cause.__class__.__name__)
        self.cause = cause


def json_response(status: int, body: Dict[str, Any]) -> Dict[str, Any]:
    """Format a JSON API Gateway HTTP API response."""
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def to_response(error: AppError) -> Dict[str, Any]:
    """Convert an AppError into a Lambda proxy integration response."""
    return json_response(error.status_code, error.to_body())
