"""
Transfer handler for POST /transfer.

Invoked as an AI tool-call: finds the caller's active Z-Pro ticket by phone
number and moves it to the enrolment queue. Every failure is turned into a
JSON response here; nothing escapes to API Gateway.
"""

from __future__ import annotations

import base64
import json
import uuid
from typing import Any, Dict, Optional

from pydantic import ValidationError

from config.settings import Settings
from models.transfer import TransferRequest
from utils.error_handling import (
    AppError,
    BadRequestError,
    MethodNotAllowedError,
    ServerMisconfiguredError,
    UnhandledError,
    UpstreamError,
    json_response,
    to_response,
)
from utils.logging_config import get_logger
from utils.validators import mask_phone_number

logger = get_logger(__name__)

MISSING_PHONE_NUMBER = "Missing phone_number in request arguments."
INVALID_JSON = "Request body must be valid JSON."

# Lazy-loaded so settings and the HTTP client are built once per container
_settings: Optional[Settings] = None
_transfer_service: Optional["TransferService"] = None


def _get_settings() -> Settings:
    """Lazy-load Settings from the environment."""
    global _settings
    if _settings is None:
        _settings = Settings.from_environment()
    return _settings


def _get_transfer_service():
    """Lazy-load TransferService."""
    global _transfer_service
    if _transfer_service is None:
        from services.transfer_service import TransferService
        _transfer_service = TransferService(_get_settings())
    return _transfer_service


def _http_method(event: Dict[str, Any]) -> str:
    method = event.get("requestContext", {}).get("http", {}).get("method")
    return (method or event.get("httpMethod") or "").upper()


def _parse_body(event: Dict[str, Any]) -> Any:
    body = event.get("body")
    if body is None or body == "":
        return {}
    if isinstance(body, dict):
        return body
    try:
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body).decode("utf-8")
        return json.loads(body)
    except (ValueError, UnicodeDecodeError) as exc:
        raise BadRequestError(INVALID_JSON) from exc


def _parse_request(event: Dict[str, Any]) -> TransferRequest:
    payload = _parse_body(event)
    try:
        return TransferRequest.from_tool_call(payload)
    except ValidationError as exc:
        logger.warning(
            "Rejected transfer payload",
            extra={
                "errors": exc.errors(
                    include_url=False, include_context=False, include_input=False
                )
            },
        )
        raise BadRequestError(MISSING_PHONE_NUMBER) from exc


def lambda_handler(event, context):
    """Handle POST /transfer."""
    correlation_id = str(uuid.uuid4())
    log_extra = {"correlation_id": correlation_id}

    try:
        if _http_method(event) != "POST":
            raise MethodNotAllowedError()

        settings = _get_settings()
        if not settings.bearer_token:
            logger.error(
                "ZPRO_BEARER_TOKEN is not configured", extra=log_extra
            )
            raise ServerMisconfiguredError("ZPRO_BEARER_TOKEN")

        request = _parse_request(event)
        logger.info(
            "Transfer requested",
            extra={**log_extra, "phone": mask_phone_number(request.phone_number)},
        )

        result = _get_transfer_service().transfer(request)

        logger.info(
            "Transfer completed",
            extra={**log_extra, "ticket_id": result.ticket_id, "queue_id": result.queue_id},
        )
        return json_response(200, result.to_body())

    except UpstreamError as exc:
        logger.error(
            "Transfer failed upstream",
            extra={
                **log_extra,
                "url": exc.url,
                "status": exc.upstream_status,
                "payload": exc.payload,
                "error": exc.message,
            },
        )
        return to_response(exc)
    except AppError as exc:
        logger.info(
            "Transfer rejected",
            extra={**log_extra, "status_code": exc.status_code, "error": exc.message},
        )
        return to_response(exc)
    except Exception as exc:
        logger.exception("Transfer handler failed", extra=log_extra)
        return to_response(UnhandledError(exc))
