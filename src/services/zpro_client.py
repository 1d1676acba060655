"""
Client for the Z-Pro external API.

Both endpoints are tenant-scoped POSTs authenticated with a bearer token.
Every call is attempted once: any non-2xx status or transport failure is
raised as an UpstreamError carrying the URL, status and payload.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from config.settings import Settings
from models.transfer import Contact, TicketId
from utils.error_handling import UpstreamError
from utils.logging_config import get_logger
from utils.validators import mask_phone_number

logger = get_logger(__name__)


class ZProClient:
    """Thin wrapper over ``httpx.Client`` for the two calls we need."""

    def __init__(self, settings: Settings, http_client: Optional[httpx.Client] = None):
        self.settings = settings
        self._http = http_client or httpx.Client()

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.settings.bearer_token}",
        }

    def _post(self, url: str, body: Dict[str, Any]) -> Any:
        try:
            response = self._http.post(url, json=body, headers=self._headers())
        except httpx.HTTPError as exc:
            logger.error(
                "Z-Pro request failed",
                extra={"url": url, "error": str(exc)},
            )
            raise UpstreamError(f"Z-Pro API request failed: {exc}", url=url) from exc

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.is_success:
            logger.error(
                "Z-Pro API error",
                extra={"url": url, "status": response.status_code, "payload": data},
            )
            message = None
            if isinstance(data, dict):
                message = data.get("message")
            raise UpstreamError(
                f"Z-Pro API error: {message or response.reason_phrase}",
                url=url,
                upstream_status=response.status_code,
                payload=data,
            )

        return data

    def show_contact(self, phone_number: str) -> Contact:
        """Fetch the contact (and its tickets) registered under a phone number."""
        url = self.settings.show_contact_url
        logger.info(
            "Looking up contact",
            extra={"url": url, "phone": mask_phone_number(phone_number)},
        )
        data = self._post(url, {"number": phone_number})
        try:
            contact = Contact.model_validate(data)
        except ValidationError as exc:
            logger.error(
                "Unexpected showcontact payload",
                extra={"url": url, "payload": data, "error": str(exc)},
            )
            raise UpstreamError(
                "Z-Pro API returned an unexpected contact payload.",
                url=url,
                payload=data,
            ) from exc

        logger.info(
            "Contact found",
            extra={"contact_id": contact.id, "ticket_count": len(contact.tickets)},
        )
        return contact

    def update_queue(self, ticket_id: TicketId, queue_id: int) -> Any:
        """Move a ticket to another queue."""
        url = self.settings.update_queue_url
        logger.info(
            "Updating ticket queue",
            extra={"url": url, "ticket_id": ticket_id, "queue_id": queue_id},
        )
        data = self._post(url, {"ticketId": ticket_id, "queueId": queue_id})
        logger.info("Queue updated", extra={"ticket_id": ticket_id, "payload": data})
        return data
