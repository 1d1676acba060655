"""
Queue transfer workflow.

Look up the caller's contact, choose the ticket to move and reassign it to
the destination queue. The two Z-Pro calls run strictly in sequence and
neither is retried; if the queue update fails the lookup is simply left
as-is and the caller re-triggers the tool call.
"""

from __future__ import annotations

from typing import Optional

from config.settings import Settings
from models.transfer import TransferRequest, TransferResult
from services.ticket_selection import select_ticket
from services.zpro_client import ZProClient
from utils.error_handling import NotFoundError
from utils.logging_config import get_logger
from utils.validators import mask_phone_number

logger = get_logger(__name__)

NO_ACTIVE_TICKET = "No active ticket found for this phone number."


class TransferService:
    """Moves a caller's active ticket to the configured queue."""

    def __init__(self, settings: Settings, client: Optional[ZProClient] = None):
        self.settings = settings
        self.client = client or ZProClient(settings)

    def transfer(self, request: TransferRequest) -> TransferResult:
        """
        Run lookup, selection and queue update for one request.

        Raises NotFoundError when the contact has no tickets and UpstreamError
        when either Z-Pro call fails.
        """
        queue_id = self.settings.destination_queue_id

        contact = self.client.show_contact(request.phone_number)
        ticket = select_ticket(contact.tickets)
        if ticket is None:
            logger.warning(
                "No active ticket found",
                extra={"phone": mask_phone_number(request.phone_number)},
            )
            raise NotFoundError(NO_ACTIVE_TICKET)

        logger.info(
            "Ticket selected for transfer",
            extra={"ticket_id": ticket.id, "status": ticket.status},
        )
        self.client.update_queue(ticket.id, queue_id)

        return TransferResult(
            success=True,
            message=f"Atendimento transferido para a fila {queue_id}.",
            ticket_id=ticket.id,
            queue_id=queue_id,
        )
