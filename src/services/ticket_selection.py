"""
Pick the ticket to transfer out of a contact's ticket history.

Priority order:
1. first ticket that is ``open`` with an active demand;
2. first ``open`` ticket;
3. most recently touched ticket (``updatedAt`` falling back to ``createdAt``).

The input sequence is never reordered.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from models.transfer import Ticket

OPEN_STATUS = "open"

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 date or datetime; naive values are taken as UTC.

    Anything that is not such a string (numbers, blanks, garbage) is None.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def resolved_timestamp(ticket: Ticket) -> Optional[datetime]:
    """``updatedAt`` when usable, else ``createdAt``."""
    updated = parse_timestamp(ticket.updated_at)
    if updated is not None:
        return updated
    return parse_timestamp(ticket.created_at)


def _recency_key(ticket: Ticket):
    timestamp = resolved_timestamp(ticket)
    # Tickets without a usable timestamp sort after every dated one.
    return (timestamp is not None, timestamp or _OLDEST)


def select_ticket(tickets: Optional[Sequence[Ticket]]) -> Optional[Ticket]:
    """Return the best ticket to move, or None only when there are no tickets."""
    if not tickets:
        return None

    for ticket in tickets:
        if ticket.status == OPEN_STATUS and ticket.is_active_demand is True:
            return ticket

    for ticket in tickets:
        if ticket.status == OPEN_STATUS:
            return ticket

    # sorted() is stable with reverse=True, so ties keep list order.
    return sorted(tickets, key=_recency_key, reverse=True)[0]
