"""Models for the queue transfer tool-call and the Z-Pro contact payload."""

from __future__ import annotations

import json
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

TicketId = Union[int, str]


class TransferArguments(BaseModel):
    """Arguments the AI orchestration layer passes to the transfer tool."""

    phone_number: str

    @field_validator("phone_number")
    @classmethod
    def validate_phone_number(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("phone_number must be provided")
        return cleaned


class ToolCallFunction(BaseModel):
    """The ``function`` block of a tool-call event."""

    name: Optional[str] = None
    arguments: TransferArguments

    @field_validator("arguments", mode="before")
    @classmethod
    def decode_arguments(cls, value: Any) -> Any:
        """Tool-call arguments often arrive JSON-encoded as a string."""
        if isinstance(value, str):
            try:
                return json.loads(value)
            except json.JSONDecodeError as exc:
                raise ValueError("arguments must be a JSON object") from exc
        return value


class ToolCallEvent(BaseModel):
    """Inbound tool-call envelope."""

    function: ToolCallFunction


class TransferRequest(BaseModel):
    """Per-invocation request: the caller's phone number."""

    phone_number: str

    @classmethod
    def from_tool_call(cls, payload: Any) -> "TransferRequest":
        """Validate a tool-call envelope and pull out the phone number."""
        event = ToolCallEvent.model_validate(payload)
        return cls(phone_number=event.function.arguments.phone_number)


class Ticket(BaseModel):
    """A Z-Pro ticket as returned by ``showcontact``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    # Only the id is typed; the rest is kept exactly as Z-Pro sent it so that
    # "open", `true` and date strings are matched literally during selection.
    id: TicketId
    status: Any = None
    is_active_demand: Any = Field(default=None, alias="isActiveDemand")
    created_at: Any = Field(default=None, alias="createdAt")
    updated_at: Any = Field(default=None, alias="updatedAt")


class Contact(BaseModel):
    """Z-Pro contact with its ticket history."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[TicketId] = None
    name: Any = None
    number: Any = None
    tickets: List[Ticket] = Field(default_factory=list)

    @field_validator("tickets", mode="before")
    @classmethod
    def default_tickets(cls, value: Any) -> Any:
        return [] if value is None else value


class TransferResult(BaseModel):
    """Outcome returned to the caller."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: Optional[str] = None
    ticket_id: Optional[TicketId] = Field(default=None, alias="ticketId")
    queue_id: Optional[int] = Field(default=None, exclude=True)
    error: Optional[str] = None
    details: Optional[str] = None

    def to_body(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
