"""Pydantic models for the transfer tool-call and Z-Pro payloads."""

from models.transfer import (  # noqa: F401
    Contact,
    Ticket,
    ToolCallEvent,
    ToolCallFunction,
    TransferArguments,
    TransferRequest,
    TransferResult,
)
