"""
Pydantic model validation tests.

Ensures the tool-call envelope and Z-Pro payload models validate correctly
and reject invalid data.

Run with: pytest tests/unit/test_models.py -v
"""

import json

import pytest
from pydantic import ValidationError

from models.transfer import Contact, Ticket, TransferRequest, TransferResult


class TestTransferRequest:
    """Extracting the phone number from a tool-call envelope."""

    def test_from_object_arguments(self):
        request = TransferRequest.from_tool_call(
            {"function": {"name": "transfer", "arguments": {"phone_number": "5511999999999"}}}
        )
        assert request.phone_number == "5511999999999"

    def test_from_string_arguments(self):
        request = TransferRequest.from_tool_call(
            {"function": {"arguments": json.dumps({"phone_number": "5511999999999"})}}
        )
        assert request.phone_number == "5511999999999"

    def test_extra_arguments_are_ignored(self):
        request = TransferRequest.from_tool_call(
            {"function": {"arguments": {"phone_number": "55119", "reason": "matrícula"}}}
        )
        assert request.phone_number == "55119"

    @pytest.mark.parametrize("phone_number", ["", "  ", None, 5511999999999])
    def test_rejects_missing_or_non_string_phone(self, phone_number):
        with pytest.raises(ValidationError):
            TransferRequest.from_tool_call(
                {"function": {"arguments": {"phone_number": phone_number}}}
            )

    def test_rejects_non_object_arguments_string(self):
        with pytest.raises(ValidationError):
            TransferRequest.from_tool_call({"function": {"arguments": "[1, 2"}})


class TestContact:
    """Z-Pro showcontact payload."""

    def test_parses_camel_case_ticket_fields(self):
        contact = Contact.model_validate(
            {
                "id": 10,
                "number": "5511999999999",
                "extraInfo": [],
                "tickets": [
                    {
                        "id": 42,
                        "status": "open",
                        "isActiveDemand": True,
                        "createdAt": "2024-01-01T10:00:00.000Z",
                        "updatedAt": "2024-01-02T10:00:00.000Z",
                        "queueId": 2,
                    }
                ],
            }
        )
        ticket = contact.tickets[0]
        assert ticket.id == 42
        assert ticket.is_active_demand is True
        assert ticket.created_at == "2024-01-01T10:00:00.000Z"
        assert ticket.updated_at == "2024-01-02T10:00:00.000Z"

    def test_missing_tickets_is_empty(self):
        assert Contact.model_validate({}).tickets == []

    def test_ticket_fields_are_kept_verbatim(self):
        ticket = Ticket.model_validate(
            {"id": 5, "status": 3, "isActiveDemand": "true", "updatedAt": 1704067200000}
        )
        assert ticket.status == 3
        assert ticket.is_active_demand == "true"
        assert ticket.updated_at == 1704067200000

    def test_ticket_requires_id(self):
        with pytest.raises(ValidationError):
            Ticket.model_validate({"status": "open"})

    def test_ticket_is_read_only(self):
        ticket = Ticket.model_validate({"id": "abc"})
        with pytest.raises(ValidationError):
            ticket.status = "closed"


class TestTransferResult:
    """Caller-facing body."""

    def test_success_body_uses_camel_case_and_hides_queue(self):
        result = TransferResult(success=True, message="ok", ticket_id=42, queue_id=5)
        assert result.to_body() == {"success": True, "message": "ok", "ticketId": 42}

    def test_failure_body_omits_ticket_fields(self):
        result = TransferResult(success=False, error="Failed to transfer chat.", details="boom")
        assert result.to_body() == {
            "success": False,
            "error": "Failed to transfer chat.",
            "details": "boom",
        }
