"""Lightweight helpers for handling caller data."""

from typing import Optional


def mask_phone_number(phone_number: Optional[str], visible: int = 4) -> str:
    """Keep only the trailing digits of a phone number for logging."""
    if not phone_number:
        return ""
    if len(phone_number) <= visible:
        return "*" * len(phone_number)
    return "*" * (len(phone_number) - visible) + phone_number[-visible:]
