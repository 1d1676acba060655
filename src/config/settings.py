"""
Runtime settings for the transfer Lambda.

Built once per process from environment variables and treated as immutable;
the handler injects it into the services instead of reading os.environ
mid-request.
"""

from dataclasses import dataclass
from typing import Optional
import os

DEFAULT_BASE_URL = "https://backend.cfcmais.com.br/v2/api/external"
DEFAULT_TENANT_ID = "6c969e8a-b200-49af-97fc-fbd223267d48"

# Enrolment ("matrícula") queue on Z-Pro.
DESTINATION_QUEUE_ID = 5


@dataclass(frozen=True)
class Settings:
    """Z-Pro connection settings."""

    bearer_token: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    tenant_id: str = DEFAULT_TENANT_ID
    destination_queue_id: int = DESTINATION_QUEUE_ID
    environment: str = "dev"

    @property
    def tenant_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.tenant_id}"

    @property
    def show_contact_url(self) -> str:
        return f"{self.tenant_url}/showcontact"

    @property
    def update_queue_url(self) -> str:
        return f"{self.tenant_url}/updatequeue"

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            bearer_token=os.environ.get("ZPRO_BEARER_TOKEN") or None,
            base_url=os.environ.get("ZPRO_BASE_URL", DEFAULT_BASE_URL),
            tenant_id=os.environ.get("ZPRO_TENANT_ID", DEFAULT_TENANT_ID),
            environment=os.environ.get("ENVIRONMENT", "dev"),
        )
