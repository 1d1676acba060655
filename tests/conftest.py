"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from handlers import transfer` to work
when running tests, simulating the Lambda environment where code
is deployed from the src/ directory.
"""

import json
import os
import sys
from pathlib import Path

import httpx
import pytest


def _ensure_paths_on_sys_path() -> None:
    """Add src/ to sys.path if missing.

    Lambda's asset root is src/, so handlers import `models`, `services`
    and `utils` as top-level packages.
    """
    src_str = str(Path(__file__).resolve().parents[1] / "src")
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_paths_on_sys_path()

os.environ.setdefault("ENVIRONMENT", "dev")
os.environ.setdefault("ZPRO_BEARER_TOKEN", "test-token")
os.environ.setdefault("ZPRO_BASE_URL", "https://zpro.test/v2/api/external")
os.environ.setdefault("ZPRO_TENANT_ID", "tenant-1")


class FakeZPro:
    """Records requests and answers them from per-endpoint responses."""

    def __init__(self):
        self.requests = []
        self.responses = {
            "showcontact": httpx.Response(200, json={"tickets": []}),
            "updatequeue": httpx.Response(200, json={"message": "ok"}),
        }

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.rsplit("/", 1)[-1]
        response = self.responses[endpoint]
        if isinstance(response, Exception):
            raise response
        return response

    def calls(self, endpoint: str):
        return [
            json.loads(r.content)
            for r in self.requests
            if r.url.path.endswith(f"/{endpoint}")
        ]


@pytest.fixture
def fake_zpro():
    return FakeZPro()


@pytest.fixture
def settings():
    from config.settings import Settings

    return Settings(
        bearer_token="test-token",
        base_url="https://zpro.test/v2/api/external",
        tenant_id="tenant-1",
    )


@pytest.fixture
def zpro_client(settings, fake_zpro):
    from services.zpro_client import ZProClient

    return ZProClient(settings, httpx.Client(transport=httpx.MockTransport(fake_zpro)))
