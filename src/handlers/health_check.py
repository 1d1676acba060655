"""Lightweight health check handler."""

import json
from datetime import datetime, timezone

from config.settings import Settings


def lambda_handler(event, context):
    """Return a 200 response reporting whether the Z-Pro token is configured."""
    settings = Settings.from_environment()
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(
            {
                "status": "ok",
                "environment": settings.environment,
                "zpro_configured": bool(settings.bearer_token),
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        ),
    }
