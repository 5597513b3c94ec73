"""Liveness handler: answers without touching the database or network."""

import json
from datetime import datetime, timezone

from utils.runtime_config import RuntimeConfig


def lambda_handler(event, context):
    """Return a simple 200 response to verify the function is deployed."""
    config = RuntimeConfig.from_environment()
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json", "Cache-Control": "no-store"},
        "body": json.dumps(
            {
                "status": "ok",
                "environment": config.environment,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        ),
    }
