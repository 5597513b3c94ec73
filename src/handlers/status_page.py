"""
Handler for GET /: connectivity status page.

Checks the private RDS instance (via the Secrets Manager credentials) and
outbound DNS, then renders the result as HTML. Collaborators are built on
the first invocation and reused while the container stays warm; nothing
else is shared between requests.
"""

from __future__ import annotations

import asyncio
from typing import Optional, Tuple

from utils.logging_config import get_logger
from utils.runtime_config import RuntimeConfig

logger = get_logger(__name__)

FALLBACK_HTML = (
    "<!DOCTYPE html><html lang=\"en\"><head><meta charset=\"UTF-8\">"
    "<title>Connection Error</title></head><body><h1>Connection Error</h1>"
    "<p>The status page could not be rendered.</p></body></html>"
)

# Lazy-loaded so importing the router does not create AWS clients.
_config: Optional[RuntimeConfig] = None
_probes: Optional[Tuple["ProbeSpec", ...]] = None


def _get_config() -> RuntimeConfig:
    global _config
    if _config is None:
        _config = RuntimeConfig.from_environment()
    return _config


def _get_probes():
    """Build the probe specs once per container."""
    global _probes
    if _probes is None:
        from services.probes import build_default_probes
        _probes = build_default_probes(_get_config())
    return _probes


def _html_response(status: int, html: str) -> dict:
    return {
        "statusCode": status,
        "headers": {
            "Content-Type": "text/html; charset=utf-8",
            "Cache-Control": "no-store",
        },
        "body": html,
    }


def lambda_handler(event, context):
    """Run the probes and return the rendered page."""
    from rendering.status_page import render_status_page
    from services.health_orchestrator import run_health_checks

    config = _get_config()
    try:
        specs = _get_probes()
        report = asyncio.run(run_health_checks(specs, short_circuit=config.short_circuit))
        status, html = render_status_page(report, specs)
    except Exception:
        logger.exception("Status page failed")
        return _html_response(500, FALLBACK_HTML)

    logger.info(
        "Status page served",
        extra={
            "status_code": status,
            "overall": report.overall.value,
            "request_id": getattr(context, "aws_request_id", None),
        },
    )
    return _html_response(status, html)
