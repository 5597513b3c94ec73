"""Pydantic models shared by handlers and services."""

from models.credentials import DbCredentials  # noqa: F401
from models.health import (  # noqa: F401
    HealthReport,
    OverallStatus,
    ProbeResult,
    ProbeSpec,
    ProbeStatus,
)
