"""Probe and report models for the connectivity status page."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Awaitable, Callable, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProbeStatus(str, Enum):
    """Outcome of a single probe."""

    OK = "ok"
    FAILED = "failed"


class OverallStatus(str, Enum):
    """Outcome of a whole run."""

    OK = "ok"
    ERROR = "error"


class ProbeResult(BaseModel):
    """Result of one probe within a request."""

    model_config = ConfigDict(frozen=True)

    name: str
    status: ProbeStatus
    detail: str
    error: Optional[str] = None
    latency_ms: int = 0

    @property
    def ok(self) -> bool:
        return self.status is ProbeStatus.OK


class HealthReport(BaseModel):
    """Ordered probe results plus the overall verdict."""

    model_config = ConfigDict(frozen=True)

    overall: OverallStatus
    probes: List[ProbeResult]
    error: Optional[str] = None
    checked_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def probe(self, name: str) -> Optional[ProbeResult]:
        """Look up a probe result by name."""
        for result in self.probes:
            if result.name == name:
                return result
        return None


@dataclass(frozen=True)
class ProbeSpec:
    """
    Static description of a probe.

    ``execute`` is a zero-argument coroutine function that returns the
    success detail or raises. ``fallback_detail`` is what the page shows
    when the probe did not succeed.
    """

    name: str
    critical: bool
    execute: Callable[[], Awaitable[str]]
    label: str = ""
    fallback_detail: str = ""
