"""
Health check orchestrator.

Runs an ordered sequence of probes and folds their outcomes into a
HealthReport. Probe failures never escape: each one becomes a FAILED
ProbeResult.

Policy per probe:
- critical failure: overall becomes ERROR and, when ``short_circuit`` is
  on, every later probe is reported as skipped without running.
- non-critical failure: the probe's ``fallback_detail`` replaces the
  detail, the raw message is kept in ``error``, and the run continues.
"""

from __future__ import annotations

import time
from typing import List, Optional, Sequence

from models.health import (
    HealthReport,
    OverallStatus,
    ProbeResult,
    ProbeSpec,
    ProbeStatus,
)
from utils.logging_config import get_logger

logger = get_logger(__name__)

SKIPPED_DETAIL = "skipped due to prior critical failure"


def _error_message(exc: BaseException) -> str:
    return str(exc).strip() or exc.__class__.__name__


def _skipped(spec: ProbeSpec) -> ProbeResult:
    return ProbeResult(name=spec.name, status=ProbeStatus.FAILED, detail=SKIPPED_DETAIL)


async def _run_probe(spec: ProbeSpec) -> ProbeResult:
    start = time.perf_counter()
    try:
        detail = await spec.execute()
    except Exception as exc:
        latency_ms = int((time.perf_counter() - start) * 1000)
        message = _error_message(exc)
        log = logger.error if spec.critical else logger.warning
        log(
            "Probe failed",
            extra={
                "probe": spec.name,
                "critical": spec.critical,
                "error": message,
                "error_type": exc.__class__.__name__,
                "latency_ms": latency_ms,
            },
        )
        if spec.critical:
            return ProbeResult(
                name=spec.name,
                status=ProbeStatus.FAILED,
                detail=message,
                error=message,
                latency_ms=latency_ms,
            )
        return ProbeResult(
            name=spec.name,
            status=ProbeStatus.FAILED,
            detail=spec.fallback_detail or message,
            error=message,
            latency_ms=latency_ms,
        )

    latency_ms = int((time.perf_counter() - start) * 1000)
    logger.info("Probe succeeded", extra={"probe": spec.name, "latency_ms": latency_ms})
    return ProbeResult(
        name=spec.name,
        status=ProbeStatus.OK,
        detail=str(detail),
        latency_ms=latency_ms,
    )


async def run_health_checks(
    specs: Sequence[ProbeSpec], short_circuit: bool = True
) -> HealthReport:
    """Run ``specs`` in order and return the aggregated report."""
    results: List[ProbeResult] = []
    critical_error: Optional[str] = None

    for spec in specs:
        if critical_error is not None and short_circuit:
            results.append(_skipped(spec))
            continue

        result = await _run_probe(spec)
        results.append(result)
        if spec.critical and not result.ok and critical_error is None:
            critical_error = result.error

    overall = OverallStatus.ERROR if critical_error is not None else OverallStatus.OK
    report = HealthReport(overall=overall, probes=results, error=critical_error)
    logger.info(
        "Health checks finished",
        extra={
            "overall": overall.value,
            "probes": {r.name: r.status.value for r in results},
        },
    )
    return report
