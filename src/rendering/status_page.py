"""
Render a HealthReport as the HTML status page.

Templates live next to this module so they ship inside the Lambda asset.
Autoescaping is on: probe details and error messages come from remote
systems.
"""

from pathlib import Path
from typing import List, Sequence, Tuple

from jinja2 import Environment, FileSystemLoader, select_autoescape

from models.health import HealthReport, OverallStatus, ProbeSpec

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
SUCCESS_MESSAGE = "Connected to private RDS and Internet"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def _success_rows(
    specs: Sequence[ProbeSpec], report: HealthReport
) -> List[Tuple[str, str]]:
    rows = [("Message", SUCCESS_MESSAGE)]
    for spec in specs:
        result = report.probe(spec.name)
        if result is None:
            continue
        rows.append((spec.label or spec.name, result.detail))
    return rows


def _error_rows(specs: Sequence[ProbeSpec]) -> List[Tuple[str, str]]:
    # Every probe is shown as offline, whatever it individually reported.
    return [
        (spec.name.capitalize(), spec.fallback_detail or "Unavailable")
        for spec in specs
    ]


def render_status_page(
    report: HealthReport, specs: Sequence[ProbeSpec]
) -> Tuple[int, str]:
    """Return ``(status_code, html)`` for ``report``."""
    if report.overall is OverallStatus.OK:
        html = _env.get_template("status.html").render(
            title="Connection Status",
            heading_color="#2c3e50",
            rows=_success_rows(specs, report),
        )
        return 200, html

    html = _env.get_template("error.html").render(
        title="Connection Error",
        heading_color="#e74c3c",
        rows=_error_rows(specs),
        error=report.error,
    )
    return 500, html
