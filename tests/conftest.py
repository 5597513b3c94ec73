"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from handlers import main` to work when running
tests, simulating the Lambda environment where code is deployed from the
src/ directory.
"""

import os
import sys
from pathlib import Path
from typing import Callable, List, Optional

import boto3
import pytest


def _ensure_paths_on_sys_path() -> None:
    """Add repository root AND src/ to sys.path if missing.

    The src/ directory is added to simulate Lambda's import behavior,
    where Code.from_asset("src") makes src/ the root of the package.
    """
    repo_root = Path(__file__).resolve().parents[1]
    src_root = repo_root / "src"

    # Add repo root first (for imports like infrastructure.*)
    root_str = str(repo_root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)

    # Add src/ for Lambda-style imports (from handlers import ...)
    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_paths_on_sys_path()

# Ensure boto3 has offline-friendly defaults so tests do not require AWS access.
os.environ.setdefault("AWS_REGION", "us-west-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-west-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "test")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "test")
os.environ.setdefault("AWS_SESSION_TOKEN", "test")
os.environ.setdefault("ENVIRONMENT", "dev")

# Lambda environment variables used by handlers
os.environ.setdefault("REGION", "us-west-1")
os.environ.setdefault("SECRET_NAME", "rds-db-credentials")

# Create a default boto3 session so clients do not error during import.
boto3.setup_default_session(region_name="us-west-1")


class ProbeFactory:
    """Build ProbeSpecs backed by canned results and record executions."""

    def __init__(self) -> None:
        self.calls: List[str] = []

    def __call__(
        self,
        name: str,
        *,
        critical: bool = False,
        detail: Optional[str] = None,
        error: Optional[BaseException] = None,
        label: str = "",
        fallback: str = "",
    ):
        from models.health import ProbeSpec

        async def execute() -> str:
            self.calls.append(name)
            if error is not None:
                raise error
            return detail

        return ProbeSpec(
            name=name,
            critical=critical,
            execute=execute,
            label=label,
            fallback_detail=fallback,
        )


@pytest.fixture
def make_probe() -> Callable[..., object]:
    """Factory for fake probes; ``make_probe.calls`` lists executed names."""
    return ProbeFactory()


@pytest.fixture
def default_like_probes(make_probe):
    """Return a builder for database/internet probes shaped like production."""

    def build(db_detail=None, db_error=None, dns_detail=None, dns_error=None):
        return (
            make_probe(
                "database",
                critical=True,
                detail=db_detail,
                error=db_error,
                label="Database Time",
                fallback="Not connected to RDS",
            ),
            make_probe(
                "internet",
                critical=False,
                detail=dns_detail,
                error=dns_error,
                label="Google IP",
                fallback="Not connected to Internet",
            ),
        )

    return build
