"""
Runtime configuration for the status Lambda.

Values come from the Lambda environment and fall back to the defaults the
stack was first deployed with.
"""

from dataclasses import dataclass
from typing import Optional
import os


@dataclass(frozen=True)
class RuntimeConfig:
    """Settings read once per cold start."""

    region: str = "us-west-1"
    secret_name: str = "rds-db-credentials"
    dns_hostname: str = "google.com"
    # False keeps probing after a database failure instead of skipping.
    short_circuit: bool = True
    database_url: Optional[str] = None
    environment: str = "dev"

    @classmethod
    def from_environment(cls) -> "RuntimeConfig":
        """Load settings from environment variables."""
        independent = os.environ.get("INDEPENDENT_PROBES", "false").lower() == "true"
        return cls(
            region=os.environ.get("REGION") or cls.region,
            secret_name=os.environ.get("SECRET_NAME") or cls.secret_name,
            dns_hostname=os.environ.get("DNS_HOSTNAME") or cls.dns_hostname,
            short_circuit=not independent,
            database_url=os.environ.get("DATABASE_URL") or None,
            environment=os.environ.get("ENVIRONMENT", "dev"),
        )
