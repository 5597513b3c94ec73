"""Default probe set: database (critical) then internet (non-critical)."""

from __future__ import annotations

import asyncio
from typing import Optional, Tuple

from models.health import ProbeSpec
from services.database_service import DatabaseService
from services.dns_service import DnsService
from services.secret_service import SecretService
from utils.runtime_config import RuntimeConfig

DATABASE_OFFLINE = "Not connected to RDS"
INTERNET_OFFLINE = "Not connected to Internet"


def build_default_probes(
    config: RuntimeConfig,
    database_service: Optional[DatabaseService] = None,
    dns_service: Optional[DnsService] = None,
) -> Tuple[ProbeSpec, ...]:
    """Wire collaborators into the ordered probe specs."""
    if database_service is None:
        secret_service = None if config.database_url else SecretService(config.region)
        database_service = DatabaseService(
            secret_service,
            config.secret_name,
            database_url=config.database_url,
        )
    dns = dns_service or DnsService()

    async def check_database() -> str:
        # boto3 and psycopg2 block, keep them off the event loop.
        return await asyncio.to_thread(database_service.fetch_server_time)

    async def check_internet() -> str:
        return await dns.lookup(config.dns_hostname)

    host_label = "Google" if config.dns_hostname == "google.com" else config.dns_hostname
    return (
        ProbeSpec(
            name="database",
            critical=True,
            execute=check_database,
            label="Database Time",
            fallback_detail=DATABASE_OFFLINE,
        ),
        ProbeSpec(
            name="internet",
            critical=False,
            execute=check_internet,
            label=f"{host_label} IP",
            fallback_detail=INTERNET_OFFLINE,
        ),
    )
