"""
Database connectivity check.

Opens a single unpooled connection per call, asks the server for its time
and closes everything again. Credentials come from Secrets Manager unless
``DATABASE_URL`` is set (local runs against a docker Postgres).
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from repositories.postgres_repo import PostgresRepository, driver_message
from services.secret_service import SecretService
from utils.error_handling import DatabaseConnectionError
from utils.logging_config import get_logger

logger = get_logger(__name__)

NOW_QUERY = "SELECT NOW() AS now"
DRIVERNAME = "postgresql+psycopg2"


def format_db_time(value) -> str:
    """Render the server timestamp as ``YYYY-MM-DD HH:MM:SS`` (UTC when zoned)."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
        return value.strftime("%Y-%m-%d %H:%M:%S")
    return str(value)


class DatabaseService:
    """Resolve credentials, connect, run one query, disconnect."""

    def __init__(
        self,
        secret_service: Optional[SecretService],
        secret_id: str,
        database_url: Optional[str] = None,
        engine_factory: Callable[..., Engine] = create_engine,
    ):
        self.secret_service = secret_service
        self.secret_id = secret_id
        self.database_url = database_url
        self._engine_factory = engine_factory

    def _url(self) -> URL:
        if self.database_url:
            return make_url(self.database_url)
        creds = self.secret_service.get_credentials(self.secret_id)
        return URL.create(
            DRIVERNAME,
            username=creds.username,
            password=creds.password,
            host=creds.host,
            port=creds.effective_port(),
            database=creds.dbname,
        )

    def fetch_server_time(self) -> str:
        """Return the database's ``NOW()`` formatted for display."""
        url = self._url()
        try:
            engine = self._engine_factory(url, poolclass=NullPool)
        except SQLAlchemyError as exc:
            raise DatabaseConnectionError(driver_message(exc)) from exc

        try:
            value = PostgresRepository(engine).scalar(NOW_QUERY)
        finally:
            engine.dispose()

        logger.info("Database reachable", extra={"host": url.host})
        return format_db_time(value)
