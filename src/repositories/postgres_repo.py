"""PostgreSQL repository using SQLAlchemy Core."""

from typing import Any, Optional
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from utils.error_handling import DatabaseConnectionError, DatabaseQueryError


def driver_message(exc: SQLAlchemyError) -> str:
    """Return the DBAPI error text without SQLAlchemy's background link."""
    original = getattr(exc, "orig", None)
    message = str(original) if original is not None else str(exc)
    return message.strip() or exc.__class__.__name__


class PostgresRepository:
    """Thin wrapper keeping connect and query failures apart."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def fetch_one(self, query: str, params: Optional[dict] = None) -> Optional[dict]:
        """Execute a SELECT and return one row as dict."""
        try:
            conn = self.engine.connect()
        except SQLAlchemyError as exc:
            raise DatabaseConnectionError(driver_message(exc)) from exc

        with conn:
            try:
                row = conn.execute(text(query), params or {}).fetchone()
            except SQLAlchemyError as exc:
                raise DatabaseQueryError(driver_message(exc)) from exc
            return dict(row._mapping) if row else None

    def scalar(self, query: str, params: Optional[dict] = None) -> Any:
        """Execute a SELECT and return the first column of the first row."""
        row = self.fetch_one(query, params)
        if row is None:
            raise DatabaseQueryError("Query returned no rows")
        return next(iter(row.values()))
