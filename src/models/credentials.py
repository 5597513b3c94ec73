"""Database credentials as stored in the RDS-managed secret."""

from typing import Optional
from pydantic import BaseModel, Field


class DbCredentials(BaseModel):
    """Subset of the RDS secret JSON needed to open a connection."""

    host: str
    username: str
    password: str = Field(repr=False)
    dbname: str = "postgres"
    port: Optional[int] = None
    engine: Optional[str] = None

    def effective_port(self) -> int:
        return self.port or 5432
