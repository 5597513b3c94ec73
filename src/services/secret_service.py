"""
Secrets Manager access for database credentials.

The RDS-managed secret is a JSON document; only the connection fields are
validated, the rest (engine, dbInstanceIdentifier, ...) is ignored.
"""

from __future__ import annotations

from botocore.exceptions import BotoCoreError, ClientError
import boto3
from pydantic import ValidationError

from models.credentials import DbCredentials
from utils.error_handling import SecretRetrievalError
from utils.logging_config import get_logger

logger = get_logger(__name__)


class SecretService:
    """Read and parse the database secret."""

    def __init__(self, region: str, client=None):
        self.region = region
        self._client = client

    def _get_client(self):
        """Create the Secrets Manager client on first use."""
        if self._client is None:
            self._client = boto3.client("secretsmanager", region_name=self.region)
        return self._client

    def get_credentials(self, secret_id: str) -> DbCredentials:
        """Fetch ``secret_id`` and return its connection fields."""
        try:
            response = self._get_client().get_secret_value(SecretId=secret_id)
        except (ClientError, BotoCoreError) as exc:
            logger.error(
                "Failed to load DB secret",
                extra={"secret_id": secret_id, "error": str(exc)},
            )
            raise SecretRetrievalError(str(exc)) from exc

        secret_string = response.get("SecretString")
        if not secret_string:
            raise SecretRetrievalError(f"Secret {secret_id} has no SecretString")

        try:
            return DbCredentials.model_validate_json(secret_string)
        except ValidationError as exc:
            # The secret value itself must never reach the logs or the page.
            fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err["loc"])
            raise SecretRetrievalError(
                f"Secret {secret_id} is not valid database credentials ({fields or 'malformed JSON'})"
            ) from exc
