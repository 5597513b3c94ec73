"""
SecretService tests with a fake Secrets Manager client.

Run with: pytest tests/unit/test_secret_service.py -v
"""

import json
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from services.secret_service import SecretService
from utils.error_handling import SecretRetrievalError


def _client_returning(secret: dict) -> MagicMock:
    client = MagicMock()
    client.get_secret_value.return_value = {"SecretString": json.dumps(secret)}
    return client


class TestGetCredentials:
    def test_parses_rds_secret(self):
        client = _client_returning(
            {
                "host": "db.internal",
                "username": "status_user",
                "password": "s3cret",
                "dbname": "status",
                "port": 5433,
                "engine": "postgres",
                "dbInstanceIdentifier": "status-db",
            }
        )
        service = SecretService("us-west-1", client=client)

        creds = service.get_credentials("rds-db-credentials")

        client.get_secret_value.assert_called_once_with(SecretId="rds-db-credentials")
        assert creds.host == "db.internal"
        assert creds.username == "status_user"
        assert creds.dbname == "status"
        assert creds.effective_port() == 5433

    def test_defaults_port_and_dbname(self):
        client = _client_returning({"host": "h", "username": "u", "password": "p"})

        creds = SecretService("us-west-1", client=client).get_credentials("s")

        assert creds.effective_port() == 5432
        assert creds.dbname == "postgres"

    def test_password_not_in_repr(self):
        client = _client_returning({"host": "h", "username": "u", "password": "hunter2"})

        creds = SecretService("us-west-1", client=client).get_credentials("s")

        assert "hunter2" not in repr(creds)

    def test_client_error_is_translated(self):
        client = MagicMock()
        client.get_secret_value.side_effect = ClientError(
            {"Error": {"Code": "ResourceNotFoundException", "Message": "not found"}},
            "GetSecretValue",
        )

        with pytest.raises(SecretRetrievalError) as exc_info:
            SecretService("us-west-1", client=client).get_credentials("missing")

        assert "ResourceNotFoundException" in str(exc_info.value)
        assert exc_info.value.status_code == 500

    def test_network_error_is_translated(self):
        client = MagicMock()
        client.get_secret_value.side_effect = EndpointConnectionError(
            endpoint_url="https://secretsmanager.us-west-1.amazonaws.com"
        )

        with pytest.raises(SecretRetrievalError):
            SecretService("us-west-1", client=client).get_credentials("s")

    def test_missing_fields_are_named_without_leaking_values(self):
        client = _client_returning({"host": "h", "password": "hunter2"})

        with pytest.raises(SecretRetrievalError) as exc_info:
            SecretService("us-west-1", client=client).get_credentials("s")

        assert "username" in str(exc_info.value)
        assert "hunter2" not in str(exc_info.value)

    def test_malformed_json(self):
        client = MagicMock()
        client.get_secret_value.return_value = {"SecretString": "{not json"}

        with pytest.raises(SecretRetrievalError):
            SecretService("us-west-1", client=client).get_credentials("s")

    def test_binary_secret_is_rejected(self):
        client = MagicMock()
        client.get_secret_value.return_value = {"SecretBinary": b"\x00"}

        with pytest.raises(SecretRetrievalError):
            SecretService("us-west-1", client=client).get_credentials("s")

    def test_client_is_not_created_until_first_use(self):
        with patch("services.secret_service.boto3") as mock_boto3:
            service = SecretService("us-west-1")
            mock_boto3.client.assert_not_called()

            mock_boto3.client.return_value.get_secret_value.return_value = {
                "SecretString": json.dumps({"host": "h", "username": "u", "password": "p"})
            }
            service.get_credentials("s")
            service.get_credentials("s")

        mock_boto3.client.assert_called_once_with("secretsmanager", region_name="us-west-1")

    def test_invalid_region_is_translated(self):
        service = SecretService("not a region!")

        with pytest.raises(SecretRetrievalError, match="not a region!"):
            service.get_credentials("rds-db-credentials")
