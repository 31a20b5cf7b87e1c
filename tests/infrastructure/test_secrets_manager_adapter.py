"""Tests for SecretsManagerAdapter with a mocked boto3 client."""

import json
import os
from unittest.mock import MagicMock, patch

from price_factor.infrastructure.secrets.secrets_manager_adapter import SecretsManagerAdapter


def _client(secret: dict) -> MagicMock:
    client = MagicMock()
    client.get_secret_value.return_value = {"SecretString": json.dumps(secret)}
    return client


class TestSecretsManagerAdapter:
    def test_get_secret_parses_json(self):
        client = _client({"OPENAI_API_KEY": "sk-secret"})
        adapter = SecretsManagerAdapter(client=client)

        assert adapter.get_secret("arn:secret") == {"OPENAI_API_KEY": "sk-secret"}
        client.get_secret_value.assert_called_once_with(SecretId="arn:secret")

    def test_load_into_env(self):
        adapter = SecretsManagerAdapter(client=_client({"OPENAI_API_KEY": "sk-secret", "PRICE_HISTORY_DAYS": 14}))

        with patch.dict(os.environ, {}, clear=True):
            adapter.load_into_env("arn:secret")
            assert os.environ["OPENAI_API_KEY"] == "sk-secret"
            assert os.environ["PRICE_HISTORY_DAYS"] == "14"

    def test_default_client_uses_region(self):
        with patch("price_factor.infrastructure.secrets.secrets_manager_adapter.boto3") as boto3_mod:
            SecretsManagerAdapter(region="eu-central-1")
        boto3_mod.client.assert_called_once_with("secretsmanager", region_name="eu-central-1")
