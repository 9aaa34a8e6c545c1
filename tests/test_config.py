"""
Tests for settings loading
"""

import pytest
from pydantic import ValidationError

from relay_payload.config import Settings


@pytest.mark.unit
class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("RELAY_PAYLOAD_CLIENT_MUTATION_ID_LENGTH", raising=False)
        monkeypatch.delenv("RELAY_PAYLOAD_DEBUG", raising=False)

        settings = Settings(_env_file=None)

        assert settings.client_mutation_id_length == 32
        assert settings.debug is False
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("RELAY_PAYLOAD_CLIENT_MUTATION_ID_LENGTH", "16")
        monkeypatch.setenv("RELAY_PAYLOAD_DEBUG", "true")

        settings = Settings(_env_file=None)

        assert settings.client_mutation_id_length == 16
        assert settings.debug is True

    def test_rejects_non_positive_length(self, monkeypatch):
        monkeypatch.setenv("RELAY_PAYLOAD_CLIENT_MUTATION_ID_LENGTH", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
