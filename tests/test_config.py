"""Application Configuration: defaults and environment overrides."""

import pytest
from pydantic import ValidationError

from gateway.config import TESTNET_PASSPHRASE, Settings


def test_defaults_target_testnet(monkeypatch):
    monkeypatch.delenv("HORIZON_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.network_passphrase == TESTNET_PASSPHRASE
    assert settings.horizon_url == "https://horizon-testnet.stellar.org"
    assert settings.base_fee == 100


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("HORIZON_URL", "https://horizon.example.org/")
    monkeypatch.setenv("BASE_FEE", "250")
    monkeypatch.setenv("NETWORK_PASSPHRASE", "Public Global Stellar Network ; September 2015")
    settings = Settings(_env_file=None)
    assert settings.horizon_url == "https://horizon.example.org"
    assert settings.base_fee == 250
    assert settings.network_passphrase.startswith("Public")


@pytest.mark.parametrize("fee", ["0", "-5"])
def test_base_fee_must_be_positive(monkeypatch, fee):
    monkeypatch.setenv("BASE_FEE", fee)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
