import pytest
from pydantic import ValidationError

from pricing_api.utils.config_loader import ORACLE_BASE_URL, load_service_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PORT", "PRICING_UPSTREAM_URL", "INTEGRATIONS_MODE", "PRICING_CONFIG_PATH"):
        monkeypatch.delenv(name, raising=False)


def test_shipped_config_defaults():
    cfg = load_service_config()
    assert cfg.server.port == 3000
    assert cfg.upstream.base_url == ORACLE_BASE_URL
    assert cfg.upstream.pricing_timeout_seconds == 10
    assert cfg.upstream.validation_timeout_seconds == 5
    assert cfg.integrations_mode == "real"


def test_port_env_override(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert load_service_config().server.port == 8080


def test_invalid_port_fails_validation(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    with pytest.raises(ValidationError):
        load_service_config()


def test_upstream_and_mode_env_overrides(monkeypatch):
    monkeypatch.setenv("PRICING_UPSTREAM_URL", "http://localhost:9000/ords/")
    monkeypatch.setenv("INTEGRATIONS_MODE", "mock")
    cfg = load_service_config()
    assert cfg.upstream.base_url == "http://localhost:9000/ords"
    assert cfg.integrations_mode == "mock"


def test_yaml_file_is_loaded(tmp_path):
    path = tmp_path / "service_config.yml"
    path.write_text("server:\n  port: 4100\nupstream:\n  pricing_timeout_seconds: 2.5\n", encoding="utf-8")
    cfg = load_service_config(path)
    assert cfg.server.port == 4100
    assert cfg.upstream.pricing_timeout_seconds == 2.5
    assert cfg.upstream.validation_timeout_seconds == 5


def test_config_path_env(monkeypatch, tmp_path):
    path = tmp_path / "custom.yml"
    path.write_text("service_name: Staging Pricing\n", encoding="utf-8")
    monkeypatch.setenv("PRICING_CONFIG_PATH", str(path))
    assert load_service_config().service_name == "Staging Pricing"


def test_missing_explicit_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_service_config(tmp_path / "missing.yml")
