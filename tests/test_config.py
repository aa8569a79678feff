import pytest

from daraza_core.config import DEFAULT_BASE_URL, DarazaConfig, __version__


def test_from_env(monkeypatch):
    monkeypatch.setenv("DARAZA_AUTH_SALT", "one")
    monkeypatch.setenv("DARAZA_SECURE_AUTH_SALT", "two")
    monkeypatch.setenv("DARAZA_BASE_URL", "https://sandbox.daraza.net/api/")
    monkeypatch.delenv("DARAZA_STORAGE_PROVIDER", raising=False)

    cfg = DarazaConfig.from_env()
    assert cfg.auth_salt == "one"
    assert cfg.base_url == "https://sandbox.daraza.net/api"
    assert cfg.storage_provider == "sqlite"
    assert cfg.user_agent == f"Daraza-Python-Client/{__version__}"


def test_from_env_requires_salts(monkeypatch):
    monkeypatch.delenv("DARAZA_AUTH_SALT", raising=False)
    monkeypatch.setenv("DARAZA_SECURE_AUTH_SALT", "two")
    with pytest.raises(RuntimeError):
        DarazaConfig.from_env()


def test_defaults():
    cfg = DarazaConfig(auth_salt="a", secure_auth_salt="b")
    assert cfg.base_url == DEFAULT_BASE_URL


def test_from_env_normalises_log_level_and_transport(monkeypatch):
    monkeypatch.setenv("DARAZA_AUTH_SALT", "one")
    monkeypatch.setenv("DARAZA_SECURE_AUTH_SALT", "two")
    monkeypatch.setenv("DARAZA_LOG_LEVEL", "verbose")
    monkeypatch.setenv("DARAZA_TRANSPORT", "HTTP")

    cfg = DarazaConfig.from_env()
    assert cfg.log_level == "INFO"
    assert cfg.transport == "http"
