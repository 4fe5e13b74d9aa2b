import pytest

from billplz import ConfigError, Environment
from billplz.settings import load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("BILLPLZ_API_KEY", "BILLPLZ_ENVIRONMENT", "BILLPLZ_BASE_URL", "BILLPLZ_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


def write_config(tmp_path, text):
    path = tmp_path / "config.toml"
    path.write_text(text, encoding="utf-8")
    return path


def test_config_from_env_vars(monkeypatch, tmp_path):
    monkeypatch.setenv("BILLPLZ_API_KEY", "env-test-key")
    monkeypatch.setenv("BILLPLZ_ENVIRONMENT", "staging")

    settings = load_settings(tmp_path / "missing.toml")

    assert settings.api_key == "env-test-key"
    assert settings.environment == "staging"


def test_config_from_file(tmp_path):
    path = write_config(tmp_path, 'api_key = "file-test-key"\nenvironment = "production"\n')

    settings = load_settings(path)

    assert settings.api_key == "file-test-key"
    assert settings.environment == "production"


def test_env_vars_override_config_file(monkeypatch, tmp_path):
    monkeypatch.setenv("BILLPLZ_API_KEY", "env-key")
    monkeypatch.setenv("BILLPLZ_ENVIRONMENT", "staging")
    path = write_config(tmp_path, 'api_key = "file-key"\nenvironment = "production"\n')

    settings = load_settings(path)

    assert settings.api_key == "env-key"
    assert settings.environment == "staging"


def test_environment_defaults_to_staging(monkeypatch, tmp_path):
    monkeypatch.setenv("BILLPLZ_API_KEY", "k")

    settings = load_settings(tmp_path / "missing.toml")

    assert settings.environment == "staging"
    assert settings.into_client().environment is Environment.STAGING


def test_missing_api_key_errors(tmp_path):
    with pytest.raises(ConfigError):
        load_settings(tmp_path / "nonexistent.toml")


def test_into_client_production(tmp_path):
    path = write_config(tmp_path, 'api_key = "k"\nenvironment = "production"\n')

    client = load_settings(path).into_client()

    assert client.base_url == "https://www.billplz.com"
    assert client.api_key == "k"


def test_base_url_override(monkeypatch, tmp_path):
    monkeypatch.setenv("BILLPLZ_API_KEY", "k")
    monkeypatch.setenv("BILLPLZ_BASE_URL", "http://localhost:9000")

    client = load_settings(tmp_path / "missing.toml").into_client()

    assert client.base_url == "http://localhost:9000"
    assert client.environment is None


def test_malformed_config_file_falls_back_to_env(monkeypatch, tmp_path):
    monkeypatch.setenv("BILLPLZ_API_KEY", "env-key")
    path = write_config(tmp_path, "api_key = \n")

    settings = load_settings(path)

    assert settings.api_key == "env-key"
    assert settings.environment == "staging"


def test_badly_typed_config_value_falls_back_to_env(monkeypatch, tmp_path):
    monkeypatch.setenv("BILLPLZ_API_KEY", "env-key")
    path = write_config(tmp_path, 'timeout = "soon"\n')

    settings = load_settings(path)

    assert settings.api_key == "env-key"
    assert settings.timeout is None


def test_malformed_config_file_without_env_key_errors(tmp_path):
    path = write_config(tmp_path, "api_key = \n")

    with pytest.raises(ConfigError, match="API key not found"):
        load_settings(path)


def test_invalid_env_value_is_config_error(monkeypatch, tmp_path):
    monkeypatch.setenv("BILLPLZ_API_KEY", "k")
    monkeypatch.setenv("BILLPLZ_TIMEOUT", "soon")

    with pytest.raises(ConfigError):
        load_settings(tmp_path / "missing.toml")
