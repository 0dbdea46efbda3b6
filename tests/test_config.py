from pathlib import Path

import pytest
from pydantic import ValidationError

from location_provider.config import LookupMode, ProviderConfig, Settings

ENV_VARS = (
    "IP2LOCATION_LOOKUP_MODE",
    "IP2LOCATION_API_KEY",
    "IP2LOCATION_DATABASE_DIR",
    "IP2LOCATION_WEB_SERVICE_URL",
    "IP2LOCATION_WEB_SERVICE_PACKAGE",
    "IP2LOCATION_TIMEOUT_SECONDS",
    "IP2LOCATION_DATABASE_MAX_AGE_DAYS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the picture.
    monkeypatch.chdir(tmp_path)


def test_defaults() -> None:
    settings = Settings()

    assert settings.lookup_mode is LookupMode.offline_database
    assert settings.api_key is None
    assert settings.database_dir == Path("data")
    assert settings.web_service_url == "https://api.ip2location.com/v2/"
    assert settings.web_service_package == "WS6"
    assert settings.timeout_seconds == 30.0
    assert settings.database_max_age_days == 60


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("IP2LOCATION_LOOKUP_MODE", "WS")
    monkeypatch.setenv("IP2LOCATION_API_KEY", "demo-key")
    monkeypatch.setenv("IP2LOCATION_DATABASE_DIR", str(tmp_path))
    monkeypatch.setenv("IP2LOCATION_WEB_SERVICE_PACKAGE", "WS3")
    monkeypatch.setenv("IP2LOCATION_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("IP2LOCATION_DATABASE_MAX_AGE_DAYS", "30")

    settings = Settings()

    assert settings.lookup_mode is LookupMode.web_service
    assert settings.api_key == "demo-key"
    assert settings.database_dir == tmp_path
    assert settings.web_service_package == "WS3"
    assert settings.timeout_seconds == 5.0
    assert settings.database_max_age_days == 30


def test_empty_api_key_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IP2LOCATION_API_KEY", "")

    assert Settings().api_key is None


def test_settings_from_env_file(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("IP2LOCATION_LOOKUP_MODE=WS\nIP2LOCATION_API_KEY=from-file\n")

    settings = Settings()

    assert settings.lookup_mode is LookupMode.web_service
    assert settings.api_key == "from-file"


def test_provider_config_resolves_database_path(tmp_path: Path) -> None:
    database_dir = tmp_path / "misc"
    database_dir.mkdir()
    (database_dir / "IP2LOCATION-LITE-DB3.BIN").write_bytes(b"\x00")

    config = ProviderConfig.from_settings(Settings(database_dir=database_dir, api_key="demo-key"))

    assert config.database_path == database_dir / "IP2LOCATION-LITE-DB3.BIN"
    assert config.api_key == "demo-key"
    assert config.has_api_key


def test_provider_config_without_database(tmp_path: Path) -> None:
    config = ProviderConfig.from_settings(Settings(database_dir=tmp_path / "missing"))

    assert config.database_path is None
    assert not config.has_api_key


def test_provider_config_is_immutable() -> None:
    config = ProviderConfig()

    with pytest.raises(ValidationError):
        config.api_key = "changed"
