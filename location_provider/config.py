import os
from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from location_provider.logger import logger

DEFAULT_WEB_SERVICE_URL = "https://api.ip2location.com/v2/"
DEFAULT_WEB_SERVICE_PACKAGE = "WS6"
DEFAULT_TIMEOUT_SECONDS = 30.0
DATABASE_SUFFIX = ".BIN"


class LookupMode(str, Enum):
    """Lookup modes recognized by the IP2Location provider."""

    web_service = "WS"
    offline_database = "BIN"


class Settings(BaseSettings):
    """Provider options loaded from environment variables (or a .env file)."""

    lookup_mode: LookupMode = Field(default=LookupMode.offline_database)
    api_key: str | None = Field(default=None)
    database_dir: Path = Field(
        default=Path("data"),
        description="Directory scanned (non-recursively) for an IP2Location *.BIN database.",
    )
    web_service_url: str = Field(default=DEFAULT_WEB_SERVICE_URL)
    web_service_package: str = Field(default=DEFAULT_WEB_SERVICE_PACKAGE)
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS)
    database_max_age_days: int = Field(
        default=60,
        description="Age after which the BIN database is reported as outdated.",
    )

    model_config = SettingsConfigDict(
        env_prefix="IP2LOCATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
    )


def find_database_path(directory: Path) -> Path | None:
    """Return the first file in `directory` whose name ends in .BIN (any case).

    The scan is shallow and follows the directory listing order, so with several
    candidates the pick depends on the filesystem.
    """
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.is_file() and entry.name[-4:].upper() == DATABASE_SUFFIX:
                    return Path(entry.path)
    except OSError as exc:
        logger.debug(f"Unable to scan database directory directory={directory} error={exc!r}")
    return None


class ProviderConfig(BaseModel):
    """Immutable configuration a provider call works against."""

    model_config = ConfigDict(frozen=True)

    lookup_mode: LookupMode = LookupMode.offline_database
    api_key: str | None = None
    database_path: Path | None = None
    web_service_url: str = DEFAULT_WEB_SERVICE_URL
    web_service_package: str = DEFAULT_WEB_SERVICE_PACKAGE
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    database_max_age_days: int = 60

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProviderConfig":
        """Build the config, resolving the database path once."""
        database_path = find_database_path(settings.database_dir)
        logger.info(
            "Resolved provider configuration "
            f"lookup_mode={settings.lookup_mode.value} api_key_set={bool(settings.api_key)} "
            f"database_path={database_path}"
        )
        return cls(
            lookup_mode=settings.lookup_mode,
            api_key=settings.api_key,
            database_path=database_path,
            web_service_url=settings.web_service_url,
            web_service_package=settings.web_service_package,
            timeout_seconds=settings.timeout_seconds,
            database_max_age_days=settings.database_max_age_days,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_provider_config() -> ProviderConfig:
    return ProviderConfig.from_settings(get_settings())
