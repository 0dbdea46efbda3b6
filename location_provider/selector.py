from collections.abc import Callable
from pathlib import Path

from location_provider.backends.base import BaseLocationBackend
from location_provider.backends.offline_database import DatabaseReader, IP2LocationReader, OfflineDatabaseBackend
from location_provider.backends.web_service import WebServiceBackend
from location_provider.config import LookupMode, ProviderConfig
from location_provider.logger import logger

ReaderFactory = Callable[[Path], DatabaseReader]


def select_backend(
    config: ProviderConfig,
    reader_factory: ReaderFactory = IP2LocationReader,
) -> BaseLocationBackend | None:
    """Pick the backend for a configuration, or None when neither is usable.

    The web service wins when it is the configured mode and an API key is set;
    otherwise a resolved BIN database is used, whatever the configured mode.
    """
    if config.lookup_mode is LookupMode.web_service and config.has_api_key:
        logger.debug("Selected IP2Location web service backend")
        return WebServiceBackend(
            api_key=config.api_key,
            base_url=config.web_service_url,
            package=config.web_service_package,
            timeout_seconds=config.timeout_seconds,
        )

    if config.database_path is not None:
        logger.debug(f"Selected IP2Location BIN database backend database_path={config.database_path}")
        return OfflineDatabaseBackend(reader_factory(config.database_path))

    logger.debug(f"No IP2Location backend available lookup_mode={config.lookup_mode.value}")
    return None
