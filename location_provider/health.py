from pydantic import BaseModel

from location_provider.backends.offline_database import IP2LocationReader, OfflineDatabaseBackend
from location_provider.capabilities import PROBE_IP
from location_provider.config import ProviderConfig
from location_provider.logger import logger
from location_provider.selector import ReaderFactory

DATABASE_NOT_FOUND = "The IP2Location BIN database file is not found."
DATABASE_CORRUPTED = "The IP2Location database file is corrupted."


class HealthStatus(BaseModel):
    """Outcome of a health check: ok, or the reason it is not."""

    ok: bool
    reason: str | None = None

    @classmethod
    def healthy(cls) -> "HealthStatus":
        return cls(ok=True)

    @classmethod
    def failed(cls, reason: str) -> "HealthStatus":
        return cls(ok=False, reason=reason)


def is_available(config: ProviderConfig) -> bool:
    """True when an API key is configured or a BIN database was found."""
    return config.has_api_key or config.database_path is not None


async def is_working(
    config: ProviderConfig,
    reader_factory: ReaderFactory = IP2LocationReader,
) -> HealthStatus:
    """Check that the provider is set up correctly.

    An API key is trusted as-is (reachability of the web service is not checked).
    Without one, the BIN database must exist and answer the probe lookup with a
    valid country code.
    """
    if config.has_api_key:
        return HealthStatus.healthy()

    if config.database_path is None or not config.database_path.is_file():
        logger.warning(f"IP2Location health check failed database_path={config.database_path} reason=not_found")
        return HealthStatus.failed(DATABASE_NOT_FOUND)

    backend = OfflineDatabaseBackend(reader_factory(config.database_path))
    raw = await backend.fetch(PROBE_IP)
    country_code = raw.get("countryCode") if raw is not None else None

    if not country_code or "invalid" in country_code.lower():
        logger.warning(
            f"IP2Location health check failed database_path={config.database_path} "
            f"reason=corrupted country_code={country_code!r}"
        )
        return HealthStatus.failed(DATABASE_CORRUPTED)

    return HealthStatus.healthy()
