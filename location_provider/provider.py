from datetime import datetime, timedelta, timezone

from pydantic import BaseModel

from location_provider.backends.base import BaseLocationBackend
from location_provider.backends.offline_database import IP2LocationReader
from location_provider.capabilities import probe_capabilities
from location_provider.config import LookupMode, ProviderConfig
from location_provider.health import HealthStatus, is_available, is_working
from location_provider.logger import logger
from location_provider.models.location import (
    ALWAYS_SUPPORTED_FIELDS,
    BackendKind,
    CanonicalLocation,
    LocationFieldId,
)
from location_provider.normalizer import normalize
from location_provider.regions.resolver import RegionResolver, default_region_resolver
from location_provider.selector import ReaderFactory, select_backend

DESCRIPTION = (
    "This location provider uses the IP2Location database to detect the location of your visitors. "
    "It supports both IPv4 and IPv6 addresses, and lookups can use either a local BIN database "
    "or the IP2Location web service."
)
INSTALL_DOCS = (
    "For the BIN database option, put an IP2Location BIN database file into the configured database "
    "directory. For the web service option, set the lookup mode to WS and provide an API key."
)
LINKS = (
    "https://lite.ip2location.com/",
    "https://www.ip2location.com/",
    "https://www.ip2location.com/web-service/ip2location/",
)

BACKEND_LOOKUP_MODES: dict[BackendKind, LookupMode] = {
    BackendKind.web_service: LookupMode.web_service,
    BackendKind.offline_database: LookupMode.offline_database,
}


class ProviderInfo(BaseModel):
    """Descriptive information about the provider and its current setup."""

    id: str
    title: str
    order: int
    description: str
    install_docs: str
    links: list[str]
    lookup_mode: LookupMode | None = None
    api_key: str | None = None
    database_file: str | None = None
    database_date: datetime | None = None
    database_outdated: bool | None = None


def mask_api_key(api_key: str) -> str:
    """Keep only the last four characters of an API key visible."""
    visible = api_key[-4:] if len(api_key) > 4 else ""
    return "*" * (len(api_key) - len(visible)) + visible


class LocationProvider:
    """IP2Location provider bound to one configuration.

    Chooses between the web service and the BIN database on every call and runs
    results through the normalizer.
    """

    ID = "ip2location"
    TITLE = "IP2Location"
    ORDER = 5

    def __init__(
        self,
        config: ProviderConfig,
        region_resolver: RegionResolver = default_region_resolver,
        reader_factory: ReaderFactory = IP2LocationReader,
    ) -> None:
        self.config = config
        self._region_resolver = region_resolver
        self._reader_factory = reader_factory
        self._web_service_capabilities: set[LocationFieldId] | None = None

    def select_backend(self) -> BaseLocationBackend | None:
        return select_backend(self.config, self._reader_factory)

    def active_lookup_mode(self) -> LookupMode | None:
        """Lookup mode the provider would use right now, or None if unavailable."""
        backend = self.select_backend()
        if backend is None:
            return None
        return BACKEND_LOOKUP_MODES[backend.kind]

    async def get_location(self, ip: str) -> CanonicalLocation | None:
        """Look up an IP; None means no backend is available."""
        backend = self.select_backend()
        if backend is None:
            return None

        raw = await backend.fetch(ip)
        location = normalize(raw, backend.kind, self._region_resolver)
        logger.debug(
            f"Normalized location ip={ip} backend={backend.kind.value} "
            f"supported={sorted(field.value for field in location.supported_fields())}"
        )
        return location

    async def get_supported_location_info(self) -> set[LocationFieldId]:
        """Fields the selected backend can supply.

        A web service probe uses a query credit. Its result is kept for the life of
        the provider unless it yielded only the country fields. BIN probes rerun
        on every call.
        """
        backend = self.select_backend()
        if backend is None:
            return set(ALWAYS_SUPPORTED_FIELDS)

        if backend.kind is not BackendKind.web_service:
            return await probe_capabilities(backend, self._region_resolver)

        if self._web_service_capabilities is None:
            capabilities = await probe_capabilities(backend, self._region_resolver)
            if capabilities == ALWAYS_SUPPORTED_FIELDS:
                return capabilities
            self._web_service_capabilities = capabilities
        return set(self._web_service_capabilities)

    def is_available(self) -> bool:
        return is_available(self.config)

    async def is_working(self) -> HealthStatus:
        return await is_working(self.config, self._reader_factory)

    def get_info(self) -> ProviderInfo:
        info = ProviderInfo(
            id=self.ID,
            title=self.TITLE,
            order=self.ORDER,
            description=DESCRIPTION,
            install_docs=INSTALL_DOCS,
            links=list(LINKS),
        )

        if self.config.lookup_mode is LookupMode.web_service:
            info.lookup_mode = LookupMode.web_service
            info.api_key = mask_api_key(self.config.api_key) if self.config.api_key else None
        elif self.config.database_path is not None:
            info.lookup_mode = LookupMode.offline_database
            info.database_file = self.config.database_path.name
            self._add_database_date(info)

        return info

    def _add_database_date(self, info: ProviderInfo) -> None:
        try:
            modified = self.config.database_path.stat().st_mtime
        except OSError as exc:
            logger.warning(f"Unable to stat IP2Location database path={self.config.database_path} error={exc}")
            return

        info.database_date = datetime.fromtimestamp(modified, tz=timezone.utc)
        max_age = timedelta(days=self.config.database_max_age_days)
        info.database_outdated = datetime.now(tz=timezone.utc) - info.database_date > max_age
