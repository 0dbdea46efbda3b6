import struct
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

import IP2Location
from fastapi.concurrency import run_in_threadpool

from location_provider.backends.base import BaseLocationBackend, RawBackendResult
from location_provider.errors import DatabaseReadError
from location_provider.logger import logger
from location_provider.models.location import BackendKind

# Raw key -> attribute of IP2Location.IP2LocationRecord.
RECORD_FIELDS: dict[str, str] = {
    "countryCode": "country_short",
    "countryName": "country_long",
    "regionName": "region",
    "cityName": "city",
    "latitude": "latitude",
    "longitude": "longitude",
    "isp": "isp",
}


class DatabaseReader(Protocol):
    """Anything that can read one record out of an IP2Location BIN database."""

    def lookup(self, ip: str) -> Mapping[str, str]: ...


class IP2LocationReader:
    """DatabaseReader backed by the IP2Location library.

    The file is opened for every lookup and closed right after, so a database
    replaced on disk is picked up without restarting the process.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def lookup(self, ip: str) -> dict[str, str]:
        try:
            database = IP2Location.IP2Location(str(self.path))
        except (OSError, ValueError, IndexError, struct.error) as exc:
            # An empty or truncated file fails while the header is unpacked.
            raise DatabaseReadError(f"Unable to open IP2Location database {self.path}: {exc!r}") from exc

        try:
            record = database.get_all(ip)
        except (OSError, ValueError, IndexError, struct.error) as exc:
            raise DatabaseReadError(f"Unable to read IP2Location database {self.path}: {exc!r}") from exc
        finally:
            database.close()

        raw: dict[str, str] = {}
        if record is None:
            return raw
        for key, attribute in RECORD_FIELDS.items():
            value = getattr(record, attribute, None)
            if value is not None:
                raw[key] = str(value)
        return raw


class OfflineDatabaseBackend(BaseLocationBackend):
    """Backend for a local IP2Location BIN database."""

    kind = BackendKind.offline_database

    def __init__(self, reader: DatabaseReader) -> None:
        self._reader = reader

    async def fetch(self, ip: str) -> RawBackendResult | None:
        """Read the raw record for an IP, or None when the database can't be read.

        The reader does blocking file I/O, so it runs in the threadpool.
        """
        try:
            return dict(await run_in_threadpool(self._reader.lookup, ip))
        except DatabaseReadError as exc:
            logger.warning(f"IP2Location database lookup failed ip={ip} error={exc}")
            return None
