from pathlib import Path

import pytest

from location_provider.backends.offline_database import IP2LocationReader, OfflineDatabaseBackend
from location_provider.backends.web_service import WebServiceBackend
from location_provider.config import LookupMode, ProviderConfig, find_database_path
from location_provider.selector import select_backend
from tests.common import GOOGLE_DB11_RECORD, FakeReader, reader_factory_for

DATABASE_PATH = Path("/data/IP2LOCATION-LITE-DB11.BIN")


def test_web_service_mode_with_key_selects_web_service() -> None:
    config = ProviderConfig(
        lookup_mode=LookupMode.web_service,
        api_key="demo-key",
        database_path=DATABASE_PATH,
        web_service_package="WS3",
        timeout_seconds=10.0,
    )

    backend = select_backend(config)

    assert isinstance(backend, WebServiceBackend)
    assert backend._api_key == "demo-key"
    assert backend._package == "WS3"
    assert backend._timeout_seconds == 10.0


def test_web_service_mode_without_key_falls_back_to_database() -> None:
    config = ProviderConfig(lookup_mode=LookupMode.web_service, api_key=None, database_path=DATABASE_PATH)

    backend = select_backend(config)

    assert isinstance(backend, OfflineDatabaseBackend)


def test_database_mode_ignores_api_key() -> None:
    reader = FakeReader(GOOGLE_DB11_RECORD)
    config = ProviderConfig(lookup_mode=LookupMode.offline_database, api_key="demo-key", database_path=DATABASE_PATH)

    backend = select_backend(config, reader_factory_for(reader))

    assert isinstance(backend, OfflineDatabaseBackend)


def test_database_backend_reads_resolved_path() -> None:
    config = ProviderConfig(database_path=DATABASE_PATH)

    backend = select_backend(config)

    assert isinstance(backend, OfflineDatabaseBackend)
    assert isinstance(backend._reader, IP2LocationReader)
    assert backend._reader.path == DATABASE_PATH


@pytest.mark.parametrize("lookup_mode", list(LookupMode))
def test_nothing_configured_selects_nothing(lookup_mode: LookupMode) -> None:
    assert select_backend(ProviderConfig(lookup_mode=lookup_mode, api_key="")) is None


def test_find_database_path_matches_suffix_case_insensitively(tmp_path: Path) -> None:
    (tmp_path / "README.txt").write_text("lite database")
    (tmp_path / "ip2location-lite-db11.bin").write_bytes(b"\x00")

    assert find_database_path(tmp_path) == tmp_path / "ip2location-lite-db11.bin"


def test_find_database_path_is_shallow_and_skips_directories(tmp_path: Path) -> None:
    (tmp_path / "archive.BIN").mkdir()
    (tmp_path / "archive.BIN" / "IP2LOCATION-LITE-DB1.BIN").write_bytes(b"\x00")

    assert find_database_path(tmp_path) is None


def test_find_database_path_needs_exact_suffix(tmp_path: Path) -> None:
    (tmp_path / "IP2LOCATION-LITE-DB1.BIN.zip").write_bytes(b"\x00")
    (tmp_path / "BIN").write_bytes(b"\x00")

    assert find_database_path(tmp_path) is None


def test_find_database_path_missing_directory(tmp_path: Path) -> None:
    assert find_database_path(tmp_path / "missing") is None
