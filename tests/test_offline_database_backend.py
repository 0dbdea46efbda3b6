import struct
import threading
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import IP2Location
import pytest

from location_provider.backends.offline_database import IP2LocationReader, OfflineDatabaseBackend
from location_provider.errors import DatabaseReadError
from location_provider.models.location import BackendKind
from tests.common import GOOGLE_DB11_RECORD, NOT_SUPPORTED, BrokenReader, FakeReader


class FakeIP2LocationDatabase:
    """Stand-in for IP2Location.IP2Location that remembers how it was used."""

    instances: list["FakeIP2LocationDatabase"] = []

    def __init__(self, filename: str, record: Any = None, error: Exception | None = None) -> None:
        self.filename = filename
        self._record = record
        self._error = error
        self.closed = False
        self.queried: list[str] = []
        FakeIP2LocationDatabase.instances.append(self)

    def get_all(self, ip: str) -> Any:
        self.queried.append(ip)
        if self._error is not None:
            raise self._error
        return self._record

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def _reset_fake_instances() -> None:
    FakeIP2LocationDatabase.instances = []


def _patch_database(monkeypatch: pytest.MonkeyPatch, record: Any = None, error: Exception | None = None) -> None:
    def _factory(filename: str) -> FakeIP2LocationDatabase:
        return FakeIP2LocationDatabase(filename, record=record, error=error)

    monkeypatch.setattr(IP2Location, "IP2Location", _factory)


@pytest.mark.asyncio
async def test_fetch_returns_reader_record() -> None:
    reader = FakeReader(GOOGLE_DB11_RECORD)
    backend = OfflineDatabaseBackend(reader)

    result = await backend.fetch("8.8.8.8")

    assert backend.kind is BackendKind.offline_database
    assert result == GOOGLE_DB11_RECORD
    assert reader.queried == ["8.8.8.8"]


@pytest.mark.asyncio
async def test_fetch_read_error_returns_none() -> None:
    backend = OfflineDatabaseBackend(BrokenReader())

    assert await backend.fetch("8.8.8.8") is None


def test_reader_maps_record_attributes(monkeypatch: pytest.MonkeyPatch) -> None:
    record = SimpleNamespace(
        country_short="US",
        country_long="United States of America",
        region="California",
        city="Mountain View",
        latitude=37.405991,
        longitude=-122.078514,
        isp=NOT_SUPPORTED,
        zipcode="94043",
    )
    _patch_database(monkeypatch, record=record)

    raw = IP2LocationReader(Path("/data/IP2LOCATION-LITE-DB11.BIN")).lookup("8.8.8.8")

    assert raw == {
        "countryCode": "US",
        "countryName": "United States of America",
        "regionName": "California",
        "cityName": "Mountain View",
        "latitude": "37.405991",
        "longitude": "-122.078514",
        "isp": NOT_SUPPORTED,
    }
    database = FakeIP2LocationDatabase.instances[0]
    assert database.filename == "/data/IP2LOCATION-LITE-DB11.BIN"
    assert database.queried == ["8.8.8.8"]
    assert database.closed


def test_reader_skips_missing_attributes(monkeypatch: pytest.MonkeyPatch) -> None:
    record = SimpleNamespace(country_short="FR", country_long="France", region=None)
    _patch_database(monkeypatch, record=record)

    raw = IP2LocationReader(Path("db.bin")).lookup("1.1.1.1")

    assert raw == {"countryCode": "FR", "countryName": "France"}


def test_reader_no_record_returns_empty_mapping(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_database(monkeypatch, record=None)

    assert IP2LocationReader(Path("db.bin")).lookup("10.0.0.1") == {}


@pytest.mark.parametrize(
    "error",
    [
        struct.error("unpack requires a buffer of 4 bytes"),
        ValueError("Invalid IP address"),
        IndexError("list index out of range"),
        OSError("Input/output error"),
    ],
)
def test_reader_lookup_failure_raises_and_closes(monkeypatch: pytest.MonkeyPatch, error: Exception) -> None:
    _patch_database(monkeypatch, error=error)

    with pytest.raises(DatabaseReadError):
        IP2LocationReader(Path("db.bin")).lookup("8.8.8.8")

    assert FakeIP2LocationDatabase.instances[0].closed


def test_reader_open_failure_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    def _failing_open(filename: str) -> None:
        raise FileNotFoundError(2, "No such file or directory", filename)

    monkeypatch.setattr(IP2Location, "IP2Location", _failing_open)

    with pytest.raises(DatabaseReadError):
        IP2LocationReader(Path("missing.BIN")).lookup("8.8.8.8")


@pytest.mark.asyncio
async def test_backend_over_real_reader_degrades_on_corrupt_file(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_database(monkeypatch, error=struct.error("unpack requires a buffer of 4 bytes"))
    backend = OfflineDatabaseBackend(IP2LocationReader(Path("corrupt.BIN")))

    assert await backend.fetch("8.8.8.8") is None


def test_reader_empty_file_raises_read_error(tmp_path: Path) -> None:
    path = tmp_path / "IP2LOCATION-LITE-DB1.BIN"
    path.write_bytes(b"")

    with pytest.raises(DatabaseReadError):
        IP2LocationReader(path).lookup("8.8.8.8")


@pytest.mark.asyncio
async def test_backend_empty_file_returns_none(tmp_path: Path) -> None:
    path = tmp_path / "IP2LOCATION-LITE-DB1.BIN"
    path.write_bytes(b"")

    assert await OfflineDatabaseBackend(IP2LocationReader(path)).fetch("8.8.8.8") is None


class ThreadRecordingReader(FakeReader):
    def __init__(self, record: dict[str, str]) -> None:
        super().__init__(record)
        self.thread_ids: list[int] = []

    def lookup(self, ip: str) -> dict[str, str]:
        self.thread_ids.append(threading.get_ident())
        return super().lookup(ip)


@pytest.mark.asyncio
async def test_fetch_reads_outside_event_loop_thread() -> None:
    reader = ThreadRecordingReader(GOOGLE_DB11_RECORD)

    result = await OfflineDatabaseBackend(reader).fetch("8.8.8.8")

    assert result == GOOGLE_DB11_RECORD
    assert reader.thread_ids
    assert reader.thread_ids[0] != threading.get_ident()
