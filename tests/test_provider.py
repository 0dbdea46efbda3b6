import os
import time
from http import HTTPStatus
from pathlib import Path

import httpx
import pytest

from location_provider.config import LookupMode, ProviderConfig
from location_provider.health import DATABASE_NOT_FOUND
from location_provider.models.location import ALWAYS_SUPPORTED_FIELDS, LocationFieldId
from location_provider.provider import LocationProvider, mask_api_key
from location_provider.regions.resolver import RegionResolver
from tests.common import (
    GOOGLE_DB11_RECORD,
    GOOGLE_WEB_SERVICE_PAYLOAD,
    FakeReader,
    MockAsyncClient,
    MockResponse,
    make_fake_async_client,
    reader_factory_for,
)


@pytest.fixture
def database_file(tmp_path: Path) -> Path:
    path = tmp_path / "IP2LOCATION-LITE-DB11.BIN"
    path.write_bytes(b"\x00" * 64)
    return path


def _database_provider(path: Path, record=GOOGLE_DB11_RECORD, **kwargs) -> LocationProvider:
    config = ProviderConfig(database_path=path, **kwargs)
    return LocationProvider(config, reader_factory=reader_factory_for(FakeReader(record)))


@pytest.mark.asyncio
async def test_get_location_from_database(database_file: Path) -> None:
    provider = _database_provider(database_file)

    location = await provider.get_location("8.8.8.8")

    assert provider.active_lookup_mode() is LookupMode.offline_database
    assert location.value(LocationFieldId.city_name) == "Mountain View"
    assert location.value(LocationFieldId.region_code) == "CA"
    assert not location.is_supported(LocationFieldId.isp)


@pytest.mark.asyncio
async def test_get_location_from_web_service(monkeypatch: pytest.MonkeyPatch) -> None:
    response = MockResponse(status_code=HTTPStatus.OK, payload=GOOGLE_WEB_SERVICE_PAYLOAD)
    monkeypatch.setattr(httpx, "AsyncClient", make_fake_async_client(response))
    provider = LocationProvider(ProviderConfig(lookup_mode=LookupMode.web_service, api_key="demo-key"))

    location = await provider.get_location("8.8.8.8")

    assert provider.active_lookup_mode() is LookupMode.web_service
    assert location.value(LocationFieldId.isp) == "Google LLC"


@pytest.mark.asyncio
async def test_get_location_uses_injected_region_resolver(database_file: Path) -> None:
    provider = LocationProvider(
        ProviderConfig(database_path=database_file),
        region_resolver=RegionResolver({"US": (("06", "CALIFORNIA"),)}),
        reader_factory=reader_factory_for(FakeReader(GOOGLE_DB11_RECORD)),
    )

    location = await provider.get_location("8.8.8.8")

    assert location.value(LocationFieldId.region_code) == "06"


@pytest.mark.asyncio
async def test_unavailable_provider() -> None:
    provider = LocationProvider(ProviderConfig(api_key=""))

    assert provider.active_lookup_mode() is None
    assert not provider.is_available()
    assert await provider.get_location("8.8.8.8") is None
    assert await provider.get_supported_location_info() == set(ALWAYS_SUPPORTED_FIELDS)
    assert (await provider.is_working()).reason == DATABASE_NOT_FOUND


@pytest.mark.asyncio
async def test_supported_location_info_for_database(database_file: Path) -> None:
    provider = _database_provider(database_file)

    supported = await provider.get_supported_location_info()

    assert supported == set(LocationFieldId) - {LocationFieldId.isp}


@pytest.mark.asyncio
async def test_is_working_with_database(database_file: Path) -> None:
    assert (await _database_provider(database_file).is_working()).ok


def test_info_identity() -> None:
    info = LocationProvider(ProviderConfig()).get_info()

    assert info.id == "ip2location"
    assert info.title == "IP2Location"
    assert info.order == 5
    assert "IPv6" in info.description
    assert info.links
    assert info.lookup_mode is None
    assert info.database_file is None


def test_info_web_service_masks_api_key() -> None:
    config = ProviderConfig(lookup_mode=LookupMode.web_service, api_key="ABCDEF123456")

    info = LocationProvider(config).get_info()

    assert info.lookup_mode is LookupMode.web_service
    assert info.api_key == "********3456"
    assert info.database_file is None


def test_info_fresh_database(database_file: Path) -> None:
    info = _database_provider(database_file).get_info()

    assert info.lookup_mode is LookupMode.offline_database
    assert info.database_file == "IP2LOCATION-LITE-DB11.BIN"
    assert info.database_date is not None
    assert info.database_outdated is False
    assert info.api_key is None


def test_info_outdated_database(database_file: Path) -> None:
    ninety_days_ago = time.time() - 90 * 24 * 3600
    os.utime(database_file, (ninety_days_ago, ninety_days_ago))

    info = _database_provider(database_file).get_info()

    assert info.database_outdated is True


def test_info_outdated_uses_configured_age(database_file: Path) -> None:
    ten_days_ago = time.time() - 10 * 24 * 3600
    os.utime(database_file, (ten_days_ago, ten_days_ago))

    assert _database_provider(database_file, database_max_age_days=7).get_info().database_outdated is True
    assert _database_provider(database_file, database_max_age_days=30).get_info().database_outdated is False


def test_info_database_gone_keeps_file_name(tmp_path: Path) -> None:
    info = _database_provider(tmp_path / "IP2LOCATION-LITE-DB1.BIN").get_info()

    assert info.database_file == "IP2LOCATION-LITE-DB1.BIN"
    assert info.database_date is None
    assert info.database_outdated is None


@pytest.mark.parametrize(
    "api_key, expected",
    [
        ("ABCDEF123456", "********3456"),
        ("12345", "*2345"),
        ("1234", "****"),
        ("ab", "**"),
    ],
)
def test_mask_api_key(api_key: str, expected: str) -> None:
    assert mask_api_key(api_key) == expected


@pytest.mark.asyncio
async def test_web_service_capabilities_are_probed_once(monkeypatch: pytest.MonkeyPatch) -> None:
    response = MockResponse(status_code=HTTPStatus.OK, payload=GOOGLE_WEB_SERVICE_PAYLOAD)
    created: list[MockAsyncClient] = []
    monkeypatch.setattr(httpx, "AsyncClient", make_fake_async_client(response, created))
    provider = LocationProvider(ProviderConfig(lookup_mode=LookupMode.web_service, api_key="demo-key"))

    first = await provider.get_supported_location_info()
    second = await provider.get_supported_location_info()

    assert first == second == set(LocationFieldId)
    assert len(created) == 1


@pytest.mark.asyncio
async def test_degraded_web_service_probe_is_retried(monkeypatch: pytest.MonkeyPatch) -> None:
    response = MockResponse(status_code=HTTPStatus.OK, payload={"response": "INSUFFICIENT CREDIT"})
    created: list[MockAsyncClient] = []
    monkeypatch.setattr(httpx, "AsyncClient", make_fake_async_client(response, created))
    provider = LocationProvider(ProviderConfig(lookup_mode=LookupMode.web_service, api_key="demo-key"))

    assert await provider.get_supported_location_info() == set(ALWAYS_SUPPORTED_FIELDS)
    assert await provider.get_supported_location_info() == set(ALWAYS_SUPPORTED_FIELDS)
    assert len(created) == 2


@pytest.mark.asyncio
async def test_database_capabilities_are_probed_every_time(database_file: Path) -> None:
    reader = FakeReader(GOOGLE_DB11_RECORD)
    provider = LocationProvider(ProviderConfig(database_path=database_file), reader_factory=reader_factory_for(reader))

    await provider.get_supported_location_info()
    await provider.get_supported_location_info()

    assert reader.queried == ["8.8.8.8", "8.8.8.8"]
