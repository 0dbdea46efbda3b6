from http import HTTPStatus

import httpx
import pytest

from location_provider.backends.offline_database import OfflineDatabaseBackend
from location_provider.backends.web_service import WebServiceBackend
from location_provider.capabilities import PROBE_IP, probe_capabilities
from location_provider.models.location import ALWAYS_SUPPORTED_FIELDS, LocationFieldId
from tests.common import (
    GOOGLE_DB1_RECORD,
    GOOGLE_DB11_RECORD,
    GOOGLE_WEB_SERVICE_PAYLOAD,
    NOT_SUPPORTED,
    BrokenReader,
    FailingAsyncClient,
    FakeReader,
    MockAsyncClient,
    MockResponse,
    make_fake_async_client,
)


@pytest.mark.asyncio
async def test_probe_uses_fixed_address() -> None:
    reader = FakeReader(GOOGLE_DB11_RECORD)

    await probe_capabilities(OfflineDatabaseBackend(reader))

    assert reader.queried == [PROBE_IP]


@pytest.mark.asyncio
async def test_city_edition_supports_everything_but_isp() -> None:
    capabilities = await probe_capabilities(OfflineDatabaseBackend(FakeReader(GOOGLE_DB11_RECORD)))

    assert capabilities == set(LocationFieldId) - {LocationFieldId.isp}


@pytest.mark.asyncio
async def test_country_edition_supports_only_country_and_continent() -> None:
    capabilities = await probe_capabilities(OfflineDatabaseBackend(FakeReader(GOOGLE_DB1_RECORD)))

    assert capabilities == set(ALWAYS_SUPPORTED_FIELDS)


@pytest.mark.asyncio
async def test_region_code_follows_region_name_even_without_a_match() -> None:
    record = {**GOOGLE_DB11_RECORD, "regionName": "Atlantis"}

    capabilities = await probe_capabilities(OfflineDatabaseBackend(FakeReader(record)))

    assert LocationFieldId.region_name in capabilities
    assert LocationFieldId.region_code in capabilities


@pytest.mark.asyncio
async def test_longitude_follows_latitude() -> None:
    record = {**GOOGLE_DB1_RECORD, "latitude": "37.405991", "longitude": NOT_SUPPORTED}

    capabilities = await probe_capabilities(OfflineDatabaseBackend(FakeReader(record)))

    assert {LocationFieldId.latitude, LocationFieldId.longitude} <= capabilities


@pytest.mark.asyncio
async def test_unreadable_database_reports_only_country_and_continent() -> None:
    capabilities = await probe_capabilities(OfflineDatabaseBackend(BrokenReader()))

    assert capabilities == set(ALWAYS_SUPPORTED_FIELDS)


@pytest.mark.asyncio
async def test_web_service_package_with_all_fields(monkeypatch: pytest.MonkeyPatch) -> None:
    response = MockResponse(status_code=HTTPStatus.OK, payload=GOOGLE_WEB_SERVICE_PAYLOAD)
    created: list[MockAsyncClient] = []
    monkeypatch.setattr(httpx, "AsyncClient", make_fake_async_client(response, created))

    capabilities = await probe_capabilities(WebServiceBackend(api_key="demo-key"))

    assert capabilities == set(LocationFieldId)
    assert created[0].requests[0][1]["ip"] == PROBE_IP


@pytest.mark.asyncio
async def test_web_service_error_wrapper_reports_only_country_and_continent(monkeypatch: pytest.MonkeyPatch) -> None:
    response = MockResponse(status_code=HTTPStatus.OK, payload={"response": "INVALID ACCOUNT"})
    monkeypatch.setattr(httpx, "AsyncClient", make_fake_async_client(response))

    capabilities = await probe_capabilities(WebServiceBackend(api_key="bad-key"))

    assert capabilities == set(ALWAYS_SUPPORTED_FIELDS)


@pytest.mark.asyncio
async def test_web_service_network_failure_reports_only_country_and_continent(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(
        httpx,
        "AsyncClient",
        lambda *args, **kwargs: FailingAsyncClient("https://api.ip2location.com/v2/", httpx.ConnectError),
    )

    capabilities = await probe_capabilities(WebServiceBackend(api_key="demo-key"))

    assert capabilities == set(ALWAYS_SUPPORTED_FIELDS)
