import json
from collections.abc import Iterator
from http import HTTPStatus
from pathlib import Path

import httpx
import pytest
from fastapi import Request
from fastapi.testclient import TestClient

from location_provider.config import LookupMode, ProviderConfig
from location_provider.errors import InvalidIpError
from location_provider.exception_handlers import invalid_ip_exception_handler
from location_provider.main import app, get_location_provider
from location_provider.provider import LocationProvider
from tests.common import (
    GOOGLE_DB1_RECORD,
    GOOGLE_DB11_RECORD,
    GOOGLE_WEB_SERVICE_PAYLOAD,
    FakeReader,
    MockResponse,
    make_fake_async_client,
    reader_factory_for,
)


@pytest.fixture
def database_file(tmp_path: Path) -> Path:
    path = tmp_path / "IP2LOCATION-LITE-DB11.BIN"
    path.write_bytes(b"\x00" * 64)
    return path


@pytest.fixture
def client() -> Iterator[TestClient]:
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _use_provider(provider: LocationProvider) -> None:
    app.dependency_overrides[get_location_provider] = lambda: provider


def _database_provider(path: Path, reader: FakeReader) -> LocationProvider:
    return LocationProvider(ProviderConfig(database_path=path), reader_factory=reader_factory_for(reader))


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_lookup_explicit_ip_from_database(client: TestClient, database_file: Path) -> None:
    reader = FakeReader(GOOGLE_DB11_RECORD)
    _use_provider(_database_provider(database_file, reader))

    response = client.get("/v1/ip/lookup?ip=8.8.8.8")

    assert response.status_code == 200
    body = response.json()
    assert reader.queried == ["8.8.8.8"]
    assert body["ip"] == "8.8.8.8"
    assert body["lookup_mode"] == "BIN"
    assert body["country_code"] == "US"
    assert body["continent_name"] == "North America"
    assert body["region_code"] == "CA"
    assert body["city_name"] == "Mountain View"
    assert body["latitude"] == pytest.approx(37.405991)
    assert body["isp"] is None
    assert body["supported_fields"] == [
        "country_code",
        "country_name",
        "continent_code",
        "continent_name",
        "region_code",
        "region_name",
        "city_name",
        "latitude",
        "longitude",
    ]


def test_lookup_from_web_service(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    response = MockResponse(status_code=HTTPStatus.OK, payload=GOOGLE_WEB_SERVICE_PAYLOAD)
    monkeypatch.setattr(httpx, "AsyncClient", make_fake_async_client(response))
    _use_provider(LocationProvider(ProviderConfig(lookup_mode=LookupMode.web_service, api_key="demo-key")))

    body = client.get("/v1/ip/lookup?ip=8.8.8.8").json()

    assert body["lookup_mode"] == "WS"
    assert body["isp"] == "Google LLC"
    assert "isp" in body["supported_fields"]


def test_lookup_uses_forwarded_for_when_ip_omitted(client: TestClient, database_file: Path) -> None:
    reader = FakeReader(GOOGLE_DB1_RECORD)
    _use_provider(_database_provider(database_file, reader))

    response = client.get("/v1/ip/lookup", headers={"X-Forwarded-For": "1.2.3.4, 10.0.0.1"})

    assert response.status_code == 200
    assert response.json()["ip"] == "1.2.3.4"
    assert reader.queried == ["1.2.3.4"]


def test_lookup_blank_ip_uses_connection_address(client: TestClient, database_file: Path) -> None:
    reader = FakeReader(GOOGLE_DB1_RECORD)
    _use_provider(_database_provider(database_file, reader))

    response = client.get("/v1/ip/lookup?ip=")

    assert response.status_code == 200
    # TestClient connects as "testclient".
    assert reader.queried == ["testclient"]


def test_lookup_invalid_ip_returns_400(client: TestClient, database_file: Path) -> None:
    reader = FakeReader(GOOGLE_DB11_RECORD)
    _use_provider(_database_provider(database_file, reader))

    response = client.get("/v1/ip/lookup?ip=qwerty")

    assert response.status_code == 400
    assert response.json()["code"] == "invalid_ip"
    assert reader.queried == []


def test_lookup_without_backend_returns_503(client: TestClient) -> None:
    _use_provider(LocationProvider(ProviderConfig(api_key="")))

    response = client.get("/v1/ip/lookup?ip=8.8.8.8")

    assert response.status_code == 503
    assert response.json()["detail"]["code"] == "provider_unavailable"


def test_provider_status_with_database(client: TestClient, database_file: Path) -> None:
    _use_provider(_database_provider(database_file, FakeReader(GOOGLE_DB11_RECORD)))

    body = client.get("/v1/provider").json()

    assert body["id"] == "ip2location"
    assert body["order"] == 5
    assert body["lookup_mode"] == "BIN"
    assert body["database_file"] == "IP2LOCATION-LITE-DB11.BIN"
    assert body["database_outdated"] is False
    assert body["available"] is True
    assert body["working"] is True
    assert body["reason"] is None
    assert "isp" not in body["supported_fields"]
    assert "region_code" in body["supported_fields"]


def test_provider_status_unavailable(client: TestClient) -> None:
    _use_provider(LocationProvider(ProviderConfig(api_key="")))

    body = client.get("/v1/provider").json()

    assert body["available"] is False
    assert body["working"] is False
    assert body["reason"] == "The IP2Location BIN database file is not found."
    assert body["supported_fields"] == []


def test_provider_status_masks_api_key(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    response = MockResponse(status_code=HTTPStatus.OK, payload={"response": "INVALID ACCOUNT"})
    monkeypatch.setattr(httpx, "AsyncClient", make_fake_async_client(response))
    _use_provider(LocationProvider(ProviderConfig(lookup_mode=LookupMode.web_service, api_key="ABCDEF123456")))

    body = client.get("/v1/provider").json()

    assert body["lookup_mode"] == "WS"
    assert body["api_key"] == "********3456"
    assert body["working"] is True
    assert body["supported_fields"] == ["country_code", "country_name", "continent_code", "continent_name"]


def test_lookup_explicit_ipv6_is_canonicalized(client: TestClient, database_file: Path) -> None:
    reader = FakeReader(GOOGLE_DB1_RECORD)
    _use_provider(_database_provider(database_file, reader))

    response = client.get("/v1/ip/lookup", params={"ip": "2001:4860:4860:0:0:0:0:8888"})

    assert response.json()["ip"] == "2001:4860:4860::8888"
    assert reader.queried == ["2001:4860:4860::8888"]


@pytest.mark.asyncio
async def test_invalid_ip_error_maps_to_400() -> None:
    request = Request({"type": "http", "method": "GET", "path": "/v1/ip/lookup", "headers": [], "query_string": b""})

    response = await invalid_ip_exception_handler(request, InvalidIpError("Unable to determine the client IP address."))

    assert response.status_code == 400
    assert json.loads(response.body) == {
        "code": "invalid_ip",
        "message": "Unable to determine the client IP address.",
    }


def test_location_provider_dependency_is_shared_per_config(tmp_path: Path) -> None:
    config = ProviderConfig(database_path=tmp_path / "IP2LOCATION-LITE-DB1.BIN")

    assert get_location_provider(config) is get_location_provider(config)
    assert get_location_provider(config) is not get_location_provider(ProviderConfig(api_key="other"))
