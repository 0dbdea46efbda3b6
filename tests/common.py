from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import httpx

from location_provider.errors import DatabaseReadError

NOT_SUPPORTED = "This parameter is unavailable for selected data file. Please upgrade the data file."

GOOGLE_WEB_SERVICE_PAYLOAD: dict[str, Any] = {
    "country_code": "US",
    "country_name": "United States of America",
    "region_name": "California",
    "city_name": "Mountain View",
    "latitude": "37.40599",
    "longitude": "-122.078514",
    "isp": "Google LLC",
}

GOOGLE_DB11_RECORD: dict[str, str] = {
    "countryCode": "US",
    "countryName": "United States of America",
    "regionName": "California",
    "cityName": "Mountain View",
    "latitude": "37.405991",
    "longitude": "-122.078514",
    "isp": NOT_SUPPORTED,
}

GOOGLE_DB1_RECORD: dict[str, str] = {
    "countryCode": "US",
    "countryName": "United States of America",
    "regionName": NOT_SUPPORTED,
    "cityName": NOT_SUPPORTED,
    "latitude": NOT_SUPPORTED,
    "longitude": NOT_SUPPORTED,
    "isp": NOT_SUPPORTED,
}


class MockResponse:
    def __init__(self, status_code: int, payload: Any = None, text: str = "") -> None:
        self.status_code = status_code
        self._payload = {} if payload is None else payload
        self.text = text

    def json(self) -> Any:
        return self._payload


class MockAsyncClient:
    """Minimal async context-manager mock for httpx.AsyncClient that records requests."""

    def __init__(self, response: MockResponse, **kwargs: Any) -> None:
        self._response = response
        self.init_kwargs = kwargs
        self.requests: list[tuple[str, dict[str, Any] | None]] = []

    async def __aenter__(self) -> "MockAsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def get(self, url: str, params: dict[str, Any] | None = None) -> MockResponse:
        self.requests.append((url, params))
        return self._response


class FailingAsyncClient:
    """Async client whose requests raise a given httpx error to simulate network failure."""

    def __init__(self, url: str, error_cls: type[httpx.RequestError] = httpx.RequestError, **kwargs: Any) -> None:
        self._url = url
        self._error_cls = error_cls

    async def __aenter__(self) -> "FailingAsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def get(self, url: str, params: dict[str, Any] | None = None) -> MockResponse:
        request = httpx.Request("GET", self._url)
        raise self._error_cls("Network failure", request=request)


def make_fake_async_client(
    response: MockResponse,
    created: list[MockAsyncClient] | None = None,
) -> Callable[..., MockAsyncClient]:
    """Factory for a fake httpx.AsyncClient returning a fixed response.

    Every client built is appended to `created` so tests can inspect the request.
    """

    def _fake_client(*args: Any, **kwargs: Any) -> MockAsyncClient:
        client = MockAsyncClient(response, **kwargs)
        if created is not None:
            created.append(client)
        return client

    return _fake_client


class FakeReader:
    """In-memory DatabaseReader returning a fixed record and remembering queried IPs."""

    def __init__(self, record: Mapping[str, str]) -> None:
        self._record = dict(record)
        self.queried: list[str] = []

    def lookup(self, ip: str) -> dict[str, str]:
        self.queried.append(ip)
        return dict(self._record)


class BrokenReader:
    """DatabaseReader standing in for an unreadable BIN file."""

    def lookup(self, ip: str) -> dict[str, str]:
        raise DatabaseReadError("Unable to read IP2Location database: unpack requires a buffer of 4 bytes")


def reader_factory_for(reader: Any) -> Callable[[Path], Any]:
    """Build a reader factory that ignores the path and hands back `reader`."""

    def _factory(path: Path) -> Any:
        return reader

    return _factory
