from http import HTTPStatus
from typing import Any

import httpx

from location_provider.backends.base import BaseLocationBackend, RawBackendResult
from location_provider.config import DEFAULT_TIMEOUT_SECONDS, DEFAULT_WEB_SERVICE_PACKAGE, DEFAULT_WEB_SERVICE_URL
from location_provider.errors import UpstreamServiceError
from location_provider.logger import logger
from location_provider.models.location import BackendKind


class WebServiceBackend(BaseLocationBackend):
    """Backend for the IP2Location web service (https://api.ip2location.com/v2/).

    Failures of any kind (network, timeout, HTTP status, undecodable body) are
    logged and reported as "no result"; they are never raised to the caller.
    """

    kind = BackendKind.web_service

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_WEB_SERVICE_URL,
        package: str = DEFAULT_WEB_SERVICE_PACKAGE,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._package = package
        self._timeout_seconds = timeout_seconds

    async def fetch(self, ip: str) -> RawBackendResult | None:
        """Look up an IP, returning the decoded JSON object or None on failure."""
        try:
            return await self._request(ip)
        except UpstreamServiceError as exc:
            logger.warning(f"IP2Location web service lookup failed ip={ip} error={exc}")
            return None

    async def _request(self, ip: str) -> RawBackendResult:
        params = {
            "key": self._api_key,
            "ip": ip,
            "format": "json",
            "package": self._package,
        }
        try:
            async with httpx.AsyncClient(timeout=self._timeout_seconds) as client:
                response = await client.get(self._base_url, params=params)
        except httpx.TimeoutException as exc:
            raise UpstreamServiceError(
                f"Request to IP2Location web service timed out after {self._timeout_seconds}s"
            ) from exc
        except httpx.RequestError as exc:
            raise UpstreamServiceError(f"Request to IP2Location web service failed: {repr(exc)}") from exc

        self._handle_http_errors(response)

        data = self._parse_json(response)
        if "response" in data:
            # Error wrapper, e.g. {"response": "INSUFFICIENT CREDIT"}; handed on as-is.
            logger.warning(f"IP2Location web service returned an error ip={ip} response={data['response']}")
        return data

    def _handle_http_errors(self, response: httpx.Response) -> None:
        """Reject anything other than a 2xx status."""
        status_code = response.status_code

        if status_code == HTTPStatus.TOO_MANY_REQUESTS:
            raise UpstreamServiceError("IP2Location rate limit or quota exceeded (HTTP 429).")

        if not HTTPStatus.OK <= status_code < HTTPStatus.MULTIPLE_CHOICES:
            raise UpstreamServiceError(f"IP2Location web service returned HTTP {status_code}: {response.text}")

    @staticmethod
    def _parse_json(response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamServiceError(f"Failed to decode IP2Location response as JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise UpstreamServiceError(f"Unexpected IP2Location response body: {data!r}")
        return data
