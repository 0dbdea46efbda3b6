from functools import lru_cache
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, Request, status
from pydantic import ValidationError

from location_provider.config import ProviderConfig, get_provider_config
from location_provider.errors import InvalidIpError
from location_provider.exception_handlers import (
    invalid_ip_exception_handler,
    pydantic_validation_exception_handler,
    unhandled_exception_handler,
)
from location_provider.logger import logger
from location_provider.models.location import LocationFieldId
from location_provider.models.request_models import IPLookupRequest
from location_provider.models.response_models import HealthResponse, IPLookupResponse, ProviderStatusResponse
from location_provider.provider import LocationProvider

app = FastAPI(
    title="IP2Location Location Provider",
    version="0.1.0",
    description="Resolves visitor IP addresses to a normalized location using IP2Location.",
)
logger.info("Started IP2Location Location Provider")


@lru_cache
def get_location_provider(
    config: Annotated[ProviderConfig, Depends(get_provider_config)],
) -> LocationProvider:
    """Dependency to provide the LocationProvider shared by every request for a configuration."""
    return LocationProvider(config)


app.add_exception_handler(ValidationError, pydantic_validation_exception_handler)
app.add_exception_handler(InvalidIpError, invalid_ip_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


def _client_ip(request: Request) -> str | None:
    """Caller's IP: first X-Forwarded-For entry, else the socket peer."""
    x_forwarded_for = request.headers.get("x-forwarded-for")
    if x_forwarded_for:
        first = x_forwarded_for.split(",")[0].strip()
        if first:
            return first
    return request.client.host if request.client else None


@app.get(
    "/health",
    tags=["health"],
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
)
async def health() -> HealthResponse:
    """Basic liveness endpoint; provider health lives under /v1/provider."""
    return HealthResponse(status="ok")


@app.get(
    "/v1/ip/lookup",
    response_model=IPLookupResponse,
    status_code=status.HTTP_200_OK,
    tags=["ip"],
    summary="Look up the location of an IP address.",
)
async def ip_lookup(
    request: Request,
    query: Annotated[IPLookupRequest, Depends()],
    provider: Annotated[LocationProvider, Depends(get_location_provider)],
) -> IPLookupResponse:
    """Look up the location of either a specific IP or the caller's IP.

    - If `query.ip` is provided, that IP is used.
    - Otherwise, the client's IP is taken from X-Forwarded-For or the connection.
    - Fields the active backend cannot supply are returned as null.
    """
    ip = query.ip or _client_ip(request)
    if not ip:
        raise InvalidIpError("Unable to determine the client IP address.")

    lookup_mode = provider.active_lookup_mode()
    if lookup_mode is None:
        logger.error(f"No IP2Location backend available path={request.url.path} method={request.method} ip={ip}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={
                "code": "provider_unavailable",
                "message": "Neither an IP2Location API key nor a BIN database is configured.",
            },
        )

    logger.info(
        f"Performing IP lookup path={request.url.path} method={request.method} ip={ip} "
        f"explicit={query.ip is not None} lookup_mode={lookup_mode.value}"
    )
    location = await provider.get_location(ip)

    return IPLookupResponse.from_location(ip=ip, lookup_mode=lookup_mode, location=location)


@app.get(
    "/v1/provider",
    response_model=ProviderStatusResponse,
    status_code=status.HTTP_200_OK,
    tags=["provider"],
    summary="Describe the location provider, its availability and health.",
)
async def provider_status(
    provider: Annotated[LocationProvider, Depends(get_location_provider)],
) -> ProviderStatusResponse:
    """Report provider info, availability, health and the fields it can supply.

    Supported fields are probed only when a backend is available.
    """
    available = provider.is_available()
    health_status = await provider.is_working()
    if available:
        supported_fields = await provider.get_supported_location_info()
    else:
        supported_fields = set()

    return ProviderStatusResponse(
        **provider.get_info().model_dump(),
        available=available,
        working=health_status.ok,
        reason=health_status.reason,
        supported_fields=[field_id for field_id in LocationFieldId if field_id in supported_fields],
    )
