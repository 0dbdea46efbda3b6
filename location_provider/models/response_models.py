from pydantic import BaseModel

from location_provider.config import LookupMode
from location_provider.models.location import CanonicalLocation, LocationFieldId
from location_provider.provider import ProviderInfo


class HealthResponse(BaseModel):
    """Response model for the health check endpoint."""

    status: str


class IPLookupResponse(BaseModel):
    """Response model for IP location lookup.

    Fields the active backend cannot supply are null and left out of
    `supported_fields`.
    """

    ip: str
    lookup_mode: LookupMode
    country_code: str | None = None
    country_name: str | None = None
    continent_code: str | None = None
    continent_name: str | None = None
    region_code: str | None = None
    region_name: str | None = None
    city_name: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    isp: str | None = None
    supported_fields: list[LocationFieldId]

    @classmethod
    def from_location(cls, ip: str, lookup_mode: LookupMode, location: CanonicalLocation) -> "IPLookupResponse":
        values = {field_id.value: location.value(field_id) for field_id in LocationFieldId}
        return cls(
            ip=ip,
            lookup_mode=lookup_mode,
            supported_fields=sorted(location.supported_fields(), key=list(LocationFieldId).index),
            **values,
        )


class ProviderStatusResponse(ProviderInfo):
    """Provider description together with its availability and health."""

    available: bool
    working: bool
    reason: str | None = None
    supported_fields: list[LocationFieldId]
