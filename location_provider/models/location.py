from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class BackendKind(str, Enum):
    """The two interchangeable lookup backends."""

    web_service = "web_service"
    offline_database = "offline_database"


class LocationFieldId(str, Enum):
    """Canonical field identifiers produced by normalization."""

    country_code = "country_code"
    country_name = "country_name"
    continent_code = "continent_code"
    continent_name = "continent_name"
    region_code = "region_code"
    region_name = "region_name"
    city_name = "city_name"
    latitude = "latitude"
    longitude = "longitude"
    isp = "isp"


# Supported by every backend regardless of what a lookup returns.
ALWAYS_SUPPORTED_FIELDS: frozenset[LocationFieldId] = frozenset(
    {
        LocationFieldId.country_code,
        LocationFieldId.country_name,
        LocationFieldId.continent_code,
        LocationFieldId.continent_name,
    }
)


class LocationField(BaseModel):
    """A single canonical value together with its support flag."""

    model_config = ConfigDict(frozen=True)

    value: str | float | None = None
    supported: bool = False

    @classmethod
    def unsupported(cls) -> "LocationField":
        return cls(value=None, supported=False)

    @classmethod
    def of(cls, value: str | float | None) -> "LocationField":
        return cls(value=value, supported=True)


def coerce_coordinate(value: Any) -> float | None:
    """Allow latitude/longitude to be provided as strings, numbers, or null.

    Backends may return these fields as strings; this normalizes them into floats
    while gracefully handling missing or invalid values.
    """
    if value is None:
        return None
    try:
        # For general GPS and mapping, 5-6 decimal places (e.g., 34.052235)
        return round(float(value), 6)
    except (TypeError, ValueError):
        return None


class CanonicalLocation(BaseModel):
    """Normalized location record with explicit per-field presence.

    Every LocationFieldId has an entry. Unsupported fields never carry a value, and
    the country/continent fields are always marked supported, even when the lookup
    produced nothing for them.
    """

    model_config = ConfigDict(frozen=True)

    fields: dict[LocationFieldId, LocationField]

    @field_validator("fields", mode="after")
    @classmethod
    def _complete_fields(cls, value: dict[LocationFieldId, LocationField]) -> dict[LocationFieldId, LocationField]:
        completed: dict[LocationFieldId, LocationField] = {}
        for field_id in LocationFieldId:
            field = value.get(field_id, LocationField.unsupported())
            if field_id in ALWAYS_SUPPORTED_FIELDS:
                field = LocationField.of(field.value)
            elif not field.supported:
                field = LocationField.unsupported()
            completed[field_id] = field
        return completed

    @classmethod
    def country_only(
        cls,
        country_code: str | None = None,
        country_name: str | None = None,
        continent_code: str | None = None,
        continent_name: str | None = None,
    ) -> "CanonicalLocation":
        """Build the degraded record: country/continent supported, everything else not."""
        return cls(
            fields={
                LocationFieldId.country_code: LocationField.of(country_code),
                LocationFieldId.country_name: LocationField.of(country_name),
                LocationFieldId.continent_code: LocationField.of(continent_code),
                LocationFieldId.continent_name: LocationField.of(continent_name),
            }
        )

    def get(self, field_id: LocationFieldId) -> LocationField:
        return self.fields[field_id]

    def is_supported(self, field_id: LocationFieldId) -> bool:
        return self.fields[field_id].supported

    def value(self, field_id: LocationFieldId) -> str | float | None:
        return self.fields[field_id].value

    def supported_fields(self) -> set[LocationFieldId]:
        return {field_id for field_id, field in self.fields.items() if field.supported}
