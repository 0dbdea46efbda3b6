"""Turn raw backend fields into a CanonicalLocation.

Each backend reports missing data differently. The web service drops the JSON
key (or answers with a `response` error wrapper), while the offline database
puts a sentinel message inside the field value. Both conventions are handled
here and nowhere else: downstream code only ever looks at LocationField.supported.
"""

from collections.abc import Mapping
from typing import Any

from location_provider.continents import continent_for_country
from location_provider.models.location import (
    BackendKind,
    CanonicalLocation,
    LocationField,
    LocationFieldId,
    coerce_coordinate,
)
from location_provider.regions.resolver import RegionResolver, default_region_resolver

RawBackendResult = Mapping[str, Any]

# Substrings the offline database reader puts in place of a value.
OFFLINE_SENTINELS = (
    "not supported",
    "unavailable",
    "ipv6 address missing in ipv4 bin",
    "invalid ip address",
)

# Key the web service wraps error messages in, e.g. {"response": "INVALID ACCOUNT"}.
WEB_SERVICE_ERROR_KEY = "response"


def normalize(
    raw: RawBackendResult | None,
    backend_kind: BackendKind,
    region_resolver: RegionResolver = default_region_resolver,
) -> CanonicalLocation:
    """Normalize a raw backend result.

    A missing result never raises; it degrades to a record where only the
    country/continent fields are (trivially) supported.
    """
    if backend_kind is BackendKind.web_service:
        return _normalize_web_service(raw, region_resolver)
    return _normalize_offline_database(raw, region_resolver)


def _normalize_web_service(raw: RawBackendResult | None, region_resolver: RegionResolver) -> CanonicalLocation:
    if raw is None or WEB_SERVICE_ERROR_KEY in raw:
        return CanonicalLocation.country_only()

    country_code = _as_text(raw.get("country_code"))
    fields = _country_fields(country_code, _as_text(raw.get("country_name")))

    region_name = _as_text(raw.get("region_name"))
    if region_name is not None:
        fields[LocationFieldId.region_name] = LocationField.of(region_name)
        fields[LocationFieldId.region_code] = _region_code_field(region_resolver, country_code, region_name)

    city_name = _as_text(raw.get("city_name"))
    if city_name is not None:
        fields[LocationFieldId.city_name] = LocationField.of(city_name)

    if raw.get("latitude") is not None:
        fields[LocationFieldId.latitude] = LocationField.of(coerce_coordinate(raw["latitude"]))
    if raw.get("longitude") is not None:
        fields[LocationFieldId.longitude] = LocationField.of(coerce_coordinate(raw["longitude"]))

    isp = _as_text(raw.get("isp"))
    if isp is not None:
        fields[LocationFieldId.isp] = LocationField.of(isp)

    return CanonicalLocation(fields=fields)


def _normalize_offline_database(
    raw: RawBackendResult | None, region_resolver: RegionResolver
) -> CanonicalLocation:
    if raw is None:
        return CanonicalLocation.country_only()

    # The reader reports lookup errors in every field, country included.
    if "countryCode" in raw and not is_offline_value_supported(raw["countryCode"]):
        return CanonicalLocation.country_only()

    country_code = _as_text(raw.get("countryCode"))
    country_name = raw.get("countryName")
    if not is_offline_value_supported(country_name):
        country_name = None
    fields = _country_fields(country_code, _as_text(country_name))

    region_name = raw.get("regionName")
    if is_offline_value_supported(region_name):
        region_name = str(region_name)
        fields[LocationFieldId.region_name] = LocationField.of(region_name)
        fields[LocationFieldId.region_code] = _region_code_field(region_resolver, country_code, region_name)

    city_name = raw.get("cityName")
    if is_offline_value_supported(city_name):
        fields[LocationFieldId.city_name] = LocationField.of(str(city_name))

    # Coordinates come as a pair; the latitude decides for both.
    if is_offline_value_supported(raw.get("latitude")):
        fields[LocationFieldId.latitude] = LocationField.of(coerce_coordinate(raw["latitude"]))
        fields[LocationFieldId.longitude] = LocationField.of(coerce_coordinate(raw.get("longitude")))

    isp = raw.get("isp")
    if is_offline_value_supported(isp):
        fields[LocationFieldId.isp] = LocationField.of(str(isp))

    return CanonicalLocation(fields=fields)


def is_offline_value_supported(value: Any) -> bool:
    """True unless the offline value is missing or carries a sentinel message."""
    if value is None:
        return False
    lowered = str(value).lower()
    return not any(sentinel in lowered for sentinel in OFFLINE_SENTINELS)


def _country_fields(country_code: str | None, country_name: str | None) -> dict[LocationFieldId, LocationField]:
    continent_code, continent_name = continent_for_country(country_code)
    return {
        LocationFieldId.country_code: LocationField.of(country_code),
        LocationFieldId.country_name: LocationField.of(country_name),
        LocationFieldId.continent_code: LocationField.of(continent_code),
        LocationFieldId.continent_name: LocationField.of(continent_name),
    }


def _region_code_field(
    region_resolver: RegionResolver, country_code: str | None, region_name: str
) -> LocationField:
    region_code = region_resolver.resolve(country_code, region_name)
    if region_code is None:
        return LocationField.unsupported()
    return LocationField.of(region_code)


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)
