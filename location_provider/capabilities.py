from location_provider.backends.base import BaseLocationBackend
from location_provider.models.location import ALWAYS_SUPPORTED_FIELDS, LocationFieldId
from location_provider.normalizer import normalize
from location_provider.regions.resolver import RegionResolver, default_region_resolver

PROBE_IP = "8.8.8.8"


async def probe_capabilities(
    backend: BaseLocationBackend,
    region_resolver: RegionResolver = default_region_resolver,
) -> set[LocationFieldId]:
    """Discover which canonical fields a backend can supply.

    Runs a single normalized lookup of the probe address. Region code/name and
    latitude/longitude are reported in pairs, decided by the region name and the
    latitude respectively.
    """
    raw = await backend.fetch(PROBE_IP)
    location = normalize(raw, backend.kind, region_resolver)

    capabilities = set(ALWAYS_SUPPORTED_FIELDS)

    if location.is_supported(LocationFieldId.region_name):
        capabilities |= {LocationFieldId.region_code, LocationFieldId.region_name}

    if location.is_supported(LocationFieldId.city_name):
        capabilities.add(LocationFieldId.city_name)

    if location.is_supported(LocationFieldId.latitude):
        capabilities |= {LocationFieldId.latitude, LocationFieldId.longitude}

    if location.is_supported(LocationFieldId.isp):
        capabilities.add(LocationFieldId.isp)

    return capabilities
