from collections.abc import Mapping, Sequence

from location_provider.regions.table import REGION_TABLE

RegionTable = Mapping[str, Sequence[tuple[str, str]]]


class RegionResolver:
    """Resolve free-text region names to region codes using a per-country table.

    Names are compared case-insensitively and the first match in table order wins,
    so a name listed under several codes always resolves to the earliest one.
    """

    def __init__(self, table: RegionTable = REGION_TABLE) -> None:
        self._table = table

    def resolve(self, country_code: str | None, region_name: str | None) -> str | None:
        """Return the region code, or None when the country or name is unknown."""
        if not country_code or region_name is None:
            return None

        regions = self._table.get(country_code.upper())
        if regions is None:
            return None

        wanted = region_name.upper()
        for region_code, canonical_name in regions:
            if canonical_name.upper() == wanted:
                return region_code

        return None


default_region_resolver = RegionResolver()
