import pytest

from location_provider.models.location import (
    ALWAYS_SUPPORTED_FIELDS,
    BackendKind,
    CanonicalLocation,
    LocationFieldId,
)
from location_provider.normalizer import is_offline_value_supported, normalize
from location_provider.regions.resolver import RegionResolver
from tests.common import GOOGLE_DB1_RECORD, GOOGLE_DB11_RECORD, GOOGLE_WEB_SERVICE_PAYLOAD, NOT_SUPPORTED


def _assert_country_only(location: CanonicalLocation) -> None:
    assert location.supported_fields() == set(ALWAYS_SUPPORTED_FIELDS)
    for field_id in set(LocationFieldId) - ALWAYS_SUPPORTED_FIELDS:
        assert location.value(field_id) is None


def test_web_service_success() -> None:
    location = normalize(GOOGLE_WEB_SERVICE_PAYLOAD, BackendKind.web_service)

    assert location.supported_fields() == set(LocationFieldId)
    assert location.value(LocationFieldId.country_code) == "US"
    assert location.value(LocationFieldId.country_name) == "United States of America"
    assert location.value(LocationFieldId.continent_code) == "NA"
    assert location.value(LocationFieldId.continent_name) == "North America"
    assert location.value(LocationFieldId.region_name) == "California"
    assert location.value(LocationFieldId.region_code) == "CA"
    assert location.value(LocationFieldId.city_name) == "Mountain View"
    assert location.value(LocationFieldId.latitude) == pytest.approx(37.40599)
    assert location.value(LocationFieldId.longitude) == pytest.approx(-122.078514)
    assert location.value(LocationFieldId.isp) == "Google LLC"


def test_web_service_error_wrapper_keeps_only_country_and_continent() -> None:
    location = normalize({"response": "INVALID ACCOUNT"}, BackendKind.web_service)

    _assert_country_only(location)
    assert location.value(LocationFieldId.country_code) is None


def test_web_service_error_wrapper_wins_over_other_keys() -> None:
    payload = {**GOOGLE_WEB_SERVICE_PAYLOAD, "response": "INSUFFICIENT CREDIT"}

    _assert_country_only(normalize(payload, BackendKind.web_service))


def test_web_service_missing_result_degrades() -> None:
    _assert_country_only(normalize(None, BackendKind.web_service))


def test_web_service_unresolvable_region_keeps_name_but_not_code() -> None:
    payload = {**GOOGLE_WEB_SERVICE_PAYLOAD, "region_name": "Atlantis"}

    location = normalize(payload, BackendKind.web_service)

    assert location.is_supported(LocationFieldId.region_name)
    assert location.value(LocationFieldId.region_name) == "Atlantis"
    assert not location.is_supported(LocationFieldId.region_code)
    assert location.value(LocationFieldId.region_code) is None


def test_web_service_omitted_keys_are_unsupported() -> None:
    payload = {"country_code": "DE", "country_name": "Germany", "city_name": "Berlin"}

    location = normalize(payload, BackendKind.web_service)

    assert location.is_supported(LocationFieldId.city_name)
    assert location.value(LocationFieldId.continent_code) == "EU"
    for field_id in (
        LocationFieldId.region_name,
        LocationFieldId.region_code,
        LocationFieldId.latitude,
        LocationFieldId.longitude,
        LocationFieldId.isp,
    ):
        assert not location.is_supported(field_id)


def test_offline_full_record() -> None:
    record = {**GOOGLE_DB11_RECORD, "isp": "Google LLC"}

    location = normalize(record, BackendKind.offline_database)

    assert location.supported_fields() == set(LocationFieldId)
    assert location.value(LocationFieldId.region_code) == "CA"
    assert location.value(LocationFieldId.latitude) == pytest.approx(37.405991)
    assert location.value(LocationFieldId.longitude) == pytest.approx(-122.078514)


def test_offline_sentinel_fields_are_unsupported() -> None:
    location = normalize(GOOGLE_DB11_RECORD, BackendKind.offline_database)

    assert location.is_supported(LocationFieldId.city_name)
    assert location.is_supported(LocationFieldId.latitude)
    assert not location.is_supported(LocationFieldId.isp)
    assert location.value(LocationFieldId.isp) is None


def test_offline_region_not_supported_leaves_city_and_coordinates_alone() -> None:
    record = {**GOOGLE_DB11_RECORD, "regionName": "not supported"}

    location = normalize(record, BackendKind.offline_database)

    assert not location.is_supported(LocationFieldId.region_name)
    assert not location.is_supported(LocationFieldId.region_code)
    assert location.value(LocationFieldId.city_name) == "Mountain View"
    assert location.is_supported(LocationFieldId.latitude)
    assert location.is_supported(LocationFieldId.longitude)


def test_offline_country_only_edition() -> None:
    location = normalize(GOOGLE_DB1_RECORD, BackendKind.offline_database)

    assert location.supported_fields() == set(ALWAYS_SUPPORTED_FIELDS)
    assert location.value(LocationFieldId.country_code) == "US"


def test_offline_coordinates_are_paired_on_latitude() -> None:
    record = {**GOOGLE_DB11_RECORD, "latitude": NOT_SUPPORTED, "longitude": "-122.078514"}

    location = normalize(record, BackendKind.offline_database)

    assert not location.is_supported(LocationFieldId.latitude)
    assert not location.is_supported(LocationFieldId.longitude)


def test_offline_missing_keys_are_unsupported() -> None:
    location = normalize({"countryCode": "FR", "countryName": "France"}, BackendKind.offline_database)

    assert location.supported_fields() == set(ALWAYS_SUPPORTED_FIELDS)
    assert location.value(LocationFieldId.continent_name) == "Europe"


def test_offline_missing_result_degrades() -> None:
    _assert_country_only(normalize(None, BackendKind.offline_database))


def test_region_code_uses_injected_resolver() -> None:
    resolver = RegionResolver({"US": (("XX", "CALIFORNIA"),)})

    location = normalize(GOOGLE_WEB_SERVICE_PAYLOAD, BackendKind.web_service, resolver)

    assert location.value(LocationFieldId.region_code) == "XX"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("California", True),
        ("-", True),
        ("", True),
        ("This parameter is unavailable for selected data file. Please upgrade the data file.", False),
        ("This parameter is not supported in this edition.", False),
        ("UNAVAILABLE", False),
        ("IPV6 ADDRESS MISSING IN IPV4 BIN", False),
        ("INVALID IP ADDRESS", False),
        (None, False),
    ],
)
def test_is_offline_value_supported(value: str | None, expected: bool) -> None:
    assert is_offline_value_supported(value) is expected


@pytest.mark.parametrize(
    "raw, backend_kind",
    [
        (GOOGLE_WEB_SERVICE_PAYLOAD, BackendKind.web_service),
        ({"response": "INVALID ACCOUNT"}, BackendKind.web_service),
        (None, BackendKind.web_service),
        (GOOGLE_DB1_RECORD, BackendKind.offline_database),
        (GOOGLE_DB11_RECORD, BackendKind.offline_database),
        ({}, BackendKind.offline_database),
    ],
)
def test_country_and_continent_always_supported_and_region_code_needs_name(raw, backend_kind: BackendKind) -> None:
    location = normalize(raw, backend_kind)

    assert ALWAYS_SUPPORTED_FIELDS <= location.supported_fields()
    if not location.is_supported(LocationFieldId.region_name):
        assert not location.is_supported(LocationFieldId.region_code)


def test_uncoercible_coordinate_is_supported_without_value() -> None:
    record = {**GOOGLE_DB11_RECORD, "latitude": "-", "longitude": "-"}

    location = normalize(record, BackendKind.offline_database)

    assert location.is_supported(LocationFieldId.latitude)
    assert location.value(LocationFieldId.latitude) is None


@pytest.mark.parametrize("error_value", ["IPV6 ADDRESS MISSING IN IPV4 BIN", "INVALID IP ADDRESS"])
def test_offline_reader_error_record_degrades_to_country_only(error_value: str) -> None:
    record = {key: error_value for key in GOOGLE_DB11_RECORD}

    location = normalize(record, BackendKind.offline_database)

    _assert_country_only(location)
    assert location.value(LocationFieldId.country_code) is None
    assert location.value(LocationFieldId.country_name) is None


def test_offline_ipv6_missing_in_city_and_coordinates_is_unsupported() -> None:
    missing = "IPV6 ADDRESS MISSING IN IPV4 BIN"
    record = {**GOOGLE_DB11_RECORD, "cityName": missing, "latitude": missing, "longitude": missing}

    location = normalize(record, BackendKind.offline_database)

    assert location.is_supported(LocationFieldId.region_name)
    assert not location.is_supported(LocationFieldId.city_name)
    assert not location.is_supported(LocationFieldId.latitude)
    assert not location.is_supported(LocationFieldId.longitude)
