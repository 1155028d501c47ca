"""
the concrete collaborators built on timezonefinder

NOTE: the expected zones encode one specific version of the boundary data.
only a few long-standing locations are checked here.
"""
import pytest

from tzoracle import adapters
from tzoracle.adapters import TimezoneFinderAdapter
from tzoracle.comparator import any_equivalent

STABLE_LOCATIONS = [
    (40.7092, -74.0151, "America/New_York"),
    (-16.4965, -68.1702, "America/La_Paz"),
    (21.4381, -158.0493, "Pacific/Honolulu"),
]


class FakeFinder:
    """answers from a fixed table instead of boundary data"""

    def __init__(self, zones):
        self.zones = zones

    def timezone_at(self, *, lng: float, lat: float):
        return self.zones.get((lat, lng))


@pytest.fixture(scope="module")
def adapter() -> TimezoneFinderAdapter:
    return adapters.get_adapter()


@pytest.mark.unit
@pytest.mark.parametrize(
    "zone, on_land, candidates",
    [
        ("Europe/Berlin", True, ["Europe/Berlin"]),
        ("Etc/GMT-12", False, ["Etc/GMT-12"]),
        ("Etc/GMT", False, ["Etc/GMT"]),
        (None, False, []),
    ],
)
def test_adapter_with_fake_finder(zone, on_land, candidates):
    adapter = TimezoneFinderAdapter(tf=FakeFinder({(52.5, 13.4): zone}))
    assert adapter.is_on_land(52.5, 13.4) == on_land
    assert adapter.reference_resolve(52.5, 13.4) == candidates


@pytest.mark.unit
def test_no_resolver_under_test():
    # the reference data must not double as the resolver under test
    assert not hasattr(adapters, "resolve")
    assert not hasattr(TimezoneFinderAdapter, "resolve")


@pytest.mark.integration
@pytest.mark.parametrize("lat, lng, expected", STABLE_LOCATIONS)
def test_reference_resolve(adapter, lat, lng, expected):
    candidates = adapter.reference_resolve(lat, lng)
    assert len(candidates) == 1
    assert any_equivalent(expected, candidates)
    assert adapter.is_on_land(lat, lng)


@pytest.mark.integration
def test_ocean(adapter):
    assert not adapter.is_on_land(-56.25, 0)
    assert adapter.reference_resolve(-56.25, 0) == ["Etc/GMT"]


@pytest.mark.integration
def test_global_functions():
    assert adapters.get_adapter() is adapters.get_adapter()
    assert adapters.reference_resolve(40.7092, -74.0151) == ["America/New_York"]
    assert adapters.is_on_land(40.7092, -74.0151)
