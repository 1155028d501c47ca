"""
stand-in collaborators for testing the oracle without any real boundary data

- a resolver answering every dataset location with its expected zone
  and every other location with the nominal ocean zone of its longitude
- a reference geocoder answering with the accepted cross reference zones
- a coarse inhabited oracle
"""
from typing import Dict, List, Tuple

from tzoracle.configs import NORTH_POLE_LAT, POLE_ZONE, POLE_ZONE_REFERENCE
from tzoracle.dataset import load_test_cases
from tzoracle.utils import round_half_up, validate_coordinates

MAX_INHABITED_LAT = 60.0


def nominal_zone(lat: float, lng: float) -> str:
    """the "Etc/GMT±N" zone of the longitude (NOTE: inverted sign convention)"""
    hours = round_half_up(lng / 15.0)
    if hours == 0:
        return "Etc/GMT"
    return f"Etc/GMT{-hours:+d}"


def shifted_zone(lat: float, lng: float) -> str:
    """one hour off the nominal zone"""
    hours = round_half_up(lng / 15.0) + 1
    if hours == 0:
        return "Etc/GMT"
    return f"Etc/GMT{-hours:+d}"


def build_lookups() -> Tuple[Dict[Tuple[float, float], str], Dict[Tuple[float, float], Tuple[str, ...]]]:
    expected = {}
    cross_ref = {}
    for case in load_test_cases():
        key = case.numeric_input
        expected[key] = case.expected_zone
        cross_ref[key] = case.expected_cross_ref_zone
    return expected, cross_ref


EXPECTED_LOOKUP, CROSS_REF_LOOKUP = build_lookups()


class DatasetResolver:
    """honours the full resolver contract, incl. rejecting malformed input"""

    def __call__(self, lat, lng) -> str:
        lat, lng = validate_coordinates(lat, lng)
        if lat == NORTH_POLE_LAT:
            return POLE_ZONE
        return EXPECTED_LOOKUP.get((lat, lng), nominal_zone(lat, lng))


class DatasetReference:
    def __call__(self, lat: float, lng: float) -> List[str]:
        if lat == NORTH_POLE_LAT:
            return [POLE_ZONE_REFERENCE]
        accepted = CROSS_REF_LOOKUP.get((lat, lng))
        if accepted is not None:
            return list(accepted)
        return [nominal_zone(lat, lng)]


def is_inhabited(lat: float, lng: float) -> bool:
    return abs(lat) < MAX_INHABITED_LAT


def lenient_resolver(lat, lng) -> str:
    """accepts everything. violates the input contract"""
    return "Etc/GMT"


dataset_resolver = DatasetResolver()
dataset_reference = DatasetReference()

# the same resolver registered under a second name
DATASET_RESOLVER_ALIAS = dataset_resolver
