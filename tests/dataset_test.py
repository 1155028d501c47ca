import pytest

from tests.auxiliaries import dataset_reference, dataset_resolver, nominal_zone
from tzoracle.configs import ACCEPTED_POLE_ZONES, POLE_ZONE
from tzoracle.dataset import (
    TestCase,
    check_case,
    check_cross_reference,
    check_exact,
    check_pole_collapse,
    check_string_input_parity,
    dataset_scenarios,
    load_test_cases,
)
from tzoracle.errors import (
    CandidateMismatch,
    ExactMismatch,
    PoleCollapseError,
    ZoneResolutionError,
)
from tzoracle.locations import (
    OCEAN_LOCATIONS,
    POLE_LOCATIONS,
    STRING_INPUT_LOCATIONS,
    TEST_LOCATIONS,
)
from tzoracle.utils import is_ocean_timezone, is_valid_coordinate

ALL_CASES = load_test_cases()


def test_dataset_shape():
    assert len(ALL_CASES) == len(TEST_LOCATIONS)
    for entry in TEST_LOCATIONS:
        assert len(entry) in (3, 4), entry
        assert is_valid_coordinate(entry[0], entry[1]), entry
    numeric = [(case.numeric_input, case.has_string_input) for case in ALL_CASES]
    assert len(set(numeric)) == len(numeric), "duplicate dataset coordinates"


def test_ocean_locations():
    for lat, lng, expected, *_ in OCEAN_LOCATIONS:
        assert is_ocean_timezone(expected)
    zones = {entry[2] for entry in OCEAN_LOCATIONS}
    assert len(zones) == len(OCEAN_LOCATIONS)


def test_from_entry():
    case = TestCase.from_entry((40.7092, -74.0151, "America/New_York"))
    assert case.expected_zone == "America/New_York"
    assert case.expected_cross_ref_zone == ("America/New_York",)
    assert case.input == (40.7092, -74.0151)
    assert not case.has_string_input

    case = TestCase.from_entry(POLE_LOCATIONS[0])
    assert case.expected_zone == POLE_ZONE
    assert case.expected_cross_ref_zone == ("Etc/GMT-12",)

    case = TestCase.from_entry(STRING_INPUT_LOCATIONS[0])
    assert case.has_string_input
    assert case.numeric_input == (42.3668, -71.0546)
    assert case.describe() == "'42.3668', '-71.0546'"


@pytest.mark.parametrize("case", ALL_CASES, ids=lambda c: c.describe())
def test_dataset_case(case, comparator):
    assert check_case(case, dataset_resolver, dataset_reference, comparator) == case.expected_zone


def test_check_exact_mismatch():
    case = TestCase.from_entry((52.5061, 13.358, "Europe/Berlin"))
    with pytest.raises(ExactMismatch) as exc_info:
        check_exact(case, lambda lat, lng: "Europe/Stockholm")
    exc = exc_info.value
    # an equivalent zone is not good enough for the resolver under test
    assert str(exc) == 'expected "Europe/Stockholm" to equal "Europe/Berlin" at 52.5061, 13.358'
    assert exc.expected == "Europe/Berlin"
    assert exc.actual == "Europe/Stockholm"


def test_check_exact_none():
    case = TestCase.from_entry((52.5061, 13.358, "Europe/Berlin"))
    with pytest.raises(ExactMismatch):
        check_exact(case, lambda lat, lng: None)


def test_check_cross_reference(comparator):
    case = TestCase.from_entry((52.5061, 13.358, "Europe/Berlin"))
    assert check_cross_reference(case, lambda lat, lng: ["Europe/Stockholm"], comparator)
    assert check_cross_reference(
        case, lambda lat, lng: ["Europe/London,Europe/Oslo"], comparator
    )
    with pytest.raises(CandidateMismatch):
        check_cross_reference(case, lambda lat, lng: ["Europe/London"], comparator)
    with pytest.raises(CandidateMismatch):
        check_cross_reference(case, lambda lat, lng: [], comparator)
    with pytest.raises(ZoneResolutionError):
        check_cross_reference(case, lambda lat, lng: ["Bogus/Zone"], comparator)


def test_cross_reference_receives_numbers(comparator):
    received = []

    def reference(lat, lng):
        received.append((lat, lng))
        return ["America/New_York"]

    check_cross_reference(TestCase.from_entry(STRING_INPUT_LOCATIONS[0]), reference, comparator)
    assert received == [(42.3668, -71.0546)]


def test_cross_reference_uses_accepted_zone(comparator):
    # the reference geocoder is held to the accepted zone, not the expected one
    case = TestCase.from_entry((37.6582, 25.3762, "Europe/Athens", "Etc/GMT-2"))
    assert check_cross_reference(case, lambda lat, lng: ["Etc/GMT-2"], comparator)
    with pytest.raises(CandidateMismatch):
        check_cross_reference(
            TestCase.from_entry((37.6582, 25.3762, "Europe/Athens")),
            lambda lat, lng: ["Etc/GMT-2"],
            comparator,
        )


@pytest.mark.parametrize("case", [TestCase.from_entry(e) for e in STRING_INPUT_LOCATIONS])
def test_string_input_parity(case):
    assert check_string_input_parity(case, dataset_resolver) == case.expected_zone


def test_string_input_parity_mismatch():
    def resolve(lat, lng):
        if isinstance(lat, str):
            return "America/Chicago"
        return "America/New_York"

    with pytest.raises(ExactMismatch):
        check_string_input_parity(TestCase.from_entry(STRING_INPUT_LOCATIONS[0]), resolve)


def test_pole_collapse(comparator):
    assert check_pole_collapse(dataset_resolver, dataset_reference, comparator) == POLE_ZONE


@pytest.mark.parametrize("zone", ACCEPTED_POLE_ZONES + ("Etc/GMT+0", "Etc/UTC"))
def test_pole_collapse_accepted_zones(comparator, zone):
    assert check_pole_collapse(lambda lat, lng: zone, comparator=comparator) == zone


def test_pole_collapse_several_zones(comparator):
    # the plain longitude based zones differ along the pole
    with pytest.raises(PoleCollapseError, match="different zones"):
        check_pole_collapse(nominal_zone, comparator=comparator)


def test_pole_collapse_wrong_zone(comparator):
    with pytest.raises(PoleCollapseError, match="not an accepted zone"):
        check_pole_collapse(lambda lat, lng: "Europe/Berlin", comparator=comparator)


def test_pole_collapse_wrong_reference(comparator):
    with pytest.raises(PoleCollapseError, match="reference geocoder"):
        check_pole_collapse(
            dataset_resolver,
            reference=lambda lat, lng: ["Etc/GMT+5"],
            comparator=comparator,
        )


def test_dataset_scenarios():
    cases = load_test_cases(
        [
            (40.7092, -74.0151, "America/New_York"),
            ("21.4381", "-158.0493", "Pacific/Honolulu"),
        ]
    )
    names = [name for name, _ in dataset_scenarios(cases, dataset_resolver, dataset_reference)]
    assert names == [
        'should return "America/New_York" given 40.7092, -74.0151',
        "should match the zone of the reference geocoder given 40.7092, -74.0151",
        "should return \"Pacific/Honolulu\" given '21.4381', '-158.0493'",
        "should match the zone of the reference geocoder given '21.4381', '-158.0493'",
        "should resolve the numeric strings '21.4381', '-158.0493' like numbers",
    ]
    names = [name for name, _ in dataset_scenarios(cases, dataset_resolver)]
    assert len(names) == 3


def test_dataset_scenarios_bind_their_case():
    cases = load_test_cases(TEST_LOCATIONS[:5])
    scenarios = dataset_scenarios(cases, dataset_resolver)
    assert [scenario() for _, scenario in scenarios] == [c.expected_zone for c in cases]
