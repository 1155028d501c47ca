"""
regression dataset runner

replays the fixed table of (coordinate -> expected zone) cases
against the resolver under test and optionally against a reference geocoder.

the resolver under test has to match the expected zone exactly:
the dataset encodes the ground truth of the resolver's own versioned boundary data.
the reference geocoder only has to return an equivalent zone:
its data might legitimately diverge at the edges.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from tzoracle.comparator import ZoneComparator, get_default_comparator
from tzoracle.configs import (
    ACCEPTED_POLE_ZONES,
    NORTH_POLE_LAT,
    POLE_LONGITUDES,
    CoordValue,
    ReferenceResolver,
    Resolver,
)
from tzoracle.errors import (
    CandidateMismatch,
    ExactMismatch,
    PoleCollapseError,
    ZoneResolutionError,
)
from tzoracle.locations import TEST_LOCATIONS
from tzoracle.utils import as_zone_tuple

logger = logging.getLogger(__name__)

Scenario = Tuple[str, Callable[[], object]]


@dataclass(frozen=True)
class TestCase:
    """a single regression case: coordinate -> expected zone

    ``expected_cross_ref_zone`` holds the zone(s) accepted for the reference geocoder
    """

    # not a pytest test class
    __test__ = False

    lat: CoordValue
    lng: CoordValue
    expected_zone: str
    expected_cross_ref_zone: Tuple[str, ...]

    @classmethod
    def from_entry(cls, entry: Sequence) -> "TestCase":
        lat, lng, expected = entry[:3]
        cross_ref = entry[3] if len(entry) > 3 else expected
        return cls(lat, lng, expected, as_zone_tuple(cross_ref))

    @property
    def input(self) -> Tuple[CoordValue, CoordValue]:
        return self.lat, self.lng

    @property
    def numeric_input(self) -> Tuple[float, float]:
        return float(self.lat), float(self.lng)

    @property
    def has_string_input(self) -> bool:
        return isinstance(self.lat, str) or isinstance(self.lng, str)

    def describe(self) -> str:
        return ", ".join(repr(v) if isinstance(v, str) else str(v) for v in self.input)


def load_test_cases(entries: Iterable[Sequence] = TEST_LOCATIONS) -> List[TestCase]:
    return [TestCase.from_entry(entry) for entry in entries]


def check_exact(case: TestCase, resolve: Resolver) -> str:
    """
    :return: the zone returned by the resolver
    :raises ExactMismatch: if the result is not exactly the expected zone
    """
    actual = resolve(case.lat, case.lng)
    if actual != case.expected_zone:
        raise ExactMismatch(case.expected_zone, actual, coordinate=case.describe())
    return actual


def check_cross_reference(
    case: TestCase,
    reference: ReferenceResolver,
    comparator: Optional[ZoneComparator] = None,
) -> bool:
    """
    :raises CandidateMismatch: if no zone of the reference geocoder is equivalent to the accepted zone(s)
    :raises ZoneResolutionError: if none of the zones could be resolved
    """
    if comparator is None:
        comparator = get_default_comparator()
    candidates = reference(*case.numeric_input)
    return comparator.any_equivalent(case.expected_cross_ref_zone, candidates)


def check_case(
    case: TestCase,
    resolve: Resolver,
    reference: Optional[ReferenceResolver] = None,
    comparator: Optional[ZoneComparator] = None,
) -> str:
    actual = check_exact(case, resolve)
    if reference is not None:
        check_cross_reference(case, reference, comparator)
    return actual


def check_string_input_parity(case: TestCase, resolve: Resolver) -> str:
    """numeric strings must resolve identically to their numeric counterparts"""
    from_strings = resolve(str(case.lat), str(case.lng))
    from_numbers = resolve(*case.numeric_input)
    if from_strings != from_numbers:
        raise ExactMismatch(from_numbers, from_strings, coordinate=case.describe())
    if from_numbers != case.expected_zone:
        raise ExactMismatch(case.expected_zone, from_numbers, coordinate=case.describe())
    return from_numbers


def check_pole_collapse(
    resolve: Resolver,
    reference: Optional[ReferenceResolver] = None,
    comparator: Optional[ZoneComparator] = None,
    lat: float = NORTH_POLE_LAT,
    longitudes: Sequence[float] = POLE_LONGITUDES,
    accepted_zones: Sequence[str] = ACCEPTED_POLE_ZONES,
) -> str:
    """the pole must resolve to a single fixed zone regardless of the longitude

    both of the accepted zones (or equivalent ones) count as correct:
    the resolver under test and the reference geocoder disagree at the poles.

    :return: the zone of the pole
    :raises PoleCollapseError: if the pole resolves to several or to an unaccepted zone
    """
    if comparator is None:
        comparator = get_default_comparator()

    zones = [resolve(lat, lng) for lng in longitudes]
    distinct = sorted(set(zones))
    if len(distinct) != 1:
        raise PoleCollapseError(
            f"latitude {lat} resolves to {len(distinct)} different zones: {', '.join(map(str, distinct))}"
        )
    zone = distinct[0]
    if zone not in accepted_zones:
        try:
            comparator.any_equivalent(zone, accepted_zones)
        except (CandidateMismatch, ZoneResolutionError) as exc:
            raise PoleCollapseError(
                f"{zone} is not an accepted zone for latitude {lat}: {exc}"
            ) from exc

    if reference is not None:
        for lng in longitudes:
            candidates = reference(float(lat), float(lng))
            try:
                comparator.any_equivalent(tuple(accepted_zones), candidates)
            except (CandidateMismatch, ZoneResolutionError) as exc:
                raise PoleCollapseError(
                    f"reference geocoder at ({lat}, {lng}): {exc}"
                ) from exc
    return zone


def dataset_scenarios(
    cases: Iterable[TestCase],
    resolve: Resolver,
    reference: Optional[ReferenceResolver] = None,
    comparator: Optional[ZoneComparator] = None,
) -> List[Scenario]:
    """one independent scenario per case and resolver, in dataset order"""
    scenarios: List[Scenario] = []
    for case in cases:
        scenarios.append(
            (
                f'should return "{case.expected_zone}" given {case.describe()}',
                lambda case=case: check_exact(case, resolve),
            )
        )
        if reference is not None:
            scenarios.append(
                (
                    f"should match the zone of the reference geocoder given {case.describe()}",
                    lambda case=case: check_cross_reference(case, reference, comparator),
                )
            )
        if case.has_string_input:
            scenarios.append(
                (
                    f"should resolve the numeric strings {case.describe()} like numbers",
                    lambda case=case: check_string_input_parity(case, resolve),
                )
            )
    logger.debug("registered %d dataset scenarios", len(scenarios))
    return scenarios
