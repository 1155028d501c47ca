"""
zone equivalence

Two differently named zones may be aliases for one and the same observed offset policy
(e.g. regional splits sharing their history). Comparing the names across independently maintained
datasets hence is too strict. Instead two zones are considered equivalent
when they observe the same UTC offset at both reference instants
(one during standard time, one during daylight saving time).

NOTE: the relation is reflexive and symmetric, but not necessarily transitive
across different pairs of reference instants.
"""
import logging
from typing import List, Optional, Tuple

from tzoracle.configs import (
    REFERENCE_INSTANTS,
    OffsetOracle,
    ReferenceInstants,
    ZoneCandidates,
)
from tzoracle.errors import (
    CandidateMismatch,
    OffsetMismatch,
    ZoneResolutionError,
)
from tzoracle.offsets import zone_offset_minutes
from tzoracle.utils import as_zone_tuple, split_candidates

logger = logging.getLogger(__name__)


class ZoneComparator:
    """decides whether zone identifiers denote the same observed offset policy"""

    __slots__ = ["offset_oracle", "instants"]

    def __init__(
        self,
        offset_oracle: Optional[OffsetOracle] = None,
        instants: ReferenceInstants = REFERENCE_INSTANTS,
    ):
        """
        :param offset_oracle: ``f(zone_id, instant) -> int`` minutes east of UTC.
            defaults to the pytz based :func:`tzoracle.offsets.zone_offset_minutes`
        :param instants: the standard and daylight saving time instants to compare at
        """
        if offset_oracle is None:
            offset_oracle = zone_offset_minutes
        self.offset_oracle = offset_oracle
        self.instants = instants

    def _offset_at(self, zone_id: str, instant, role: str) -> int:
        try:
            return self.offset_oracle(zone_id, instant)
        except ZoneResolutionError as exc:
            raise ZoneResolutionError(f"{role}: {exc}") from exc
        except LookupError as exc:
            # custom oracles may signal unknown zones with a failed lookup (e.g. KeyError)
            raise ZoneResolutionError(f"{role}: invalid IANA zone: {zone_id}") from exc

    def offsets_of(self, zone_id: str, role: str = "zone") -> Tuple[int, int]:
        """
        :return: the UTC offsets in minutes at the (standard, daylight) reference instants
        :raises ZoneResolutionError: if the zone is unknown
        """
        return (
            self._offset_at(zone_id, self.instants.standard, role),
            self._offset_at(zone_id, self.instants.daylight, role),
        )

    def assert_equivalent(self, zone_a: str, zone_b: str) -> None:
        """
        :raises ZoneResolutionError: if one of the zones is unknown
        :raises OffsetMismatch: if the offsets differ at one of the reference instants
        """
        if zone_a == zone_b:
            return
        # resolve both before comparing: unknown zones take precedence over mismatches
        std_a, dst_a = self.offsets_of(zone_a, role="a")
        std_b, dst_b = self.offsets_of(zone_b, role="b")
        if std_a != std_b or dst_a != dst_b:
            raise OffsetMismatch(zone_a, zone_b, (std_a, std_b), (dst_a, dst_b))

    def equivalent(self, zone_a: str, zone_b: str) -> bool:
        """
        :return: True if both zones observe the same offsets at both reference instants
        :raises ZoneResolutionError: if one of the zones is unknown
        """
        try:
            self.assert_equivalent(zone_a, zone_b)
        except OffsetMismatch:
            return False
        return True

    def any_equivalent(self, primary: ZoneCandidates, candidates: ZoneCandidates) -> bool:
        """checks a zone against the (possibly overlapping) candidates of another resolver

        :param primary: the expected zone. a collection is interpreted as accepted alternatives
        :param candidates: candidate zones. each entry may be a comma separated list of alternatives
        :return: True if the primary zone is equivalent to any of the candidates
        :raises ZoneResolutionError: if every single comparison failed due to an unknown zone
        :raises CandidateMismatch: otherwise, holding every single comparison failure
        """
        primaries = as_zone_tuple(primary)
        flat_candidates = split_candidates(candidates)
        failures: List[Exception] = []
        for expected in primaries:
            for actual in flat_candidates:
                try:
                    self.assert_equivalent(expected, actual)
                except (ZoneResolutionError, OffsetMismatch) as exc:
                    failures.append(exc)
                    continue
                logger.debug("%s is equivalent to %s", expected, actual)
                return True

        if len(failures) == 0:
            raise CandidateMismatch(
                f"no candidate zones to compare {', '.join(primaries)} with"
            )
        message = "; ".join(str(f) for f in failures)
        if all(isinstance(f, ZoneResolutionError) for f in failures):
            raise ZoneResolutionError(message, failures)
        raise CandidateMismatch(message, failures)


_default_comparator: Optional[ZoneComparator] = None


def get_default_comparator() -> ZoneComparator:
    global _default_comparator
    if _default_comparator is None:
        _default_comparator = ZoneComparator()
    return _default_comparator


def equivalent(zone_a: str, zone_b: str) -> bool:
    return get_default_comparator().equivalent(zone_a, zone_b)


def assert_equivalent(zone_a: str, zone_b: str) -> None:
    get_default_comparator().assert_equivalent(zone_a, zone_b)


def any_equivalent(primary: ZoneCandidates, candidates: ZoneCandidates) -> bool:
    return get_default_comparator().any_equivalent(primary, candidates)
