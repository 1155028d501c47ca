from datetime import datetime, timezone
from typing import Callable, List, NamedTuple, Sequence, Tuple, Union

OCEAN_TIMEZONE_PREFIX = r"Etc/GMT"

MAX_LNG_VAL = 180.0
MAX_LAT_VAL = 90.0

# the one error message every resolver must use to reject malformed input
INVALID_COORDINATES_MSG = "invalid coordinates"


class ReferenceInstants(NamedTuple):
    """two UTC instants discriminating offset policies in both hemispheres"""

    standard: datetime
    daylight: datetime


# January: northern winter, southern summer. July: the opposite.
REFERENCE_INSTANTS = ReferenceInstants(
    standard=datetime(2023, 1, 1, tzinfo=timezone.utc),
    daylight=datetime(2023, 7, 1, tzinfo=timezone.utc),
)

# candidate zones returned as one string are separated by this
CANDIDATE_SEPARATOR = ","

# POLE COLLAPSE
NORTH_POLE_LAT = 90
POLE_LONGITUDES = (-180, -90, 0, 90, 180)
# the resolver under test collapses the pole to "Etc/GMT",
# the reference geocoder reports a zone equivalent to "Etc/GMT-12" there
POLE_ZONE = "Etc/GMT"
POLE_ZONE_REFERENCE = "Etc/GMT-12"
ACCEPTED_POLE_ZONES = (POLE_ZONE, POLE_ZONE_REFERENCE)

# FUZZING
# a full run. reduce it for constrained execution budgets (e.g. CI)
DEFAULT_FUZZ_SAMPLES = 50_000
# maximal accepted share of mismatches in percent
DEFAULT_ERROR_BUDGET_PERCENT = 8
# how many mismatch records are reported on failure
MISMATCH_REPORT_LIMIT = 10
MISMATCH_DECIMAL_PLACES = 3

# PROFILING
DEFAULT_PROFILE_SAMPLES = 50_000
PROFILE_WARMUP_SAMPLES = 100
DEFAULT_PROFILE_SEED = 42

# TYPES
Number = Union[int, float]
CoordValue = Union[Number, str]
Coordinate = Tuple[float, float]
CoordPairs = Sequence[Coordinate]
ZoneId = str
ZoneCandidates = Union[ZoneId, Sequence[ZoneId]]
Resolver = Callable[..., ZoneId]
ReferenceResolver = Callable[[float, float], Sequence[ZoneId]]
OffsetOracle = Callable[[ZoneId, datetime], int]
InhabitedOracle = Callable[[float, float], bool]
ZoneList = List[ZoneId]
