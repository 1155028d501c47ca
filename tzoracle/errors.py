"""
exception classes raised by the oracle

all of them derive from builtins, so callers can keep catching ``ValueError``
or ``AssertionError`` as they would with any other library.
"""
from typing import TYPE_CHECKING, List, Optional, Sequence

from tzoracle.configs import INVALID_COORDINATES_MSG

if TYPE_CHECKING:
    from tzoracle.fuzz import FuzzReport


class TzOracleError(Exception):
    """base class of all errors raised by tzoracle"""


class InvalidCoordinateError(TzOracleError, ValueError):
    """the given input does not describe a valid coordinate"""

    def __init__(self, message: str = INVALID_COORDINATES_MSG):
        super().__init__(message)


class ZoneResolutionError(TzOracleError, ValueError):
    """a zone identifier is not known to the offset oracle

    indicates a gap in the reference data rather than a resolver defect
    """

    def __init__(self, message: str, failures: Optional[Sequence[Exception]] = None):
        super().__init__(message)
        self.failures: List[Exception] = list(failures or [])


class AssertionMismatch(TzOracleError, AssertionError):
    """expected and actual zones differ"""


class ExactMismatch(AssertionMismatch):
    def __init__(self, expected: str, actual: str, coordinate=None):
        self.expected = expected
        self.actual = actual
        self.coordinate = coordinate
        location = "" if coordinate is None else f" at {coordinate}"
        super().__init__(f'expected "{actual}" to equal "{expected}"{location}')


class OffsetMismatch(AssertionMismatch):
    """two zones observe different UTC offsets at one of the reference instants

    the offsets (minutes east of UTC) at both instants are attached for diagnosis
    """

    def __init__(
        self,
        zone_a: str,
        zone_b: str,
        standard_offsets: Sequence[int],
        daylight_offsets: Sequence[int],
    ):
        self.zone_a = zone_a
        self.zone_b = zone_b
        self.standard_offsets = tuple(standard_offsets)
        self.daylight_offsets = tuple(daylight_offsets)
        if self.standard_offsets[0] != self.standard_offsets[1]:
            kind, (offset_a, offset_b) = "standard-time", self.standard_offsets
        else:
            kind, (offset_a, offset_b) = "daylight-saving-time", self.daylight_offsets
        super().__init__(
            f"expected {zone_a}({offset_a}) to have the same {kind} offset as {zone_b}({offset_b})"
        )

    @property
    def standard_delta(self) -> int:
        return self.standard_offsets[1] - self.standard_offsets[0]

    @property
    def daylight_delta(self) -> int:
        return self.daylight_offsets[1] - self.daylight_offsets[0]


class CandidateMismatch(AssertionMismatch):
    """none of the candidate zones is equivalent. holds every single failure"""

    def __init__(self, message: str, failures: Optional[Sequence[Exception]] = None):
        super().__init__(message)
        self.failures: List[Exception] = list(failures or [])


class PoleCollapseError(AssertionMismatch):
    """the pole does not resolve to a single accepted zone"""


class InvalidInputAccepted(AssertionMismatch):
    """a resolver returned a result for malformed input instead of rejecting it"""


class ErrorBudgetExceeded(AssertionMismatch):
    def __init__(self, message: str, report: "FuzzReport"):
        super().__init__(message)
        self.report = report
