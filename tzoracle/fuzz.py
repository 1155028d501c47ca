"""
statistical validation against a reference geocoder

Independently maintained boundary datasets are expected to disagree at a low but nonzero rate.
Instead of demanding exact parity the share of mismatches over a large random sample is bounded.

Only inhabited locations are compared: marine locations diverge much more often
(~30% instead of ~5%) and would dilute the signal.

NOTE: both latitude and longitude are sampled uniformly.
This is NOT area-weighted: polar regions are over-represented compared to their true surface area.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterator, List, NamedTuple, Optional

import numpy as np

from tzoracle.comparator import ZoneComparator, get_default_comparator
from tzoracle.configs import (
    DEFAULT_ERROR_BUDGET_PERCENT,
    DEFAULT_FUZZ_SAMPLES,
    MAX_LAT_VAL,
    MAX_LNG_VAL,
    MISMATCH_DECIMAL_PLACES,
    MISMATCH_REPORT_LIMIT,
    InhabitedOracle,
    ReferenceResolver,
    Resolver,
)
from tzoracle.errors import ErrorBudgetExceeded
from tzoracle.utils import percentage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FuzzConfig:
    samples: int = DEFAULT_FUZZ_SAMPLES
    error_budget_percent: int = DEFAULT_ERROR_BUDGET_PERCENT
    report_limit: int = MISMATCH_REPORT_LIMIT
    seed: Optional[int] = None

    def __post_init__(self):
        if self.samples < 0:
            raise ValueError(f"the amount of samples must not be negative, got {self.samples}")
        if not 0 <= self.error_budget_percent <= 100:
            raise ValueError(
                f"the error budget must be a percentage, got {self.error_budget_percent}"
            )


class MismatchRecord(NamedTuple):
    lat: float
    lng: float
    error: str

    def __str__(self):
        return f"({self.lat:.{MISMATCH_DECIMAL_PLACES}f}, {self.lng:.{MISMATCH_DECIMAL_PLACES}f}): {self.error}"


@dataclass
class FuzzReport:
    samples: int
    error_budget_percent: int
    retained: int = 0
    matches: int = 0
    mismatches: List[MismatchRecord] = field(default_factory=list)

    @property
    def mismatch_percent(self) -> int:
        # NOTE: relative to the successful comparisons
        return percentage(len(self.mismatches), self.matches)

    @property
    def passed(self) -> bool:
        return self.mismatch_percent <= self.error_budget_percent

    def summary(self, limit: int = MISMATCH_REPORT_LIMIT) -> str:
        lines = [
            f"{self.mismatch_percent}% mismatches (budget: {self.error_budget_percent}%): "
            f"{len(self.mismatches):,} mismatches, {self.matches:,} matches, "
            f"{self.retained:,} of {self.samples:,} samples inhabited"
        ]
        if self.mismatches and limit > 0:
            lines.append(f"first {min(limit, len(self.mismatches))} mismatches:")
            lines.extend(f"  {record}" for record in self.mismatches[:limit])
        return "\n".join(lines)


def random_coordinates(
    length: int,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """
    :return: array of shape (length, 2) with uniformly distributed (lat, lng) rows
    """
    if rng is None:
        rng = np.random.default_rng(seed)
    lats = rng.uniform(-MAX_LAT_VAL, MAX_LAT_VAL, length)
    lngs = rng.uniform(-MAX_LNG_VAL, MAX_LNG_VAL, length)
    return np.column_stack((lats, lngs))


def iter_inhabited(points: np.ndarray, is_inhabited: InhabitedOracle) -> Iterator[tuple]:
    for lat, lng in points:
        lat, lng = float(lat), float(lng)
        if is_inhabited(lat, lng):
            yield lat, lng


def run_fuzz(
    resolve: Resolver,
    reference: ReferenceResolver,
    is_inhabited: InhabitedOracle,
    config: Optional[FuzzConfig] = None,
    comparator: Optional[ZoneComparator] = None,
) -> FuzzReport:
    """compares both resolvers on random inhabited locations

    individual disagreements are recorded, never raised.
    """
    if config is None:
        config = FuzzConfig()
    if comparator is None:
        comparator = get_default_comparator()

    report = FuzzReport(samples=config.samples, error_budget_percent=config.error_budget_percent)
    points = random_coordinates(config.samples, seed=config.seed)
    for lat, lng in iter_inhabited(points, is_inhabited):
        report.retained += 1
        try:
            comparator.any_equivalent(resolve(lat, lng), reference(lat, lng))
        except Exception as exc:
            # every kind of failure counts as a mismatch. the run continues
            report.mismatches.append(
                MismatchRecord(
                    round(lat, MISMATCH_DECIMAL_PLACES),
                    round(lng, MISMATCH_DECIMAL_PLACES),
                    str(exc),
                )
            )
            continue
        report.matches += 1

    logger.info(
        "fuzzing done: %d%% mismatches (%d of %d inhabited samples)",
        report.mismatch_percent,
        len(report.mismatches),
        report.retained,
    )
    return report


def validate_fuzz(
    resolve: Resolver,
    reference: ReferenceResolver,
    is_inhabited: InhabitedOracle,
    config: Optional[FuzzConfig] = None,
    comparator: Optional[ZoneComparator] = None,
) -> FuzzReport:
    """
    :return: the report of the run if the share of mismatches stays within the error budget
    :raises ErrorBudgetExceeded: otherwise, reporting the first mismatches
    """
    if config is None:
        config = FuzzConfig()
    report = run_fuzz(resolve, reference, is_inhabited, config, comparator)
    if not report.passed:
        summary = report.summary(config.report_limit)
        logger.warning("too many mismatches: %s", summary)
        raise ErrorBudgetExceeded(f"too many mismatches: {summary}", report)
    return report
