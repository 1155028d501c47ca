"""
performance profiling of the resolvers. observational only: nothing is asserted.

the same fixed list of query points is used in every phase:
"cold" is the first exposure to the points, "warm" repeats them
(allowing internal memoization to take effect).
"""
import timeit
from typing import Callable, Dict, Iterable, List, NamedTuple, Optional, Tuple

from tzoracle.configs import (
    DEFAULT_PROFILE_SAMPLES,
    DEFAULT_PROFILE_SEED,
    PROFILE_WARMUP_SAMPLES,
    Coordinate,
)
from tzoracle.fuzz import random_coordinates

PHASE_BASELINE = "baseline"
PHASE_WARMUP = "warmup"
PHASE_COLD = "cold"
PHASE_WARM = "warm"
PHASES = (PHASE_WARMUP, PHASE_COLD, PHASE_WARM)
NOOP_LABEL = "no-op"

RESULT_TEMPLATE = "{:30s} | {:10s} | {:>8s} | {:>12s}"


class ProfileResult(NamedTuple):
    label: str
    phase: str
    calls: int
    seconds: float

    @property
    def ms_per_call(self) -> float:
        if self.calls == 0:
            return 0.0
        return 1000 * self.seconds / self.calls

    def __str__(self):
        return RESULT_TEMPLATE.format(
            self.label, self.phase, f"{self.calls:,}", f"{self.ms_per_call:.3f}ms"
        )


def noop(lat: float, lng: float) -> None:
    pass


def get_profile_points(
    length: int = DEFAULT_PROFILE_SAMPLES, seed: int = DEFAULT_PROFILE_SEED
) -> Tuple[Coordinate, ...]:
    """deterministic: the same seed always yields the same points"""
    points = random_coordinates(length, seed=seed)
    return tuple((float(lat), float(lng)) for lat, lng in points)


def timefunc(function: Callable, *args) -> float:
    def wrap():
        function(*args)

    timer = timeit.Timer(wrap)
    nr_runs = 1
    t_in_sec = timer.timeit(nr_runs)
    return t_in_sec


def time_all_runs(func2time: Callable, test_inputs: Iterable[Coordinate]) -> None:
    for lat, lng in test_inputs:
        func2time(lat, lng)


def time_func(label: str, phase: str, func: Callable, points: Tuple[Coordinate, ...]) -> ProfileResult:
    seconds = timefunc(time_all_runs, func, points)
    return ProfileResult(label, phase, len(points), seconds)


def profile_plan(
    resolvers: Dict[str, Callable],
    points: Tuple[Coordinate, ...],
    warmup: int = PROFILE_WARMUP_SAMPLES,
) -> List[Tuple[str, str, Callable, Tuple[Coordinate, ...]]]:
    """
    :return: (label, phase, function, points) in execution order:
        the no-op baseline, then every phase for all resolvers
    """
    plan = [(NOOP_LABEL, PHASE_BASELINE, noop, points)]
    for phase in PHASES:
        phase_points = points[:warmup] if phase == PHASE_WARMUP else points
        for label, func in resolvers.items():
            plan.append((label, phase, func, phase_points))
    return plan


def print_header():
    print(RESULT_TEMPLATE.format("function", "phase", "calls", "per call"))
    print("-" * 70)


def profile(
    resolvers: Dict[str, Callable],
    points: Optional[Tuple[Coordinate, ...]] = None,
    warmup: int = PROFILE_WARMUP_SAMPLES,
    verbose: bool = True,
) -> List[ProfileResult]:
    """measures the mean time per call of every resolver in every phase

    :param resolvers: label -> function(lat, lng)
    :param points: the query points. generated deterministically if not given
    """
    if points is None:
        points = get_profile_points()
    if verbose:
        print(f"\n{len(points):,} random points (anywhere on earth)")
        print_header()
    results = []
    for label, phase, func, phase_points in profile_plan(resolvers, points, warmup):
        result = time_func(label, phase, func, phase_points)
        if verbose:
            print(result)
        results.append(result)
    return results


def profiler_scenarios(
    resolvers: Dict[str, Callable],
    points: Optional[Tuple[Coordinate, ...]] = None,
    warmup: int = PROFILE_WARMUP_SAMPLES,
):
    """one scenario per (resolver, phase), sharing the same points"""
    if points is None:
        points = get_profile_points()

    def run(label, phase, func, phase_points):
        result = time_func(label, phase, func, phase_points)
        print(result)
        return result

    scenarios = []
    for entry in profile_plan(resolvers, points, warmup):
        label, phase = entry[:2]
        scenarios.append((f"speed test for {label} ({phase})", lambda args=entry: run(*args)))
    return scenarios
