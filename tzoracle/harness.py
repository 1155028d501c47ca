"""
a minimal, framework agnostic scenario runner

scenarios are a mapping from a name to a function without arguments.
they run strictly sequentially in declaration order and fail independently of each other.
any test framework can consume the same mapping (cf. ``tests/oracle_test.py``).
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from tzoracle.comparator import ZoneComparator
from tzoracle.configs import InhabitedOracle, ReferenceResolver, Resolver
from tzoracle.dataset import (
    TestCase,
    check_pole_collapse,
    dataset_scenarios,
    load_test_cases,
)
from tzoracle.fuzz import FuzzConfig, validate_fuzz
from tzoracle.invalid_input import invalid_input_scenarios
from tzoracle.profiler import profiler_scenarios

logger = logging.getLogger(__name__)

Scenarios = Dict[str, Callable[[], Any]]

RESOLVER_LABEL = "resolver under test"
REFERENCE_LABEL = "reference geocoder"


@dataclass(frozen=True)
class Capabilities:
    """which of the optional collaborators may be used in the current environment"""

    reference_resolver_available: bool = False
    inhabited_oracle_available: bool = False

    @classmethod
    def from_collaborators(
        cls,
        reference: Optional[ReferenceResolver] = None,
        is_inhabited: Optional[InhabitedOracle] = None,
    ) -> "Capabilities":
        return cls(
            reference_resolver_available=reference is not None,
            inhabited_oracle_available=is_inhabited is not None,
        )

    @property
    def fuzzing_available(self) -> bool:
        return self.reference_resolver_available and self.inhabited_oracle_available


class ScenarioResult(NamedTuple):
    name: str
    passed: bool
    value: Any = None
    error: Optional[BaseException] = None


def register(scenarios: Scenarios, entries: Iterable[Tuple[str, Callable[[], Any]]]) -> None:
    for name, scenario in entries:
        if name in scenarios:
            raise ValueError(f"duplicate scenario name: {name}")
        scenarios[name] = scenario


def build_scenarios(
    resolve: Resolver,
    reference: Optional[ReferenceResolver] = None,
    is_inhabited: Optional[InhabitedOracle] = None,
    capabilities: Optional[Capabilities] = None,
    comparator: Optional[ZoneComparator] = None,
    cases: Optional[Sequence[TestCase]] = None,
    fuzz_config: Optional[FuzzConfig] = None,
    profile: bool = False,
) -> Scenarios:
    """
    :param resolve: the resolver under test ``f(lat, lng) -> zone``
    :param reference: the reference geocoder ``f(lat, lng) -> [zone, ...]``
    :param is_inhabited: the inhabited land oracle ``f(lat, lng) -> bool``
    :param capabilities: which collaborators to use. derived from the given collaborators if None
    :param cases: the regression dataset. defaults to the bundled one
    :param fuzz_config: sample size, error budget etc. of the statistical validation
    :param profile: whether to add the (observational) speed tests
    :return: ordered mapping: scenario name -> function without arguments
    """
    if capabilities is None:
        capabilities = Capabilities.from_collaborators(reference, is_inhabited)
    if capabilities.reference_resolver_available and reference is None:
        raise ValueError("a reference resolver is declared available, but none was given")
    if capabilities.inhabited_oracle_available and is_inhabited is None:
        raise ValueError("an inhabited oracle is declared available, but none was given")
    if not capabilities.reference_resolver_available:
        reference = None
    if cases is None:
        cases = load_test_cases()

    scenarios: Scenarios = {}
    register(scenarios, dataset_scenarios(cases, resolve, reference, comparator))
    register(
        scenarios,
        [
            (
                "should collapse the pole to a single zone",
                lambda: check_pole_collapse(resolve, reference, comparator),
            )
        ],
    )

    if profile:
        resolvers = {RESOLVER_LABEL: resolve}
        if reference is not None:
            resolvers[REFERENCE_LABEL] = reference
        register(scenarios, profiler_scenarios(resolvers))

    if capabilities.fuzzing_available:
        register(
            scenarios,
            [
                (
                    "should match the reference geocoder at random inhabited locations",
                    lambda: validate_fuzz(resolve, reference, is_inhabited, fuzz_config, comparator),
                )
            ],
        )
    else:
        logger.info("no reference geocoder or inhabited oracle available: skipping the statistical validation")

    register(scenarios, invalid_input_scenarios(resolve))
    return scenarios


def run_scenarios(scenarios: Scenarios) -> List[ScenarioResult]:
    """runs every scenario in declaration order. a failure does not stop the remaining scenarios"""
    results = []
    for name, scenario in scenarios.items():
        try:
            value = scenario()
        except Exception as exc:
            # scoped to this scenario, reported in the results
            logger.debug("FAIL %s: %s", name, exc)
            results.append(ScenarioResult(name, False, error=exc))
            continue
        logger.debug("PASS %s", name)
        results.append(ScenarioResult(name, True, value=value))
    return results


def failures_of(results: Iterable[ScenarioResult]) -> List[ScenarioResult]:
    return [r for r in results if not r.passed]


def summarize(results: Sequence[ScenarioResult]) -> str:
    failed = failures_of(results)
    lines = [f"{len(results) - len(failed)} passing", f"{len(failed)} failing"]
    for i, result in enumerate(failed, start=1):
        lines.append("")
        lines.append(f"{i}) {result.name}")
        lines.append(f"   {type(result.error).__name__}: {result.error}")
    return "\n".join(lines)


def run_suite(resolve: Resolver, **kwargs) -> List[ScenarioResult]:
    """builds and runs all scenarios. keyword arguments as for :func:`build_scenarios`"""
    results = run_scenarios(build_scenarios(resolve, **kwargs))
    logger.info("%d of %d scenarios passed", len(results) - len(failures_of(results)), len(results))
    return results
