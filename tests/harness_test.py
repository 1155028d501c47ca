import pytest

from tests.auxiliaries import (
    dataset_reference,
    dataset_resolver,
    is_inhabited,
    lenient_resolver,
)
from tzoracle.dataset import load_test_cases
from tzoracle.errors import ExactMismatch, InvalidInputAccepted
from tzoracle.fuzz import FuzzConfig
from tzoracle.harness import (
    Capabilities,
    ScenarioResult,
    build_scenarios,
    failures_of,
    register,
    run_scenarios,
    run_suite,
    summarize,
)
from tzoracle.invalid_input import INVALID_INPUTS

FEW_CASES = load_test_cases(
    [
        (40.7092, -74.0151, "America/New_York"),
        (-16.4965, -68.1702, "America/La_Paz"),
    ]
)
SMALL_RUN = FuzzConfig(samples=500, seed=0)
FUZZ_NAME = "should match the reference geocoder at random inhabited locations"
POLE_NAME = "should collapse the pole to a single zone"


def test_capabilities():
    caps = Capabilities.from_collaborators(dataset_reference, is_inhabited)
    assert caps.reference_resolver_available
    assert caps.fuzzing_available
    caps = Capabilities.from_collaborators(dataset_reference)
    assert caps.reference_resolver_available
    assert not caps.fuzzing_available
    assert not Capabilities().fuzzing_available


def test_scenario_order():
    scenarios = build_scenarios(
        dataset_resolver,
        dataset_reference,
        is_inhabited,
        cases=FEW_CASES,
        fuzz_config=SMALL_RUN,
    )
    names = list(scenarios)
    assert names[0] == 'should return "America/New_York" given 40.7092, -74.0151'
    assert names[1] == "should match the zone of the reference geocoder given 40.7092, -74.0151"
    assert names[4] == POLE_NAME
    assert names[5] == FUZZ_NAME
    assert names[6:] == [f"should fail given {a}, {b}" for a, b in INVALID_INPUTS]


def test_without_reference():
    scenarios = build_scenarios(dataset_resolver, cases=FEW_CASES)
    names = list(scenarios)
    assert FUZZ_NAME not in names
    assert not any("reference geocoder" in name for name in names)
    assert len(names) == len(FEW_CASES) + 1 + len(INVALID_INPUTS)


def test_capabilities_disable_collaborators():
    # the reference is given, but may not be used
    scenarios = build_scenarios(
        dataset_resolver,
        dataset_reference,
        is_inhabited,
        capabilities=Capabilities(),
        cases=FEW_CASES,
    )
    assert not any("reference geocoder" in name for name in scenarios)


def test_declared_but_missing_collaborator():
    with pytest.raises(ValueError):
        build_scenarios(
            dataset_resolver,
            capabilities=Capabilities(reference_resolver_available=True),
        )
    with pytest.raises(ValueError):
        build_scenarios(
            dataset_resolver,
            dataset_reference,
            capabilities=Capabilities(True, True),
        )


def test_profiling_scenarios(capsys):
    scenarios = build_scenarios(dataset_resolver, cases=FEW_CASES, profile=True)
    speed_tests = [name for name in scenarios if name.startswith("speed test")]
    assert speed_tests[0] == "speed test for no-op (baseline)"
    assert "speed test for resolver under test (cold)" in speed_tests
    assert len(speed_tests) == 4


def test_register_duplicates():
    scenarios = {}
    register(scenarios, [("a", lambda: 1)])
    with pytest.raises(ValueError, match="duplicate"):
        register(scenarios, [("a", lambda: 2)])


def test_run_scenarios_isolates_failures():
    executed = []

    def failing():
        executed.append("failing")
        raise ExactMismatch("Europe/Berlin", "Europe/Paris")

    def passing():
        executed.append("passing")
        return "Europe/Berlin"

    results = run_scenarios({"first": failing, "second": passing})
    assert executed == ["failing", "passing"]
    assert [r.passed for r in results] == [False, True]
    assert isinstance(results[0].error, ExactMismatch)
    assert results[1].value == "Europe/Berlin"
    assert failures_of(results) == [results[0]]


def test_summarize():
    results = [
        ScenarioResult("ok", True, value=1),
        ScenarioResult("broken", False, error=ExactMismatch("Europe/Berlin", "Europe/Paris")),
    ]
    summary = summarize(results)
    lines = summary.splitlines()
    assert lines[:2] == ["1 passing", "1 failing"]
    assert "1) broken" in lines
    assert '   ExactMismatch: expected "Europe/Paris" to equal "Europe/Berlin"' in lines


def test_run_suite_passing():
    results = run_suite(
        dataset_resolver,
        reference=dataset_reference,
        is_inhabited=is_inhabited,
        cases=FEW_CASES,
        fuzz_config=SMALL_RUN,
    )
    assert failures_of(results) == []
    assert len(results) == 4 + 1 + 1 + len(INVALID_INPUTS)


def test_run_suite_lenient_resolver():
    results = run_suite(lenient_resolver, cases=FEW_CASES)
    failed = failures_of(results)
    # both dataset cases and every invalid input. the pole collapses to "Etc/GMT"
    assert len(failed) == len(FEW_CASES) + len(INVALID_INPUTS)
    assert all(
        isinstance(r.error, InvalidInputAccepted)
        for r in failed
        if r.name.startswith("should fail")
    )
