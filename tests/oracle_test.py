"""
runs the whole scenario mapping as individual pytest tests

the stand-in collaborators of ``tests/auxiliaries.py`` honour every contract,
so each generated scenario has to pass.
"""
import pytest

from tests.auxiliaries import dataset_reference, dataset_resolver, is_inhabited
from tzoracle.fuzz import FuzzConfig
from tzoracle.harness import build_scenarios

SCENARIOS = build_scenarios(
    dataset_resolver,
    reference=dataset_reference,
    is_inhabited=is_inhabited,
    fuzz_config=FuzzConfig(samples=2_000, seed=0),
)


def pytest_generate_tests(metafunc):
    if "scenario_name" in metafunc.fixturenames:
        metafunc.parametrize("scenario_name", list(SCENARIOS))


def test_scenario(scenario_name: str):
    SCENARIOS[scenario_name]()


def test_scenario_count():
    # dataset: exact and cross reference per case, parity per string input case
    assert len(SCENARIOS) > 2 * 1000


@pytest.mark.slow
def test_full_size_fuzzing():
    scenarios = build_scenarios(
        dataset_resolver,
        reference=dataset_reference,
        is_inhabited=is_inhabited,
        cases=[],
    )
    scenarios["should match the reference geocoder at random inhabited locations"]()
