import numpy as np
import pytest

from tests.auxiliaries import (
    dataset_reference,
    dataset_resolver,
    is_inhabited,
    nominal_zone,
    shifted_zone,
)
from tzoracle.errors import ErrorBudgetExceeded
from tzoracle.fuzz import (
    FuzzConfig,
    FuzzReport,
    MismatchRecord,
    iter_inhabited,
    random_coordinates,
    run_fuzz,
    validate_fuzz,
)

SMALL_RUN = FuzzConfig(samples=2_000, seed=0)


def test_random_coordinates():
    points = random_coordinates(1_000, seed=1)
    assert points.shape == (1_000, 2)
    assert np.all(np.abs(points[:, 0]) <= 90.0)
    assert np.all(np.abs(points[:, 1]) <= 180.0)
    np.testing.assert_array_equal(points, random_coordinates(1_000, seed=1))
    assert random_coordinates(0).shape == (0, 2)


def test_random_coordinates_rng():
    rng = np.random.default_rng(3)
    first = random_coordinates(10, rng=rng)
    second = random_coordinates(10, rng=rng)
    assert not np.array_equal(first, second)


def test_iter_inhabited():
    points = np.array([[10.0, 20.0], [70.0, 20.0], [-59.0, -170.0], [-89.0, 0.0]])
    retained = list(iter_inhabited(points, is_inhabited))
    assert retained == [(10.0, 20.0), (-59.0, -170.0)]
    assert all(isinstance(v, float) for pt in retained for v in pt)


def test_fuzz_config_validation():
    with pytest.raises(ValueError):
        FuzzConfig(samples=-1)
    with pytest.raises(ValueError):
        FuzzConfig(error_budget_percent=101)
    with pytest.raises(ValueError):
        FuzzConfig(error_budget_percent=-1)
    FuzzConfig(samples=0, error_budget_percent=0)


def test_run_fuzz_agreeing(comparator):
    report = run_fuzz(dataset_resolver, dataset_reference, is_inhabited, SMALL_RUN, comparator)
    assert report.samples == SMALL_RUN.samples
    assert 0 < report.retained < SMALL_RUN.samples
    assert report.matches == report.retained
    assert report.mismatches == []
    assert report.mismatch_percent == 0
    assert report.passed


def test_run_fuzz_is_reproducible(comparator):
    first = run_fuzz(nominal_zone, lambda lat, lng: [shifted_zone(lat, lng)], is_inhabited, SMALL_RUN, comparator)
    second = run_fuzz(nominal_zone, lambda lat, lng: [shifted_zone(lat, lng)], is_inhabited, SMALL_RUN, comparator)
    assert first == second


def test_run_fuzz_disagreeing(comparator):
    report = run_fuzz(
        nominal_zone, lambda lat, lng: [shifted_zone(lat, lng)], is_inhabited, SMALL_RUN, comparator
    )
    assert report.matches == 0
    assert len(report.mismatches) == report.retained
    # no successful comparison at all
    assert report.mismatch_percent == 100
    assert not report.passed
    record = report.mismatches[0]
    assert isinstance(record, MismatchRecord)
    assert "offset" in record.error


def test_run_fuzz_records_resolver_errors(comparator):
    def failing(lat, lng):
        raise RuntimeError("boom")

    report = run_fuzz(failing, dataset_reference, is_inhabited, FuzzConfig(samples=100, seed=1), comparator)
    assert report.matches == 0
    assert len(report.mismatches) == report.retained
    assert all(r.error == "boom" for r in report.mismatches)


def test_run_fuzz_nothing_inhabited(comparator):
    report = run_fuzz(
        dataset_resolver, dataset_reference, lambda lat, lng: False, SMALL_RUN, comparator
    )
    assert report.retained == 0
    assert report.mismatch_percent == 0
    assert report.passed


def test_mismatch_percent_relative_to_matches():
    report = FuzzReport(samples=100, error_budget_percent=8, retained=27, matches=25)
    report.mismatches = [MismatchRecord(1.0, 2.0, "x"), MismatchRecord(3.0, 4.0, "y")]
    # 2 / 25 = 8%
    assert report.mismatch_percent == 8
    assert report.passed
    report.mismatches.append(MismatchRecord(5.0, 6.0, "z"))
    # 3 / 25 = 12%
    assert report.mismatch_percent == 12
    assert not report.passed


def test_mismatch_record_str():
    assert str(MismatchRecord(1.23456, -7.0, "boom")) == "(1.235, -7.000): boom"


def test_summary_limit():
    report = FuzzReport(samples=50, error_budget_percent=8, retained=30, matches=10)
    report.mismatches = [MismatchRecord(float(i), 0.0, f"error {i}") for i in range(20)]
    summary = report.summary(limit=10)
    assert summary.startswith("200% mismatches (budget: 8%)")
    assert "first 10 mismatches:" in summary
    assert "error 9" in summary
    assert "error 10" not in summary
    assert "mismatches:" not in report.summary(limit=0)


def test_validate_fuzz_passing(comparator):
    report = validate_fuzz(dataset_resolver, dataset_reference, is_inhabited, SMALL_RUN, comparator)
    assert report.passed


def test_validate_fuzz_budget_exceeded(comparator):
    with pytest.raises(ErrorBudgetExceeded) as exc_info:
        validate_fuzz(
            nominal_zone,
            lambda lat, lng: [shifted_zone(lat, lng)],
            is_inhabited,
            SMALL_RUN,
            comparator,
        )
    exc = exc_info.value
    assert str(exc).startswith("too many mismatches: 100% mismatches")
    assert exc.report.mismatch_percent == 100
    assert isinstance(exc, AssertionError)


def test_validate_fuzz_partial_disagreement(comparator):
    # disagree east of 150 degrees only: about 8% of all longitudes
    def reference(lat, lng):
        if lng > 150:
            return [shifted_zone(lat, lng)]
        return [nominal_zone(lat, lng)]

    report = run_fuzz(nominal_zone, reference, is_inhabited, SMALL_RUN, comparator)
    assert 0 < len(report.mismatches) < report.matches
    with pytest.raises(ErrorBudgetExceeded):
        validate_fuzz(
            nominal_zone,
            reference,
            is_inhabited,
            FuzzConfig(samples=2_000, seed=0, error_budget_percent=0),
            comparator,
        )
    generous = FuzzConfig(samples=2_000, seed=0, error_budget_percent=50)
    assert validate_fuzz(nominal_zone, reference, is_inhabited, generous, comparator).passed
