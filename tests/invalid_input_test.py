import pytest

from tests.auxiliaries import dataset_resolver, lenient_resolver
from tzoracle.errors import InvalidInputAccepted
from tzoracle.invalid_input import (
    INVALID_INPUTS,
    check_rejected,
    invalid_input_scenarios,
)


@pytest.mark.parametrize("args", INVALID_INPUTS)
def test_rejected(args):
    check_rejected(dataset_resolver, args)


@pytest.mark.parametrize("args", INVALID_INPUTS)
def test_accepted(args):
    with pytest.raises(InvalidInputAccepted, match="expected an exception"):
        check_rejected(lenient_resolver, args)


def test_message_must_match():
    def resolve(lat, lng):
        raise ValueError("latitude out of bounds")

    # the unexpected error is propagated unchanged
    with pytest.raises(ValueError, match="latitude out of bounds"):
        check_rejected(resolve, (100, 10))


def test_any_exception_type_counts():
    def resolve(lat, lng):
        raise TypeError("invalid coordinates")

    check_rejected(resolve, (None, None))


def test_scenario_names():
    names = [name for name, _ in invalid_input_scenarios(dataset_resolver)]
    assert names[:2] == ["should fail given 100, 10", "should fail given 10, 190"]
    assert "should fail given hello, 10" in names
    assert "should fail given None, None" in names
    assert len(names) == len(set(names)) == len(INVALID_INPUTS)


def test_scenarios_bind_their_input():
    received = []

    def resolve(lat, lng):
        received.append((lat, lng))
        raise ValueError("invalid coordinates")

    for _, scenario in invalid_input_scenarios(resolve, [(100, 10), (10, 190)]):
        scenario()
    assert received == [(100, 10), (10, 190)]


@pytest.mark.parametrize("args", [(10**400, 10), (10, -(10**400))])
def test_rejected_huge_integers(args):
    check_rejected(dataset_resolver, args)
