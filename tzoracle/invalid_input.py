"""
malformed input must be rejected with one stable error signal:
an exception with the message "invalid coordinates"
"""
from typing import Any, List, Sequence, Tuple

from tzoracle.configs import INVALID_COORDINATES_MSG, Resolver
from tzoracle.errors import InvalidInputAccepted
from tzoracle.utils import format_coordinates

INVALID_INPUTS: List[Tuple[Any, Any]] = [
    # out of range
    (100, 10),
    (10, 190),
    (-100, 10),
    (10, -190),
    # non numeric
    ("hello", 10),
    (10, "hello"),
    (float("nan"), 10),
    # missing
    (None, None),
    # a structured object instead of two scalars
    ({"lat": 10, "lon": 10}, None),
]


def check_rejected(resolve: Resolver, args: Sequence) -> None:
    """
    :raises InvalidInputAccepted: if the resolver returns a result
    any exception with a different message is propagated unchanged
    """
    try:
        result = resolve(*args)
    except Exception as exc:
        if str(exc) == INVALID_COORDINATES_MSG:
            return
        raise
    raise InvalidInputAccepted(
        f"expected an exception for ({format_coordinates(args)}), but got {result!r}"
    )


def invalid_input_scenarios(resolve: Resolver, inputs: Sequence[Sequence] = INVALID_INPUTS):
    return [
        (
            f"should fail given {format_coordinates(args)}",
            lambda args=args: check_rejected(resolve, args),
        )
        for args in inputs
    ]
