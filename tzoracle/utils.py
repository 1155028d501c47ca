import math
import re
from typing import Any, Iterable, List, Tuple

from tzoracle.configs import (
    CANDIDATE_SEPARATOR,
    MAX_LAT_VAL,
    MAX_LNG_VAL,
    OCEAN_TIMEZONE_PREFIX,
    CoordValue,
    ZoneCandidates,
)
from tzoracle.errors import InvalidCoordinateError


def parse_coord_value(value: Any) -> float:
    """
    :param value: a number or a string holding a number
    :return: the value as float
    :raises InvalidCoordinateError: for anything else (None, bool, containers, NaN, ...)
    """
    # NOTE: bool is a subclass of int
    if isinstance(value, bool):
        raise InvalidCoordinateError()
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            raise InvalidCoordinateError() from None
    else:
        try:
            # also numpy scalars. huge ints overflow
            value = float(value)
        except (TypeError, ValueError, OverflowError):
            raise InvalidCoordinateError() from None
    if math.isnan(value):
        raise InvalidCoordinateError()
    return value


def validate_coordinates(lat: CoordValue, lng: CoordValue) -> Tuple[float, float]:
    """
    the input contract every resolver under test has to honour

    :param lat: latitude in degree (90.0 to -90.0), number or numeric string
    :param lng: longitude in degree (-180.0 to 180.0), number or numeric string
    :return: (lat, lng) as floats
    :raises InvalidCoordinateError: with the message "invalid coordinates"
    """
    lat = parse_coord_value(lat)
    lng = parse_coord_value(lng)
    if not -MAX_LAT_VAL <= lat <= MAX_LAT_VAL:
        raise InvalidCoordinateError()
    if not -MAX_LNG_VAL <= lng <= MAX_LNG_VAL:
        raise InvalidCoordinateError()
    return lat, lng


def is_valid_coordinate(lat: Any, lng: Any) -> bool:
    try:
        validate_coordinates(lat, lng)
    except InvalidCoordinateError:
        return False
    return True


def is_ocean_timezone(timezone_name: str) -> bool:
    if re.match(OCEAN_TIMEZONE_PREFIX, timezone_name) is None:
        return False
    return True


def split_candidates(candidates: ZoneCandidates) -> List[str]:
    """flattens candidate zones. every entry may hold comma separated alternatives

    >>> split_candidates(["Europe/Paris,Europe/Brussels", "Etc/GMT-1"])
    ['Europe/Paris', 'Europe/Brussels', 'Etc/GMT-1']
    """
    if isinstance(candidates, str):
        candidates = [candidates]
    flat = []
    for entry in candidates:
        for zone in str(entry).split(CANDIDATE_SEPARATOR):
            flat.append(zone.strip())
    return flat


def as_zone_tuple(zones: ZoneCandidates) -> Tuple[str, ...]:
    # a single zone id or a collection of accepted alternatives
    if isinstance(zones, str):
        return (zones,)
    return tuple(zones)


def round_half_up(value: float) -> int:
    # NOTE: the builtin round() rounds half to even
    return int(math.floor(value + 0.5))


def percentage(part: int, whole: int) -> int:
    """rounded integer percentage. a non empty part of an empty whole counts as 100%"""
    if whole == 0:
        return 0 if part == 0 else 100
    return round_half_up(100 * part / whole)


def format_coordinates(values: Iterable) -> str:
    return ", ".join(str(v) for v in values)
