"""
default offset oracle backed by pytz

cf. the ``get_offset()`` recipe: resolve the zone by name and ask it for the UTC offset
"""
from datetime import datetime, timezone
from functools import lru_cache

import pytz
from pytz.exceptions import UnknownTimeZoneError

from tzoracle.errors import ZoneResolutionError


@lru_cache(maxsize=None)
def _load_zone(zone_id: str) -> pytz.BaseTzInfo:
    try:
        return pytz.timezone(zone_id)
    except UnknownTimeZoneError:
        raise ZoneResolutionError(f"invalid IANA zone: {zone_id}") from None


def get_zone(zone_id: str) -> pytz.BaseTzInfo:
    """
    :param zone_id: IANA zone name or "Etc/GMT±N"
    :raises ZoneResolutionError: if the zone is unknown
    """
    if not isinstance(zone_id, str) or len(zone_id) == 0:
        raise ZoneResolutionError(f"invalid IANA zone: {zone_id}")
    return _load_zone(zone_id)


def is_known_zone(zone_id: str) -> bool:
    try:
        get_zone(zone_id)
    except ZoneResolutionError:
        return False
    return True


def zone_offset_minutes(zone_id: str, instant: datetime) -> int:
    """
    :param zone_id: IANA zone name or "Etc/GMT±N"
    :param instant: a point in time. naive datetimes are interpreted as UTC
    :return: the UTC offset of the zone at this instant in minutes east of UTC
    :raises ZoneResolutionError: if the zone is unknown
    """
    zone = get_zone(zone_id)
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    offset = instant.astimezone(zone).utcoffset()
    return int(offset.total_seconds() // 60)
