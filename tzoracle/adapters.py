"""
concrete collaborators built on the ``timezonefinder`` package

- a reference geocoder returning the candidate zones of a point
- a (coarse) land oracle: a point counts as inhabited when it lies within a land timezone

NOTE: there is no resolver under test in here. it has to come from elsewhere,
a resolver compared against its own boundary data would always agree.
"""
from typing import List, Optional

from timezonefinder import TimezoneFinder

from tzoracle.utils import is_ocean_timezone


class TimezoneFinderAdapter:
    __slots__ = ["tf"]

    def __init__(self, tf: Optional[TimezoneFinder] = None, in_memory: bool = True):
        """
        :param tf: the instance to use. a new one is created if None
        :param in_memory: whether to read the polygon data into memory (only used when creating an instance)
        """
        if tf is None:
            tf = TimezoneFinder(in_memory=in_memory)
        self.tf = tf

    def reference_resolve(self, lat: float, lng: float) -> List[str]:
        """
        :return: the candidate zones. empty if no zone could be found
        """
        zone = self.tf.timezone_at(lng=lng, lat=lat)
        if zone is None:
            return []
        return [zone]

    def is_on_land(self, lat: float, lng: float) -> bool:
        """
        :return: False for points without a zone or within an ocean timezone ("Etc/GMT+-XX")
        """
        zone = self.tf.timezone_at(lng=lng, lat=lat)
        return zone is not None and not is_ocean_timezone(zone)


_adapter: Optional[TimezoneFinderAdapter] = None


def get_adapter() -> TimezoneFinderAdapter:
    """lazily creates a single shared adapter"""
    global _adapter
    if _adapter is None:
        _adapter = TimezoneFinderAdapter()
    return _adapter


def reference_resolve(lat: float, lng: float) -> List[str]:
    return get_adapter().reference_resolve(lat, lng)


def is_on_land(lat: float, lng: float) -> bool:
    return get_adapter().is_on_land(lat, lng)
