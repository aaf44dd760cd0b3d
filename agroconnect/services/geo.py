"""
Great-circle distance between listing positions.

Used to annotate crop listings with their distance from a reference point
(usually the buyer's location) and order them nearest first.
"""
from math import atan2, cos, radians, sin, sqrt
from typing import Callable, Iterable, List, Optional, Tuple, TypeVar

EARTH_RADIUS_KM = 6371.0

T = TypeVar("T")


def haversine_distance(lat0: float, lon0: float, lat1: float, lon1: float) -> float:
    """Distance in kilometres between two (latitude, longitude) points given in degrees."""
    d_lat = radians(lat1 - lat0)
    d_lon = radians(lon1 - lon0)
    a = sin(d_lat / 2) ** 2 + cos(radians(lat0)) * cos(radians(lat1)) * sin(d_lon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * atan2(sqrt(a), sqrt(1 - a))


def _location_of(record) -> Tuple[float, float]:
    return record.location.latitude, record.location.longitude


def sort_by_distance(
    records: Iterable[T],
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
    position: Callable[[T], Tuple[float, float]] = _location_of,
) -> List[T]:
    """
    Set ``distance`` on every record and return them nearest first.

    Without a complete reference point the records come back in their
    original order, untouched.
    """
    records = list(records)
    if latitude is None or longitude is None:
        return records

    for record in records:
        lat, lon = position(record)
        record.distance = haversine_distance(latitude, longitude, lat, lon)
    return sorted(records, key=lambda r: r.distance)
