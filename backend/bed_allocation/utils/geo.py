"""
Geographic helpers: great-circle distance and travel time estimation.
"""
import math
from typing import Optional

from bed_allocation.config import settings
from bed_allocation.core.exceptions import InvalidCoordinatesError

EARTH_RADIUS_KM = 6371.0


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Great-circle distance between two points using the haversine formula.
    
    Coordinates are not range-checked here; callers validate first.
    
    Args:
        lat1: Latitude of point 1 (degrees)
        lon1: Longitude of point 1 (degrees)
        lat2: Latitude of point 2 (degrees)
        lon2: Longitude of point 2 (degrees)
    
    Returns:
        Distance in kilometres
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def estimate_travel_minutes(distance: float, speed_kmh: Optional[float] = None) -> int:
    """
    Estimated travel time for a distance at a fixed effective speed.
    
    Rounded up to the next whole minute, so a farther hospital is never
    reported as faster.
    
    Args:
        distance: Distance in kilometres
        speed_kmh: Effective speed; defaults to settings.AVERAGE_SPEED_KMH
    
    Returns:
        Estimated minutes
    """
    if speed_kmh is None:
        speed_kmh = settings.AVERAGE_SPEED_KMH
    if distance <= 0:
        return 0
    return int(math.ceil(distance / speed_kmh * 60))


def validate_coordinates(latitude: Optional[float], longitude: Optional[float]) -> None:
    """
    Checks that a latitude/longitude pair is inside the valid ranges.
    
    Raises:
        InvalidCoordinatesError: if a value is missing, NaN or out of range
    """
    if latitude is None or longitude is None:
        raise InvalidCoordinatesError(latitude, longitude)
    if math.isnan(latitude) or math.isnan(longitude):
        raise InvalidCoordinatesError(latitude, longitude)
    if not -90.0 <= latitude <= 90.0 or not -180.0 <= longitude <= 180.0:
        raise InvalidCoordinatesError(latitude, longitude)
