"""
Shared utilities.
"""
from bed_allocation.utils.geo import (
    distance_km,
    estimate_travel_minutes,
    validate_coordinates,
    EARTH_RADIUS_KM,
)
from bed_allocation.utils.logger import configure_logging, get_logger

__all__ = [
    "distance_km",
    "estimate_travel_minutes",
    "validate_coordinates",
    "EARTH_RADIUS_KM",
    "configure_logging",
    "get_logger",
]
