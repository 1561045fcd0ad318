"""
Geo-ranked availability search.

Finds active hospitals that have at least one AVAILABLE bed of a
specialty and ranks them by great-circle distance from a query point.
The grouping and counting happen in the store; distance scoring,
radius filtering and ordering happen here.
"""
from dataclasses import dataclass
from typing import List, Optional
from sqlmodel import Session

from bed_allocation.config import settings
from bed_allocation.repositories.hospital_repo import HospitalRepository
from bed_allocation.core.exceptions import ValidationError
from bed_allocation.utils.geo import distance_km, estimate_travel_minutes, validate_coordinates
from bed_allocation.utils.logger import get_logger

logger = get_logger("search")


@dataclass
class RankedHospital:
    """A candidate hospital with its distance from the query point."""
    id: str
    name: str
    city: str
    latitude: float
    longitude: float
    available_beds: int
    distance_km: float
    estimated_time_minutes: int


class SearchService:
    """
    Nearest-hospital search by specialty availability.
    
    Supports a result limit, a maximum radius, or both.
    """
    
    def __init__(self, session: Session):
        self.session = session
        self.hospital_repo = HospitalRepository(session)
    
    def search_nearest_with_availability(
        self,
        latitude: float,
        longitude: float,
        specialty_code: str,
        limit: Optional[int] = None,
        radius_km: Optional[float] = None
    ) -> List[RankedHospital]:
        """
        Ranks active hospitals with free beds of a specialty, nearest first.
        
        Args:
            latitude: Query latitude, within [-90, 90]
            longitude: Query longitude, within [-180, 180]
            specialty_code: Specialty code (e.g. "CARD")
            limit: Maximum number of results (settings.DEFAULT_SEARCH_LIMIT if None)
            radius_km: Optional maximum distance
        
        Returns:
            Hospitals sorted by (distance, id). Empty if none qualifies.
        
        Raises:
            InvalidCoordinatesError: if the query point is out of range
            ValidationError: if the code is blank or limit/radius is not positive
        """
        validate_coordinates(latitude, longitude)
        if not specialty_code or not specialty_code.strip():
            raise ValidationError("Specialty code is required")
        if limit is None:
            limit = settings.DEFAULT_SEARCH_LIMIT
        if limit <= 0:
            raise ValidationError("limit must be greater than 0")
        if radius_km is not None and radius_km <= 0:
            raise ValidationError("radius_km must be greater than 0")
        
        rows = self.hospital_repo.find_with_available_beds_by_specialty(specialty_code)
        
        candidates = []
        for row in rows:
            distance = distance_km(latitude, longitude, row.latitude, row.longitude)
            if radius_km is not None and distance > radius_km:
                continue
            candidates.append(RankedHospital(
                id=row.id,
                name=row.name,
                city=row.city,
                latitude=row.latitude,
                longitude=row.longitude,
                available_beds=row.available_beds,
                distance_km=distance,
                estimated_time_minutes=estimate_travel_minutes(distance),
            ))
        
        candidates.sort(key=lambda h: (h.distance_km, h.id))
        result = candidates[:limit]
        
        logger.debug(
            f"Search {specialty_code} at ({latitude}, {longitude}): "
            f"{len(rows)} candidates, {len(result)} returned"
        )
        return result
