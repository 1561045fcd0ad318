"""
Emergency allocation.

Turns a (location, specialty) request into a single recommended hospital
with its distance and estimated travel time.
"""
from dataclasses import dataclass
from sqlmodel import Session

from bed_allocation.models.specialty import Specialty
from bed_allocation.repositories.specialty_repo import SpecialtyRepository
from bed_allocation.services.search_service import SearchService, RankedHospital
from bed_allocation.core.exceptions import (
    ValidationError,
    UnknownSpecialtyError,
    NoCapacityAvailableError,
)
from bed_allocation.utils.geo import distance_km, estimate_travel_minutes, validate_coordinates
from bed_allocation.utils.logger import get_logger

logger = get_logger("emergency")


@dataclass
class AllocationResult:
    """Outcome of an emergency allocation."""
    hospital: RankedHospital
    specialty: Specialty
    available_beds: int
    distance_km: float
    estimated_time_minutes: int


class EmergencyService:
    """Recommends the nearest hospital with capacity for a specialty."""
    
    def __init__(self, session: Session):
        self.session = session
        self.specialty_repo = SpecialtyRepository(session)
        self.search_service = SearchService(session)
    
    def allocate_for_emergency(
        self,
        latitude: float,
        longitude: float,
        specialty_code: str
    ) -> AllocationResult:
        """
        Picks the best hospital for an emergency.
        
        Steps:
        1. Resolve the specialty code
        2. Search the nearest hospital with capacity (limit 1)
        3. Re-derive distance and travel time for the winner
        
        Args:
            latitude: Patient latitude
            longitude: Patient longitude
            specialty_code: Required specialty code
        
        Returns:
            AllocationResult with hospital, specialty, beds, distance and ETA
        
        Raises:
            InvalidCoordinatesError: if the location is out of range
            UnknownSpecialtyError: if the code does not resolve
            NoCapacityAvailableError: if no hospital qualifies
        """
        logger.info(
            f"Allocation requested for specialty {specialty_code} at [{latitude}, {longitude}]"
        )
        validate_coordinates(latitude, longitude)
        if not specialty_code or not specialty_code.strip():
            raise ValidationError("Specialty code is required")
        
        specialty = self.specialty_repo.get_by_code(specialty_code)
        if not specialty:
            raise UnknownSpecialtyError(specialty_code)
        
        nearest = self.search_service.search_nearest_with_availability(
            latitude, longitude, specialty_code, limit=1
        )
        if not nearest:
            logger.warning(f"No capacity available for specialty {specialty_code}")
            raise NoCapacityAvailableError(specialty_code)
        
        best = nearest[0]
        
        # Recomputed rather than taken from the search result
        distance = distance_km(latitude, longitude, best.latitude, best.longitude)
        minutes = estimate_travel_minutes(distance)
        
        logger.info(
            f"Recommended hospital: {best.name} ({distance:.2f} km, {minutes} min)"
        )
        
        return AllocationResult(
            hospital=best,
            specialty=specialty,
            available_beds=best.available_beds,
            distance_km=round(distance, 2),
            estimated_time_minutes=minutes,
        )
