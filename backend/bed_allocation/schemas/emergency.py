"""
Emergency allocation schemas.
"""
from pydantic import BaseModel, Field

from bed_allocation.schemas.hospital import HospitalSummaryResponse
from bed_allocation.schemas.specialty import SpecialtySummaryResponse


class EmergencyRequest(BaseModel):
    """
    Emergency allocation request.
    
    Coordinates are range-checked by the service so that an out-of-range
    location is reported as an invalid request (400).
    """
    specialty_code: str = Field(..., min_length=1, max_length=50)
    latitude: float
    longitude: float


class EmergencyResponse(BaseModel):
    """Recommended hospital for an emergency."""
    hospital: HospitalSummaryResponse
    specialty: SpecialtySummaryResponse
    available_beds: int
    distance_km: float
    estimated_time_minutes: int
