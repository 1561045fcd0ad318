"""
Business logic services.
"""
from bed_allocation.services.availability_service import AvailabilityService
from bed_allocation.services.search_service import SearchService, RankedHospital
from bed_allocation.services.emergency_service import EmergencyService, AllocationResult
from bed_allocation.services.bed_service import BedService, BedDistance
from bed_allocation.services.hospital_service import HospitalService
from bed_allocation.services.specialty_service import SpecialtyService

__all__ = [
    "AvailabilityService",
    "SearchService",
    "RankedHospital",
    "EmergencyService",
    "AllocationResult",
    "BedService",
    "BedDistance",
    "HospitalService",
    "SpecialtyService",
]
