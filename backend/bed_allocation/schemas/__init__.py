"""
Pydantic schemas for validation and serialization.
"""
from bed_allocation.schemas.bed import (
    BedCreate,
    BedUpdate,
    BedStatusUpdate,
    BedResponse,
    BedAvailabilityResponse,
)

from bed_allocation.schemas.hospital import (
    HospitalCreate,
    HospitalUpdate,
    HospitalSummaryResponse,
    HospitalResponse,
)

from bed_allocation.schemas.specialty import (
    SpecialtyCreate,
    SpecialtyUpdate,
    SpecialtyResponse,
    SpecialtySummaryResponse,
    SpecialtyGroupCreate,
    SpecialtyGroupUpdate,
    SpecialtyGroupResponse,
)

from bed_allocation.schemas.emergency import (
    EmergencyRequest,
    EmergencyResponse,
)

from bed_allocation.schemas.responses import (
    MessageResponse,
    ErrorResponse,
    PageResponse,
)

__all__ = [
    # Bed
    "BedCreate",
    "BedUpdate",
    "BedStatusUpdate",
    "BedResponse",
    "BedAvailabilityResponse",
    # Hospital
    "HospitalCreate",
    "HospitalUpdate",
    "HospitalSummaryResponse",
    "HospitalResponse",
    # Specialty
    "SpecialtyCreate",
    "SpecialtyUpdate",
    "SpecialtyResponse",
    "SpecialtySummaryResponse",
    "SpecialtyGroupCreate",
    "SpecialtyGroupUpdate",
    "SpecialtyGroupResponse",
    # Emergency
    "EmergencyRequest",
    "EmergencyResponse",
    # Common
    "MessageResponse",
    "ErrorResponse",
    "PageResponse",
]
