"""
Data models.
Re-exports every model for simpler imports.
"""
from bed_allocation.models.enums import BedStatusEnum, BED_STATUS_TRANSITIONS

from bed_allocation.models.hospital import Hospital, HospitalSpecialtyLink
from bed_allocation.models.specialty import Specialty, SpecialtyGroup
from bed_allocation.models.bed import Bed

__all__ = [
    # Enums
    "BedStatusEnum",
    "BED_STATUS_TRANSITIONS",
    # Models
    "Hospital",
    "HospitalSpecialtyLink",
    "Specialty",
    "SpecialtyGroup",
    "Bed",
]
