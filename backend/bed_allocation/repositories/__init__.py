"""
Data access repositories.
They wrap the SQL queries behind a small interface.
"""
from bed_allocation.repositories.base import BaseRepository
from bed_allocation.repositories.hospital_repo import HospitalRepository, HospitalAvailabilityRow
from bed_allocation.repositories.bed_repo import BedRepository
from bed_allocation.repositories.specialty_repo import SpecialtyRepository, SpecialtyGroupRepository

__all__ = [
    "BaseRepository",
    "HospitalRepository",
    "HospitalAvailabilityRow",
    "BedRepository",
    "SpecialtyRepository",
    "SpecialtyGroupRepository",
]
