"""
Hospital service.

CRUD, listings and specialty association management for hospitals.
"""
from typing import List, Optional
from sqlmodel import Session

from bed_allocation.models.hospital import Hospital
from bed_allocation.repositories.hospital_repo import HospitalRepository
from bed_allocation.repositories.specialty_repo import SpecialtyRepository
from bed_allocation.schemas.hospital import HospitalCreate, HospitalUpdate
from bed_allocation.services.availability_service import AvailabilityService
from bed_allocation.core.exceptions import (
    HospitalNotFoundError,
    SpecialtyNotFoundError,
    DuplicateResourceError,
)
from bed_allocation.utils.geo import validate_coordinates
from bed_allocation.utils.logger import get_logger
from bed_allocation.utils.timestamps import utc_now

logger = get_logger("hospitals")


class HospitalService:
    """
    Service for hospital management.
    
    The available bed count of a hospital is never written here directly;
    it is delegated to AvailabilityService.
    """
    
    def __init__(self, session: Session):
        self.session = session
        self.hospital_repo = HospitalRepository(session)
        self.specialty_repo = SpecialtyRepository(session)
        self.availability = AvailabilityService(session)
    
    # ============================================
    # QUERIES
    # ============================================
    
    def get_hospital(self, hospital_id: str) -> Hospital:
        """
        Returns a hospital.
        
        Raises:
            HospitalNotFoundError: if it does not exist
        """
        hospital = self.hospital_repo.get_by_id(hospital_id)
        if not hospital:
            raise HospitalNotFoundError(hospital_id)
        return hospital
    
    def list_hospitals(self, offset: int = 0, limit: Optional[int] = None) -> List[Hospital]:
        return self.hospital_repo.get_all(offset=offset, limit=limit)
    
    def count_hospitals(self) -> int:
        return self.hospital_repo.count()
    
    def list_available(self) -> List[Hospital]:
        """Active hospitals with at least one available bed."""
        return [h for h in self.hospital_repo.get_active() if h.available_beds > 0]
    
    def list_by_city(self, city: str) -> List[Hospital]:
        """Active hospitals of a city."""
        return self.hospital_repo.get_by_city(city)
    
    def list_by_specialty_code(self, specialty_code: str) -> List[Hospital]:
        """Active hospitals that support a specialty."""
        return self.hospital_repo.get_by_specialty_code(specialty_code)
    
    # ============================================
    # CRUD
    # ============================================
    
    def create_hospital(self, data: HospitalCreate) -> Hospital:
        """
        Creates a hospital.
        
        Args:
            data: Hospital data, optionally with the ids of its specialties
        
        Raises:
            InvalidCoordinatesError: if the location is out of range
            DuplicateResourceError: if the name is taken
            SpecialtyNotFoundError: if a specialty id does not exist
        """
        validate_coordinates(data.latitude, data.longitude)
        if self.hospital_repo.get_by_name(data.name):
            raise DuplicateResourceError(f"Hospital with name '{data.name}' already exists")
        
        hospital = Hospital(**data.model_dump(exclude={"specialty_ids"}))
        hospital.specialties = self._resolve_specialties(data.specialty_ids)
        hospital = self.hospital_repo.save(hospital)
        self.availability.recompute_for_hospital(hospital.id)
        self.session.refresh(hospital)
        
        logger.info(f"Hospital created: id={hospital.id}, name={hospital.name}")
        return hospital
    
    def update_hospital(self, hospital_id: str, data: HospitalUpdate) -> Hospital:
        """
        Updates a hospital. Fields left as None keep their value.
        
        Raises:
            HospitalNotFoundError: if it does not exist
            InvalidCoordinatesError: if the new location is out of range
            DuplicateResourceError: if the new name is taken
        """
        hospital = self.get_hospital(hospital_id)
        
        if data.name is not None and data.name != hospital.name:
            if self.hospital_repo.get_by_name(data.name):
                raise DuplicateResourceError(f"Hospital with name '{data.name}' already exists")
        
        latitude = data.latitude if data.latitude is not None else hospital.latitude
        longitude = data.longitude if data.longitude is not None else hospital.longitude
        validate_coordinates(latitude, longitude)
        
        if data.specialty_ids is not None:
            hospital.specialties = self._resolve_specialties(data.specialty_ids)
        
        hospital.updated_at = utc_now()
        self.availability.recompute_for_hospital(hospital.id, commit=False)
        hospital = self.hospital_repo.update_from_dict(
            hospital, data.model_dump(exclude={"specialty_ids"})
        )
        
        logger.info(f"Hospital updated: id={hospital.id}")
        return hospital
    
    def delete_hospital(self, hospital_id: str) -> None:
        """Deletes a hospital together with its beds."""
        hospital = self.get_hospital(hospital_id)
        self.hospital_repo.delete(hospital)
        logger.warning(f"Hospital deleted: id={hospital_id}")
    
    # ============================================
    # SPECIALTIES
    # ============================================
    
    def add_specialty(self, hospital_id: str, specialty_id: str) -> Hospital:
        """Associates a specialty with a hospital. No-op if already linked."""
        hospital = self.get_hospital(hospital_id)
        specialty = self.specialty_repo.get_by_id(specialty_id)
        if not specialty:
            raise SpecialtyNotFoundError(specialty_id)
        
        if specialty not in hospital.specialties:
            hospital.specialties.append(specialty)
            hospital.updated_at = utc_now()
            hospital = self.hospital_repo.save(hospital)
            logger.info(f"Specialty {specialty.code} added to hospital {hospital.id}")
        return hospital
    
    def remove_specialty(self, hospital_id: str, specialty_id: str) -> Hospital:
        """Removes a specialty from a hospital. No-op if not linked."""
        hospital = self.get_hospital(hospital_id)
        specialty = self.specialty_repo.get_by_id(specialty_id)
        if not specialty:
            raise SpecialtyNotFoundError(specialty_id)
        
        if specialty in hospital.specialties:
            hospital.specialties.remove(specialty)
            hospital.updated_at = utc_now()
            hospital = self.hospital_repo.save(hospital)
            logger.info(f"Specialty {specialty.code} removed from hospital {hospital.id}")
        return hospital
    
    def update_available_beds(self, hospital_id: str) -> Hospital:
        """
        Recounts the available beds of a hospital.
        
        Returns:
            The refreshed hospital
        """
        self.availability.recompute_for_hospital(hospital_id)
        hospital = self.get_hospital(hospital_id)
        logger.info(f"Available beds recomputed for hospital {hospital_id}: {hospital.available_beds}")
        return hospital
    
    def _resolve_specialties(self, specialty_ids: Optional[List[str]]) -> list:
        specialties = []
        for specialty_id in specialty_ids or []:
            specialty = self.specialty_repo.get_by_id(specialty_id)
            if not specialty:
                raise SpecialtyNotFoundError(specialty_id)
            if specialty not in specialties:
                specialties.append(specialty)
        return specialties
