"""
Hospital repository.
"""
from dataclasses import dataclass
from typing import Optional, List
from sqlmodel import Session, select, func

from bed_allocation.repositories.base import BaseRepository
from bed_allocation.models.hospital import Hospital
from bed_allocation.models.specialty import Specialty
from bed_allocation.models.bed import Bed
from bed_allocation.models.enums import BedStatusEnum


@dataclass
class HospitalAvailabilityRow:
    """Lightweight projection of a hospital with its per-specialty free beds."""
    id: str
    name: str
    city: str
    latitude: float
    longitude: float
    available_beds: int


class HospitalRepository(BaseRepository[Hospital]):
    """Repository for hospital operations."""
    
    def __init__(self, session: Session):
        super().__init__(session, Hospital)
    
    def get_by_name(self, name: str) -> Optional[Hospital]:
        """
        Returns a hospital by its name.
        
        Args:
            name: Hospital name
        
        Returns:
            The hospital or None
        """
        query = select(Hospital).where(Hospital.name == name)
        return self.session.exec(query).first()
    
    def get_active(self) -> List[Hospital]:
        """
        Returns every active hospital.
        
        Returns:
            List of hospitals
        """
        query = select(Hospital).where(Hospital.is_active == True).order_by(Hospital.name)
        return list(self.session.exec(query).all())
    
    def get_by_city(self, city: str, active_only: bool = True) -> List[Hospital]:
        """
        Returns the hospitals of a city.
        
        Args:
            city: City name
            active_only: If True, only active hospitals
        
        Returns:
            List of hospitals
        """
        query = select(Hospital).where(Hospital.city == city)
        if active_only:
            query = query.where(Hospital.is_active == True)
        return list(self.session.exec(query.order_by(Hospital.name)).all())
    
    def get_by_specialty_code(self, specialty_code: str, active_only: bool = True) -> List[Hospital]:
        """
        Returns the hospitals that support a specialty.
        
        Args:
            specialty_code: Specialty code
            active_only: If True, only active hospitals
        
        Returns:
            List of hospitals
        """
        query = (
            select(Hospital)
            .join(Hospital.specialties)
            .where(Specialty.code == specialty_code)
        )
        if active_only:
            query = query.where(Hospital.is_active == True)
        return list(self.session.exec(query.order_by(Hospital.name)).all())
    
    def find_with_available_beds_by_specialty(self, specialty_code: str) -> List[HospitalAvailabilityRow]:
        """
        Active hospitals with at least one AVAILABLE bed of a specialty.
        
        The count is computed per specialty straight from the bed rows,
        independent of the hospital-level cached aggregate.
        
        Args:
            specialty_code: Specialty code
        
        Returns:
            One row per qualifying hospital
        """
        available_beds = func.count(Bed.id).label("available_beds")
        query = (
            select(
                Hospital.id,
                Hospital.name,
                Hospital.city,
                Hospital.latitude,
                Hospital.longitude,
                available_beds,
            )
            .join(Bed, Bed.hospital_id == Hospital.id)
            .join(Specialty, Specialty.id == Bed.specialty_id)
            .where(
                Hospital.is_active == True,
                Specialty.code == specialty_code,
                Bed.status == BedStatusEnum.AVAILABLE
            )
            .group_by(
                Hospital.id,
                Hospital.name,
                Hospital.city,
                Hospital.latitude,
                Hospital.longitude
            )
            .having(func.count(Bed.id) > 0)
        )
        return [
            HospitalAvailabilityRow(
                id=row.id,
                name=row.name,
                city=row.city,
                latitude=row.latitude,
                longitude=row.longitude,
                available_beds=int(row.available_beds),
            )
            for row in self.session.exec(query).all()
        ]
