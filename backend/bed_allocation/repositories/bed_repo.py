"""
Bed repository.
"""
from typing import Any, Dict, Optional, List, Tuple
from sqlmodel import Session, select, func
from sqlalchemy import update

from bed_allocation.repositories.base import BaseRepository
from bed_allocation.models.bed import Bed
from bed_allocation.models.hospital import Hospital
from bed_allocation.models.specialty import Specialty
from bed_allocation.models.enums import BedStatusEnum
from bed_allocation.utils.timestamps import utc_now


class BedRepository(BaseRepository[Bed]):
    """Repository for bed operations."""
    
    def __init__(self, session: Session):
        super().__init__(session, Bed)
    
    def get_fresh(self, bed_id: str) -> Optional[Bed]:
        """
        Loads a bed bypassing the identity map.
        
        Used before a status transition so the status and version
        reflect what is committed in the database, not what this session
        cached earlier.
        
        Args:
            bed_id: Bed ID
        
        Returns:
            The bed or None
        """
        return self.session.get(Bed, bed_id, populate_existing=True)
    
    def get_by_hospital_and_number(self, hospital_id: str, bed_number: str) -> Optional[Bed]:
        """
        Returns a bed by its number inside a hospital.
        
        Args:
            hospital_id: Hospital ID
            bed_number: Bed number (e.g. "B-12")
        
        Returns:
            The bed or None
        """
        query = select(Bed).where(
            Bed.hospital_id == hospital_id,
            Bed.bed_number == bed_number
        )
        return self.session.exec(query).first()
    
    def get_by_hospital_and_status(self, hospital_id: str, status: BedStatusEnum) -> List[Bed]:
        """
        Returns the beds of a hospital in a given status.
        
        Args:
            hospital_id: Hospital ID
            status: Bed status
        
        Returns:
            List of beds
        """
        query = (
            select(Bed)
            .where(Bed.hospital_id == hospital_id, Bed.status == status)
            .order_by(Bed.bed_number)
        )
        return list(self.session.exec(query).all())
    
    def get_by_specialty_and_status(self, specialty_id: str, status: BedStatusEnum) -> List[Bed]:
        """
        Returns the beds of a specialty in a given status.
        
        Args:
            specialty_id: Specialty ID
            status: Bed status
        
        Returns:
            List of beds
        """
        query = (
            select(Bed)
            .where(Bed.specialty_id == specialty_id, Bed.status == status)
            .order_by(Bed.hospital_id, Bed.bed_number)
        )
        return list(self.session.exec(query).all())
    
    def get_available_by_specialty_code(self, specialty_code: str) -> List[Tuple[Bed, Hospital]]:
        """
        Returns available beds of a specialty code in active hospitals,
        together with their hospital.
        
        Args:
            specialty_code: Specialty code (e.g. "CARD")
        
        Returns:
            List of (bed, hospital) pairs
        """
        query = (
            select(Bed, Hospital)
            .join(Hospital, Hospital.id == Bed.hospital_id)
            .join(Specialty, Specialty.id == Bed.specialty_id)
            .where(
                Specialty.code == specialty_code,
                Bed.status == BedStatusEnum.AVAILABLE,
                Hospital.is_active == True
            )
        )
        return [(bed, hospital) for bed, hospital in self.session.exec(query).all()]
    
    def count_available_by_hospital(self, hospital_id: str) -> int:
        """
        Counts the beds of a hospital whose availability flag is set.
        
        Args:
            hospital_id: Hospital ID
        
        Returns:
            Number of available beds
        """
        query = (
            select(func.count())
            .select_from(Bed)
            .where(Bed.hospital_id == hospital_id, Bed.is_available == True)
        )
        return self.session.exec(query).one()
    
    def count_by_hospital(self, hospital_id: str) -> int:
        """
        Counts every bed of a hospital.
        
        Args:
            hospital_id: Hospital ID
        
        Returns:
            Number of beds
        """
        query = select(func.count()).select_from(Bed).where(Bed.hospital_id == hospital_id)
        return self.session.exec(query).one()
    
    def exists_for_specialty(self, specialty_id: str) -> bool:
        """
        Checks whether any bed still references a specialty.
        
        Args:
            specialty_id: Specialty ID
        
        Returns:
            True if at least one bed references it
        """
        query = select(Bed.id).where(Bed.specialty_id == specialty_id).limit(1)
        return self.session.exec(query).first() is not None
    
    def compare_and_set(self, bed_id: str, expected_version: int, values: Dict[str, Any]) -> bool:
        """
        Writes ``values`` only if the bed still has the expected version.
        
        The version is bumped and ``updated_at`` refreshed by the same
        statement. Does not commit.
        
        Args:
            bed_id: Bed ID
            expected_version: Version read before validating the change
            values: Column values to write
        
        Returns:
            True if the row was updated, False if another writer got there first
        """
        statement = (
            update(Bed)
            .where(Bed.id == bed_id, Bed.version == expected_version)
            .values(**values, version=expected_version + 1, updated_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        result = self.session.exec(statement)
        return result.rowcount == 1
    