"""
Specialty and specialty group repositories.
"""
from typing import Optional, List
from sqlmodel import Session, select

from bed_allocation.repositories.base import BaseRepository
from bed_allocation.models.specialty import Specialty, SpecialtyGroup


class SpecialtyRepository(BaseRepository[Specialty]):
    """Repository for specialty operations."""
    
    def __init__(self, session: Session):
        super().__init__(session, Specialty)
    
    def get_by_code(self, code: str) -> Optional[Specialty]:
        """
        Returns a specialty by its code.
        
        Args:
            code: Specialty code (e.g. "CARD")
        
        Returns:
            The specialty or None
        """
        query = select(Specialty).where(Specialty.code == code)
        return self.session.exec(query).first()
    
    def get_by_group(self, group_id: str) -> List[Specialty]:
        """Returns the specialties of a group."""
        query = (
            select(Specialty)
            .where(Specialty.specialty_group_id == group_id)
            .order_by(Specialty.name)
        )
        return list(self.session.exec(query).all())
    
    def get_by_group_name(self, group_name: str) -> List[Specialty]:
        """Returns the specialties whose ``specialty_group`` is the given name."""
        query = (
            select(Specialty)
            .where(Specialty.specialty_group == group_name)
            .order_by(Specialty.name)
        )
        return list(self.session.exec(query).all())


class SpecialtyGroupRepository(BaseRepository[SpecialtyGroup]):
    """Repository for specialty groups."""
    
    def __init__(self, session: Session):
        super().__init__(session, SpecialtyGroup)
    
    def get_by_code(self, code: str) -> Optional[SpecialtyGroup]:
        query = select(SpecialtyGroup).where(SpecialtyGroup.code == code)
        return self.session.exec(query).first()
