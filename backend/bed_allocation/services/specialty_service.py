"""
Specialty service.

Reference data: specialties and the groups that organize them.
"""
from typing import List, Optional
from sqlmodel import Session

from bed_allocation.models.specialty import Specialty, SpecialtyGroup
from bed_allocation.repositories.bed_repo import BedRepository
from bed_allocation.repositories.specialty_repo import SpecialtyRepository, SpecialtyGroupRepository
from bed_allocation.schemas.specialty import (
    SpecialtyCreate,
    SpecialtyUpdate,
    SpecialtyGroupCreate,
    SpecialtyGroupUpdate,
)
from bed_allocation.core.exceptions import (
    SpecialtyNotFoundError,
    SpecialtyGroupNotFoundError,
    UnknownSpecialtyError,
    DuplicateResourceError,
    InvalidOperationError,
    ValidationError,
)
from bed_allocation.utils.logger import get_logger
from bed_allocation.utils.timestamps import utc_now

logger = get_logger("specialties")


class SpecialtyService:
    """Service for specialties and specialty groups."""
    
    def __init__(self, session: Session):
        self.session = session
        self.specialty_repo = SpecialtyRepository(session)
        self.group_repo = SpecialtyGroupRepository(session)
        self.bed_repo = BedRepository(session)
    
    def get_specialty(self, specialty_id: str) -> Specialty:
        specialty = self.specialty_repo.get_by_id(specialty_id)
        if not specialty:
            raise SpecialtyNotFoundError(specialty_id)
        return specialty
    
    def get_by_code(self, code: str) -> Specialty:
        """
        Resolves a specialty code.
        
        Raises:
            UnknownSpecialtyError: if no specialty has that code
        """
        specialty = self.specialty_repo.get_by_code(code)
        if not specialty:
            raise UnknownSpecialtyError(code)
        return specialty
    
    def list_specialties(self, offset: int = 0, limit: Optional[int] = None) -> List[Specialty]:
        return self.specialty_repo.get_all(offset=offset, limit=limit)
    
    def create_specialty(self, data: SpecialtyCreate) -> Specialty:
        """
        Creates a specialty.
        
        When a group id is given, the group's name is copied into
        ``specialty_group``.
        
        Raises:
            DuplicateResourceError: if the code is taken
            SpecialtyGroupNotFoundError: if the group does not exist
        """
        if self.specialty_repo.get_by_code(data.code):
            raise DuplicateResourceError(f"Specialty with code '{data.code}' already exists")
        
        values = data.model_dump()
        self._apply_group(values)
        if not values.get("specialty_group"):
            raise ValidationError("Either specialty_group or specialty_group_id is required")
        specialty = self.specialty_repo.create_from_dict(values)
        
        logger.info(f"Specialty created: code={specialty.code}")
        return specialty
    
    def update_specialty(self, specialty_id: str, data: SpecialtyUpdate) -> Specialty:
        """Updates a specialty. Fields left as None keep their value."""
        specialty = self.get_specialty(specialty_id)
        
        if data.code is not None and data.code != specialty.code:
            if self.specialty_repo.get_by_code(data.code):
                raise DuplicateResourceError(f"Specialty with code '{data.code}' already exists")
        
        values = data.model_dump()
        self._apply_group(values)
        specialty = self.specialty_repo.update_from_dict(specialty, values)
        
        logger.info(f"Specialty updated: code={specialty.code}")
        return specialty
    
    def delete_specialty(self, specialty_id: str) -> None:
        """
        Deletes a specialty.
        
        Raises:
            InvalidOperationError: if beds still reference it
        """
        specialty = self.get_specialty(specialty_id)
        if self.bed_repo.exists_for_specialty(specialty_id):
            raise InvalidOperationError(
                f"Specialty {specialty.code} is still referenced by beds"
            )
        specialty.hospitals = []
        self.specialty_repo.delete(specialty)
        logger.warning(f"Specialty deleted: code={specialty.code}")
    
    # ============================================
    # GROUPS
    # ============================================
    
    def list_by_group(self, group_name: str) -> List[Specialty]:
        """Specialties filed under a group name."""
        return self.specialty_repo.get_by_group_name(group_name)
    
    def list_groups(self) -> List[SpecialtyGroup]:
        return self.group_repo.get_all()
    
    def get_group(self, group_id: str) -> SpecialtyGroup:
        group = self.group_repo.get_by_id(group_id)
        if not group:
            raise SpecialtyGroupNotFoundError(group_id)
        return group
    
    def get_group_by_code(self, code: str) -> SpecialtyGroup:
        group = self.group_repo.get_by_code(code)
        if not group:
            raise SpecialtyGroupNotFoundError(code)
        return group
    
    def create_group(self, data: SpecialtyGroupCreate) -> SpecialtyGroup:
        if self.group_repo.get_by_code(data.code):
            raise DuplicateResourceError(f"Specialty group with code '{data.code}' already exists")
        group = self.group_repo.create(data)
        logger.info(f"Specialty group created: code={group.code}")
        return group
    
    def update_group(self, group_id: str, data: SpecialtyGroupUpdate) -> SpecialtyGroup:
        """
        Updates a group. Fields left as None keep their value.
        
        A new name is copied to the ``specialty_group`` of its specialties.
        
        Raises:
            SpecialtyGroupNotFoundError: if it does not exist
            DuplicateResourceError: if the new code is taken
        """
        group = self.get_group(group_id)
        
        if data.code is not None and data.code != group.code:
            if self.group_repo.get_by_code(data.code):
                raise DuplicateResourceError(f"Specialty group with code '{data.code}' already exists")
        
        if data.name is not None and data.name != group.name:
            for specialty in self.specialty_repo.get_by_group(group.id):
                specialty.specialty_group = data.name
                self.session.add(specialty)
        
        group.updated_at = utc_now()
        group = self.group_repo.update_from_dict(group, data.model_dump())
        
        logger.info(f"Specialty group updated: code={group.code}")
        return group
    
    def delete_group(self, group_id: str) -> None:
        """
        Deletes a group.
        
        Its specialties are kept and detached: ``specialty_group_id`` is
        set to NULL, ``specialty_group`` keeps the last name.
        """
        group = self.get_group(group_id)
        code = group.code
        
        for specialty in self.specialty_repo.get_by_group(group.id):
            specialty.specialty_group_id = None
            self.session.add(specialty)
        self.session.flush()
        
        self.group_repo.delete(group)
        logger.warning(f"Specialty group deleted: code={code}")
    
    def _apply_group(self, values: dict) -> None:
        group_id = values.get("specialty_group_id")
        if group_id is None:
            return
        group = self.group_repo.get_by_id(group_id)
        if not group:
            raise SpecialtyGroupNotFoundError(group_id)
        values["specialty_group"] = group.name
