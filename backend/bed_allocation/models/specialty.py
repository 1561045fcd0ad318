"""
Specialty and specialty group models.
Reference data: beds and hospitals point to it but do not own it.
"""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import DateTime
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
import uuid

from bed_allocation.utils.timestamps import utc_now
from bed_allocation.models.hospital import HospitalSpecialtyLink

if TYPE_CHECKING:
    from bed_allocation.models.hospital import Hospital
    from bed_allocation.models.bed import Bed


class SpecialtyGroup(SQLModel, table=True):
    """
    Specialty group model.
    
    Groups related medical specialties (e.g. "General medicine group").
    """
    __tablename__ = "specialty_group"
    
    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()), 
        primary_key=True
    )
    code: str = Field(max_length=50, unique=True, index=True)
    name: str = Field(max_length=150)
    description: Optional[str] = Field(default=None)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    
    specialties: List["Specialty"] = Relationship(back_populates="group")
    
    def __repr__(self) -> str:
        return f"SpecialtyGroup(id={self.id}, code={self.code})"


class Specialty(SQLModel, table=True):
    """
    Medical specialty model.
    
    ``code`` is the unique reference used by emergency requests (e.g. "CARD").
    ``specialty_group`` keeps the owning group's display name.
    """
    __tablename__ = "specialty"
    
    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()), 
        primary_key=True
    )
    code: str = Field(max_length=50, unique=True, index=True)
    name: str = Field(max_length=150)
    specialty_group: str = Field(max_length=150, index=True)
    specialty_group_id: Optional[str] = Field(
        default=None,
        foreign_key="specialty_group.id",
        ondelete="SET NULL"
    )
    description: Optional[str] = Field(default=None)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    
    # Relationships
    group: Optional[SpecialtyGroup] = Relationship(back_populates="specialties")
    hospitals: List["Hospital"] = Relationship(
        back_populates="specialties",
        link_model=HospitalSpecialtyLink
    )
    beds: List["Bed"] = Relationship(back_populates="specialty")
    
    def __repr__(self) -> str:
        return f"Specialty(id={self.id}, code={self.code}, name={self.name})"
