"""
Hospital model.
"""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import DateTime
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
import uuid

from bed_allocation.utils.timestamps import utc_now

if TYPE_CHECKING:
    from bed_allocation.models.bed import Bed
    from bed_allocation.models.specialty import Specialty


class HospitalSpecialtyLink(SQLModel, table=True):
    """Association table between hospitals and the specialties they support."""
    __tablename__ = "hospital_specialty"
    
    hospital_id: str = Field(foreign_key="hospital.id", primary_key=True)
    specialty_id: str = Field(foreign_key="specialty.id", primary_key=True)


class Hospital(SQLModel, table=True):
    """
    Hospital model.
    
    A care facility with a location, a set of supported specialties and
    the beds it owns. ``available_beds`` is a cached aggregate of the
    bed collection: it is recomputed by the availability service and
    never patched in place.
    """
    __tablename__ = "hospital"
    
    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()), 
        primary_key=True
    )
    name: str = Field(max_length=200, unique=True, index=True)
    address: Optional[str] = Field(default=None, max_length=255)
    city: str = Field(index=True)
    postal_code: Optional[str] = Field(default=None, max_length=20)
    latitude: float
    longitude: float
    phone_number: Optional[str] = Field(default=None, max_length=30)
    
    total_beds: Optional[int] = Field(default=None)
    available_beds: int = Field(default=0)
    is_active: bool = Field(default=True, index=True)
    
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    
    # Relationships
    beds: List["Bed"] = Relationship(
        back_populates="hospital",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"}
    )
    specialties: List["Specialty"] = Relationship(
        back_populates="hospitals",
        link_model=HospitalSpecialtyLink
    )
    
    def __repr__(self) -> str:
        return f"Hospital(id={self.id}, name={self.name}, city={self.city})"
