"""
Bed model.
"""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import DateTime, UniqueConstraint
from typing import Optional, TYPE_CHECKING
from datetime import datetime
import uuid

from bed_allocation.utils.timestamps import utc_now
from bed_allocation.models.enums import BedStatusEnum

if TYPE_CHECKING:
    from bed_allocation.models.hospital import Hospital
    from bed_allocation.models.specialty import Specialty


class Bed(SQLModel, table=True):
    """
    Hospital bed model.
    
    Owned by one hospital and typed to one specialty. ``is_available``
    mirrors ``status == AVAILABLE`` and is only written by the bed
    lifecycle functions. ``version`` is bumped on every status write and
    backs the compare-and-set update in the bed repository.
    """
    __tablename__ = "bed"
    __table_args__ = (
        UniqueConstraint("hospital_id", "bed_number", name="uk_bed_hospital_bed_number"),
    )
    
    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()), 
        primary_key=True
    )
    hospital_id: str = Field(foreign_key="hospital.id", index=True)
    specialty_id: str = Field(foreign_key="specialty.id", index=True)
    bed_number: str
    room_number: Optional[str] = Field(default=None)
    floor: Optional[int] = Field(default=None)
    
    status: BedStatusEnum = Field(default=BedStatusEnum.AVAILABLE, index=True)
    is_available: bool = Field(default=True, index=True)
    last_occupied_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    version: int = Field(default=0)
    
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    
    # Relationships
    hospital: "Hospital" = Relationship(back_populates="beds")
    specialty: "Specialty" = Relationship(back_populates="beds")
    
    def __repr__(self) -> str:
        return f"Bed(id={self.id}, bed_number={self.bed_number}, status={self.status})"
