"""
Bed schemas.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from bed_allocation.models.enums import BedStatusEnum


class BedCreate(BaseModel):
    """
    Schema to create a bed.
    
    There is no ``is_available`` field: availability is always derived
    from the status.
    """
    hospital_id: str
    specialty_id: str
    bed_number: str = Field(..., min_length=1, max_length=50)
    room_number: Optional[str] = Field(default=None, max_length=50)
    floor: Optional[int] = None
    status: Optional[BedStatusEnum] = None


class BedUpdate(BaseModel):
    """Schema to update a bed. Every field is optional."""
    hospital_id: Optional[str] = None
    specialty_id: Optional[str] = None
    bed_number: Optional[str] = Field(default=None, min_length=1, max_length=50)
    room_number: Optional[str] = Field(default=None, max_length=50)
    floor: Optional[int] = None
    status: Optional[BedStatusEnum] = None


class BedStatusUpdate(BaseModel):
    """Request to move a bed to another status."""
    status: BedStatusEnum


class BedResponse(BaseModel):
    """Response schema for a bed."""
    
    id: str
    hospital_id: str
    specialty_id: str
    bed_number: str
    room_number: Optional[str] = None
    floor: Optional[int] = None
    status: BedStatusEnum
    is_available: bool
    last_occupied_at: Optional[datetime] = None
    version: int
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True


class BedAvailabilityResponse(BaseModel):
    """Available bed with its hospital, as returned by listings and searches."""
    
    id: str
    bed_number: str
    room_number: Optional[str] = None
    floor: Optional[int] = None
    hospital_id: str
    hospital_name: Optional[str] = None
    specialty_id: str
    specialty_code: Optional[str] = None
    status: BedStatusEnum
    distance_km: Optional[float] = None
