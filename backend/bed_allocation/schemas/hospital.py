"""
Hospital schemas.
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from bed_allocation.schemas.specialty import SpecialtySummaryResponse


class HospitalCreate(BaseModel):
    """Schema to create a hospital."""
    
    name: str = Field(..., min_length=1, max_length=200)
    address: Optional[str] = Field(default=None, max_length=255)
    city: str = Field(..., min_length=1)
    postal_code: Optional[str] = Field(default=None, max_length=20)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    phone_number: Optional[str] = Field(default=None, max_length=30)
    total_beds: Optional[int] = Field(default=None, ge=0)
    is_active: bool = True
    
    specialty_ids: List[str] = []


class HospitalUpdate(BaseModel):
    """Schema to update a hospital. Every field is optional."""
    
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    address: Optional[str] = Field(default=None, max_length=255)
    city: Optional[str] = Field(default=None, min_length=1)
    postal_code: Optional[str] = Field(default=None, max_length=20)
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    phone_number: Optional[str] = Field(default=None, max_length=30)
    total_beds: Optional[int] = Field(default=None, ge=0)
    is_active: Optional[bool] = None
    
    specialty_ids: Optional[List[str]] = None


class HospitalSummaryResponse(BaseModel):
    """
    Hospital summary.
    
    ``distance_km`` and ``estimated_time_minutes`` are only filled in by
    the nearest-hospital search.
    """
    
    id: str
    name: str
    city: str
    latitude: float
    longitude: float
    available_beds: int = 0
    distance_km: Optional[float] = None
    estimated_time_minutes: Optional[int] = None
    
    class Config:
        from_attributes = True


class HospitalResponse(BaseModel):
    """Full hospital detail."""
    
    id: str
    name: str
    address: Optional[str] = None
    city: str
    postal_code: Optional[str] = None
    latitude: float
    longitude: float
    phone_number: Optional[str] = None
    total_beds: Optional[int] = None
    available_beds: int = 0
    is_active: bool
    created_at: datetime
    updated_at: datetime
    specialties: List[SpecialtySummaryResponse] = []
    
    class Config:
        from_attributes = True
