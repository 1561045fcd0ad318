"""
Specialty and specialty group schemas.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class SpecialtyCreate(BaseModel):
    """Schema to create a specialty."""
    code: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=150)
    specialty_group: Optional[str] = Field(default=None, max_length=150)
    specialty_group_id: Optional[str] = None
    description: Optional[str] = None
    is_active: bool = True


class SpecialtyUpdate(BaseModel):
    """Schema to update a specialty. Every field is optional."""
    code: Optional[str] = Field(default=None, min_length=1, max_length=50)
    name: Optional[str] = Field(default=None, min_length=1, max_length=150)
    specialty_group: Optional[str] = Field(default=None, max_length=150)
    specialty_group_id: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None


class SpecialtySummaryResponse(BaseModel):
    """Compact specialty, embedded in hospital and allocation responses."""
    
    id: str
    code: str
    name: str
    
    class Config:
        from_attributes = True


class SpecialtyResponse(BaseModel):
    """Response schema for a specialty."""
    
    id: str
    code: str
    name: str
    specialty_group: str
    specialty_group_id: Optional[str] = None
    description: Optional[str] = None
    is_active: bool
    created_at: datetime
    
    class Config:
        from_attributes = True


class SpecialtyGroupCreate(BaseModel):
    """Schema to create a specialty group."""
    code: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=150)
    description: Optional[str] = None
    is_active: bool = True


class SpecialtyGroupUpdate(BaseModel):
    """Schema to update a specialty group. Every field is optional."""
    code: Optional[str] = Field(default=None, min_length=1, max_length=50)
    name: Optional[str] = Field(default=None, min_length=1, max_length=150)
    description: Optional[str] = None
    is_active: Optional[bool] = None


class SpecialtyGroupResponse(BaseModel):
    """Response schema for a specialty group."""
    
    id: str
    code: str
    name: str
    description: Optional[str] = None
    is_active: bool
    
    class Config:
        from_attributes = True
