"""
Emergency allocation endpoint.
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from bed_allocation.core.database import get_session
from bed_allocation.core.exceptions import (
    ValidationError,
    InvalidCoordinatesError,
    UnknownSpecialtyError,
    NoCapacityAvailableError,
)
from bed_allocation.schemas.emergency import EmergencyRequest, EmergencyResponse
from bed_allocation.schemas.hospital import HospitalSummaryResponse
from bed_allocation.schemas.specialty import SpecialtySummaryResponse
from bed_allocation.services.emergency_service import EmergencyService

router = APIRouter()


@router.post("/allocate", response_model=EmergencyResponse)
def allocate(request: EmergencyRequest, session: Session = Depends(get_session)):
    """
    Recommends the nearest active hospital with a free bed of the
    requested specialty.
    
    Errors:
    - 400: coordinates out of range
    - 404: unknown specialty, or no hospital with capacity
    """
    try:
        result = EmergencyService(session).allocate_for_emergency(
            request.latitude, request.longitude, request.specialty_code
        )
    except (InvalidCoordinatesError, ValidationError) as e:
        raise HTTPException(status_code=400, detail=e.message)
    except (UnknownSpecialtyError, NoCapacityAvailableError) as e:
        raise HTTPException(status_code=404, detail=e.message)
    
    hospital = result.hospital
    return EmergencyResponse(
        hospital=HospitalSummaryResponse(
            id=hospital.id,
            name=hospital.name,
            city=hospital.city,
            latitude=hospital.latitude,
            longitude=hospital.longitude,
            available_beds=hospital.available_beds,
            distance_km=result.distance_km,
            estimated_time_minutes=result.estimated_time_minutes,
        ),
        specialty=SpecialtySummaryResponse.model_validate(result.specialty),
        available_beds=result.available_beds,
        distance_km=result.distance_km,
        estimated_time_minutes=result.estimated_time_minutes,
    )
