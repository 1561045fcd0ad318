"""
Hospital endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session
from typing import List, Optional

from bed_allocation.config import settings
from bed_allocation.core.database import get_session
from bed_allocation.core.exceptions import (
    NotFoundError,
    ValidationError,
    InvalidCoordinatesError,
    DuplicateResourceError,
)
from bed_allocation.schemas.hospital import (
    HospitalCreate,
    HospitalUpdate,
    HospitalResponse,
    HospitalSummaryResponse,
)
from bed_allocation.schemas.responses import PageResponse
from bed_allocation.services.hospital_service import HospitalService
from bed_allocation.services.search_service import SearchService

router = APIRouter()


@router.get("", response_model=PageResponse[HospitalSummaryResponse])
def list_hospitals(
    page: int = Query(0, ge=0),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=200),
    session: Session = Depends(get_session)
):
    """Lists every hospital, paginated."""
    service = HospitalService(session)
    hospitals = service.list_hospitals(offset=page * size, limit=size)
    return PageResponse[HospitalSummaryResponse](
        items=[HospitalSummaryResponse.model_validate(h) for h in hospitals],
        page=page,
        size=size,
        total=service.count_hospitals(),
    )


@router.get("/available", response_model=List[HospitalSummaryResponse])
def list_available_hospitals(session: Session = Depends(get_session)):
    """Active hospitals with at least one available bed."""
    return HospitalService(session).list_available()


@router.get("/city/{city}", response_model=List[HospitalSummaryResponse])
def list_hospitals_by_city(city: str, session: Session = Depends(get_session)):
    """Active hospitals of a city."""
    return HospitalService(session).list_by_city(city)


@router.get("/specialty/{specialty_code}", response_model=List[HospitalSummaryResponse])
def list_hospitals_by_specialty(specialty_code: str, session: Session = Depends(get_session)):
    """Active hospitals that support a specialty."""
    return HospitalService(session).list_by_specialty_code(specialty_code)


@router.get("/search/nearest", response_model=List[HospitalSummaryResponse])
def search_nearest_hospitals(
    lat: float,
    lon: float,
    specialty_code: str,
    limit: Optional[int] = None,
    radius_km: Optional[float] = None,
    session: Session = Depends(get_session)
):
    """
    Nearest active hospitals with available beds of a specialty.
    
    Each result carries its distance and estimated travel time.
    """
    try:
        results = SearchService(session).search_nearest_with_availability(
            lat, lon, specialty_code, limit=limit, radius_km=radius_km
        )
    except (InvalidCoordinatesError, ValidationError) as e:
        raise HTTPException(status_code=400, detail=e.message)
    
    return [
        HospitalSummaryResponse(
            id=r.id,
            name=r.name,
            city=r.city,
            latitude=r.latitude,
            longitude=r.longitude,
            available_beds=r.available_beds,
            distance_km=round(r.distance_km, 2),
            estimated_time_minutes=r.estimated_time_minutes,
        )
        for r in results
    ]


@router.get("/{hospital_id}", response_model=HospitalResponse)
def get_hospital(hospital_id: str, session: Session = Depends(get_session)):
    """Returns a hospital with its specialties."""
    try:
        return HospitalService(session).get_hospital(hospital_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.post("", response_model=HospitalResponse, status_code=status.HTTP_201_CREATED)
def create_hospital(data: HospitalCreate, session: Session = Depends(get_session)):
    """Creates a hospital."""
    try:
        return HospitalService(session).create_hospital(data)
    except DuplicateResourceError as e:
        raise HTTPException(status_code=409, detail=e.message)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except InvalidCoordinatesError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.put("/{hospital_id}", response_model=HospitalResponse)
def update_hospital(hospital_id: str, data: HospitalUpdate, session: Session = Depends(get_session)):
    """Updates a hospital."""
    try:
        return HospitalService(session).update_hospital(hospital_id, data)
    except DuplicateResourceError as e:
        raise HTTPException(status_code=409, detail=e.message)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except InvalidCoordinatesError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.delete("/{hospital_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_hospital(hospital_id: str, session: Session = Depends(get_session)):
    """Deletes a hospital and its beds."""
    try:
        HospitalService(session).delete_hospital(hospital_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.post("/{hospital_id}/specialties/{specialty_id}", response_model=HospitalResponse)
def add_specialty(hospital_id: str, specialty_id: str, session: Session = Depends(get_session)):
    """Associates a specialty with a hospital."""
    try:
        return HospitalService(session).add_specialty(hospital_id, specialty_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.delete("/{hospital_id}/specialties/{specialty_id}", response_model=HospitalResponse)
def remove_specialty(hospital_id: str, specialty_id: str, session: Session = Depends(get_session)):
    """Removes a specialty from a hospital."""
    try:
        return HospitalService(session).remove_specialty(hospital_id, specialty_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.post("/{hospital_id}/recompute-availability", response_model=HospitalResponse)
def recompute_availability(hospital_id: str, session: Session = Depends(get_session)):
    """Recounts the available beds of a hospital."""
    try:
        return HospitalService(session).update_available_beds(hospital_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
