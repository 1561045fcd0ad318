"""
Bed endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session
from typing import List

from bed_allocation.config import settings
from bed_allocation.core.database import get_session
from bed_allocation.core.exceptions import (
    NotFoundError,
    ValidationError,
    InvalidCoordinatesError,
    InvalidTransitionError,
    DuplicateResourceError,
    ConcurrentModificationError,
)
from bed_allocation.models.bed import Bed
from bed_allocation.schemas.bed import (
    BedCreate,
    BedUpdate,
    BedStatusUpdate,
    BedResponse,
    BedAvailabilityResponse,
)
from bed_allocation.schemas.responses import PageResponse
from bed_allocation.services.bed_service import BedService

router = APIRouter()


def _to_availability(bed: Bed, distance_km: float = None) -> BedAvailabilityResponse:
    return BedAvailabilityResponse(
        id=bed.id,
        bed_number=bed.bed_number,
        room_number=bed.room_number,
        floor=bed.floor,
        hospital_id=bed.hospital_id,
        hospital_name=bed.hospital.name if bed.hospital else None,
        specialty_id=bed.specialty_id,
        specialty_code=bed.specialty.code if bed.specialty else None,
        status=bed.status,
        distance_km=round(distance_km, 2) if distance_km is not None else None,
    )


def _status_change_error(e: Exception) -> HTTPException:
    """Maps the errors of a status operation to an HTTP error."""
    if isinstance(e, NotFoundError):
        return HTTPException(status_code=404, detail=e.message)
    if isinstance(e, ConcurrentModificationError):
        return HTTPException(status_code=409, detail=e.message)
    return HTTPException(status_code=400, detail=e.message)


@router.get("", response_model=PageResponse[BedResponse])
def list_beds(
    page: int = Query(0, ge=0),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=200),
    session: Session = Depends(get_session)
):
    """Lists every bed, paginated."""
    service = BedService(session)
    beds = service.list_beds(offset=page * size, limit=size)
    return PageResponse[BedResponse](
        items=[BedResponse.model_validate(b) for b in beds],
        page=page,
        size=size,
        total=service.count_beds(),
    )


@router.get("/hospital/{hospital_id}/available", response_model=List[BedAvailabilityResponse])
def list_available_beds_by_hospital(hospital_id: str, session: Session = Depends(get_session)):
    """Available beds of a hospital."""
    try:
        beds = BedService(session).find_available_beds(hospital_id=hospital_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return [_to_availability(b) for b in beds]


@router.get("/specialty/{specialty_code}/available", response_model=List[BedAvailabilityResponse])
def list_available_beds_by_specialty(specialty_code: str, session: Session = Depends(get_session)):
    """Available beds of a specialty, in every hospital."""
    try:
        beds = BedService(session).find_available_beds_by_specialty_code(specialty_code)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return [_to_availability(b) for b in beds]


@router.get("/emergency/search", response_model=List[BedAvailabilityResponse])
def search_beds_for_emergency(
    lat: float,
    lon: float,
    specialty_code: str,
    session: Session = Depends(get_session)
):
    """
    Available beds of a specialty in active hospitals, nearest hospital first.
    """
    try:
        results = BedService(session).find_available_beds_for_emergency(specialty_code, lat, lon)
    except (InvalidCoordinatesError, ValidationError) as e:
        raise HTTPException(status_code=400, detail=e.message)
    return [_to_availability(r.bed, r.distance_km) for r in results]


@router.get("/{bed_id}", response_model=BedResponse)
def get_bed(bed_id: str, session: Session = Depends(get_session)):
    """Returns a bed."""
    try:
        return BedService(session).get_bed(bed_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.post("", response_model=BedResponse, status_code=status.HTTP_201_CREATED)
def create_bed(data: BedCreate, session: Session = Depends(get_session)):
    """Creates a bed."""
    try:
        return BedService(session).create_bed(data)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except DuplicateResourceError as e:
        raise HTTPException(status_code=409, detail=e.message)


@router.put("/{bed_id}", response_model=BedResponse)
def update_bed(bed_id: str, data: BedUpdate, session: Session = Depends(get_session)):
    """Updates a bed. A status change is validated against the lifecycle."""
    try:
        return BedService(session).update_bed(bed_id, data)
    except DuplicateResourceError as e:
        raise HTTPException(status_code=409, detail=e.message)
    except (NotFoundError, InvalidTransitionError, ValidationError, ConcurrentModificationError) as e:
        raise _status_change_error(e)


@router.patch("/{bed_id}/status", response_model=BedResponse)
def change_bed_status(bed_id: str, request: BedStatusUpdate, session: Session = Depends(get_session)):
    """Moves a bed to another status."""
    try:
        return BedService(session).transition_bed_status(bed_id, request.status)
    except (NotFoundError, InvalidTransitionError, ValidationError, ConcurrentModificationError) as e:
        raise _status_change_error(e)


@router.post("/{bed_id}/reserve", response_model=BedResponse)
def reserve_bed(bed_id: str, session: Session = Depends(get_session)):
    """Reserves an available bed."""
    try:
        return BedService(session).reserve_bed(bed_id)
    except (NotFoundError, InvalidTransitionError, ConcurrentModificationError) as e:
        raise _status_change_error(e)


@router.post("/{bed_id}/release", response_model=BedResponse)
def release_bed(bed_id: str, session: Session = Depends(get_session)):
    """Releases a bed back to AVAILABLE."""
    try:
        return BedService(session).release_bed(bed_id)
    except (NotFoundError, InvalidTransitionError, ConcurrentModificationError) as e:
        raise _status_change_error(e)


@router.delete("/{bed_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_bed(bed_id: str, session: Session = Depends(get_session)):
    """Deletes a bed."""
    try:
        BedService(session).delete_bed(bed_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
