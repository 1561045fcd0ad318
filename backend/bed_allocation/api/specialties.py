"""
Specialty and specialty group endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import List

from bed_allocation.core.database import get_session
from bed_allocation.core.exceptions import (
    NotFoundError,
    ValidationError,
    DuplicateResourceError,
    InvalidOperationError,
)
from bed_allocation.schemas.specialty import (
    SpecialtyCreate,
    SpecialtyUpdate,
    SpecialtyResponse,
    SpecialtyGroupCreate,
    SpecialtyGroupUpdate,
    SpecialtyGroupResponse,
)
from bed_allocation.services.specialty_service import SpecialtyService

router = APIRouter()
groups_router = APIRouter()


@router.get("", response_model=List[SpecialtyResponse])
def list_specialties(session: Session = Depends(get_session)):
    """Lists every specialty."""
    return SpecialtyService(session).list_specialties()


@router.get("/code/{code}", response_model=SpecialtyResponse)
def get_specialty_by_code(code: str, session: Session = Depends(get_session)):
    """Resolves a specialty by its code."""
    try:
        return SpecialtyService(session).get_by_code(code)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.get("/group/{group}", response_model=List[SpecialtyResponse])
def list_specialties_by_group(group: str, session: Session = Depends(get_session)):
    """Lists the specialties filed under a group name."""
    return SpecialtyService(session).list_by_group(group)


@router.get("/{specialty_id}", response_model=SpecialtyResponse)
def get_specialty(specialty_id: str, session: Session = Depends(get_session)):
    try:
        return SpecialtyService(session).get_specialty(specialty_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.post("", response_model=SpecialtyResponse, status_code=status.HTTP_201_CREATED)
def create_specialty(data: SpecialtyCreate, session: Session = Depends(get_session)):
    try:
        return SpecialtyService(session).create_specialty(data)
    except DuplicateResourceError as e:
        raise HTTPException(status_code=409, detail=e.message)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.put("/{specialty_id}", response_model=SpecialtyResponse)
def update_specialty(specialty_id: str, data: SpecialtyUpdate, session: Session = Depends(get_session)):
    try:
        return SpecialtyService(session).update_specialty(specialty_id, data)
    except DuplicateResourceError as e:
        raise HTTPException(status_code=409, detail=e.message)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.delete("/{specialty_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_specialty(specialty_id: str, session: Session = Depends(get_session)):
    """Deletes a specialty that no bed references."""
    try:
        SpecialtyService(session).delete_specialty(specialty_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except InvalidOperationError as e:
        raise HTTPException(status_code=400, detail=e.message)


@groups_router.get("", response_model=List[SpecialtyGroupResponse])
def list_specialty_groups(session: Session = Depends(get_session)):
    return SpecialtyService(session).list_groups()


@groups_router.post("", response_model=SpecialtyGroupResponse, status_code=status.HTTP_201_CREATED)
def create_specialty_group(data: SpecialtyGroupCreate, session: Session = Depends(get_session)):
    try:
        return SpecialtyService(session).create_group(data)
    except DuplicateResourceError as e:
        raise HTTPException(status_code=409, detail=e.message)


@groups_router.get("/code/{code}", response_model=SpecialtyGroupResponse)
def get_specialty_group_by_code(code: str, session: Session = Depends(get_session)):
    try:
        return SpecialtyService(session).get_group_by_code(code)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@groups_router.get("/{group_id}", response_model=SpecialtyGroupResponse)
def get_specialty_group(group_id: str, session: Session = Depends(get_session)):
    try:
        return SpecialtyService(session).get_group(group_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@groups_router.put("/{group_id}", response_model=SpecialtyGroupResponse)
def update_specialty_group(group_id: str, data: SpecialtyGroupUpdate, session: Session = Depends(get_session)):
    try:
        return SpecialtyService(session).update_group(group_id, data)
    except DuplicateResourceError as e:
        raise HTTPException(status_code=409, detail=e.message)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@groups_router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_specialty_group(group_id: str, session: Session = Depends(get_session)):
    """Deletes a group. Its specialties are kept without a group reference."""
    try:
        SpecialtyService(session).delete_group(group_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
