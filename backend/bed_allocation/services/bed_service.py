"""
Bed service.

CRUD for beds plus the status operations of the bed lifecycle. Every
write to an existing bed (status change or field edit) is a compare-and-set
on the bed version, committed in the same transaction as the hospital
aggregate recompute.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from bed_allocation.config import settings
from bed_allocation.models.bed import Bed
from bed_allocation.models.hospital import Hospital
from bed_allocation.models.enums import BedStatusEnum
from bed_allocation.repositories.bed_repo import BedRepository
from bed_allocation.repositories.hospital_repo import HospitalRepository
from bed_allocation.repositories.specialty_repo import SpecialtyRepository
from bed_allocation.schemas.bed import BedCreate, BedUpdate
from bed_allocation.services import bed_lifecycle
from bed_allocation.services.bed_lifecycle import TransitionPlan
from bed_allocation.services.availability_service import AvailabilityService
from bed_allocation.core.exceptions import (
    ValidationError,
    BedNotFoundError,
    HospitalNotFoundError,
    SpecialtyNotFoundError,
    UnknownSpecialtyError,
    DuplicateResourceError,
    ConcurrentModificationError,
)
from bed_allocation.utils.geo import distance_km, validate_coordinates
from bed_allocation.utils.logger import get_logger
from bed_allocation.utils.timestamps import utc_now

logger = get_logger("beds")


@dataclass
class BedDistance:
    """An available bed with the distance of its hospital from a query point."""
    bed: Bed
    hospital: Hospital
    distance_km: float


class BedService:
    """
    Service for bed management.
    
    Handles:
    - Creation, update and deletion
    - Status transitions, reservation and release
    - Available bed listings
    """
    
    def __init__(self, session: Session):
        self.session = session
        self.bed_repo = BedRepository(session)
        self.hospital_repo = HospitalRepository(session)
        self.specialty_repo = SpecialtyRepository(session)
        self.availability = AvailabilityService(session)
    
    # ============================================
    # QUERIES
    # ============================================
    
    def get_bed(self, bed_id: str) -> Bed:
        """
        Returns a bed.
        
        Raises:
            BedNotFoundError: if it does not exist
        """
        bed = self.bed_repo.get_by_id(bed_id)
        if not bed:
            raise BedNotFoundError(bed_id)
        return bed
    
    def list_beds(self, offset: int = 0, limit: Optional[int] = None) -> List[Bed]:
        return self.bed_repo.get_all(offset=offset, limit=limit)
    
    def count_beds(self) -> int:
        return self.bed_repo.count()
    
    def find_available_beds(
        self,
        hospital_id: Optional[str] = None,
        specialty_id: Optional[str] = None
    ) -> List[Bed]:
        """
        Lists AVAILABLE beds of a hospital or of a specialty.
        
        Exactly one of the two filters must be given.
        
        Raises:
            ValidationError: if neither or both filters are given
            HospitalNotFoundError / SpecialtyNotFoundError: unknown id
        """
        if (hospital_id is None) == (specialty_id is None):
            raise ValidationError("Provide exactly one of hospital_id or specialty_id")
        
        if hospital_id is not None:
            if not self.hospital_repo.get_by_id(hospital_id):
                raise HospitalNotFoundError(hospital_id)
            return self.bed_repo.get_by_hospital_and_status(hospital_id, BedStatusEnum.AVAILABLE)
        
        if not self.specialty_repo.get_by_id(specialty_id):
            raise SpecialtyNotFoundError(specialty_id)
        return self.bed_repo.get_by_specialty_and_status(specialty_id, BedStatusEnum.AVAILABLE)
    
    def find_available_beds_by_specialty_code(self, specialty_code: str) -> List[Bed]:
        """
        Lists AVAILABLE beds of a specialty identified by its code.
        
        Raises:
            UnknownSpecialtyError: if the code does not resolve
        """
        specialty = self.specialty_repo.get_by_code(specialty_code)
        if not specialty:
            raise UnknownSpecialtyError(specialty_code)
        return self.find_available_beds(specialty_id=specialty.id)
    
    def find_available_beds_for_emergency(
        self,
        specialty_code: str,
        latitude: float,
        longitude: float
    ) -> List[BedDistance]:
        """
        Lists available beds of a specialty in active hospitals, nearest
        hospital first.
        
        Args:
            specialty_code: Specialty code
            latitude: Query latitude
            longitude: Query longitude
        
        Returns:
            Beds sorted by (distance, hospital id, bed id)
        """
        if not specialty_code or not specialty_code.strip():
            raise ValidationError("Specialty code is required")
        validate_coordinates(latitude, longitude)
        
        pairs = self.bed_repo.get_available_by_specialty_code(specialty_code)
        result = [
            BedDistance(
                bed=bed,
                hospital=hospital,
                distance_km=distance_km(latitude, longitude, hospital.latitude, hospital.longitude),
            )
            for bed, hospital in pairs
        ]
        result.sort(key=lambda item: (item.distance_km, item.hospital.id, item.bed.id))
        return result
    
    # ============================================
    # CRUD
    # ============================================
    
    def create_bed(self, data: BedCreate) -> Bed:
        """
        Creates a bed and refreshes its hospital's aggregate.
        
        The status defaults to AVAILABLE; the availability flag is derived
        from it.
        
        Raises:
            HospitalNotFoundError / SpecialtyNotFoundError: unknown reference
            DuplicateResourceError: bed number already used in the hospital
        """
        hospital = self.hospital_repo.get_by_id(data.hospital_id)
        if not hospital:
            raise HospitalNotFoundError(data.hospital_id)
        specialty = self.specialty_repo.get_by_id(data.specialty_id)
        if not specialty:
            raise SpecialtyNotFoundError(data.specialty_id)
        if self.bed_repo.get_by_hospital_and_number(hospital.id, data.bed_number):
            raise DuplicateResourceError(
                f"Bed {data.bed_number} already exists in hospital {hospital.name}"
            )
        
        bed = Bed(
            hospital_id=hospital.id,
            specialty_id=specialty.id,
            bed_number=data.bed_number,
            room_number=data.room_number,
            floor=data.floor,
            status=data.status or BedStatusEnum.AVAILABLE,
        )
        bed_lifecycle.sync_availability(bed)
        if bed.status == BedStatusEnum.OCCUPIED:
            bed.last_occupied_at = utc_now()
        
        self.session.add(bed)
        self.session.flush()
        self.availability.recompute_for_hospital(hospital.id, commit=False)
        self.session.commit()
        self.session.refresh(bed)
        
        logger.info(
            f"Bed created: id={bed.id}, hospital_id={hospital.id}, "
            f"specialty_id={specialty.id}, status={bed.status.value}"
        )
        return bed
    
    def update_bed(self, bed_id: str, data: BedUpdate) -> Bed:
        """
        Updates a bed in a single version-checked write.
        
        References and the bed number are checked first. A status change is
        planned by the lifecycle and written together with the other fields,
        so either all of them change or none do. Moving a bed to another
        hospital refreshes the aggregates of both hospitals.
        
        Raises:
            BedNotFoundError / HospitalNotFoundError / SpecialtyNotFoundError
            DuplicateResourceError: bed number already used in the target hospital
            InvalidTransitionError: if the status change is not allowed
            ConcurrentModificationError: if the retries ran out
        """
        bed = self.get_bed(bed_id)
        
        edits: Dict[str, Any] = data.model_dump(
            include={"hospital_id", "specialty_id", "bed_number", "room_number", "floor"},
            exclude_none=True,
        )
        
        hospital_id = edits.get("hospital_id", bed.hospital_id)
        if hospital_id != bed.hospital_id and not self.hospital_repo.get_by_id(hospital_id):
            raise HospitalNotFoundError(hospital_id)
        specialty_id = edits.get("specialty_id", bed.specialty_id)
        if specialty_id != bed.specialty_id and not self.specialty_repo.get_by_id(specialty_id):
            raise SpecialtyNotFoundError(specialty_id)
        
        bed_number = edits.get("bed_number", bed.bed_number)
        existing = self.bed_repo.get_by_hospital_and_number(hospital_id, bed_number)
        if existing and existing.id != bed.id:
            raise DuplicateResourceError(f"Bed {bed_number} already exists in hospital {hospital_id}")
        
        target_status = data.status
        
        def planner(current: Bed) -> Optional[TransitionPlan]:
            if target_status is None:
                return None
            return bed_lifecycle.plan_transition(current, target_status)
        
        return self._apply(bed_id, planner, "update", edits)
    
    def delete_bed(self, bed_id: str) -> None:
        """Deletes a bed and refreshes its hospital's aggregate."""
        bed = self.get_bed(bed_id)
        hospital_id = bed.hospital_id
        
        self.session.delete(bed)
        self.session.flush()
        self.availability.recompute_for_hospital(hospital_id, commit=False)
        self.session.commit()
        
        logger.warning(f"Bed deleted: id={bed_id}")
    
    # ============================================
    # STATUS TRANSITIONS
    # ============================================
    
    def transition_bed_status(self, bed_id: str, target_status: BedStatusEnum) -> Bed:
        """
        Moves a bed to a new status.
        
        A same-state move is a no-op.
        
        Raises:
            BedNotFoundError: if the bed does not exist
            InvalidTransitionError: if the move is not in the transition table
            ConcurrentModificationError: if the retries ran out
        """
        if target_status is None:
            raise ValidationError("Target status is required")
        return self._apply(
            bed_id,
            lambda bed: bed_lifecycle.plan_transition(bed, target_status),
            "status change"
        )
    
    def reserve_bed(self, bed_id: str) -> Bed:
        """
        Reserves an AVAILABLE bed.
        
        Raises:
            InvalidTransitionError: if the bed is not AVAILABLE, including
                when someone else reserved it first
        """
        return self._apply(bed_id, bed_lifecycle.plan_reservation, "reservation")
    
    def release_bed(self, bed_id: str) -> Bed:
        """
        Puts a bed back to AVAILABLE. Idempotent.
        
        Raises:
            BedNotFoundError: if the bed does not exist
        """
        return self._apply(bed_id, bed_lifecycle.plan_release, "release")
    
    def _apply(
        self,
        bed_id: str,
        planner: Callable[[Bed], Optional[TransitionPlan]],
        operation: str,
        edits: Optional[Dict[str, Any]] = None
    ) -> Bed:
        """
        Read, validate and write a change to a bed atomically.
        
        The planned status change and the field edits are written by one
        compare-and-set on the version read before planning. When another
        writer changed the bed in between, the transaction is rolled back
        and the bed is read and validated again. The aggregates of the
        hospitals the bed leaves and joins are recomputed in the same
        transaction.
        """
        edits = edits or {}
        max_attempts = max(1, settings.STATUS_UPDATE_MAX_RETRIES)
        
        for attempt in range(1, max_attempts + 1):
            bed = self.bed_repo.get_fresh(bed_id)
            if not bed:
                raise BedNotFoundError(bed_id)
            
            plan = planner(bed)
            if plan is None and not edits:
                logger.debug(f"Bed {bed_id} already {bed.status.value}, nothing to do ({operation})")
                return bed
            
            values = dict(edits)
            if plan is not None:
                values.update(
                    status=plan.to_status,
                    is_available=plan.is_available,
                    last_occupied_at=plan.last_occupied_at,
                )
            
            try:
                updated = self.bed_repo.compare_and_set(bed_id, bed.version, values)
            except IntegrityError:
                self.session.rollback()
                raise DuplicateResourceError(
                    f"Bed {values.get('bed_number', bed.bed_number)} already exists in hospital "
                    f"{values.get('hospital_id', bed.hospital_id)}"
                )
            if not updated:
                self.session.rollback()
                logger.info(
                    f"Concurrent update on bed {bed_id} during {operation}, "
                    f"retrying ({attempt}/{max_attempts})"
                )
                continue
            
            self.availability.recompute_for_hospitals(
                [bed.hospital_id, values.get("hospital_id", bed.hospital_id)],
                commit=False,
            )
            self.session.commit()
            
            if plan is not None:
                logger.info(
                    f"Bed status updated: id={bed_id}, "
                    f"{plan.from_status.value} -> {plan.to_status.value} ({operation})"
                )
            else:
                logger.info(f"Bed updated: id={bed_id} ({operation})")
            return self.bed_repo.get_fresh(bed_id)
        
        raise ConcurrentModificationError(bed_id, max_attempts)
