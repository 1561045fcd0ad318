"""
Hospital availability aggregate.

``Hospital.available_beds`` is a cached count of the hospital's beds whose
availability flag is set. It is always rebuilt with a full count query and
never incremented or decremented in place.

The hospital row is locked (``SELECT ... FOR UPDATE``) before counting, so
two transactions changing different beds of the same hospital recount one
after the other and the second one sees the first one's committed bed.
"""
from typing import Iterable, List
from sqlmodel import Session

from bed_allocation.models.hospital import Hospital
from bed_allocation.repositories.bed_repo import BedRepository
from bed_allocation.core.exceptions import HospitalNotFoundError
from bed_allocation.utils.logger import get_logger
from bed_allocation.utils.timestamps import utc_now

logger = get_logger("availability")


class AvailabilityService:
    """Recomputes the per-hospital available bed count."""

    def __init__(self, session: Session):
        self.session = session
        self.bed_repo = BedRepository(session)

    def recompute_for_hospital(self, hospital_id: str, commit: bool = True) -> int:
        """
        Recounts the available beds of a hospital and stores the result.

        Args:
            hospital_id: Hospital ID
            commit: If False, the change is left in the current transaction
                so the caller can commit it together with a bed write

        Returns:
            The new available bed count

        Raises:
            HospitalNotFoundError: if the hospital does not exist
        """
        hospital = self.session.get(Hospital, hospital_id, with_for_update=True)
        if not hospital:
            raise HospitalNotFoundError(hospital_id)

        available = self.bed_repo.count_available_by_hospital(hospital_id)
        hospital.available_beds = available
        hospital.updated_at = utc_now()
        self.session.add(hospital)

        if commit:
            self.session.commit()
            self.session.refresh(hospital)

        logger.debug(f"Availability recomputed for hospital {hospital_id}: {available} beds")
        return available

    def recompute_for_hospitals(self, hospital_ids: Iterable[str], commit: bool = True) -> List[int]:
        """
        Recounts several hospitals in one transaction.

        Hospitals are locked in id order so that two writers touching the
        same pair never wait on each other crosswise.
        """
        counts = [
            self.recompute_for_hospital(hospital_id, commit=False)
            for hospital_id in sorted(set(hospital_ids))
        ]
        if commit:
            self.session.commit()
        return counts
