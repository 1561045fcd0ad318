"""
Bed lifecycle: the status state machine of a single bed.

States: AVAILABLE, RESERVED, OCCUPIED, MAINTENANCE. The machine is cyclic,
there is no terminal state.

    AVAILABLE   -> RESERVED, OCCUPIED, MAINTENANCE
    RESERVED    -> OCCUPIED, AVAILABLE
    OCCUPIED    -> AVAILABLE
    MAINTENANCE -> AVAILABLE

The functions here are pure: they validate a move and compute the values a
bed must take after it. Persisting those values (atomically, together with
the hospital aggregate) is the job of BedService.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from bed_allocation.models.bed import Bed
from bed_allocation.models.enums import BedStatusEnum, BED_STATUS_TRANSITIONS
from bed_allocation.core.exceptions import InvalidTransitionError
from bed_allocation.utils.timestamps import utc_now


@dataclass(frozen=True)
class TransitionPlan:
    """Values a bed takes after a validated status change."""
    from_status: BedStatusEnum
    to_status: BedStatusEnum
    is_available: bool
    last_occupied_at: Optional[datetime]


def derive_availability(status: BedStatusEnum) -> bool:
    """A bed is available if and only if its status is AVAILABLE."""
    return status == BedStatusEnum.AVAILABLE


def is_transition_allowed(from_status: BedStatusEnum, to_status: BedStatusEnum) -> bool:
    """
    Checks a move against the transition table.
    
    Same-state moves are not part of the table and return False here;
    callers treat them as no-ops before asking.
    """
    return to_status in BED_STATUS_TRANSITIONS.get(from_status, frozenset())


def validate_transition(from_status: BedStatusEnum, to_status: BedStatusEnum) -> None:
    """
    Validates a status change.
    
    Raises:
        InvalidTransitionError: if the pair is not in the transition table
    """
    if from_status == to_status:
        return
    if not is_transition_allowed(from_status, to_status):
        raise InvalidTransitionError(from_status.value, to_status.value)


def plan_transition(
    bed: Bed,
    to_status: BedStatusEnum,
    now: Optional[datetime] = None
) -> Optional[TransitionPlan]:
    """
    Computes the outcome of moving a bed to a new status.
    
    Args:
        bed: Bed in its current state
        to_status: Target status
        now: Timestamp to use when entering OCCUPIED
    
    Returns:
        The plan, or None when the move is a same-state no-op
    
    Raises:
        InvalidTransitionError: if the move is not allowed
    """
    from_status = bed.status
    if from_status == to_status:
        return None
    validate_transition(from_status, to_status)
    
    last_occupied_at = bed.last_occupied_at
    if to_status == BedStatusEnum.OCCUPIED:
        last_occupied_at = now or utc_now()
    
    return TransitionPlan(
        from_status=from_status,
        to_status=to_status,
        is_available=derive_availability(to_status),
        last_occupied_at=last_occupied_at,
    )


def plan_reservation(bed: Bed, now: Optional[datetime] = None) -> TransitionPlan:
    """
    Plans a reservation.
    
    A reservation claims the bed for one caller, so only an AVAILABLE bed
    can be reserved. Reserving a bed that is already RESERVED fails
    instead of being a no-op.
    
    Raises:
        InvalidTransitionError: if the bed is not AVAILABLE
    """
    if bed.status != BedStatusEnum.AVAILABLE:
        raise InvalidTransitionError(bed.status.value, BedStatusEnum.RESERVED.value)
    return plan_transition(bed, BedStatusEnum.RESERVED, now)


def plan_release(bed: Bed) -> Optional[TransitionPlan]:
    """
    Plans a release back to AVAILABLE.
    
    Idempotent: an AVAILABLE bed yields None (no-op).
    """
    return plan_transition(bed, BedStatusEnum.AVAILABLE)


def apply_plan(bed: Bed, plan: TransitionPlan) -> Bed:
    """Copies a plan onto an in-memory bed."""
    bed.status = plan.to_status
    bed.is_available = plan.is_available
    bed.last_occupied_at = plan.last_occupied_at
    return bed


def sync_availability(bed: Bed) -> Bed:
    """
    Recomputes the derived availability flag from the status.
    
    Used when a bed is created with an explicit or default status.
    """
    if bed.status is None:
        bed.status = BedStatusEnum.AVAILABLE
    bed.is_available = derive_availability(bed.status)
    return bed
