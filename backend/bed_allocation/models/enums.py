"""
System enumerations.
Kept in one module to avoid circular imports.
"""
from enum import Enum


class BedStatusEnum(str, Enum):
    """Status of a hospital bed."""
    AVAILABLE = "AVAILABLE"
    OCCUPIED = "OCCUPIED"
    MAINTENANCE = "MAINTENANCE"
    RESERVED = "RESERVED"


# ============================================
# BED STATE MACHINE
# ============================================

# Allowed targets for each source status. Same-state moves are handled
# separately as no-ops and are not listed here.
BED_STATUS_TRANSITIONS = {
    BedStatusEnum.AVAILABLE: frozenset({
        BedStatusEnum.RESERVED,
        BedStatusEnum.OCCUPIED,
        BedStatusEnum.MAINTENANCE,
    }),
    BedStatusEnum.RESERVED: frozenset({
        BedStatusEnum.OCCUPIED,
        BedStatusEnum.AVAILABLE,
    }),
    BedStatusEnum.OCCUPIED: frozenset({
        BedStatusEnum.AVAILABLE,
    }),
    BedStatusEnum.MAINTENANCE: frozenset({
        BedStatusEnum.AVAILABLE,
    }),
}
