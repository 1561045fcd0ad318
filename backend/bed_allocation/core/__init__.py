"""
Core module: central system functionality.
"""
from bed_allocation.core.database import create_db_and_tables, get_session, get_session_direct, engine
from bed_allocation.core.exceptions import (
    BaseAppException,
    ValidationError,
    InvalidOperationError,
    InvalidCoordinatesError,
    InvalidTransitionError,
    ConcurrentModificationError,
    NotFoundError,
    BedNotFoundError,
    HospitalNotFoundError,
    SpecialtyNotFoundError,
    SpecialtyGroupNotFoundError,
    UnknownSpecialtyError,
    NoCapacityAvailableError,
    DuplicateResourceError,
)

__all__ = [
    "create_db_and_tables",
    "get_session",
    "get_session_direct",
    "engine",
    "BaseAppException",
    "ValidationError",
    "InvalidOperationError",
    "InvalidCoordinatesError",
    "InvalidTransitionError",
    "ConcurrentModificationError",
    "NotFoundError",
    "BedNotFoundError",
    "HospitalNotFoundError",
    "SpecialtyNotFoundError",
    "SpecialtyGroupNotFoundError",
    "UnknownSpecialtyError",
    "NoCapacityAvailableError",
    "DuplicateResourceError",
]
