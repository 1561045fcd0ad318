"""
Custom system exceptions.
Semantic exceptions for clearer error handling across services and routers.
"""
from typing import Optional


class BaseAppException(Exception):
    """
    Base application exception.
    Every custom exception inherits from this one.
    """
    def __init__(self, message: str, code: str = "ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


# ============================================
# VALIDATION ERRORS
# ============================================

class ValidationError(BaseAppException):
    """Invalid input data."""
    def __init__(self, message: str):
        super().__init__(message, "VALIDATION_ERROR")


class InvalidOperationError(BaseAppException):
    """Operation not allowed in the current state of the data."""
    def __init__(self, message: str):
        super().__init__(message, "INVALID_OPERATION")


class InvalidCoordinatesError(BaseAppException):
    """Latitude or longitude outside the valid range."""
    def __init__(self, latitude: Optional[float], longitude: Optional[float]):
        super().__init__(
            f"Invalid coordinates ({latitude}, {longitude}). "
            f"Latitude must be within [-90, 90] and longitude within [-180, 180]",
            "INVALID_COORDINATES"
        )
        self.latitude = latitude
        self.longitude = longitude


# ============================================
# BED STATE ERRORS
# ============================================

class InvalidTransitionError(BaseAppException):
    """Bed status change not allowed from the current status."""
    def __init__(self, from_status: str, to_status: str):
        super().__init__(
            f"Invalid bed status transition: {from_status} -> {to_status}",
            "INVALID_TRANSITION"
        )
        self.from_status = from_status
        self.to_status = to_status


class ConcurrentModificationError(BaseAppException):
    """The bed kept changing under us and the retries ran out."""
    def __init__(self, bed_id: str, attempts: int):
        super().__init__(
            f"Bed {bed_id} was modified concurrently; gave up after {attempts} attempts",
            "CONCURRENT_MODIFICATION"
        )
        self.bed_id = bed_id
        self.attempts = attempts


# ============================================
# NOT FOUND ERRORS
# ============================================

class NotFoundError(BaseAppException):
    """Resource not found."""
    def __init__(self, resource: str, identifier: str, code: str = "NOT_FOUND"):
        super().__init__(
            f"{resource} with identifier '{identifier}' not found",
            code
        )
        self.resource = resource
        self.identifier = identifier


class BedNotFoundError(NotFoundError):
    """Bed not found."""
    def __init__(self, bed_id: str):
        super().__init__("Bed", bed_id)


class HospitalNotFoundError(NotFoundError):
    """Hospital not found."""
    def __init__(self, hospital_id: str):
        super().__init__("Hospital", hospital_id)


class SpecialtyNotFoundError(NotFoundError):
    """Specialty not found by id."""
    def __init__(self, specialty_id: str):
        super().__init__("Specialty", specialty_id)


class SpecialtyGroupNotFoundError(NotFoundError):
    """Specialty group not found."""
    def __init__(self, group_id: str):
        super().__init__("Specialty group", group_id)


class UnknownSpecialtyError(NotFoundError):
    """Specialty code does not resolve to any specialty."""
    def __init__(self, specialty_code: str):
        super().__init__("Specialty", specialty_code, "UNKNOWN_SPECIALTY")
        self.specialty_code = specialty_code


# ============================================
# ALLOCATION ERRORS
# ============================================

class NoCapacityAvailableError(BaseAppException):
    """No active hospital has a free bed for the requested specialty."""
    def __init__(self, specialty_code: str):
        super().__init__(
            f"No hospital with available beds for specialty {specialty_code}",
            "NO_CAPACITY"
        )
        self.specialty_code = specialty_code


# ============================================
# CONFLICT ERRORS
# ============================================

class DuplicateResourceError(BaseAppException):
    """A resource with the same unique key already exists."""
    def __init__(self, message: str):
        super().__init__(message, "DUPLICATE")
