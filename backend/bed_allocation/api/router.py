"""
Main router grouping every sub-router.
"""
from fastapi import APIRouter

from bed_allocation.api import health
from bed_allocation.api import hospitals
from bed_allocation.api import beds
from bed_allocation.api import specialties
from bed_allocation.api import emergency

api_router = APIRouter()

# ============================================
# INCLUDE EVERY ROUTER
# ============================================

api_router.include_router(health.router)

api_router.include_router(
    hospitals.router,
    prefix="/hospitals",
    tags=["Hospitals"]
)

api_router.include_router(
    beds.router,
    prefix="/beds",
    tags=["Beds"]
)

api_router.include_router(
    specialties.router,
    prefix="/specialties",
    tags=["Specialties"]
)

api_router.include_router(
    specialties.groups_router,
    prefix="/specialty-groups",
    tags=["Specialties"]
)

api_router.include_router(
    emergency.router,
    prefix="/emergency",
    tags=["Emergency"]
)
