"""
pytest fixtures.
"""
import os

# Keep the app's own engine off the working directory and skip demo data
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_DATA_ON_STARTUP", "false")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session, create_engine
from sqlmodel.pool import StaticPool

from bed_allocation.core.database import get_session
from main import app


# Test engine (in-memory SQLite)
@pytest.fixture(name="engine")
def engine_fixture():
    """Creates an in-memory test engine."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    """Creates a test session."""
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session):
    """Creates a test client with the session injected."""
    def get_session_override():
        yield session
    
    app.dependency_overrides[get_session] = get_session_override
    
    with TestClient(app) as client:
        yield client
    
    app.dependency_overrides.clear()


# Test data fixtures

@pytest.fixture
def hospital_data():
    """Hospital payload for API tests."""
    return {
        "name": "Test Hospital",
        "address": "1 Test Street",
        "city": "London",
        "postal_code": "SE1 7EH",
        "latitude": 51.4980,
        "longitude": -0.1170,
        "phone_number": "+44 20 0000 0000",
        "specialty_ids": []
    }


@pytest.fixture
def create_specialty(session):
    """Factory fixture to create specialties."""
    from bed_allocation.models.specialty import Specialty
    
    def _create_specialty(code="CARD", name="Cardiology", specialty_group="General medicine group"):
        specialty = Specialty(code=code, name=name, specialty_group=specialty_group)
        session.add(specialty)
        session.commit()
        session.refresh(specialty)
        return specialty
    
    return _create_specialty


@pytest.fixture
def create_hospital(session):
    """Factory fixture to create hospitals."""
    from bed_allocation.models.hospital import Hospital
    
    def _create_hospital(
        name="Test Hospital",
        city="Paris",
        latitude=48.8566,
        longitude=2.3522,
        is_active=True,
        specialties=None
    ):
        hospital = Hospital(
            name=name,
            city=city,
            latitude=latitude,
            longitude=longitude,
            is_active=is_active
        )
        hospital.specialties = list(specialties or [])
        session.add(hospital)
        session.commit()
        session.refresh(hospital)
        return hospital
    
    return _create_hospital


@pytest.fixture
def create_bed(session):
    """
    Factory fixture to create beds.
    
    Keeps the availability flag and the hospital aggregate consistent.
    """
    from bed_allocation.models.bed import Bed
    from bed_allocation.models.enums import BedStatusEnum
    from bed_allocation.services.availability_service import AvailabilityService
    
    counter = {"n": 0}
    
    def _create_bed(hospital_id, specialty_id, bed_number=None, status=BedStatusEnum.AVAILABLE):
        counter["n"] += 1
        if bed_number is None:
            bed_number = f"B-{counter['n']:03d}"
        
        bed = Bed(
            hospital_id=hospital_id,
            specialty_id=specialty_id,
            bed_number=bed_number,
            status=status,
            is_available=status == BedStatusEnum.AVAILABLE
        )
        session.add(bed)
        session.commit()
        AvailabilityService(session).recompute_for_hospital(hospital_id)
        session.refresh(bed)
        return bed
    
    return _create_bed


@pytest.fixture
def hospital_with_beds(create_hospital, create_specialty, create_bed):
    """Creates a hospital with four available cardiology beds."""
    specialty = create_specialty()
    hospital = create_hospital(name="Full Hospital", specialties=[specialty])
    
    beds = [create_bed(hospital.id, specialty.id, bed_number=f"C-10{i}") for i in range(1, 5)]
    
    return {
        "hospital": hospital,
        "specialty": specialty,
        "beds": beds
    }
