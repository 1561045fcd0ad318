"""
Tests for the health endpoints and data seeding.
"""
from fastapi import status
from sqlmodel import select, func

from bed_allocation.models import Bed, Hospital, Specialty
from bed_allocation.utils import init_data
from bed_allocation.utils.init_data import initialize_data


class TestHealth:
    
    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "healthy"
    
    def test_readiness(self, client):
        response = client.get("/api/health/readiness")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["components"]["database"]["status"] == "healthy"


class TestInitData:
    """Tests for the demo data seeding."""
    
    def test_seed_is_consistent(self, session):
        """Seeded hospitals have an aggregate matching their beds."""
        initialize_data(session)
        
        hospitals = session.exec(select(Hospital)).all()
        assert len(hospitals) == 5
        for hospital in hospitals:
            available = session.exec(
                select(func.count()).select_from(Bed).where(
                    Bed.hospital_id == hospital.id, Bed.is_available == True
                )
            ).one()
            assert hospital.available_beds == available
            assert 24 <= hospital.total_beds <= 30
    
    def test_seed_is_idempotent(self, session):
        """Running the seed twice creates nothing new."""
        initialize_data(session)
        beds = session.exec(select(func.count()).select_from(Bed)).one()
        specialties = session.exec(select(func.count()).select_from(Specialty)).one()
        
        initialize_data(session)
        
        assert session.exec(select(func.count()).select_from(Bed)).one() == beds
        assert session.exec(select(func.count()).select_from(Specialty)).one() == specialties
    
    def test_seed_supports_emergency_codes(self, session):
        """Codes used by emergency requests exist after seeding."""
        initialize_data(session)
        codes = set(session.exec(select(Specialty.code)).all())
        assert {"EMER", "CARD", "GSUR", "GENM"} <= codes
    
    def test_seed_skips_hospitals_without_specialties(self, session, monkeypatch):
        """Without any seeded specialty, no hospital or bed is created."""
        monkeypatch.setattr(init_data, "SPECIALTY_GROUPS", {})
        
        initialize_data(session)
        
        assert session.exec(select(func.count()).select_from(Hospital)).one() == 0
        assert session.exec(select(func.count()).select_from(Bed)).one() == 0
