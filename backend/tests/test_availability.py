"""
Tests for the hospital available bed aggregate.
"""
import pytest
from sqlmodel import select, func

from bed_allocation.core.exceptions import HospitalNotFoundError
from bed_allocation.models.bed import Bed
from bed_allocation.models.enums import BedStatusEnum
from bed_allocation.models.hospital import Hospital
from bed_allocation.schemas.bed import BedCreate, BedUpdate
from bed_allocation.services.availability_service import AvailabilityService
from bed_allocation.services.bed_service import BedService


def count_available(session, hospital_id):
    return session.exec(
        select(func.count()).select_from(Bed).where(
            Bed.hospital_id == hospital_id, Bed.is_available == True
        )
    ).one()


class TestAvailabilityService:
    """Tests for AvailabilityService."""
    
    def test_recompute_counts_available_beds(self, session, create_hospital, create_specialty, create_bed):
        """Only beds with the availability flag are counted."""
        specialty = create_specialty()
        hospital = create_hospital()
        create_bed(hospital.id, specialty.id)
        create_bed(hospital.id, specialty.id)
        create_bed(hospital.id, specialty.id, status=BedStatusEnum.OCCUPIED)
        create_bed(hospital.id, specialty.id, status=BedStatusEnum.MAINTENANCE)
        
        result = AvailabilityService(session).recompute_for_hospital(hospital.id)
        
        assert result == 2
        session.refresh(hospital)
        assert hospital.available_beds == 2
    
    def test_recompute_overwrites_stale_value(self, session, create_hospital, create_specialty, create_bed):
        """A wrong cached value is replaced by the real count."""
        specialty = create_specialty()
        hospital = create_hospital()
        create_bed(hospital.id, specialty.id)
        
        hospital.available_beds = 99
        session.add(hospital)
        session.commit()
        
        assert AvailabilityService(session).recompute_for_hospital(hospital.id) == 1
    
    def test_recompute_empty_hospital(self, session, create_hospital):
        """A hospital without beds has 0 available."""
        hospital = create_hospital()
        assert AvailabilityService(session).recompute_for_hospital(hospital.id) == 0
    
    def test_recompute_unknown_hospital(self, session):
        """An unknown hospital raises HospitalNotFoundError."""
        with pytest.raises(HospitalNotFoundError):
            AvailabilityService(session).recompute_for_hospital("missing")
    
    def test_recompute_locks_hospital_row(self, session, create_hospital, monkeypatch):
        """The hospital is read with FOR UPDATE before the recount."""
        hospital = create_hospital()
        reads = []
        original_get = session.get
        
        def recording_get(entity, ident, **kwargs):
            reads.append((entity, kwargs.get("with_for_update")))
            return original_get(entity, ident, **kwargs)
        
        monkeypatch.setattr(session, "get", recording_get)
        AvailabilityService(session).recompute_for_hospital(hospital.id)
        
        assert (Hospital, True) in reads
    
    def test_recompute_several_hospitals(self, session, create_hospital, create_specialty, create_bed):
        """Several hospitals are recounted in one call, duplicates ignored."""
        specialty = create_specialty()
        first = create_hospital(name="First")
        second = create_hospital(name="Second")
        create_bed(first.id, specialty.id)
        
        counts = AvailabilityService(session).recompute_for_hospitals([second.id, first.id, first.id])
        
        assert sorted(counts) == [0, 1]


class TestAggregateAfterMutations:
    """The aggregate matches the bed rows after every bed mutation."""
    
    def test_create_delete(self, session, create_hospital, create_specialty):
        """Creating and deleting beds keeps the count in sync."""
        specialty = create_specialty()
        hospital = create_hospital()
        service = BedService(session)
        
        bed = service.create_bed(BedCreate(
            hospital_id=hospital.id, specialty_id=specialty.id, bed_number="001"
        ))
        service.create_bed(BedCreate(
            hospital_id=hospital.id, specialty_id=specialty.id, bed_number="002",
            status=BedStatusEnum.OCCUPIED
        ))
        session.refresh(hospital)
        assert hospital.available_beds == 1 == count_available(session, hospital.id)
        
        service.delete_bed(bed.id)
        session.refresh(hospital)
        assert hospital.available_beds == 0 == count_available(session, hospital.id)
    
    def test_transitions(self, session, hospital_with_beds):
        """Each transition is reflected in the aggregate."""
        hospital = hospital_with_beds["hospital"]
        beds = hospital_with_beds["beds"]
        service = BedService(session)
        
        service.reserve_bed(beds[0].id)
        service.transition_bed_status(beds[1].id, BedStatusEnum.OCCUPIED)
        service.transition_bed_status(beds[2].id, BedStatusEnum.MAINTENANCE)
        session.refresh(hospital)
        assert hospital.available_beds == 1 == count_available(session, hospital.id)
        
        service.release_bed(beds[0].id)
        session.refresh(hospital)
        assert hospital.available_beds == 2 == count_available(session, hospital.id)
    
    def test_move_bed_between_hospitals(self, session, create_hospital, create_specialty, create_bed):
        """Moving a bed refreshes both hospitals."""
        specialty = create_specialty()
        origin = create_hospital(name="Origin")
        target = create_hospital(name="Target")
        bed = create_bed(origin.id, specialty.id)
        
        BedService(session).update_bed(bed.id, BedUpdate(hospital_id=target.id))
        
        session.refresh(origin)
        session.refresh(target)
        assert origin.available_beds == 0
        assert target.available_beds == 1
