"""
Tests for the nearest-hospital search.
"""
import pytest

from bed_allocation.core.exceptions import InvalidCoordinatesError, ValidationError
from bed_allocation.models.enums import BedStatusEnum
from bed_allocation.services.search_service import SearchService


@pytest.fixture
def paris_lyon(create_hospital, create_specialty, create_bed):
    """Hospital A in Paris with 2 free CARD beds, hospital B in Lyon with 1."""
    card = create_specialty(code="CARD", name="Cardiology")
    a = create_hospital(name="Hospital A", city="Paris", latitude=48.8566, longitude=2.3522)
    b = create_hospital(name="Hospital B", city="Lyon", latitude=45.7640, longitude=4.8357)
    create_bed(a.id, card.id)
    create_bed(a.id, card.id)
    create_bed(b.id, card.id)
    return {"a": a, "b": b, "card": card}


class TestSearchService:
    """Tests for SearchService.search_nearest_with_availability."""
    
    def test_nearest_first(self, session, paris_lyon):
        """Results are ordered by distance from the query point."""
        results = SearchService(session).search_nearest_with_availability(
            48.85, 2.35, "CARD", limit=5
        )
        
        assert [r.id for r in results] == [paris_lyon["a"].id, paris_lyon["b"].id]
        assert results[0].available_beds == 2
        assert results[1].available_beds == 1
        assert results[0].distance_km < results[1].distance_km
    
    def test_results_carry_travel_time(self, session, paris_lyon):
        """Every result has a distance and an estimated travel time."""
        results = SearchService(session).search_nearest_with_availability(48.85, 2.35, "CARD")
        for r in results:
            assert r.distance_km >= 0
            assert r.estimated_time_minutes >= 0
        assert results[1].estimated_time_minutes > results[0].estimated_time_minutes
    
    def test_limit(self, session, paris_lyon):
        """limit truncates after ordering."""
        results = SearchService(session).search_nearest_with_availability(
            48.85, 2.35, "CARD", limit=1
        )
        assert [r.id for r in results] == [paris_lyon["a"].id]
    
    def test_radius(self, session, paris_lyon):
        """Hospitals farther than radius_km are dropped."""
        results = SearchService(session).search_nearest_with_availability(
            48.85, 2.35, "CARD", radius_km=50
        )
        assert [r.id for r in results] == [paris_lyon["a"].id]
    
    def test_inactive_hospital_excluded(self, session, paris_lyon):
        """Inactive hospitals never appear."""
        a = paris_lyon["a"]
        a.is_active = False
        session.add(a)
        session.commit()
        
        results = SearchService(session).search_nearest_with_availability(48.85, 2.35, "CARD")
        assert [r.id for r in results] == [paris_lyon["b"].id]
    
    def test_hospital_without_free_beds_excluded(self, session, create_hospital, create_specialty, create_bed):
        """A hospital whose beds of the specialty are all taken is not a candidate."""
        card = create_specialty()
        full = create_hospital(name="Full")
        create_bed(full.id, card.id, status=BedStatusEnum.OCCUPIED)
        create_bed(full.id, card.id, status=BedStatusEnum.RESERVED)
        
        assert SearchService(session).search_nearest_with_availability(48.85, 2.35, "CARD") == []
    
    def test_counts_only_requested_specialty(self, session, create_hospital, create_specialty, create_bed):
        """Beds of other specialties do not count."""
        card = create_specialty(code="CARD", name="Cardiology")
        neur = create_specialty(code="NEUR", name="Neurology")
        hospital = create_hospital()
        create_bed(hospital.id, card.id)
        create_bed(hospital.id, neur.id)
        create_bed(hospital.id, neur.id)
        
        results = SearchService(session).search_nearest_with_availability(48.85, 2.35, "CARD")
        assert len(results) == 1
        assert results[0].available_beds == 1
    
    def test_tie_broken_by_id(self, session, create_hospital, create_specialty, create_bed):
        """Equidistant hospitals are ordered by id."""
        card = create_specialty()
        h1 = create_hospital(name="Twin 1")
        h2 = create_hospital(name="Twin 2")
        create_bed(h1.id, card.id)
        create_bed(h2.id, card.id)
        
        results = SearchService(session).search_nearest_with_availability(48.85, 2.35, "CARD")
        assert [r.id for r in results] == sorted([h1.id, h2.id])
    
    def test_unknown_code_returns_empty(self, session, paris_lyon):
        """An unknown code simply matches nothing."""
        assert SearchService(session).search_nearest_with_availability(48.85, 2.35, "NOPE") == []
    
    def test_invalid_coordinates(self, session):
        """Out-of-range coordinates are rejected."""
        with pytest.raises(InvalidCoordinatesError):
            SearchService(session).search_nearest_with_availability(91.0, 0.0, "CARD")
    
    @pytest.mark.parametrize("kwargs", [
        {"specialty_code": ""},
        {"specialty_code": "CARD", "limit": 0},
        {"specialty_code": "CARD", "radius_km": -1},
    ])
    def test_invalid_arguments(self, session, kwargs):
        """Blank code and non-positive limit or radius are rejected."""
        with pytest.raises(ValidationError):
            SearchService(session).search_nearest_with_availability(48.85, 2.35, **kwargs)
