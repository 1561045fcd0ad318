"""
Tests for the bed endpoints.
"""
import pytest
from fastapi import status


class TestBeds:
    """Bed CRUD and listings."""
    
    def test_list_beds_empty(self, client):
        """An empty page when there are no beds."""
        response = client.get("/api/beds")
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["items"] == []
        assert data["total"] == 0
    
    def test_list_beds_paginated(self, client, hospital_with_beds):
        """Pages are cut by size."""
        response = client.get("/api/beds", params={"page": 1, "size": 3})
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["total"] == 4
        assert len(data["items"]) == 1
    
    def test_get_bed(self, client, hospital_with_beds):
        """A single bed by id."""
        bed = hospital_with_beds["beds"][0]
        response = client.get(f"/api/beds/{bed.id}")
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["bed_number"] == "C-101"
        assert data["status"] == "AVAILABLE"
        assert data["is_available"] is True
    
    def test_get_bed_not_found(self, client):
        response = client.get("/api/beds/missing")
        assert response.status_code == status.HTTP_404_NOT_FOUND
    
    def test_create_bed(self, client, create_hospital, create_specialty):
        """A created bed updates its hospital's aggregate."""
        specialty = create_specialty()
        hospital = create_hospital()
        
        response = client.post("/api/beds", json={
            "hospital_id": hospital.id,
            "specialty_id": specialty.id,
            "bed_number": "001",
            "room_number": "R01",
            "floor": 1
        })
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["is_available"] is True
        
        response = client.get(f"/api/hospitals/{hospital.id}")
        assert response.json()["available_beds"] == 1
    
    def test_create_bed_ignores_is_available(self, client, create_hospital, create_specialty):
        """Availability is derived from the status, never taken from input."""
        specialty = create_specialty()
        hospital = create_hospital()
        
        response = client.post("/api/beds", json={
            "hospital_id": hospital.id,
            "specialty_id": specialty.id,
            "bed_number": "001",
            "status": "MAINTENANCE",
            "is_available": True
        })
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["is_available"] is False
    
    def test_create_bed_duplicate(self, client, hospital_with_beds):
        response = client.post("/api/beds", json={
            "hospital_id": hospital_with_beds["hospital"].id,
            "specialty_id": hospital_with_beds["specialty"].id,
            "bed_number": "C-101"
        })
        assert response.status_code == status.HTTP_409_CONFLICT
    
    def test_create_bed_unknown_hospital(self, client, create_specialty):
        specialty = create_specialty()
        response = client.post("/api/beds", json={
            "hospital_id": "missing",
            "specialty_id": specialty.id,
            "bed_number": "001"
        })
        assert response.status_code == status.HTTP_404_NOT_FOUND
    
    def test_update_bed(self, client, hospital_with_beds):
        bed = hospital_with_beds["beds"][0]
        response = client.put(f"/api/beds/{bed.id}", json={"room_number": "R99"})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["room_number"] == "R99"
    
    def test_delete_bed(self, client, hospital_with_beds):
        """Deleting a bed recomputes the aggregate."""
        hospital = hospital_with_beds["hospital"]
        bed = hospital_with_beds["beds"][0]
        
        response = client.delete(f"/api/beds/{bed.id}")
        assert response.status_code == status.HTTP_204_NO_CONTENT
        
        response = client.get(f"/api/hospitals/{hospital.id}")
        assert response.json()["available_beds"] == 3
    
    def test_available_by_hospital(self, client, hospital_with_beds):
        hospital = hospital_with_beds["hospital"]
        response = client.get(f"/api/beds/hospital/{hospital.id}/available")
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 4
        assert data[0]["specialty_code"] == "CARD"
        assert data[0]["hospital_name"] == "Full Hospital"
    
    def test_available_by_specialty(self, client, hospital_with_beds):
        response = client.get("/api/beds/specialty/CARD/available")
        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()) == 4
    
    def test_available_by_unknown_specialty(self, client):
        response = client.get("/api/beds/specialty/NOPE/available")
        assert response.status_code == status.HTTP_404_NOT_FOUND
    
    def test_emergency_search(self, client, hospital_with_beds):
        """Beds for an emergency carry their hospital distance."""
        response = client.get("/api/beds/emergency/search", params={
            "lat": 48.85, "lon": 2.35, "specialty_code": "CARD"
        })
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 4
        assert all(b["distance_km"] is not None for b in data)
    
    def test_emergency_search_invalid_coordinates(self, client):
        response = client.get("/api/beds/emergency/search", params={
            "lat": 120, "lon": 2.35, "specialty_code": "CARD"
        })
        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestBedStatus:
    """Status change endpoints."""
    
    def test_patch_status(self, client, hospital_with_beds):
        """A valid transition updates the bed and the aggregate."""
        hospital = hospital_with_beds["hospital"]
        bed = hospital_with_beds["beds"][0]
        
        response = client.patch(f"/api/beds/{bed.id}/status", json={"status": "OCCUPIED"})
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "OCCUPIED"
        assert data["is_available"] is False
        assert data["last_occupied_at"] is not None
        
        response = client.get(f"/api/hospitals/{hospital.id}")
        assert response.json()["available_beds"] == 3
    
    def test_patch_invalid_transition(self, client, hospital_with_beds):
        """MAINTENANCE -> OCCUPIED is rejected with 400."""
        bed = hospital_with_beds["beds"][0]
        client.patch(f"/api/beds/{bed.id}/status", json={"status": "MAINTENANCE"})
        
        response = client.patch(f"/api/beds/{bed.id}/status", json={"status": "OCCUPIED"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "MAINTENANCE -> OCCUPIED" in response.json()["detail"]
    
    def test_patch_unknown_status_value(self, client, hospital_with_beds):
        bed = hospital_with_beds["beds"][0]
        response = client.patch(f"/api/beds/{bed.id}/status", json={"status": "BROKEN"})
        assert response.status_code == 422
    
    def test_reserve_and_release(self, client, hospital_with_beds):
        bed = hospital_with_beds["beds"][0]
        
        response = client.post(f"/api/beds/{bed.id}/reserve")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "RESERVED"
        
        response = client.post(f"/api/beds/{bed.id}/reserve")
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        
        response = client.post(f"/api/beds/{bed.id}/release")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "AVAILABLE"
        
        response = client.post(f"/api/beds/{bed.id}/release")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "AVAILABLE"
    
    def test_reserve_not_found(self, client):
        response = client.post("/api/beds/missing/reserve")
        assert response.status_code == status.HTTP_404_NOT_FOUND
