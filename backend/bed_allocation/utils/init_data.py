"""
System data initialization.
Creates reference specialties and a set of demo hospitals with beds.

DEMO HOSPITALS:
===============

St Thomas' Hospital (London)                  - EMER, CARD, GSUR, GENM
Manchester Royal Infirmary (Manchester)       - EMER, ORTH, NEUR, GENM
Queen Elizabeth Hospital Birmingham           - EMER, ONCO, GSUR, CARD
Queen Elizabeth University Hospital (Glasgow) - EMER, PED, PSYC, GENM
St James's University Hospital (Leeds)        - EMER, DERM, ORTH, GENM

Each hospital gets 24 to 30 beds spread over its specialties, mostly
AVAILABLE with a few OCCUPIED, MAINTENANCE and RESERVED ones.
"""
from sqlmodel import Session, select
import random

from bed_allocation.models.hospital import Hospital
from bed_allocation.models.specialty import Specialty, SpecialtyGroup
from bed_allocation.models.bed import Bed
from bed_allocation.models.enums import BedStatusEnum
from bed_allocation.services.availability_service import AvailabilityService
from bed_allocation.services.bed_lifecycle import sync_availability
from bed_allocation.utils.logger import get_logger
from bed_allocation.utils.timestamps import utc_now

logger = get_logger("init_data")


# group code -> (group name, [(specialty code, specialty name), ...])
SPECIALTY_GROUPS = {
    "EMERGENCY": ("Emergency medicine", [
        ("EMER", "Emergency medicine"),
    ]),
    "GENERAL_MEDICINE": ("General medicine group", [
        ("CARD", "Cardiology"),
        ("GENM", "General medicine"),
        ("NEUR", "Neurology"),
        ("DERM", "Dermatology"),
        ("ONCO", "Medical oncology"),
    ]),
    "SURGERY": ("Surgical group", [
        ("GSUR", "General surgery"),
        ("ORTH", "Trauma and orthopaedic surgery"),
    ]),
    "PAEDIATRICS": ("Paediatric group", [
        ("PED", "Paediatrics"),
    ]),
    "PSYCHIATRY": ("Psychiatry group", [
        ("PSYC", "General psychiatry"),
    ]),
}

DEMO_HOSPITALS = [
    ("St Thomas' Hospital", "London", "Westminster Bridge Rd", "SE1 7EH",
     51.4980, -0.1170, "+44 20 7188 7188", ["EMER", "CARD", "GSUR", "GENM"]),
    ("Manchester Royal Infirmary", "Manchester", "Oxford Rd", "M13 9WL",
     53.4631, -2.2256, "+44 161 276 1234", ["EMER", "ORTH", "NEUR", "GENM"]),
    ("Queen Elizabeth Hospital Birmingham", "Birmingham", "Mindelsohn Way", "B15 2WB",
     52.4527, -1.9430, "+44 121 627 2000", ["EMER", "ONCO", "GSUR", "CARD"]),
    ("Queen Elizabeth University Hospital", "Glasgow", "1345 Govan Rd", "G51 4TF",
     55.8609, -4.3476, "+44 141 201 1100", ["EMER", "PED", "PSYC", "GENM"]),
    ("St James's University Hospital", "Leeds", "Beckett St", "LS9 7TF",
     53.8067, -1.5200, "+44 113 243 3144", ["EMER", "DERM", "ORTH", "GENM"]),
]


def initialize_data(session: Session) -> None:
    """
    Initializes the base system data if missing.
    
    Safe to run on every startup: specialties are created only when their
    code is unknown, and hospitals only when the hospital table is empty.
    
    Args:
        session: Database session
    """
    logger.info("Initializing reference data")
    _init_specialties(session)
    _init_hospitals_and_beds(session)
    logger.info("Data initialization finished")


def _init_specialties(session: Session) -> None:
    created = 0
    for group_code, (group_name, specialties) in SPECIALTY_GROUPS.items():
        group = session.exec(
            select(SpecialtyGroup).where(SpecialtyGroup.code == group_code)
        ).first()
        if not group:
            group = SpecialtyGroup(code=group_code, name=group_name)
            session.add(group)
            session.flush()
        
        for code, name in specialties:
            existing = session.exec(select(Specialty).where(Specialty.code == code)).first()
            if existing:
                continue
            session.add(Specialty(
                code=code,
                name=name,
                specialty_group=group.name,
                specialty_group_id=group.id,
                description=f"Specialty: {name} (group: {group.name})",
            ))
            created += 1
    
    session.commit()
    logger.info(f"Specialty groups ready: {len(SPECIALTY_GROUPS)}; specialties created: {created}")


def _init_hospitals_and_beds(session: Session) -> None:
    if session.exec(select(Hospital)).first():
        logger.info("Hospitals already present, skipping demo data")
        return
    
    by_code = {s.code: s for s in session.exec(select(Specialty)).all()}
    
    # Fixed seed so every fresh database gets the same demo beds
    rnd = random.Random(42)
    hospitals = []
    total_beds = 0
    
    for name, city, address, postal_code, lat, lon, phone, codes in DEMO_HOSPITALS:
        specialties = [by_code[c] for c in codes if c in by_code]
        if not specialties and "GENM" in by_code:
            specialties = [by_code["GENM"]]
        if not specialties:
            logger.warning(f"No specialty available for {name}, hospital not created")
            continue
        
        hospital = Hospital(
            name=name,
            city=city,
            address=address,
            postal_code=postal_code,
            latitude=lat,
            longitude=lon,
            phone_number=phone,
            is_active=True,
        )
        hospital.specialties = specialties
        session.add(hospital)
        session.flush()
        
        bed_count = rnd.randint(24, 30)
        for i in range(1, bed_count + 1):
            roll = rnd.randrange(100)
            if roll < 70:
                status = BedStatusEnum.AVAILABLE
            elif roll < 85:
                status = BedStatusEnum.OCCUPIED
            elif roll < 95:
                status = BedStatusEnum.MAINTENANCE
            else:
                status = BedStatusEnum.RESERVED
            
            bed = Bed(
                hospital_id=hospital.id,
                specialty_id=specialties[(i - 1) % len(specialties)].id,
                bed_number=f"{i:03d}",
                room_number=f"R{(i - 1) // 2 + 1:02d}",
                floor=1 + (i - 1) // 10,
                status=status,
            )
            sync_availability(bed)
            if status == BedStatusEnum.OCCUPIED:
                bed.last_occupied_at = utc_now()
            session.add(bed)
        
        hospital.total_beds = bed_count
        total_beds += bed_count
        hospitals.append(hospital)
    
    session.commit()
    
    availability = AvailabilityService(session)
    for hospital in hospitals:
        availability.recompute_for_hospital(hospital.id, commit=False)
    session.commit()
    
    logger.info(f"{len(hospitals)} hospitals and {total_beds} beds created")
