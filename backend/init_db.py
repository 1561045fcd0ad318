#!/usr/bin/env python3
"""
Script to create the schema and load the demo data.
Run with: python init_db.py
"""
import sys
from pathlib import Path

# Add the backend directory to the path
sys.path.insert(0, str(Path(__file__).parent))

from sqlmodel import select

from bed_allocation.core.database import create_db_and_tables, get_session_direct
from bed_allocation.models import Hospital, Bed
from bed_allocation.utils.init_data import initialize_data
from bed_allocation.utils.logger import configure_logging


def main():
    """Create tables and seed the database."""
    logger = configure_logging()
    logger.info("=" * 60)
    logger.info("INITIALIZING DATABASE")
    logger.info("=" * 60)
    
    create_db_and_tables()
    session = get_session_direct()
    try:
        initialize_data(session)
        hospitals = session.exec(select(Hospital)).all()
        beds = session.exec(select(Bed)).all()
        for hospital in hospitals:
            logger.info(
                f"  {hospital.name} ({hospital.city}): "
                f"{hospital.available_beds}/{hospital.total_beds} beds available"
            )
        logger.info(f"Database ready: {len(hospitals)} hospitals, {len(beds)} beds")
    finally:
        session.close()


if __name__ == "__main__":
    main()
