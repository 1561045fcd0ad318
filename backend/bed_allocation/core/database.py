"""
Database configuration.
Connection and session management with SQLModel.
"""
from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy import text
from typing import Generator, Dict, Any, Optional

from bed_allocation.config import settings
from bed_allocation.utils.logger import get_logger

logger = get_logger("database")


# Engine arguments depend on the database backend
connect_args = {}
if "sqlite" in settings.DATABASE_URL:
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    connect_args=connect_args
)


def create_db_and_tables() -> None:
    """
    Creates every table in the database.
    Called at application startup.
    """
    # Import models so they are registered on the metadata
    import bed_allocation.models  # noqa: F401
    SQLModel.metadata.create_all(engine)


def get_session() -> Generator[Session, None, None]:
    """
    Session generator for FastAPI dependency injection.
    
    Usage:
        @router.get("/endpoint")
        def endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session


def get_session_direct() -> Session:
    """
    Returns a plain session (not a generator).
    Useful for startup tasks and scripts.
    
    IMPORTANT: the caller is responsible for closing the session.
    """
    return Session(engine)


def check_database_health(session: Optional[Session] = None) -> Dict[str, Any]:
    """
    Runs a trivial query to verify the database answers.
    
    Args:
        session: Session to probe with; a new one on the global engine if None
    
    Returns:
        Dictionary with "status" and, on failure, "error"
    """
    try:
        if session is not None:
            session.exec(text("SELECT 1"))
        else:
            with Session(engine) as own_session:
                own_session.exec(text("SELECT 1"))
        return {"status": "healthy"}
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return {"status": "unhealthy", "error": str(e)}
