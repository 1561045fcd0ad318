"""
Emergency Bed Allocation Service API.
FastAPI application wiring routers, CORS and startup tasks.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bed_allocation.config import settings
from bed_allocation.api.router import api_router
from bed_allocation.core.database import create_db_and_tables, get_session_direct
from bed_allocation.utils.init_data import initialize_data
from bed_allocation.utils.logger import configure_logging, get_logger

configure_logging()
logger = get_logger("main")

# Create application
app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)

app.include_router(api_router, prefix="/api")


# ============================================
# STARTUP EVENTS
# ============================================

@app.on_event("startup")
def on_startup():
    logger.info(f"Starting {settings.APP_TITLE} v{settings.APP_VERSION} ({settings.APP_ENV})")
    create_db_and_tables()
    
    if settings.SEED_DATA_ON_STARTUP:
        session = get_session_direct()
        try:
            initialize_data(session)
        finally:
            session.close()


@app.get("/")
def root():
    return {
        "name": settings.APP_TITLE,
        "version": settings.APP_VERSION,
        "docs": "/docs"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
