"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.

Run with: uvicorn hospital.main:app
"""
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hospital.api.errors import register_exception_handlers
from hospital.api.v1 import (
    appointment_router,
    doctor_availability_router,
    doctor_router,
    doctor_specialty_router,
    doctor_working_hours_router,
    examination_router,
    patient_router,
)
from hospital.core.config import Settings, get_settings
from hospital.di.container import DIContainer

logger = logging.getLogger(__name__)


def create_application(
    settings: Optional[Settings] = None,
    container: Optional[DIContainer] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Logging level from settings
    - Its own DI container (fresh in-memory stores unless one is passed in)
    - CORS middleware configuration
    - Exception handlers rendering {"error": message}
    - API route registration
    
    Args:
        settings: Settings to use (defaults to environment-loaded settings)
        container: DI container to use (defaults to a new one)
    
    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    
    # Create FastAPI app
    application = FastAPI(
        title=settings.app_name,
        description="Patients, doctors, appointments and examinations",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    application.state.container = container or DIContainer(settings)
    
    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_exception_handlers(application)
    
    # Register API routers; doctor sub-resources share the /api/doctors prefix
    application.include_router(doctor_router, prefix="/api/doctors")
    application.include_router(doctor_working_hours_router, prefix="/api/doctors")
    application.include_router(doctor_specialty_router, prefix="/api/doctors")
    application.include_router(doctor_availability_router, prefix="/api/doctors")
    application.include_router(patient_router, prefix="/api/patients")
    application.include_router(appointment_router, prefix="/api/appointments")
    application.include_router(examination_router, prefix="/api/examinations")
    
    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "OK", "message": "API is running"}
    
    logger.info("%s %s ready", settings.app_name, settings.app_version)
    return application


# Create application instance
app = create_application()
