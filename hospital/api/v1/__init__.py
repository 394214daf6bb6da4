"""
API v1 Package
===============

Version 1 API controllers.
"""
from .doctor_controller import router as doctor_router
from .doctor_working_hours_controller import router as doctor_working_hours_router
from .doctor_specialty_controller import router as doctor_specialty_router
from .doctor_availability_controller import router as doctor_availability_router
from .patient_controller import router as patient_router
from .appointment_controller import router as appointment_router
from .examination_controller import router as examination_router

__all__ = [
    "doctor_router",
    "doctor_working_hours_router",
    "doctor_specialty_router",
    "doctor_availability_router",
    "patient_router",
    "appointment_router",
    "examination_router",
]
