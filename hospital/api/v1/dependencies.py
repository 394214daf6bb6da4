"""
Request Dependencies
====================

FastAPI dependencies resolving services from the application's DI
container (``app.state.container``).
"""
from fastapi import Depends, Request

from hospital.application.services.appointment_service import AppointmentService
from hospital.application.services.doctor_service import DoctorService
from hospital.application.services.examination_service import ExaminationService
from hospital.application.services.patient_service import PatientService
from hospital.di.container import DIContainer
from hospital.domain.services.doctor_availability_service import DoctorAvailabilityService
from hospital.domain.services.doctor_specialty_service import DoctorSpecialtyService
from hospital.domain.services.doctor_working_hours_service import DoctorWorkingHoursService


def get_container(request: Request) -> DIContainer:
    """DI container owned by the running application."""
    return request.app.state.container


def get_doctor_service(container: DIContainer = Depends(get_container)) -> DoctorService:
    return container.get(DoctorService)


def get_working_hours_service(
    container: DIContainer = Depends(get_container),
) -> DoctorWorkingHoursService:
    return container.get(DoctorWorkingHoursService)


def get_specialty_service(container: DIContainer = Depends(get_container)) -> DoctorSpecialtyService:
    return container.get(DoctorSpecialtyService)


def get_availability_service(
    container: DIContainer = Depends(get_container),
) -> DoctorAvailabilityService:
    return container.get(DoctorAvailabilityService)


def get_patient_service(container: DIContainer = Depends(get_container)) -> PatientService:
    return container.get(PatientService)


def get_appointment_service(container: DIContainer = Depends(get_container)) -> AppointmentService:
    return container.get(AppointmentService)


def get_examination_service(container: DIContainer = Depends(get_container)) -> ExaminationService:
    return container.get(ExaminationService)
