"""
Shared pytest fixtures for all tests.

This module provides a fresh DI container per test, the services and
repositories it holds, an HTTP client bound to an application using that
container, and sample patients and doctors.
"""
import os
from typing import Generator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

# Ensure test environment
os.environ["CLINIC_TIMEZONE"] = "UTC"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DEFAULT_APPOINTMENT_STATUS"] = "scheduled"

from hospital.core.config import reset_settings  # noqa: E402
from hospital.di.container import DIContainer  # noqa: E402
from hospital.main import create_application  # noqa: E402
from hospital.application.services.appointment_service import AppointmentService  # noqa: E402
from hospital.application.services.doctor_service import DoctorService  # noqa: E402
from hospital.application.services.examination_service import ExaminationService  # noqa: E402
from hospital.application.services.patient_service import PatientService  # noqa: E402
from hospital.domain.models.contact import Address, EmergencyContact  # noqa: E402
from hospital.domain.repositories.appointment_repository import AppointmentRepository  # noqa: E402
from hospital.domain.repositories.doctor_repository import DoctorRepository  # noqa: E402
from hospital.domain.repositories.patient_repository import PatientRepository  # noqa: E402
from hospital.domain.services.doctor_availability_service import DoctorAvailabilityService  # noqa: E402
from hospital.domain.services.doctor_working_hours_service import DoctorWorkingHoursService  # noqa: E402
from hospital.domain.services.notification_service import NotificationService  # noqa: E402


# ============================================================================
# CONTAINER FIXTURES
# ============================================================================


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Re-read settings from the environment around every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def container() -> DIContainer:
    return DIContainer()


@pytest.fixture
def notification_spy(container: DIContainer) -> MagicMock:
    """Replace the logging adapter's e-mail sender with a mock."""
    notifier = container.get(NotificationService)
    notifier.send_email_notification = MagicMock()
    return notifier.send_email_notification


@pytest.fixture
def client(container: DIContainer) -> Generator[TestClient, None, None]:
    with TestClient(create_application(container=container)) as test_client:
        yield test_client


@pytest.fixture
def patient_repository(container: DIContainer) -> PatientRepository:
    return container.get(PatientRepository)


@pytest.fixture
def doctor_repository(container: DIContainer) -> DoctorRepository:
    return container.get(DoctorRepository)


@pytest.fixture
def appointment_repository(container: DIContainer) -> AppointmentRepository:
    return container.get(AppointmentRepository)


@pytest.fixture
def patient_service(container: DIContainer) -> PatientService:
    return container.get(PatientService)


@pytest.fixture
def doctor_service(container: DIContainer) -> DoctorService:
    return container.get(DoctorService)


@pytest.fixture
def working_hours_service(container: DIContainer) -> DoctorWorkingHoursService:
    return container.get(DoctorWorkingHoursService)


@pytest.fixture
def availability_service(container: DIContainer) -> DoctorAvailabilityService:
    return container.get(DoctorAvailabilityService)


@pytest.fixture
def appointment_service(container: DIContainer) -> AppointmentService:
    return container.get(AppointmentService)


@pytest.fixture
def examination_service(container: DIContainer) -> ExaminationService:
    return container.get(ExaminationService)


# ============================================================================
# SAMPLE DATA FIXTURES
# ============================================================================


@pytest.fixture
def patient(patient_service: PatientService):
    """Sample registered patient."""
    return patient_service.add_patient(
        id="1",
        name="John Doe",
        identification_document="123.123.123-12",
        date_of_birth="1990-01-01",
        gender="Male",
        blood_type="O+",
        address=Address("Main Street", "123", "Mesopotamia", "Lost State", "11234"),
        phone_number="+1234567890",
        email="john.doe@example.com",
        emergency_contact=EmergencyContact("Jane Doe", "+0987654321"),
    )


@pytest.fixture
def doctor(doctor_service: DoctorService, working_hours_service: DoctorWorkingHoursService):
    """Sample doctor working Mondays 09:00 AM - 05:00 PM."""
    doctor = doctor_service.add_doctor(
        id="101",
        name="Smith",
        rcm="CRM12345",
        specialties=["Cardiology", "General Medicine"],
        phone_number="+1122334455",
    )
    return working_hours_service.add_working_hours(doctor.id, "Monday", "09:00 AM - 05:00 PM")
