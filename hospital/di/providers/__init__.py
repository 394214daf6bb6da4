"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .repository_provider import RepositoryProvider
from .notification_provider import NotificationProvider
from .doctor_provider import DoctorProvider
from .patient_provider import PatientProvider
from .appointment_provider import AppointmentProvider
from .examination_provider import ExaminationProvider

__all__ = [
    "RepositoryProvider",
    "NotificationProvider",
    "DoctorProvider",
    "PatientProvider",
    "AppointmentProvider",
    "ExaminationProvider",
]
