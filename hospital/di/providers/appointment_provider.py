from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.patient_repository import PatientRepository
from ...domain.repositories.doctor_repository import DoctorRepository
from ...domain.repositories.appointment_repository import AppointmentRepository
from ...domain.services.doctor_availability_service import DoctorAvailabilityService
from ...domain.services.notification_service import NotificationService
from ...application.use_cases.appointment.schedule_appointment import ScheduleAppointmentUseCase
from ...application.services.appointment_service import AppointmentService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AppointmentProvider:
    """Appointment service provider - registers the scheduling use case and service"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register appointment use case and service.
        The use case needs the availability and notification services.
        """
        appointment_repository = container.get(AppointmentRepository)
        
        schedule_use_case = ScheduleAppointmentUseCase(
            patient_repository=container.get(PatientRepository),
            doctor_repository=container.get(DoctorRepository),
            appointment_repository=appointment_repository,
            availability_service=container.get(DoctorAvailabilityService),
            notification_service=container.get(NotificationService),
            default_status=container.get(Settings).default_appointment_status,
        )
        container.register_singleton(ScheduleAppointmentUseCase, schedule_use_case)
        
        container.register_singleton(
            AppointmentService,
            AppointmentService(
                appointment_repository=appointment_repository,
                schedule_use_case=schedule_use_case
            )
        )
