from typing import TYPE_CHECKING
from ...domain.repositories.doctor_repository import DoctorRepository
from ...domain.repositories.appointment_repository import AppointmentRepository
from ...domain.services.doctor_availability_service import DoctorAvailabilityService
from ...domain.services.doctor_specialty_service import DoctorSpecialtyService
from ...domain.services.doctor_working_hours_service import DoctorWorkingHoursService
from ...application.services.doctor_service import DoctorService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DoctorProvider:
    """Doctor service provider - registers doctor-related services"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register doctor services.
        Services are created with repositories from container.
        """
        doctor_repository = container.get(DoctorRepository)
        
        container.register_singleton(
            DoctorService,
            DoctorService(doctor_repository=doctor_repository)
        )
        
        container.register_singleton(
            DoctorWorkingHoursService,
            DoctorWorkingHoursService(doctor_repository=doctor_repository)
        )
        
        container.register_singleton(
            DoctorSpecialtyService,
            DoctorSpecialtyService(doctor_repository=doctor_repository)
        )
        
        container.register_singleton(
            DoctorAvailabilityService,
            DoctorAvailabilityService(
                appointment_repository=container.get(AppointmentRepository),
                doctor_repository=doctor_repository
            )
        )
