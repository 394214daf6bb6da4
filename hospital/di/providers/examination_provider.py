from typing import TYPE_CHECKING
from ...domain.repositories.examination_repository import ExaminationRepository
from ...domain.repositories.patient_repository import PatientRepository
from ...domain.repositories.doctor_repository import DoctorRepository
from ...application.services.examination_service import ExaminationService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ExaminationProvider:
    """Examination service provider - registers examination-related services"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register examination service.
        Service is created with repositories from container.
        """
        container.register_singleton(
            ExaminationService,
            ExaminationService(
                examination_repository=container.get(ExaminationRepository),
                patient_repository=container.get(PatientRepository),
                doctor_repository=container.get(DoctorRepository)
            )
        )
