from typing import TYPE_CHECKING
from ...domain.repositories.patient_repository import PatientRepository
from ...application.services.patient_service import PatientService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PatientProvider:
    """Patient service provider - registers patient-related services"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register patient service.
        Service is created with repository from container.
        """
        container.register_singleton(
            PatientService,
            PatientService(
                patient_repository=container.get(PatientRepository)
            )
        )
