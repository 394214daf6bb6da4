from typing import TYPE_CHECKING
from ...domain.repositories.patient_repository import PatientRepository
from ...domain.repositories.doctor_repository import DoctorRepository
from ...domain.repositories.appointment_repository import AppointmentRepository
from ...domain.repositories.examination_repository import ExaminationRepository
from ...infrastructure.db.in_memory_patient_repository import InMemoryPatientRepository
from ...infrastructure.db.in_memory_doctor_repository import InMemoryDoctorRepository
from ...infrastructure.db.in_memory_appointment_repository import InMemoryAppointmentRepository
from ...infrastructure.db.in_memory_examination_repository import InMemoryExaminationRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Every container gets fresh, empty stores.
        """
        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            PatientRepository,
            InMemoryPatientRepository()
        )
        
        container.register_singleton(
            DoctorRepository,
            InMemoryDoctorRepository()
        )
        
        container.register_singleton(
            AppointmentRepository,
            InMemoryAppointmentRepository()
        )
        
        container.register_singleton(
            ExaminationRepository,
            InMemoryExaminationRepository()
        )
