"""
In-Memory Appointment Repository
================================

Concrete implementation of AppointmentRepository.
"""
from typing import List

from hospital.domain.models.appointment import Appointment
from hospital.domain.repositories.appointment_repository import AppointmentRepository
from hospital.infrastructure.db.in_memory_repository import InMemoryRepository


class InMemoryAppointmentRepository(InMemoryRepository[Appointment], AppointmentRepository):
    """Appointment store with linear-scan filters."""
    
    ENTITY_NAME = "Appointment"
    
    def find_by_doctor_id(self, doctor_id: str) -> List[Appointment]:
        return self._filter(lambda appointment: appointment.doctor_id == doctor_id)
    
    def find_by_patient_id(self, patient_id: str) -> List[Appointment]:
        return self._filter(lambda appointment: appointment.patient_id == patient_id)
    
    def find_by_status(self, status: str) -> List[Appointment]:
        return self._filter(lambda appointment: appointment.status == status)
