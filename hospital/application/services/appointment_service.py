"""
Appointment Service
===================

Application service that coordinates appointment-related operations.
Scheduling is delegated to ScheduleAppointmentUseCase.
"""
from typing import Any, List, Mapping, Optional, Union

from hospital.core.exceptions import NotFoundError
from hospital.application.dto.appointment_dto import AppointmentCreateRequest
from hospital.application.use_cases.appointment.schedule_appointment import ScheduleAppointmentUseCase
from hospital.domain.models.appointment import Appointment
from hospital.domain.repositories.appointment_repository import AppointmentRepository


class AppointmentService:
    """Application service for appointment operations."""
    
    def __init__(
        self,
        appointment_repository: AppointmentRepository,
        schedule_use_case: ScheduleAppointmentUseCase,
    ):
        self._repository = appointment_repository
        self._schedule_use_case = schedule_use_case
    
    def schedule_appointment(
        self,
        request: Union[AppointmentCreateRequest, Mapping[str, Any]],
    ) -> Appointment:
        return self._schedule_use_case.execute(request)
    
    def find_appointment_by_id(self, appointment_id: str) -> Optional[Appointment]:
        return self._repository.find_by_id(appointment_id)
    
    def get_appointment(self, appointment_id: str) -> Appointment:
        appointment = self._repository.find_by_id(appointment_id)
        if not appointment:
            raise NotFoundError("Appointment not found")
        return appointment
    
    def list_appointments(
        self,
        doctor_id: Optional[str] = None,
        patient_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Appointment]:
        """
        List appointments with optional filters.
        
        Args:
            doctor_id: Only appointments with this doctor
            patient_id: Only appointments for this patient
            status: Only appointments with this status
            
        Returns:
            Matching appointments in booking order
        """
        if doctor_id:
            appointments = self._repository.find_by_doctor_id(doctor_id)
        elif patient_id:
            appointments = self._repository.find_by_patient_id(patient_id)
        elif status:
            appointments = self._repository.find_by_status(status)
        else:
            appointments = self._repository.find_all()
        
        if patient_id:
            appointments = [a for a in appointments if a.patient_id == patient_id]
        if status:
            appointments = [a for a in appointments if a.status == status]
        return appointments
    
    def update_status(self, appointment_id: str, status: str) -> Appointment:
        appointment = self.get_appointment(appointment_id)
        appointment.update_status(status)
        return self._repository.update(appointment.id, appointment)
