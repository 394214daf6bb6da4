"""
Doctor Working Hours Service
============================

Adds, removes and lists a doctor's working-hour windows. This is the
layer that refuses a window identical to one already declared.
"""
from typing import List

from hospital.core.exceptions import ConflictError, NotFoundError
from hospital.domain.models.doctor import Doctor
from hospital.domain.models.working_hours import WorkingHoursEntry
from hospital.domain.repositories.doctor_repository import DoctorRepository


class DoctorWorkingHoursService:
    """Working-hours operations on the Doctor aggregate."""
    
    def __init__(self, doctor_repository: DoctorRepository):
        self._repository = doctor_repository
    
    def _get_doctor(self, doctor_id: str) -> Doctor:
        doctor = self._repository.find_by_id(doctor_id)
        if not doctor:
            raise NotFoundError("Doctor not found")
        return doctor
    
    def add_working_hours(self, doctor_id: str, day: str, time_slot: str) -> Doctor:
        """
        Declare a new window.
        
        Raises:
            NotFoundError: If the doctor does not exist
            InvalidInputError: If the day or slot is malformed
            ConflictError: If the same day and slot are already declared
        """
        doctor = self._get_doctor(doctor_id)
        entry = WorkingHoursEntry.create(day, time_slot)
        
        if doctor.working_hours.has_hours(entry.day, entry.time_slot):
            raise ConflictError("Working hours already exists for this doctor")
        
        doctor.working_hours.add_hours(entry.day, entry.time_slot)
        return self._repository.update(doctor.id, doctor)
    
    def remove_working_hours(self, doctor_id: str, day: str, time_slot: str) -> Doctor:
        """Remove the window matching both ``day`` and ``time_slot``."""
        doctor = self._get_doctor(doctor_id)
        doctor.working_hours.remove_hours(day, time_slot)
        return self._repository.update(doctor.id, doctor)
    
    def list_working_hours(self, doctor_id: str) -> List[WorkingHoursEntry]:
        return list(self._get_doctor(doctor_id).working_hours.list_hours())
