"""
Doctor Availability Service
===========================

Domain service deciding whether a doctor can be booked at an instant.

A doctor is available when no existing appointment sits at exactly the same
instant and the instant falls inside one of the doctor's working-hour
windows for that weekday. Appointments carry no duration, so bookings a
minute apart never collide.
"""
import logging
from datetime import datetime
from typing import Union

from hospital.core.datetime_utils import minute_of_day, parse_datetime, to_iso, weekday_name
from hospital.core.exceptions import InvalidInputError, NotFoundError
from hospital.domain.models.doctor import Doctor
from hospital.domain.repositories.appointment_repository import AppointmentRepository
from hospital.domain.repositories.doctor_repository import DoctorRepository

logger = logging.getLogger(__name__)


class DoctorAvailabilityService:
    """Availability checks against appointments and working hours."""
    
    def __init__(
        self,
        appointment_repository: AppointmentRepository,
        doctor_repository: DoctorRepository,
    ):
        self._appointment_repository = appointment_repository
        self._doctor_repository = doctor_repository
    
    def is_doctor_available(self, doctor_id: str, date: Union[datetime, str]) -> bool:
        """
        Check whether ``doctor_id`` can take an appointment at ``date``.
        
        Args:
            doctor_id: Doctor identifier
            date: Requested instant (datetime or ISO 8601 string)
            
        Returns:
            True if there is no conflicting appointment and the instant lies
            inside a working-hours window
            
        Raises:
            NotFoundError: If the doctor does not exist
            InvalidInputError: If ``date`` is not a valid date
        """
        doctor = self._doctor_repository.find_by_id(doctor_id)
        if not doctor:
            raise NotFoundError("Doctor not found")
        
        instant = parse_datetime(date)
        if instant is None:
            raise InvalidInputError("Invalid date")
        
        if self.has_appointment_conflict(doctor_id, instant):
            logger.info("Doctor %s has a conflicting appointment on %s", doctor_id, to_iso(instant))
            return False
        
        if not self.is_within_working_hours(doctor, instant):
            logger.info(
                "Requested time %s is outside of doctor %s's working hours",
                to_iso(instant),
                doctor_id,
            )
            return False
        
        return True
    
    def has_appointment_conflict(self, doctor_id: str, instant: datetime) -> bool:
        """True when the doctor already has an appointment at exactly ``instant``."""
        return any(
            appointment.is_at(instant)
            for appointment in self._appointment_repository.find_by_doctor_id(doctor_id)
        )
    
    @staticmethod
    def is_within_working_hours(doctor: Doctor, instant: datetime) -> bool:
        """True when ``instant`` falls inside a window declared for its weekday."""
        minute = minute_of_day(instant)
        return any(
            entry.time_slot.contains(minute)
            for entry in doctor.working_hours.hours_for(weekday_name(instant))
        )
