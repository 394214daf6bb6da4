"""
Schedule Appointment Use Case
=============================

Business use case for booking a patient with a doctor.

Steps: validate the date, resolve patient and doctor, ask the availability
service, store the appointment, link it to the patient and notify the
patient. Nothing is rolled back if the notification fails after the
appointment has been stored.
"""
import logging
import threading
import uuid
from typing import Any, Mapping, Union

from hospital.core.datetime_utils import parse_datetime
from hospital.core.exceptions import ConflictError, InvalidInputError, NotFoundError
from hospital.application.dto.appointment_dto import AppointmentCreateRequest
from hospital.domain.models.appointment import DEFAULT_STATUS, Appointment
from hospital.domain.repositories.appointment_repository import AppointmentRepository
from hospital.domain.repositories.doctor_repository import DoctorRepository
from hospital.domain.repositories.patient_repository import PatientRepository
from hospital.domain.services.doctor_availability_service import DoctorAvailabilityService
from hospital.domain.services.notification_service import NotificationService

logger = logging.getLogger(__name__)


class ScheduleAppointmentUseCase:
    """
    Use case for scheduling an appointment.
    
    The availability check and the insert run under one lock, so two
    requests for the same doctor and instant cannot both succeed.
    """
    
    def __init__(
        self,
        patient_repository: PatientRepository,
        doctor_repository: DoctorRepository,
        appointment_repository: AppointmentRepository,
        availability_service: DoctorAvailabilityService,
        notification_service: NotificationService,
        default_status: str = DEFAULT_STATUS,
    ):
        """
        Initialize use case with repositories and collaborating services.
        
        Args:
            patient_repository: Repository for patient lookups
            doctor_repository: Repository for doctor lookups
            appointment_repository: Repository the appointment is stored in
            availability_service: Decides whether the doctor is free
            notification_service: Tells the patient about the booking
            default_status: Status used when the request omits one
        """
        self._patient_repository = patient_repository
        self._doctor_repository = doctor_repository
        self._appointment_repository = appointment_repository
        self._availability_service = availability_service
        self._notification_service = notification_service
        self._default_status = default_status
        self._lock = threading.Lock()
    
    def execute(
        self,
        request: Union[AppointmentCreateRequest, Mapping[str, Any]],
    ) -> Appointment:
        """
        Execute the schedule appointment use case.
        
        Args:
            request: Appointment data, flat or nested patient/doctor references
            
        Returns:
            Stored appointment entity
            
        Raises:
            InvalidInputError: If the date is invalid or an id is missing
            NotFoundError: If the patient or doctor does not exist
            ConflictError: If the doctor is not available or the id is taken
        """
        if not isinstance(request, AppointmentCreateRequest):
            request = AppointmentCreateRequest.model_validate(dict(request))
        
        date = parse_datetime(request.date)
        if date is None:
            raise InvalidInputError("Invalid appointment date")
        
        patient_id = request.resolved_patient_id
        doctor_id = request.resolved_doctor_id
        if not patient_id or not doctor_id:
            raise InvalidInputError("Patient ID and Doctor ID are required")
        
        patient = self._patient_repository.find_by_id(patient_id)
        if not patient:
            raise NotFoundError("Patient not found")
        
        doctor = self._doctor_repository.find_by_id(doctor_id)
        if not doctor:
            raise NotFoundError("Doctor not found")
        
        appointment = Appointment(
            id=request.id or uuid.uuid4().hex,
            date=date,
            patient_id=patient.id,
            doctor_id=doctor.id,
            reason=request.reason,
            status=request.status or self._default_status,
            observations=request.observations,
        )
        
        with self._lock:
            if not self._availability_service.is_doctor_available(doctor.id, date):
                raise ConflictError("Doctor is not available at the requested time")
            self._appointment_repository.add(appointment.id, appointment)
        
        patient.add_appointment(appointment.id)
        self._patient_repository.update(patient.id, patient)
        logger.info(
            "Appointment %s scheduled for patient %s with doctor %s",
            appointment.id,
            patient.id,
            doctor.id,
        )
        
        self._notification_service.notify_appointment_scheduled(appointment, patient, doctor)
        return appointment
