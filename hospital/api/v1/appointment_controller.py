"""
Appointment Controller
======================

FastAPI controller for scheduling and looking up appointments.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from hospital.api.v1.dependencies import get_appointment_service
from hospital.application.dto.appointment_dto import (
    AppointmentCreateRequest,
    AppointmentResponse,
    AppointmentStatusRequest,
)
from hospital.application.services.appointment_service import AppointmentService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["appointments"])


@router.post(
    "",
    response_model=AppointmentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Schedule an appointment",
    description="""
    Schedule an appointment for a patient with a doctor.
    
    The patient and doctor may be given as patient_id / doctor_id or as
    nested {"patient": {"id": ...}, "doctor": {"id": ...}} references.
    
    When an appointment is scheduled:
    1. The doctor must have no appointment at exactly the same instant
    2. The instant must fall inside the doctor's working hours
    3. The patient is notified by e-mail
    """
)
def schedule_appointment(
    request: AppointmentCreateRequest,
    service: AppointmentService = Depends(get_appointment_service),
) -> AppointmentResponse:
    appointment = service.schedule_appointment(request)
    logger.info("Appointment %s created via API", appointment.id)
    return AppointmentResponse.from_domain(appointment)


@router.get(
    "",
    response_model=List[AppointmentResponse],
    summary="List appointments",
    description="Get all appointments, optionally filtered by doctor_id, patient_id or status.",
)
def list_appointments(
    doctor_id: Optional[str] = None,
    patient_id: Optional[str] = None,
    status_filter: Optional[str] = Query(None, alias="status"),
    service: AppointmentService = Depends(get_appointment_service),
) -> List[AppointmentResponse]:
    appointments = service.list_appointments(
        doctor_id=doctor_id,
        patient_id=patient_id,
        status=status_filter,
    )
    return [AppointmentResponse.from_domain(appointment) for appointment in appointments]


@router.get("/{appointment_id}", response_model=AppointmentResponse, summary="Get appointment by ID")
def get_appointment(
    appointment_id: str,
    service: AppointmentService = Depends(get_appointment_service),
) -> AppointmentResponse:
    return AppointmentResponse.from_domain(service.get_appointment(appointment_id))


@router.patch(
    "/{appointment_id}/status",
    response_model=AppointmentResponse,
    summary="Change appointment status",
    description="Any non-empty status is accepted (e.g. 'completed', 'cancelled').",
)
def update_appointment_status(
    appointment_id: str,
    request: AppointmentStatusRequest,
    service: AppointmentService = Depends(get_appointment_service),
) -> AppointmentResponse:
    appointment = service.update_status(appointment_id, request.status)
    return AppointmentResponse.from_domain(appointment)
