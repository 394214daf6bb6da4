"""
Doctor Availability Controller
==============================

FastAPI controller answering whether a doctor can be booked at an instant.
"""
from fastapi import APIRouter, Depends

from hospital.api.v1.dependencies import get_availability_service
from hospital.application.dto.doctor_dto import AvailabilityRequest, AvailabilityResponse
from hospital.domain.services.doctor_availability_service import DoctorAvailabilityService

router = APIRouter(tags=["doctor availability"])


@router.post(
    "/{doctor_id}/availability",
    response_model=AvailabilityResponse,
    summary="Check doctor availability",
    description="""
    Returns available=true when the doctor has no appointment at exactly this
    instant and the instant falls inside one of the doctor's working-hours
    windows for that weekday (both boundaries included).
    """
)
def check_availability(
    doctor_id: str,
    request: AvailabilityRequest,
    service: DoctorAvailabilityService = Depends(get_availability_service),
) -> AvailabilityResponse:
    return AvailabilityResponse(available=service.is_doctor_available(doctor_id, request.date))
