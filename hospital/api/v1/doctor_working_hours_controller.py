"""
Doctor Working Hours Controller
===============================

FastAPI controller for a doctor's working-hours windows.
"""
from typing import List

from fastapi import APIRouter, Depends

from hospital.api.v1.dependencies import get_working_hours_service
from hospital.application.dto.doctor_dto import (
    DoctorResponse,
    WorkingHoursRequest,
    WorkingHoursResponse,
)
from hospital.domain.services.doctor_working_hours_service import DoctorWorkingHoursService

router = APIRouter(tags=["doctor working hours"])


@router.get(
    "/{doctor_id}/working-hours",
    response_model=List[WorkingHoursResponse],
    summary="List working hours",
)
def list_working_hours(
    doctor_id: str,
    service: DoctorWorkingHoursService = Depends(get_working_hours_service),
) -> List[WorkingHoursResponse]:
    return [WorkingHoursResponse.from_entry(entry) for entry in service.list_working_hours(doctor_id)]


@router.post(
    "/{doctor_id}/working-hours",
    response_model=DoctorResponse,
    summary="Add working hours",
    description="""
    Declare a day and time slot (e.g. "09:00 AM - 05:00 PM") when the doctor can be booked.
    
    An identical day and slot already declared is rejected.
    """
)
def add_working_hours(
    doctor_id: str,
    request: WorkingHoursRequest,
    service: DoctorWorkingHoursService = Depends(get_working_hours_service),
) -> DoctorResponse:
    doctor = service.add_working_hours(doctor_id, request.day, request.time_slot)
    return DoctorResponse.from_domain(doctor)


@router.delete(
    "/{doctor_id}/working-hours",
    response_model=DoctorResponse,
    summary="Remove working hours",
)
def remove_working_hours(
    doctor_id: str,
    request: WorkingHoursRequest,
    service: DoctorWorkingHoursService = Depends(get_working_hours_service),
) -> DoctorResponse:
    doctor = service.remove_working_hours(doctor_id, request.day, request.time_slot)
    return DoctorResponse.from_domain(doctor)
