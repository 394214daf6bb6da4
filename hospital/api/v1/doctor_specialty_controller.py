"""
Doctor Specialty Controller
===========================

FastAPI controller for the specialties a doctor practices.
"""
from typing import List

from fastapi import APIRouter, Depends

from hospital.api.v1.dependencies import get_specialty_service
from hospital.application.dto.doctor_dto import DoctorResponse, SpecialtyRequest
from hospital.domain.services.doctor_specialty_service import DoctorSpecialtyService

router = APIRouter(tags=["doctor specialties"])


@router.get("/{doctor_id}/specialties", response_model=List[str], summary="List specialties")
def list_specialties(
    doctor_id: str,
    service: DoctorSpecialtyService = Depends(get_specialty_service),
) -> List[str]:
    return service.list_specialties(doctor_id)


@router.post("/{doctor_id}/specialties", response_model=DoctorResponse, summary="Add a specialty")
def add_specialty(
    doctor_id: str,
    request: SpecialtyRequest,
    service: DoctorSpecialtyService = Depends(get_specialty_service),
) -> DoctorResponse:
    return DoctorResponse.from_domain(service.add_specialty(doctor_id, request.specialty))


@router.delete("/{doctor_id}/specialties", response_model=DoctorResponse, summary="Remove a specialty")
def remove_specialty(
    doctor_id: str,
    request: SpecialtyRequest,
    service: DoctorSpecialtyService = Depends(get_specialty_service),
) -> DoctorResponse:
    return DoctorResponse.from_domain(service.remove_specialty(doctor_id, request.specialty))
