"""
Doctor Controller
=================

FastAPI controller for doctor registration, lookup and search.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from hospital.api.v1.dependencies import get_doctor_service
from hospital.application.dto.doctor_dto import (
    DoctorCreateRequest,
    DoctorResponse,
    DoctorUpdateRequest,
)
from hospital.application.services.doctor_service import DoctorService

router = APIRouter(tags=["doctors"])


@router.post(
    "",
    response_model=DoctorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a doctor",
)
def create_doctor(
    request: DoctorCreateRequest,
    service: DoctorService = Depends(get_doctor_service),
) -> DoctorResponse:
    """Register a doctor with no working hours."""
    doctor = service.add_doctor(
        id=request.id,
        name=request.name,
        rcm=request.rcm,
        specialties=request.specialties,
        phone_number=request.phone_number,
    )
    return DoctorResponse.from_domain(doctor)


@router.get("", response_model=List[DoctorResponse], summary="List doctors")
def list_doctors(
    service: DoctorService = Depends(get_doctor_service),
) -> List[DoctorResponse]:
    return [DoctorResponse.from_domain(doctor) for doctor in service.list_doctors()]


@router.get(
    "/search/name/{name}",
    response_model=List[DoctorResponse],
    summary="Find doctors by name",
)
def search_doctors_by_name(
    name: str,
    service: DoctorService = Depends(get_doctor_service),
) -> List[DoctorResponse]:
    return [DoctorResponse.from_domain(doctor) for doctor in service.find_doctors_by_name(name)]


@router.get(
    "/search/specialty/{specialty}",
    response_model=List[DoctorResponse],
    summary="Find doctors by specialty",
)
def search_doctors_by_specialty(
    specialty: str,
    service: DoctorService = Depends(get_doctor_service),
) -> List[DoctorResponse]:
    return [
        DoctorResponse.from_domain(doctor)
        for doctor in service.find_doctors_by_specialization(specialty)
    ]


@router.get("/{doctor_id}", response_model=DoctorResponse, summary="Get doctor by ID")
def get_doctor(
    doctor_id: str,
    service: DoctorService = Depends(get_doctor_service),
) -> DoctorResponse:
    return DoctorResponse.from_domain(service.get_doctor(doctor_id))


@router.put("/{doctor_id}", response_model=DoctorResponse, summary="Update a doctor")
def update_doctor(
    doctor_id: str,
    request: DoctorUpdateRequest,
    service: DoctorService = Depends(get_doctor_service),
) -> DoctorResponse:
    """Update the fields present in the body."""
    changes = {name: getattr(request, name) for name in request.model_fields_set}
    return DoctorResponse.from_domain(service.update_doctor(doctor_id, changes))


@router.delete("/{doctor_id}", response_model=DoctorResponse, summary="Remove a doctor")
def delete_doctor(
    doctor_id: str,
    service: DoctorService = Depends(get_doctor_service),
) -> DoctorResponse:
    return DoctorResponse.from_domain(service.delete_doctor(doctor_id))
