"""
Examination Controller
======================

FastAPI controller for examinations.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from hospital.api.v1.dependencies import get_examination_service
from hospital.application.dto.examination_dto import (
    ExaminationCreateRequest,
    ExaminationResponse,
    ExaminationUpdateRequest,
)
from hospital.application.services.examination_service import ExaminationService

router = APIRouter(tags=["examinations"])


@router.post(
    "",
    response_model=ExaminationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Schedule an examination",
)
def schedule_examination(
    request: ExaminationCreateRequest,
    service: ExaminationService = Depends(get_examination_service),
) -> ExaminationResponse:
    exam = service.schedule_examination(
        id=request.id,
        type=request.type,
        patient_id=request.patient_id,
        responsible_doctor_id=request.responsible_doctor_id,
        date=request.date,
        result=request.result,
        location=request.location,
    )
    return ExaminationResponse.from_domain(exam)


@router.get("", response_model=List[ExaminationResponse], summary="List examinations")
def list_examinations(
    service: ExaminationService = Depends(get_examination_service),
) -> List[ExaminationResponse]:
    return [ExaminationResponse.from_domain(exam) for exam in service.list_exams()]


@router.get(
    "/patient/{patient_id}",
    response_model=List[ExaminationResponse],
    summary="Examinations for a patient",
)
def list_examinations_by_patient(
    patient_id: str,
    service: ExaminationService = Depends(get_examination_service),
) -> List[ExaminationResponse]:
    return [ExaminationResponse.from_domain(exam) for exam in service.find_exams_by_patient_id(patient_id)]


@router.get(
    "/type/{exam_type}",
    response_model=List[ExaminationResponse],
    summary="Examinations of a type",
)
def list_examinations_by_type(
    exam_type: str,
    service: ExaminationService = Depends(get_examination_service),
) -> List[ExaminationResponse]:
    return [ExaminationResponse.from_domain(exam) for exam in service.find_exams_by_type(exam_type)]


@router.get(
    "/date/{exam_date}",
    response_model=List[ExaminationResponse],
    summary="Examinations on a date",
    description="Date as YYYY-MM-DD; matched against the clinic-local calendar date.",
)
def list_examinations_by_date(
    exam_date: str,
    service: ExaminationService = Depends(get_examination_service),
) -> List[ExaminationResponse]:
    return [ExaminationResponse.from_domain(exam) for exam in service.find_exams_by_date(exam_date)]


@router.get("/{exam_id}", response_model=ExaminationResponse, summary="Get examination by ID")
def get_examination(
    exam_id: str,
    service: ExaminationService = Depends(get_examination_service),
) -> ExaminationResponse:
    return ExaminationResponse.from_domain(service.get_exam(exam_id))


@router.put("/{exam_id}", response_model=ExaminationResponse, summary="Update an examination")
def update_examination(
    exam_id: str,
    request: ExaminationUpdateRequest,
    service: ExaminationService = Depends(get_examination_service),
) -> ExaminationResponse:
    return ExaminationResponse.from_domain(service.update_exam(exam_id, request.changes()))


@router.delete("/{exam_id}", response_model=ExaminationResponse, summary="Remove an examination")
def delete_examination(
    exam_id: str,
    service: ExaminationService = Depends(get_examination_service),
) -> ExaminationResponse:
    return ExaminationResponse.from_domain(service.delete_exam(exam_id))
