"""
Examination Model
=================

A lab test or exam ordered for a patient by a responsible doctor.
"""
from dataclasses import dataclass
from datetime import datetime


@dataclass
class Examination:
    """Examination domain model."""
    id: str
    type: str
    patient_id: str
    responsible_doctor_id: str
    date: datetime
    result: str = ""
    location: str = ""
