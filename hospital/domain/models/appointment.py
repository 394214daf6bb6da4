"""
Appointment Model
=================

A patient's booking with a doctor at an exact instant.
"""
from dataclasses import dataclass
from datetime import datetime

from hospital.core.exceptions import InvalidInputError

DEFAULT_STATUS = "scheduled"


@dataclass
class Appointment:
    """
    Appointment domain model.
    
    Patient and doctor are referenced by id so each aggregate can be stored
    on its own. ``status`` is free text; no transitions are enforced.
    """
    id: str
    date: datetime
    patient_id: str
    doctor_id: str
    reason: str = ""
    status: str = DEFAULT_STATUS
    observations: str = ""
    
    def is_at(self, instant: datetime) -> bool:
        """Exact-instant match; appointments have no duration."""
        return self.date == instant
    
    def update_status(self, status: str) -> None:
        if not status or not status.strip():
            raise InvalidInputError("Status cannot be empty")
        self.status = status.strip()
