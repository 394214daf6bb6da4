"""
Doctor Model
============

Aggregate root for a doctor and the working hours it owns.
"""
from dataclasses import dataclass, field
from typing import List

from hospital.domain.models.working_hours import WorkingHours


@dataclass
class Doctor:
    """
    Doctor domain model.
    
    Identity is ``id``; ``rcm`` is the medical license number and plays no
    part in comparisons.
    """
    id: str
    name: str
    rcm: str = ""
    specialties: List[str] = field(default_factory=list)
    phone_number: str = ""
    working_hours: WorkingHours = field(default_factory=WorkingHours)
    
    def has_specialty(self, specialty: str) -> bool:
        return specialty in self.specialties
    
    def add_specialty(self, specialty: str) -> None:
        self.specialties.append(specialty)
    
    def remove_specialty(self, specialty: str) -> None:
        self.specialties = [spec for spec in self.specialties if spec != specialty]
