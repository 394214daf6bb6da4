"""
Contact Value Objects
=====================

Address and emergency contact attached to a patient.
Both compare by value and carry no identity.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """Postal address."""
    street: str = ""
    number: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""


@dataclass(frozen=True)
class EmergencyContact:
    """Person to call on the patient's behalf."""
    name: str = ""
    phone: str = ""
    relationship: str = ""
