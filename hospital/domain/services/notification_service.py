"""
Notification Service Interface
==============================

Port through which the application tells patients about their bookings.
"""
from abc import ABC, abstractmethod

from hospital.core.datetime_utils import clock_label, long_date_label
from hospital.domain.models.appointment import Appointment
from hospital.domain.models.doctor import Doctor
from hospital.domain.models.patient import Patient


def appointment_scheduled_message(appointment: Appointment, doctor: Doctor) -> str:
    """Patient-facing text, e.g. "... scheduled for Monday, July 1, 2024 at 10:00 AM."."""
    return (
        f"Your appointment with Dr. {doctor.name} is scheduled for "
        f"{long_date_label(appointment.date)} at {clock_label(appointment.date)}."
    )


class NotificationService(ABC):
    """Abstract notification channel."""
    
    @abstractmethod
    def send_email_notification(self, email: str, message: str) -> None:
        """Deliver ``message`` to ``email``."""
        pass
    
    def notify_appointment_scheduled(
        self,
        appointment: Appointment,
        patient: Patient,
        doctor: Doctor,
    ) -> None:
        """Tell the patient their appointment has been booked."""
        self.send_email_notification(
            patient.email,
            appointment_scheduled_message(appointment, doctor),
        )
