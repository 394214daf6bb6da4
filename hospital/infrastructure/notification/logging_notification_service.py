"""
Logging Notification Service
============================

NotificationService adapter that writes outgoing e-mails to the log
instead of sending them.
"""
import logging

from hospital.domain.services.notification_service import NotificationService

logger = logging.getLogger(__name__)


class LoggingNotificationService(NotificationService):
    """Records every notification as an INFO log line."""
    
    def send_email_notification(self, email: str, message: str) -> None:
        logger.info("Sending email to %s with message: %s", email, message)
