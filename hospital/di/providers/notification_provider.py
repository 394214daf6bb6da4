from typing import TYPE_CHECKING
from ...domain.services.notification_service import NotificationService
from ...infrastructure.notification.logging_notification_service import LoggingNotificationService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class NotificationProvider:
    """Notification provider - registers the outbound notification adapter"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register notification service.
        Swap the adapter here to deliver real e-mails.
        """
        container.register_singleton(
            NotificationService,
            LoggingNotificationService()
        )
