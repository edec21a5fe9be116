import logging

from src.app.services.notification_sink import (
    INotificationSink,
    Notification,
    NotificationLevel,
)

logger = logging.getLogger(__name__)


class LoggingNotificationSink(INotificationSink):
    """Notification sink that writes every outcome to the application log"""

    def notify(self, notification: Notification) -> None:
        if notification.level == NotificationLevel.success:
            logger.info(f"[{notification.operation}] {notification.message}")
        else:
            logger.warning(
                f"[{notification.operation}] {notification.code}: {notification.message}"
            )
