"""
Notification Sink

Fire-and-forget channel told about every mutation outcome. Nothing in the
core depends on delivery succeeding.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from src.domain.result import Result

logger = logging.getLogger(__name__)


class NotificationLevel(str, Enum):
    success = "success"
    error = "error"


class Notification(BaseModel):
    """Human-readable outcome of one mutation"""

    operation: str
    level: NotificationLevel
    message: str
    code: Optional[str] = None


class INotificationSink(ABC):
    """Notification sink interface - application layer"""

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        pass


def report_outcome(
    sink: INotificationSink, operation: str, result: Result, success_message: str
) -> Result:
    """
    Emit exactly one notification for a finished mutation and hand the
    result back unchanged. A failing sink is logged and otherwise ignored.
    """
    if result.is_ok():
        notification = Notification(
            operation=operation,
            level=NotificationLevel.success,
            message=success_message,
        )
    else:
        notification = Notification(
            operation=operation,
            level=NotificationLevel.error,
            message=result.error.message,
            code=result.error.code,
        )

    try:
        sink.notify(notification)
    except Exception:
        logger.exception(f"Notification sink failed for {operation}")

    return result
