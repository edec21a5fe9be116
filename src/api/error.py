from typing import Optional

from fastapi import status

from src.app.services.notification_sink import INotificationSink, report_outcome
from src.domain.errors import (
    BackendUnavailable,
    DuplicateEmailError,
    InvalidTransition,
    NotFoundError,
    PaymentDeclined,
    PermissionDenied,
    ValidationError,
)
from src.domain.result import Error, Return

CLIENT_ERROR_STATUS = {
    ValidationError.CODE: status.HTTP_400_BAD_REQUEST,
    PermissionDenied.CODE: status.HTTP_403_FORBIDDEN,
    NotFoundError.CODE: status.HTTP_404_NOT_FOUND,
    InvalidTransition.CODE: status.HTTP_409_CONFLICT,
    DuplicateEmailError.CODE: status.HTTP_409_CONFLICT,
    PaymentDeclined.CODE: status.HTTP_402_PAYMENT_REQUIRED,
}


class ClientError(Exception):
    def __init__(
        self,
        base_error: Error,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Optional[dict] = None,
    ):
        self.base_error = base_error
        self.status_code = status_code
        self.details = details or {}
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(
        self,
        base_error: Error,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


def raise_for_error(error: Error) -> None:
    """Translate a use case error into the matching HTTP exception"""
    if isinstance(error, PaymentDeclined):
        raise ClientError(
            error,
            status_code=status.HTTP_402_PAYMENT_REQUIRED,
            details={"payment": error.payment.model_dump(mode="json")},
        )
    if error.code in CLIENT_ERROR_STATUS:
        raise ClientError(error, status_code=CLIENT_ERROR_STATUS[error.code])
    if error.code == BackendUnavailable.CODE:
        raise ServerError(error, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
    raise ServerError(error)


def raise_denied(notifier: INotificationSink, operation: str, denied: PermissionDenied) -> None:
    """Report a refused mutation to the notification sink, then answer 403"""
    report_outcome(notifier, operation, Return.err(denied), "")
    raise ClientError(denied, status_code=status.HTTP_403_FORBIDDEN)
