"""
Property Service Error Taxonomy

Every failure a use case can report. All are recoverable by the caller.
"""

from typing import TYPE_CHECKING

from src.domain.result import Error

if TYPE_CHECKING:
    from src.domain.entities import PaymentInfo


class ValidationError(Error):
    """Malformed input or a reference to a record that does not exist"""

    CODE = "VALIDATION_ERROR"

    def __init__(self, message: str):
        super().__init__(self.CODE, message)


class NotFoundError(Error):
    """Mutation or lookup target is absent"""

    CODE = "NOT_FOUND"

    def __init__(self, message: str):
        super().__init__(self.CODE, message)


class InvalidTransition(Error):
    """Status change that does not strictly advance the current status"""

    CODE = "INVALID_TRANSITION"

    def __init__(self, message: str):
        super().__init__(self.CODE, message)


class DuplicateEmailError(Error):
    CODE = "EMAIL_ALREADY_EXISTS"

    def __init__(self, email: str):
        super().__init__(self.CODE, f"Email already registered: {email}")


class PaymentDeclined(Error):
    """
    Simulated gateway rejection.

    The declined payment is still persisted; it travels with the error so
    the caller can show it.
    """

    CODE = "PAYMENT_DECLINED"

    def __init__(self, payment: "PaymentInfo"):
        super().__init__(self.CODE, "Payment processing failed")
        self.payment = payment


class BackendUnavailable(Error):
    """Transport or storage failure in the entity store's backing service"""

    CODE = "BACKEND_UNAVAILABLE"

    def __init__(self, message: str = "Entity store is unavailable"):
        super().__init__(self.CODE, message)


class PermissionDenied(Error):
    CODE = "FORBIDDEN"

    def __init__(self, message: str):
        super().__init__(self.CODE, message)
