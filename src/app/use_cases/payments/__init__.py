"""
Payment Use Cases
"""

from .dtos import CreatePaymentCommand
from .create_payment_use_case import CreatePaymentUseCase
from .list_payments_use_case import ListPaymentsUseCase

__all__ = [
    "CreatePaymentUseCase",
    "ListPaymentsUseCase",
    "CreatePaymentCommand",
]
