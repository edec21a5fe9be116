"""
Authentication Use Cases
"""

from .sign_in_use_case import SignInUseCase
from .load_context_use_case import LoadContextUseCase
from .dtos import ContextResponse

__all__ = [
    "SignInUseCase",
    "LoadContextUseCase",
    "ContextResponse",
]
