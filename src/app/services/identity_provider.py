from abc import ABC, abstractmethod
from typing import Callable, Optional

from src.domain.access import CallerIdentity

IdentityCallback = Callable[[Optional[CallerIdentity]], None]


class IIdentityProvider(ABC):
    """
    Identity/session provider interface.

    The core does no credential checking; it trusts whatever identity
    this provider yields.
    """

    @abstractmethod
    def get_current_identity(self) -> Optional[CallerIdentity]:
        """Current caller, or None when signed out"""
        pass

    @abstractmethod
    def on_identity_change(self, callback: IdentityCallback) -> Callable[[], None]:
        """
        Register a callback for sign-in/sign-out.

        Returns:
            Function that unregisters the callback
        """
        pass

    @abstractmethod
    def sign_out(self) -> None:
        pass
