import logging
from typing import Callable, List, Optional

from src.app.services.identity_provider import IdentityCallback, IIdentityProvider
from src.domain.access import CallerIdentity

logger = logging.getLogger(__name__)


class SessionIdentityProvider(IIdentityProvider):
    """
    In-process session holding the signed-in caller.

    Listeners are told about every sign-in and sign-out, in registration order.
    """

    def __init__(self, identity: Optional[CallerIdentity] = None):
        self._identity = identity
        self._listeners: List[IdentityCallback] = []

    def get_current_identity(self) -> Optional[CallerIdentity]:
        return self._identity

    def on_identity_change(self, callback: IdentityCallback) -> Callable[[], None]:
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def sign_in(self, identity: CallerIdentity) -> None:
        self._identity = identity
        logger.info(f"Signed in {identity.email} as {identity.role.value}")
        self._emit()

    def sign_out(self) -> None:
        if self._identity is None:
            return
        logger.info(f"Signed out {self._identity.email}")
        self._identity = None
        self._emit()

    def _emit(self) -> None:
        for callback in list(self._listeners):
            callback(self._identity)
