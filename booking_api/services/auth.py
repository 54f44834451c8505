import secrets
from abc import ABC, abstractmethod
from typing import Optional

import structlog

from booking_api.core.exceptions import ForbiddenError, UnauthorizedError
from booking_api.stores.tokens import TokenRegistry

logger = structlog.get_logger(__name__)

TOKEN_BYTES = 16


class AuthProvider(ABC):
    """Grants and checks admin bearer tokens.

    Routes only talk to this interface, so the shared-passcode scheme below
    can be swapped for hashed credentials or expiring tokens.
    """

    @abstractmethod
    def issue_token(self, passcode: Optional[str]) -> str:
        """Exchange credentials for a bearer token.

        Raises:
            UnauthorizedError: If the credentials are rejected
        """

    @abstractmethod
    def authorize(self, token: Optional[str]) -> None:
        """Accept a presented bearer token or raise.

        Raises:
            UnauthorizedError: If no token was presented
            ForbiddenError: If the token is not recognised
        """


class PasscodeAuthProvider(AuthProvider):
    """Single shared passcode exchanged for process-lifetime tokens."""

    def __init__(self, passcode: str, registry: Optional[TokenRegistry] = None):
        if not passcode:
            raise ValueError("Admin passcode must not be empty")
        self._passcode = passcode
        self.registry = registry if registry is not None else TokenRegistry()

    def issue_token(self, passcode: Optional[str]) -> str:
        if not isinstance(passcode, str) or not secrets.compare_digest(
            passcode.encode(), self._passcode.encode()
        ):
            logger.warning("Admin login failed")
            raise UnauthorizedError("Invalid passcode.")

        token = secrets.token_hex(TOKEN_BYTES)
        self.registry.add(token)
        logger.info("Admin login succeeded", active_tokens=len(self.registry))
        return token

    def authorize(self, token: Optional[str]) -> None:
        if not token:
            raise UnauthorizedError()
        if token not in self.registry:
            logger.warning("Rejected unknown admin token")
            raise ForbiddenError()
