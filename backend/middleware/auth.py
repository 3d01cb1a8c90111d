"""
Admin authentication

Demo-grade gate for the admin screen: a single shared secret compared in
memory. No sessions, tokens or expiry. The data layer never sees credentials;
swap the Authenticator to change how admins are recognized.
"""
import secrets
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from fastapi import Request, HTTPException

from services.errors import AuthenticationError

ADMIN_SECRET_HEADER = "X-Admin-Secret"


@dataclass(frozen=True)
class AdminSession:
    """Result of a successful authentication"""
    subject: str = "admin"
    authenticated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class Authenticator(ABC):
    """Pluggable admin authentication capability"""

    @abstractmethod
    def authenticate(self, credentials: Optional[str]) -> AdminSession:
        """
        Check credentials.

        Raises:
            AuthenticationError: if the credentials are rejected
        """
        pass


class SharedSecretAuthenticator(Authenticator):
    """Accepts exactly one configured secret. An empty secret accepts nothing."""

    def __init__(self, secret: Optional[str]):
        self._secret = secret or ""

    @property
    def enabled(self) -> bool:
        return bool(self._secret)

    def authenticate(self, credentials: Optional[str]) -> AdminSession:
        if not self.enabled:
            raise AuthenticationError("Admin access is not configured")
        if not credentials or not secrets.compare_digest(credentials.encode(), self._secret.encode()):
            raise AuthenticationError("Invalid password")
        return AdminSession()


async def require_admin(request: Request) -> AdminSession:
    """
    FastAPI dependency: authenticate the admin secret header

    Returns:
        AdminSession

    Raises:
        HTTPException 401 if not authenticated
    """
    authenticator: Authenticator = request.app.state.authenticator
    try:
        return authenticator.authenticate(request.headers.get(ADMIN_SECRET_HEADER))
    except AuthenticationError as e:
        raise HTTPException(status_code=401, detail=str(e))
