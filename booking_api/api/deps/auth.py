from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from booking_api.api.deps.state import get_auth_provider
from booking_api.services.auth import AuthProvider

# auto_error is off so a missing header maps to 401 and an unknown token to
# 403, rather than FastAPI's built-in response.
security = HTTPBearer(auto_error=False)


async def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth_provider: AuthProvider = Depends(get_auth_provider),
) -> str:
    """
    Gate for admin routes.

    Returns the presented token when it is valid; otherwise the auth provider
    raises UnauthorizedError (no bearer header) or ForbiddenError (unknown
    token).
    """
    token = credentials.credentials if credentials else None
    auth_provider.authorize(token)
    return token
