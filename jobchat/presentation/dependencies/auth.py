"""
Authentication Dependency for FastAPI.

Validates the bearer token issued by the marketplace's identity service and
returns the Actor every command and query receives.

Claims:
- sub:  user id (UUID)
- role: COMPANY | JOB_SEEKER
- name: optional display name, used in notification text
"""

import jwt
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from jobchat.config.settings import Config
from jobchat.domain.value_objects.actor import Actor
from jobchat.domain.value_objects.user_id import UserId
from jobchat.domain.value_objects.user_role import UserRole

# auto_error=False: a missing header is a 401 from us, not a 403 from FastAPI
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Actor:
    """
    Extract and validate the actor from the JWT token.

    Raises:
        HTTPException 401 if the token is missing, invalid, expired, or
        missing required claims
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Unauthorized")

    try:
        claims = jwt.decode(
            credentials.credentials,
            Config.SERVICE_AUTH_SECRET,
            algorithms=["HS256"],
            audience=Config.SERVICE_AUTH_AUDIENCE,
            issuer=Config.SERVICE_AUTH_ISSUER,
            options={"require": ["exp", "iat", "aud", "iss", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise _unauthorized("Token has expired")
    except jwt.InvalidTokenError as e:
        raise _unauthorized(f"Invalid token: {str(e)}")

    try:
        user_id = UserId(claims.get("sub"))
        role = UserRole.parse(claims.get("role"))
    except (ValueError, TypeError, AttributeError):
        raise _unauthorized("Missing required claims in token")

    return Actor(user_id=user_id, role=role, name=claims.get("name"))
