from typing import Optional
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from pydantic import ValidationError
import logging

from medcase.core.config import settings
from medcase.core.exceptions import Unauthenticated, PermissionDenied
from medcase.core.security import create_access_token, decode_access_token
from medcase.db.models import User
from medcase.schemas.auth import SessionIdentity

logger = logging.getLogger(__name__)
oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_V1_STR}/auth/login",
    auto_error=False,
)

def identity_for_user(user: User) -> SessionIdentity:
    """
    Snapshot a user and its (at most one) profile into a session identity.
    """
    return SessionIdentity(
        user_id=user.id,
        email=user.email,
        name=user.name,
        role=user.role,
        client_profile_id=user.client_profile.id if user.client_profile else None,
        employee_profile_id=user.employee_profile.id if user.employee_profile else None,
    )

def issue_session(identity: SessionIdentity) -> str:
    claims = {
        "sub": identity.user_id,
        "email": identity.email,
        "name": identity.name,
        "role": identity.role.value,
        "client_profile_id": identity.client_profile_id,
        "employee_profile_id": identity.employee_profile_id,
    }
    return create_access_token(claims)

def resolve_session(token: Optional[str]) -> SessionIdentity:
    if not token:
        raise Unauthenticated("Not authenticated")

    payload = decode_access_token(token)
    try:
        return SessionIdentity(
            user_id=payload["sub"],
            email=payload["email"],
            name=payload["name"],
            role=payload["role"],
            client_profile_id=payload.get("client_profile_id"),
            employee_profile_id=payload.get("employee_profile_id"),
        )
    except (KeyError, ValidationError) as e:
        logger.warning(f"Rejected malformed session token: {e}")
        raise Unauthenticated()

async def get_current_user(token: Optional[str] = Depends(oauth2_scheme)) -> SessionIdentity:
    return resolve_session(token)

async def get_current_admin(
    current_user: SessionIdentity = Depends(get_current_user)
) -> SessionIdentity:
    """
    Check if current user is an admin.
    """
    if not current_user.is_admin:
        logger.warning(f"Admin-only endpoint requested by user: {current_user.user_id}")
        raise PermissionDenied()
    return current_user
