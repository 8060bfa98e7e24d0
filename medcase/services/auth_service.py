from functools import lru_cache
from typing import Optional, Tuple
import secrets
import logging
from sqlalchemy.ext.asyncio import AsyncSession

from medcase.core.auth import identity_for_user
from medcase.core.exceptions import DuplicateEmail, InvalidCredentials
from medcase.core.security import generate_two_factor_secret, get_password_hash, verify_password
from medcase.crud import user as user_crud
from medcase.db.models import User, UserRole
from medcase.schemas.auth import SessionIdentity
from medcase.schemas.user import UserCreate

logger = logging.getLogger(__name__)

@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    # Hash of a random string; never matches user input
    return get_password_hash(secrets.token_urlsafe(16))

async def register_user(
    db: AsyncSession,
    name: str,
    email: str,
    password: str,
) -> Tuple[Optional[User], str, str]:
    """
    Self-registration.

    The first user ever stored becomes ADMIN, every later one CLIENT. A
    two-factor secret is generated and stored; the secret and its provisioning
    URI are returned to the caller this one time.
    """
    if await user_crud.get_user_by_email(db, email=email):
        logger.info("Registration rejected: email already registered")
        raise DuplicateEmail()

    is_first_user = await user_crud.count_users(db) == 0
    role = UserRole.ADMIN if is_first_user else UserRole.CLIENT
    logger.debug(f"Registering new user with role {role.value}")

    secret, provisioning_uri = generate_two_factor_secret(email)
    user = await user_crud.create_user(
        db,
        name=name,
        email=email,
        password=password,
        role=role,
        two_factor_secret=secret,
    )
    return user, provisioning_uri, secret

async def provision_user(db: AsyncSession, user_in: UserCreate) -> Optional[User]:
    """
    Admin-created account with the profile for its role.
    """
    if await user_crud.get_user_by_email(db, email=user_in.email):
        raise DuplicateEmail()

    return await user_crud.create_user(
        db,
        name=user_in.name,
        email=user_in.email,
        password=user_in.password,
        role=user_in.role,
        client_profile=user_in.client_profile,
        employee_profile=user_in.employee_profile,
    )

async def authenticate(db: AsyncSession, email: str, password: str) -> SessionIdentity:
    """
    Check credentials and snapshot the identity for the session token.

    Unknown email, inactive account and wrong password raise the same error.
    """
    user = await user_crud.get_user_by_email(db, email=email)
    if user is None or not user.is_active:
        # Hash anyway so both paths cost about the same
        verify_password(password, _dummy_hash())
        raise InvalidCredentials()

    if not verify_password(password, user.hashed_password):
        raise InvalidCredentials()

    return identity_for_user(user)
