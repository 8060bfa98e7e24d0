from typing import Optional, List
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
import logging
from medcase.db.models import User, UserRole, ClientProfile, EmployeeProfile
from medcase.schemas.client import ClientProfileCreate
from medcase.schemas.employee import EmployeeProfileCreate
from medcase.core.exceptions import DuplicateEmail
from medcase.core.security import get_password_hash

logger = logging.getLogger(__name__)

def _with_profiles(query):
    return query.options(
        selectinload(User.client_profile),
        selectinload(User.employee_profile),
    ).execution_options(populate_existing=True)

async def get_user(db: AsyncSession, user_id: str) -> Optional[User]:
    result = await db.execute(_with_profiles(select(User).where(User.id == user_id)))
    return result.scalar_one_or_none()

async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    """
    Get a user by email, with both profiles loaded.
    """
    result = await db.execute(_with_profiles(select(User).where(User.email == email)))
    return result.scalar_one_or_none()

async def count_users(db: AsyncSession) -> int:
    result = await db.execute(select(func.count()).select_from(User))
    return result.scalar_one()

async def get_users(db: AsyncSession, skip: int = 0, limit: int = 100) -> List[User]:
    result = await db.execute(
        select(User).order_by(User.created_at.desc()).offset(skip).limit(limit)
    )
    return list(result.scalars().all())

async def get_active_employees(db: AsyncSession) -> List[User]:
    result = await db.execute(
        select(User)
        .options(selectinload(User.employee_profile))
        .where(User.role == UserRole.EMPLOYEE, User.is_active.is_(True))
        .order_by(User.name.asc())
    )
    return list(result.scalars().all())

async def create_user(
    db: AsyncSession,
    *,
    name: str,
    email: str,
    password: str,
    role: UserRole,
    client_profile: Optional[ClientProfileCreate] = None,
    employee_profile: Optional[EmployeeProfileCreate] = None,
    two_factor_secret: Optional[str] = None,
) -> Optional[User]:
    """
    Create a user and its profile in one commit.
    """
    try:
        db_user = User(
            name=name,
            email=email,
            hashed_password=get_password_hash(password),
            role=role,
            is_active=True,
            two_factor_secret=two_factor_secret,
            two_factor_enabled=two_factor_secret is not None,
        )
        if client_profile is not None:
            db_user.client_profile = ClientProfile(**client_profile.model_dump())
        if employee_profile is not None:
            db_user.employee_profile = EmployeeProfile(**employee_profile.model_dump())

        db.add(db_user)
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        # Lost a race with another insert of the same email
        if "email" in str(e.orig).lower():
            raise DuplicateEmail()
        logger.error(f"Integrity error in create_user: {e}")
        return None
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Database error in create_user: {e}")
        return None

    logger.info(f"User created: {db_user.id} ({role.value})")
    return await get_user(db, db_user.id)
