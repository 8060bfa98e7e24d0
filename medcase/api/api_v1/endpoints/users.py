from typing import List, Any
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging
from medcase.core.database import get_db
from medcase.core.auth import get_current_user, get_current_admin
from medcase.core.exceptions import NotFoundOrForbidden
from medcase.crud import user as user_crud
from medcase.schemas.auth import SessionIdentity
from medcase.schemas.user import User, UserCreate, UserProfile
from medcase.services import auth_service

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/user/profile", response_model=UserProfile)
async def read_user_profile(
    db: AsyncSession = Depends(get_db),
    current_user: SessionIdentity = Depends(get_current_user)
) -> Any:
    """
    Get current user with their profile.
    """
    user = await user_crud.get_user(db, current_user.user_id)
    if not user:
        raise NotFoundOrForbidden("User not found")
    return user

@router.get("/users", response_model=List[User])
async def read_users(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
    current_user: SessionIdentity = Depends(get_current_admin)
) -> Any:
    """
    Retrieve users.
    """
    return await user_crud.get_users(db, skip=skip, limit=limit)

@router.post("/users", response_model=UserProfile, status_code=status.HTTP_201_CREATED)
async def create_user(
    *,
    user_in: UserCreate,
    db: AsyncSession = Depends(get_db),
    current_user: SessionIdentity = Depends(get_current_admin)
) -> Any:
    """
    Provision an account with the profile for its role.
    """
    logger.info(f"User provisioning ({user_in.role.value}) requested by admin: {current_user.user_id}")

    user = await auth_service.provision_user(db, user_in)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create user"
        )
    return user
