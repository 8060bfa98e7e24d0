from typing import Any
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.ext.asyncio import AsyncSession
import logging
from medcase.core.database import get_db
from medcase.core.auth import get_current_user, issue_session
from medcase.core.security import render_qr_data_url
from medcase.schemas.auth import RegisterRequest, RegisterResponse, SessionIdentity, Token
from medcase.services import auth_service

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/register", response_model=RegisterResponse)
async def register(
    *,
    db: AsyncSession = Depends(get_db),
    user_in: RegisterRequest
) -> Any:
    """
    Register a new user.

    The first registered user becomes ADMIN; everyone after that is a CLIENT.
    Returns the two-factor secret, its provisioning URI and that URI rendered
    as a QR code image, once.
    """
    logger.info("Registration request received")

    user, provisioning_uri, secret = await auth_service.register_user(
        db, name=user_in.name, email=user_in.email, password=user_in.password
    )
    if not user:
        logger.error("Failed to create user")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create user"
        )

    logger.info(f"User registered: {user.id} ({user.role.value})")
    return RegisterResponse(
        qr_code=render_qr_data_url(provisioning_uri),
        provisioning_uri=provisioning_uri,
        secret=secret,
    )

@router.post("/login", response_model=Token)
async def login(
    db: AsyncSession = Depends(get_db),
    form_data: OAuth2PasswordRequestForm = Depends()
) -> Any:
    """
    Exchange email (as ``username``) and password for a bearer token.
    """
    identity = await auth_service.authenticate(db, form_data.username, form_data.password)
    logger.info(f"User logged in: {identity.user_id}")
    return Token(access_token=issue_session(identity))

@router.post("/test-token", response_model=SessionIdentity)
async def test_token(current_user: SessionIdentity = Depends(get_current_user)) -> Any:
    """
    Test access token.
    """
    return current_user
