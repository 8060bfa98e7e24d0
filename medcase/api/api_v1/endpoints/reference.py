from typing import List, Any
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging
from medcase.core.database import get_db
from medcase.core.auth import get_current_user, get_current_admin
from medcase.core.exceptions import DuplicateName
from medcase.crud import reference as reference_crud
from medcase.db.models import CaseType as DBCaseType, CertificationType as DBCertificationType
from medcase.schemas.auth import SessionIdentity
from medcase.schemas.reference import (
    CaseType, CaseTypeCreate, CertificationType, CertificationTypeCreate
)

logger = logging.getLogger(__name__)
router = APIRouter()

async def _create(db: AsyncSession, model, item_in):
    if await reference_crud.get_by_name(db, model, item_in.name):
        raise DuplicateName(f"{model.__name__} '{item_in.name}' already exists")

    item = await reference_crud.create(db, model, item_in)
    if not item:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create {model.__name__}"
        )
    return item

@router.get("/case-types", response_model=List[CaseType])
async def get_case_types(
    db: AsyncSession = Depends(get_db),
    current_user: SessionIdentity = Depends(get_current_user)
) -> Any:
    """
    Active case types.
    """
    return await reference_crud.get_active(db, DBCaseType)

@router.post("/case-types", response_model=CaseType, status_code=status.HTTP_201_CREATED)
async def create_case_type(
    *,
    db: AsyncSession = Depends(get_db),
    item_in: CaseTypeCreate,
    current_user: SessionIdentity = Depends(get_current_admin)
) -> Any:
    logger.info(f"Case type '{item_in.name}' created by admin: {current_user.user_id}")
    return await _create(db, DBCaseType, item_in)

@router.get("/certification-types", response_model=List[CertificationType])
async def get_certification_types(
    db: AsyncSession = Depends(get_db),
    current_user: SessionIdentity = Depends(get_current_user)
) -> Any:
    """
    Active certification types.
    """
    return await reference_crud.get_active(db, DBCertificationType)

@router.post("/certification-types", response_model=CertificationType, status_code=status.HTTP_201_CREATED)
async def create_certification_type(
    *,
    db: AsyncSession = Depends(get_db),
    item_in: CertificationTypeCreate,
    current_user: SessionIdentity = Depends(get_current_admin)
) -> Any:
    logger.info(f"Certification type '{item_in.name}' created by admin: {current_user.user_id}")
    return await _create(db, DBCertificationType, item_in)
