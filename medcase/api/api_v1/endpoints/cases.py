from typing import List, Any, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query, Path
from sqlalchemy.ext.asyncio import AsyncSession
import logging
from medcase.core.database import get_db
from medcase.core.auth import get_current_user
from medcase.db.models import CasePriority
from medcase.schemas.auth import SessionIdentity
from medcase.schemas.case import Case, CaseCreate, CaseDetail, CaseListItem
from medcase.services.case_service import CaseService

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("", response_model=Case)
async def create_case(
    *,
    db: AsyncSession = Depends(get_db),
    case_in: CaseCreate,
    current_user: SessionIdentity = Depends(get_current_user)
) -> Any:
    """
    Create new case.

    The caller is recorded as creator and a CREATED history entry is written
    in the same transaction.
    """
    logger.info(f"Case creation requested by user: {current_user.user_id}")

    new_case = await CaseService(db).create_case(current_user, case_in)
    if not new_case:
        logger.error("Failed to create case")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Something went wrong while creating the case. Please try again."
        )

    logger.info(f"Case created successfully: {new_case.id}")
    return new_case

@router.get("", response_model=List[CaseListItem])
async def get_cases(
    *,
    db: AsyncSession = Depends(get_db),
    current_user: SessionIdentity = Depends(get_current_user),
    status: Optional[str] = Query(None, description="Filter by case status"),
    priority: Optional[CasePriority] = Query(None, description="Filter by priority"),
    search: Optional[str] = Query(None, description="Search title, description and location"),
) -> Any:
    """
    Retrieve the cases visible to the caller, newest first.

    Admins see every case, employees the cases assigned to them or created by
    them, clients the cases filed for their company.
    """
    logger.info(f"Case list requested by user: {current_user.user_id}")

    cases = await CaseService(db).list_cases(
        current_user, status=status, priority=priority, search=search
    )

    logger.info(f"Retrieved {len(cases)} cases")
    return cases

@router.get("/{case_id}", response_model=CaseDetail)
async def read_case(
    *,
    db: AsyncSession = Depends(get_db),
    case_id: str = Path(..., description="The ID of the case to retrieve"),
    current_user: SessionIdentity = Depends(get_current_user)
) -> Any:
    """
    Get case by ID with its history and documents.

    Cases outside the caller's scope answer 404, like missing ones.
    """
    logger.info(f"Case {case_id} requested by user: {current_user.user_id}")
    return await CaseService(db).get_case(current_user, case_id)
