from typing import List, Optional
from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.sql.elements import ColumnElement
from sqlalchemy.exc import SQLAlchemyError
import logging
from medcase.db.models import Case, CaseHistory, CaseAction, CasePriority, Document, EmployeeProfile
from medcase.schemas.case import CaseCreate
from medcase.crud import case_history as history_crud

logger = logging.getLogger(__name__)

_list_options = (
    selectinload(Case.case_type),
    selectinload(Case.client),
    selectinload(Case.created_by),
    selectinload(Case.assigned_to).selectinload(EmployeeProfile.user),
)

_detail_options = _list_options + (
    selectinload(Case.history).selectinload(CaseHistory.user),
    selectinload(Case.documents).selectinload(Document.uploaded_by),
)

async def get_case(db: AsyncSession, visibility: ColumnElement) -> Optional[Case]:
    """
    Get a single case matching ``visibility`` with history and documents loaded.
    """
    result = await db.execute(
        select(Case)
        .options(*_detail_options)
        .where(visibility)
        .execution_options(populate_existing=True)
    )
    return result.scalars().first()

async def case_exists(db: AsyncSession, visibility: ColumnElement) -> bool:
    result = await db.execute(select(Case.id).where(visibility))
    return result.first() is not None

async def get_cases(
    db: AsyncSession,
    visibility: ColumnElement,
    status: Optional[str] = None,
    priority: Optional[CasePriority] = None,
    search: Optional[str] = None,
) -> List[Case]:
    """
    Get cases matching ``visibility`` and the optional filters, newest first.
    """
    query = select(Case).options(*_list_options).where(visibility)

    if status:
        query = query.where(Case.status == status)
    if priority:
        query = query.where(Case.priority == priority)
    if search:
        query = query.where(
            or_(
                Case.title.icontains(search, autoescape=True),
                Case.description.icontains(search, autoescape=True),
                Case.location.icontains(search, autoescape=True),
            )
        )

    query = query.order_by(Case.created_at.desc())
    result = await db.execute(query)
    return list(result.scalars().all())

async def create_case(db: AsyncSession, case_in: CaseCreate, created_by_id: str) -> Optional[Case]:
    """
    Create a case and its CREATED history entry in one commit.
    """
    logger.info("Starting case creation in CRUD layer")

    try:
        db_case = Case(
            created_by_id=created_by_id,
            **case_in.model_dump(),
        )
        db.add(db_case)
        await db.flush()

        await history_crud.add_entry(
            db,
            case_id=db_case.id,
            user_id=created_by_id,
            action=CaseAction.CREATED,
            description="Case created",
        )

        await db.commit()
        await db.refresh(db_case)

        logger.info(f"Case created successfully with ID: {db_case.id}")
        return db_case

    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Database error in create_case: {e}")
        return None
