from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.exc import SQLAlchemyError
import logging
from medcase.db.models import Document, CaseAction
from medcase.schemas.document import DocumentCreate
from medcase.crud import case_history as history_crud

logger = logging.getLogger(__name__)

async def get_document(db: AsyncSession, case_id: str, document_id: str) -> Optional[Document]:
    result = await db.execute(
        select(Document)
        .options(selectinload(Document.uploaded_by))
        .where(Document.id == document_id, Document.case_id == case_id)
    )
    return result.scalar_one_or_none()

async def get_documents(db: AsyncSession, case_id: str) -> List[Document]:
    result = await db.execute(
        select(Document)
        .options(selectinload(Document.uploaded_by))
        .where(Document.case_id == case_id)
        .order_by(Document.uploaded_at.desc())
    )
    return list(result.scalars().all())

async def create_document(
    db: AsyncSession,
    case_id: str,
    document_in: DocumentCreate,
    uploaded_by_id: str
) -> Optional[Document]:
    """
    Create a document and its DOCUMENT_UPLOADED history entry in one commit.
    """
    try:
        db_document = Document(
            case_id=case_id,
            uploaded_by_id=uploaded_by_id,
            **document_in.model_dump(),
        )
        db.add(db_document)
        await db.flush()

        await history_crud.add_entry(
            db,
            case_id=case_id,
            user_id=uploaded_by_id,
            action=CaseAction.DOCUMENT_UPLOADED,
            description=f'Document "{document_in.name}" uploaded',
        )

        await db.commit()
        await db.refresh(db_document)

        logger.info(f"Document {db_document.id} added to case {case_id}")
        return db_document

    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Database error in create_document: {e}")
        return None
