from typing import List, Any
from fastapi import APIRouter, Depends, HTTPException, status, Path
from sqlalchemy.ext.asyncio import AsyncSession
import logging
from medcase.core.database import get_db
from medcase.core.auth import get_current_user
from medcase.schemas.auth import SessionIdentity
from medcase.schemas.document import Document, DocumentCreate, DocumentWithUploader
from medcase.services.case_service import CaseService

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/{case_id}/documents", response_model=Document)
async def create_document(
    *,
    db: AsyncSession = Depends(get_db),
    case_id: str = Path(..., description="The case the document belongs to"),
    document_in: DocumentCreate,
    current_user: SessionIdentity = Depends(get_current_user)
) -> Any:
    """
    Attach a stored file to a case.

    ``url`` is the value returned by the upload endpoint.
    """
    logger.info(f"Document upload to case {case_id} by user: {current_user.user_id}")

    document = await CaseService(db).add_document(current_user, case_id, document_in)
    if not document:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Something went wrong while creating document. Please try again."
        )
    return document

@router.get("/{case_id}/documents", response_model=List[DocumentWithUploader])
async def get_documents(
    *,
    db: AsyncSession = Depends(get_db),
    case_id: str = Path(...),
    current_user: SessionIdentity = Depends(get_current_user)
) -> Any:
    return await CaseService(db).list_documents(current_user, case_id)

@router.get("/{case_id}/documents/{document_id}", response_model=DocumentWithUploader)
async def get_document(
    *,
    db: AsyncSession = Depends(get_db),
    case_id: str = Path(...),
    document_id: str = Path(...),
    current_user: SessionIdentity = Depends(get_current_user)
) -> Any:
    return await CaseService(db).get_document(current_user, case_id, document_id)
