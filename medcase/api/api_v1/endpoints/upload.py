from typing import Any
from fastapi import APIRouter, Depends, File, UploadFile
import logging
from medcase.core.auth import get_current_user
from medcase.core.storage import upload_file
from medcase.schemas.auth import SessionIdentity
from medcase.schemas.document import UploadResponse

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("", response_model=UploadResponse)
async def upload(
    file: UploadFile = File(...),
    current_user: SessionIdentity = Depends(get_current_user)
) -> Any:
    """
    Store a single file (pdf, doc, docx, jpeg or png, at most 5MB).
    """
    logger.info(f"Upload of {file.filename} by user: {current_user.user_id}")
    url = await upload_file(file)
    return UploadResponse(url=url)
