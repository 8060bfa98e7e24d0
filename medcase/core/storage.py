from fastapi import UploadFile
import aiofiles
import logging
import os
import uuid
from typing import Optional
from medcase.core.config import settings
from medcase.core.exceptions import PayloadTooLarge, UnsupportedMediaType

logger = logging.getLogger(__name__)

def ensure_upload_dir(upload_dir: Optional[str] = None) -> str:
    upload_dir = upload_dir or settings.UPLOAD_DIR
    os.makedirs(upload_dir, exist_ok=True)
    return upload_dir

def generate_file_name(original_name: Optional[str]) -> str:
    """
    Random identifier plus the original file extension.
    """
    unique_id = uuid.uuid4().hex
    _, extension = os.path.splitext(original_name or "")
    return f"{unique_id}{extension.lower()}"

def check_file_type(file_name: Optional[str], content_type: Optional[str]) -> None:
    # Both the declared type and the stored extension must be on the allow-list
    _, extension = os.path.splitext(file_name or "")
    if extension.lower() not in settings.ALLOWED_UPLOAD_EXTENSIONS:
        raise UnsupportedMediaType()
    if content_type not in settings.ALLOWED_UPLOAD_TYPES:
        raise UnsupportedMediaType()

async def read_limited(file: UploadFile, max_size: int) -> bytes:
    # One byte past the limit is enough to know the file is too large
    content = await file.read(max_size + 1)
    if len(content) > max_size:
        raise PayloadTooLarge()
    return content

async def upload_file(file: UploadFile, upload_dir: Optional[str] = None) -> str:
    """
    Validate and store an uploaded file.
    Returns the public URL of the stored blob.
    """
    max_size = settings.MAX_UPLOAD_SIZE
    if file.size is not None and file.size > max_size:
        raise PayloadTooLarge()
    content = await read_limited(file, max_size)
    check_file_type(file.filename, file.content_type)

    upload_dir = ensure_upload_dir(upload_dir)
    file_name = generate_file_name(file.filename)
    file_path = os.path.join(upload_dir, file_name)

    async with aiofiles.open(file_path, 'wb') as out_file:
        await out_file.write(content)

    logger.info(f"Stored upload {file_name} ({len(content)} bytes)")
    return f"{settings.UPLOAD_URL_PREFIX}/{file_name}"
