from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field

from medcase.schemas.base import ORMModel

class DocumentCreate(BaseModel):
    """Metadata for a blob already stored through the upload endpoint."""
    name: str = Field(..., min_length=1, max_length=255)
    type: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    url: str = Field(..., min_length=1, max_length=1000)

class Uploader(ORMModel):
    id: str
    name: str

class Document(ORMModel):
    id: str
    case_id: str
    name: str
    type: str
    description: Optional[str] = None
    url: str
    uploaded_by_id: str
    uploaded_at: datetime

class DocumentWithUploader(Document):
    uploaded_by: Optional[Uploader] = None

class UploadResponse(BaseModel):
    url: str
