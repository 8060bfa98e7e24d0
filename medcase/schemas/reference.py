from typing import Optional
from pydantic import BaseModel, Field

from medcase.schemas.base import ORMModel

class ReferenceTypeCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    is_active: bool = True

class CaseTypeCreate(ReferenceTypeCreate):
    pass

class CertificationTypeCreate(ReferenceTypeCreate):
    pass

class CaseType(ORMModel):
    id: str
    name: str
    description: Optional[str] = None

class CertificationType(ORMModel):
    id: str
    name: str
    description: Optional[str] = None
