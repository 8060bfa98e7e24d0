from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from medcase.db.models.case import CasePriority, DEFAULT_CASE_STATUS
from medcase.schemas.base import ORMModel
from medcase.schemas.client import ClientSummary
from medcase.schemas.employee import Assignee
from medcase.schemas.reference import CaseType
from medcase.schemas.user import UserSummary
from medcase.schemas.document import DocumentWithUploader

class CaseCreate(BaseModel):
    case_type_id: str = Field(..., min_length=1, description="Case type is required")
    client_id: str = Field(..., min_length=1, description="Client is required")
    title: str = Field(..., min_length=5, max_length=100)
    location: str = Field(..., min_length=3, max_length=100)
    priority: CasePriority
    description: str = Field(..., min_length=10, max_length=2000)
    symptoms: str = Field(..., min_length=10, max_length=2000)
    required_assistance: str = Field(..., min_length=10, max_length=2000)
    medical_history: Optional[str] = Field(None, max_length=2000)
    current_medications: Optional[str] = Field(None, max_length=2000)
    assigned_to_id: str = Field(..., min_length=1, description="Assigned employee is required")
    status: str = Field(DEFAULT_CASE_STATUS, min_length=1, max_length=50)

    @field_validator("priority", mode="before")
    @classmethod
    def normalize_priority(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

class Case(ORMModel):
    id: str
    title: str
    description: str
    case_type_id: str
    client_id: str
    created_by_id: str
    assigned_to_id: Optional[str] = None
    location: str
    priority: CasePriority
    status: str
    symptoms: str
    required_assistance: str
    medical_history: Optional[str] = None
    current_medications: Optional[str] = None
    created_at: datetime
    updated_at: datetime

class CaseListItem(Case):
    case_type: Optional[CaseType] = None
    client: Optional[ClientSummary] = None
    created_by: Optional[UserSummary] = None
    assigned_to: Optional[Assignee] = None

class CaseHistoryEntry(ORMModel):
    id: str
    action: str
    description: Optional[str] = None
    created_at: datetime
    user: Optional[UserSummary] = None

class CaseDetail(CaseListItem):
    history: List[CaseHistoryEntry] = []
    documents: List[DocumentWithUploader] = []
