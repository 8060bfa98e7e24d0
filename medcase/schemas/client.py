from typing import Optional
from pydantic import BaseModel, Field

from medcase.schemas.base import ORMModel

class ClientProfileCreate(BaseModel):
    company_name: str = Field(..., min_length=1, max_length=200)
    contact_person: str = Field(..., min_length=1, max_length=200)
    phone_number: Optional[str] = Field(None, max_length=50)
    country: Optional[str] = Field(None, max_length=100)

class ClientProfile(ORMModel):
    id: str
    company_name: str
    contact_person: str
    phone_number: Optional[str] = None
    country: Optional[str] = None

class ClientSummary(ORMModel):
    id: str
    company_name: str
    contact_person: str
