from typing import Optional
from pydantic import BaseModel, Field

from medcase.schemas.base import ORMModel

class EmployeeProfileCreate(BaseModel):
    department: Optional[str] = Field(None, max_length=100)
    position: Optional[str] = Field(None, max_length=100)

class EmployeeProfile(ORMModel):
    id: str
    department: Optional[str] = None
    position: Optional[str] = None

class Employee(ORMModel):
    """Active employee as listed for case assignment."""
    id: str
    name: str
    employee_profile: Optional[EmployeeProfile] = None

class AssigneeUser(ORMModel):
    id: str
    name: str

class Assignee(ORMModel):
    id: str
    department: Optional[str] = None
    position: Optional[str] = None
    user: Optional[AssigneeUser] = None
