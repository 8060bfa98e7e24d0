from typing import Optional
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field, model_validator

from medcase.db.models.user import UserRole
from medcase.schemas.base import ORMModel
from medcase.schemas.client import ClientProfileCreate, ClientProfile
from medcase.schemas.employee import EmployeeProfileCreate, EmployeeProfile

class UserSummary(ORMModel):
    id: str
    name: str
    email: Optional[str] = None

class UserCreate(BaseModel):
    """Account provisioned by an admin, with the profile matching its role."""
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=72)
    role: UserRole
    client_profile: Optional[ClientProfileCreate] = None
    employee_profile: Optional[EmployeeProfileCreate] = None

    @model_validator(mode="after")
    def check_profile_matches_role(self):
        if self.role == UserRole.CLIENT:
            if self.client_profile is None:
                raise ValueError("client_profile is required for CLIENT users")
            if self.employee_profile is not None:
                raise ValueError("CLIENT users cannot have an employee_profile")
        elif self.role == UserRole.EMPLOYEE:
            if self.employee_profile is None:
                raise ValueError("employee_profile is required for EMPLOYEE users")
            if self.client_profile is not None:
                raise ValueError("EMPLOYEE users cannot have a client_profile")
        elif self.client_profile is not None or self.employee_profile is not None:
            raise ValueError("ADMIN users have no profile")
        return self

class User(ORMModel):
    """User as returned by the API; never carries password or two-factor secret."""
    id: str
    email: str
    name: str
    role: UserRole
    is_active: bool
    two_factor_enabled: bool
    created_at: datetime
    updated_at: datetime

class UserProfile(User):
    client_profile: Optional[ClientProfile] = None
    employee_profile: Optional[EmployeeProfile] = None
