from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from medcase.db.models.user import UserRole

class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"

class SessionIdentity(BaseModel):
    """Authorization state carried by the session token."""
    model_config = ConfigDict(frozen=True)

    user_id: str
    email: str
    name: str
    role: UserRole
    client_profile_id: Optional[str] = None
    employee_profile_id: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=72)

class RegisterResponse(BaseModel):
    success: bool = True
    qr_code: str
    provisioning_uri: str
    secret: str
