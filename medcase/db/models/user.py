from sqlalchemy import Column, String, Boolean, Enum as SQLEnum, Text, DateTime
from sqlalchemy.orm import relationship
from enum import Enum
from medcase.db.base_class import Base, generate_id, utcnow

class UserRole(str, Enum):
    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"
    CLIENT = "CLIENT"

class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_id)
    email = Column(Text, unique=True, index=True, nullable=False)
    name = Column(Text, nullable=False)
    hashed_password = Column(Text, nullable=False)
    role = Column(SQLEnum(UserRole, name="user_role"), nullable=False, default=UserRole.CLIENT)
    is_active = Column(Boolean, nullable=False, default=True)
    two_factor_secret = Column(Text, nullable=True)
    two_factor_enabled = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    client_profile = relationship("ClientProfile", back_populates="user", uselist=False)
    employee_profile = relationship("EmployeeProfile", back_populates="user", uselist=False)
    created_cases = relationship("Case", back_populates="created_by")

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
