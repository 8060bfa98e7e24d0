from sqlalchemy import Column, String, Text, DateTime, Enum as SQLEnum, ForeignKey
from sqlalchemy.orm import relationship
from enum import Enum
from medcase.db.base_class import Base, generate_id, utcnow

class CasePriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"

DEFAULT_CASE_STATUS = "OPEN"

class Case(Base):
    __tablename__ = "cases"

    id = Column(String(36), primary_key=True, default=generate_id)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    case_type_id = Column(String(36), ForeignKey("case_types.id"), nullable=False)
    client_id = Column(String(36), ForeignKey("client_profiles.id"), nullable=False, index=True)
    created_by_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    assigned_to_id = Column(String(36), ForeignKey("employee_profiles.id"), nullable=True, index=True)
    location = Column(Text, nullable=False)
    priority = Column(SQLEnum(CasePriority, name="case_priority"), nullable=False, default=CasePriority.MEDIUM)
    # Free-form; no transition rules are enforced
    status = Column(Text, nullable=False, default=DEFAULT_CASE_STATUS)
    symptoms = Column(Text, nullable=False)
    required_assistance = Column(Text, nullable=False)
    medical_history = Column(Text, nullable=True)
    current_medications = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    case_type = relationship("CaseType", back_populates="cases")
    client = relationship("ClientProfile", back_populates="cases")
    created_by = relationship("User", back_populates="created_cases")
    assigned_to = relationship("EmployeeProfile", back_populates="assigned_cases")
    history = relationship(
        "CaseHistory",
        back_populates="case",
        order_by="desc(CaseHistory.created_at)"
    )
    documents = relationship(
        "Document",
        back_populates="case",
        order_by="desc(Document.uploaded_at)"
    )

    def __repr__(self):
        return f"<Case(id={self.id}, title={self.title}, status={self.status})>"
