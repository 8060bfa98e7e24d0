from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from enum import Enum
from medcase.db.base_class import Base, generate_id, utcnow

class CaseAction(str, Enum):
    CREATED = "CREATED"
    DOCUMENT_UPLOADED = "DOCUMENT_UPLOADED"

class CaseHistory(Base):
    """Append-only audit entry attached to a case."""
    __tablename__ = "case_history"

    id = Column(String(36), primary_key=True, default=generate_id)
    case_id = Column(String(36), ForeignKey("cases.id"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    action = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Relationships
    case = relationship("Case", back_populates="history")
    user = relationship("User")
