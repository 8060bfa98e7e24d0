from sqlalchemy import Column, String, Text, Boolean, DateTime
from sqlalchemy.orm import relationship
from medcase.db.base_class import Base, generate_id, utcnow

class CaseType(Base):
    __tablename__ = "case_types"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(Text, nullable=False, unique=True)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    cases = relationship("Case", back_populates="case_type")
