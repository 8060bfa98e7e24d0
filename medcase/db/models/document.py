from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from medcase.db.base_class import Base, generate_id, utcnow

class Document(Base):
    __tablename__ = "documents"

    id = Column(String(36), primary_key=True, default=generate_id)
    case_id = Column(String(36), ForeignKey("cases.id"), nullable=False, index=True)
    name = Column(Text, nullable=False)
    type = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    # Points at a blob in the upload store
    url = Column(Text, nullable=False)
    uploaded_by_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    uploaded_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Relationships
    case = relationship("Case", back_populates="documents")
    uploaded_by = relationship("User")
