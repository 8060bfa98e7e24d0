from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from medcase.db.base_class import Base, generate_id, utcnow

class ClientProfile(Base):
    __tablename__ = "client_profiles"

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, unique=True)
    company_name = Column(Text, nullable=False)
    contact_person = Column(Text, nullable=False)
    phone_number = Column(Text, nullable=True)
    country = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    user = relationship("User", back_populates="client_profile")
    cases = relationship("Case", back_populates="client")
