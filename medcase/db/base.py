from medcase.db.base_class import Base  # noqa: F401
from medcase.db.models import (  # noqa: F401
    User,
    ClientProfile,
    EmployeeProfile,
    CaseType,
    CertificationType,
    Case,
    CaseHistory,
    Document,
)

# All models are imported here for SQLAlchemy to discover them
