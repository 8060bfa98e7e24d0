from medcase.db.models.user import User, UserRole
from medcase.db.models.client import ClientProfile
from medcase.db.models.employee import EmployeeProfile
from medcase.db.models.case_type import CaseType
from medcase.db.models.certification_type import CertificationType
from medcase.db.models.case import Case, CasePriority, DEFAULT_CASE_STATUS
from medcase.db.models.case_history import CaseHistory, CaseAction
from medcase.db.models.document import Document

# Export all models and enums
__all__ = [
    'User', 'UserRole',
    'ClientProfile',
    'EmployeeProfile',
    'CaseType',
    'CertificationType',
    'Case', 'CasePriority', 'DEFAULT_CASE_STATUS',
    'CaseHistory', 'CaseAction',
    'Document',
]

# This ensures all models are imported in the correct order
