from medcase.schemas.auth import (
    Token, SessionIdentity, RegisterRequest, RegisterResponse
)
from medcase.schemas.user import User, UserCreate, UserProfile, UserSummary
from medcase.schemas.client import ClientProfile, ClientProfileCreate, ClientSummary
from medcase.schemas.employee import Employee, EmployeeProfile, EmployeeProfileCreate, Assignee
from medcase.schemas.reference import (
    CaseType, CaseTypeCreate, CertificationType, CertificationTypeCreate
)
from medcase.schemas.document import Document, DocumentCreate, DocumentWithUploader, UploadResponse
from medcase.schemas.case import Case, CaseCreate, CaseListItem, CaseDetail, CaseHistoryEntry

# Export all schemas
__all__ = [
    'Token', 'SessionIdentity', 'RegisterRequest', 'RegisterResponse',
    'User', 'UserCreate', 'UserProfile', 'UserSummary',
    'ClientProfile', 'ClientProfileCreate', 'ClientSummary',
    'Employee', 'EmployeeProfile', 'EmployeeProfileCreate', 'Assignee',
    'CaseType', 'CaseTypeCreate', 'CertificationType', 'CertificationTypeCreate',
    'Document', 'DocumentCreate', 'DocumentWithUploader', 'UploadResponse',
    'Case', 'CaseCreate', 'CaseListItem', 'CaseDetail', 'CaseHistoryEntry',
]
