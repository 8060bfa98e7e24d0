from dataclasses import dataclass
from typing import Dict, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from medcase.core.auth import identity_for_user, issue_session
from medcase.crud import case as case_crud
from medcase.crud import user as user_crud
from medcase.db.models import Case, CaseType, User, UserRole
from medcase.schemas.case import CaseCreate
from medcase.schemas.client import ClientProfileCreate
from medcase.schemas.employee import EmployeeProfileCreate

TEST_PASSWORD = "test_password123"

def auth_headers(user: User) -> Dict[str, str]:
    token = issue_session(identity_for_user(user))
    return {"Authorization": f"Bearer {token}"}

async def make_user(
    db: AsyncSession,
    email: str,
    role: UserRole,
    name: Optional[str] = None,
    company_name: Optional[str] = None,
    with_profile: bool = True,
) -> User:
    client_profile = None
    employee_profile = None
    if with_profile and role == UserRole.CLIENT:
        client_profile = ClientProfileCreate(
            company_name=company_name or f"{email} Ltd",
            contact_person=name or email,
            phone_number="+1234567890",
            country="Thailand",
        )
    if with_profile and role == UserRole.EMPLOYEE:
        employee_profile = EmployeeProfileCreate(department="Operations", position="Case Coordinator")

    user = await user_crud.create_user(
        db,
        name=name or email.split("@")[0],
        email=email,
        password=TEST_PASSWORD,
        role=role,
        client_profile=client_profile,
        employee_profile=employee_profile,
    )
    assert user is not None
    return user

def case_payload(case_type_id: str, client_id: str, assigned_to_id: str, **overrides) -> dict:
    payload = {
        "case_type_id": case_type_id,
        "client_id": client_id,
        "assigned_to_id": assigned_to_id,
        "title": "Emergency transport",
        "location": "New York, USA",
        "priority": "HIGH",
        "description": "Patient requires urgent medical transport",
        "symptoms": "Chest pain and shortness of breath",
        "required_assistance": "Ground ambulance with medical team",
        "medical_history": "No significant medical history",
        "current_medications": "None",
    }
    payload.update(overrides)
    return payload

@dataclass
class World:
    """Admin, two employees, two clients and one active case type."""
    admin: User
    employee: User
    other_employee: User
    client_user: User
    other_client_user: User
    case_type: CaseType

    def payload(self, client_user: User, assignee: User, **overrides) -> dict:
        return case_payload(**{
            "case_type_id": self.case_type.id,
            "client_id": client_user.client_profile.id,
            "assigned_to_id": assignee.employee_profile.id,
            **overrides,
        })

    async def create_case(
        self,
        db: AsyncSession,
        created_by: User,
        client_user: User,
        assignee: User,
        **overrides
    ) -> Case:
        case_in = CaseCreate(**self.payload(client_user, assignee, **overrides))
        case = await case_crud.create_case(db, case_in, created_by_id=created_by.id)
        assert case is not None
        return case

async def build_world(db: AsyncSession) -> World:
    admin = await make_user(db, "admin@example.com", UserRole.ADMIN, name="Admin User")
    employee = await make_user(db, "coordinator@example.com", UserRole.EMPLOYEE, name="Michael Brown")
    other_employee = await make_user(db, "nurse@example.com", UserRole.EMPLOYEE, name="Anna White")
    client_user = await make_user(
        db, "contact@insuranceco.com", UserRole.CLIENT,
        name="John Smith", company_name="Global Insurance Co."
    )
    other_client_user = await make_user(
        db, "contact@hospital.com", UserRole.CLIENT,
        name="Sarah Johnson", company_name="City General Hospital"
    )

    case_type = CaseType(name="Emergency Transport", description="Urgent medical transportation services")
    db.add(case_type)
    await db.commit()
    await db.refresh(case_type)

    return World(
        admin=admin,
        employee=employee,
        other_employee=other_employee,
        client_user=client_user,
        other_client_user=other_client_user,
        case_type=case_type,
    )
