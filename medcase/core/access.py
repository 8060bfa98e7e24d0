"""
Case visibility rules.

The rules are computed once per request from the session identity and consumed
in two forms: as a SQLAlchemy clause for list and single-case queries, and as a
plain boolean decision for objects already in memory.

- ADMIN sees every case.
- EMPLOYEE sees cases assigned to their employee profile or created by them.
- CLIENT sees cases filed for their client profile.

A caller missing the profile for their role keeps only the criteria that do
not depend on it; with none left the scope matches nothing.
"""
from dataclasses import dataclass
from typing import Optional, Union

from sqlalchemy import and_, false, or_, true
from sqlalchemy.sql.elements import ColumnElement

from medcase.db.models import Case, UserRole
from medcase.schemas.auth import SessionIdentity


@dataclass(frozen=True)
class Unrestricted:
    pass


@dataclass(frozen=True)
class ScopedTo:
    """Visible iff any of the set ids matches the case (OR semantics)."""
    client_id: Optional[str] = None
    assigned_to_id: Optional[str] = None
    created_by_id: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.client_id is None and self.assigned_to_id is None and self.created_by_id is None


CaseScope = Union[Unrestricted, ScopedTo]


def case_scope(identity: SessionIdentity) -> CaseScope:
    if identity.role == UserRole.ADMIN:
        return Unrestricted()
    if identity.role == UserRole.EMPLOYEE:
        return ScopedTo(
            assigned_to_id=identity.employee_profile_id,
            created_by_id=identity.user_id,
        )
    if identity.role == UserRole.CLIENT:
        return ScopedTo(client_id=identity.client_profile_id)
    return ScopedTo()


def scope_clause(scope: CaseScope) -> ColumnElement:
    if isinstance(scope, Unrestricted):
        return true()

    conditions = []
    if scope.client_id is not None:
        conditions.append(Case.client_id == scope.client_id)
    if scope.assigned_to_id is not None:
        conditions.append(Case.assigned_to_id == scope.assigned_to_id)
    if scope.created_by_id is not None:
        conditions.append(Case.created_by_id == scope.created_by_id)

    if not conditions:
        return false()
    return or_(*conditions)


def visible_case_clause(identity: SessionIdentity, case_id: str) -> ColumnElement:
    return and_(Case.id == case_id, scope_clause(case_scope(identity)))


def scope_allows(scope: CaseScope, case: Case) -> bool:
    if isinstance(scope, Unrestricted):
        return True
    if scope.client_id is not None and case.client_id == scope.client_id:
        return True
    if scope.assigned_to_id is not None and case.assigned_to_id == scope.assigned_to_id:
        return True
    if scope.created_by_id is not None and case.created_by_id == scope.created_by_id:
        return True
    return False


def can_view_case(identity: SessionIdentity, case: Case) -> bool:
    return scope_allows(case_scope(identity), case)
