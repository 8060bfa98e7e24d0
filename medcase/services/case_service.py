from typing import List, Optional
import logging
from sqlalchemy.ext.asyncio import AsyncSession

from medcase.core.access import case_scope, scope_clause, visible_case_clause
from medcase.core.exceptions import InvalidReference, NotFoundOrForbidden
from medcase.crud import case as case_crud
from medcase.crud import client as client_crud
from medcase.crud import document as document_crud
from medcase.crud import reference as reference_crud
from medcase.db.models import Case, CasePriority, CaseType, Document, EmployeeProfile
from medcase.schemas.auth import SessionIdentity
from medcase.schemas.case import CaseCreate
from medcase.schemas.document import DocumentCreate

logger = logging.getLogger(__name__)

class CaseService:
    """Case operations with the caller's visibility applied to every query."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _check_references(self, case_in: CaseCreate) -> None:
        if await reference_crud.get_by_id(self.db, CaseType, case_in.case_type_id) is None:
            raise InvalidReference("Case type does not exist")
        if await client_crud.get_client(self.db, case_in.client_id) is None:
            raise InvalidReference("Client does not exist")
        if await self.db.get(EmployeeProfile, case_in.assigned_to_id) is None:
            raise InvalidReference("Assigned employee does not exist")

    async def create_case(self, caller: SessionIdentity, case_in: CaseCreate) -> Optional[Case]:
        """
        Persist a case and its CREATED history entry.

        Returns None when the store rejected the write; nothing is persisted then.
        """
        await self._check_references(case_in)
        return await case_crud.create_case(self.db, case_in, created_by_id=caller.user_id)

    async def list_cases(
        self,
        caller: SessionIdentity,
        status: Optional[str] = None,
        priority: Optional[CasePriority] = None,
        search: Optional[str] = None,
    ) -> List[Case]:
        visibility = scope_clause(case_scope(caller))
        return await case_crud.get_cases(
            self.db, visibility, status=status, priority=priority, search=search
        )

    async def get_case(self, caller: SessionIdentity, case_id: str) -> Case:
        case = await case_crud.get_case(self.db, visible_case_clause(caller, case_id))
        if case is None:
            logger.warning(f"Case {case_id} not found or not visible to user {caller.user_id}")
            raise NotFoundOrForbidden("Case not found or access denied")
        return case

    async def _require_visible_case(self, caller: SessionIdentity, case_id: str) -> None:
        if not await case_crud.case_exists(self.db, visible_case_clause(caller, case_id)):
            logger.warning(f"Case {case_id} not found or not visible to user {caller.user_id}")
            raise NotFoundOrForbidden("Case not found or access denied")

    async def add_document(
        self,
        caller: SessionIdentity,
        case_id: str,
        document_in: DocumentCreate,
    ) -> Optional[Document]:
        await self._require_visible_case(caller, case_id)
        return await document_crud.create_document(
            self.db, case_id, document_in, uploaded_by_id=caller.user_id
        )

    async def list_documents(self, caller: SessionIdentity, case_id: str) -> List[Document]:
        await self._require_visible_case(caller, case_id)
        return await document_crud.get_documents(self.db, case_id)

    async def get_document(self, caller: SessionIdentity, case_id: str, document_id: str) -> Document:
        await self._require_visible_case(caller, case_id)
        document = await document_crud.get_document(self.db, case_id, document_id)
        if document is None:
            raise NotFoundOrForbidden("Document not found")
        return document
