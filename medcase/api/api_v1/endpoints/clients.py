from typing import List, Any
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from medcase.core.database import get_db
from medcase.core.auth import get_current_user
from medcase.crud import client as client_crud
from medcase.schemas.auth import SessionIdentity
from medcase.schemas.client import ClientProfile

router = APIRouter()

@router.get("", response_model=List[ClientProfile])
async def get_clients(
    db: AsyncSession = Depends(get_db),
    current_user: SessionIdentity = Depends(get_current_user)
) -> Any:
    """
    Retrieve clients with an active account, by company name.
    """
    return await client_crud.get_active_clients(db)
