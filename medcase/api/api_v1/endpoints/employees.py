from typing import List, Any
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from medcase.core.database import get_db
from medcase.core.auth import get_current_user
from medcase.crud import user as user_crud
from medcase.schemas.auth import SessionIdentity
from medcase.schemas.employee import Employee

router = APIRouter()

@router.get("", response_model=List[Employee])
async def get_employees(
    db: AsyncSession = Depends(get_db),
    current_user: SessionIdentity = Depends(get_current_user)
) -> Any:
    """
    Active employees by name. Cases are assigned to ``employee_profile.id``.
    """
    return await user_crud.get_active_employees(db)
